"""Feed normalization entry point.

Detects the dialect of a parsed feed document and dispatches to the
matching extractor. Unrecognized documents yield no items; the parser
never raises for data problems within a recognized feed.
"""

from collections.abc import Iterator, Mapping

import structlog

from feedmark.models.feed_item import Dialect, FeedItem
from feedmark.parsers.atom import AtomExtractor
from feedmark.parsers.base import FeedDocument, FeedExtractor
from feedmark.parsers.detector import detect_dialect
from feedmark.parsers.rdf import RdfExtractor
from feedmark.parsers.rss import RssExtractor

logger = structlog.get_logger()


def default_extractors() -> dict[Dialect, FeedExtractor]:
    """Return a fresh dialect-to-extractor mapping for the built-in dialects."""
    extractors: list[FeedExtractor] = [RssExtractor(), AtomExtractor(), RdfExtractor()]
    return {extractor.dialect: extractor for extractor in extractors}


class FeedParser:
    """Normalizes RSS, Atom and RDF documents into FeedItem lists.

    The parser holds no per-call state and can be shared between callers.
    """

    def __init__(self, extractors: Mapping[Dialect, FeedExtractor] | None = None):
        """Initialize the parser.

        Args:
            extractors: Optional dialect-to-extractor mapping. Defaults to
                the built-in RSS, Atom and RDF extractors.
        """
        self._extractors = dict(extractors) if extractors is not None else default_extractors()

    def detect(self, doc: FeedDocument) -> Dialect:
        """Classify ``doc`` by dialect."""
        return detect_dialect(doc)

    def iter_items(self, doc: FeedDocument) -> Iterator[FeedItem]:
        """Lazily yield normalized items in document order.

        The dialect is detected before the first item is requested.
        """
        _, extractor = self._select(doc)
        if extractor is None:
            return iter(())
        return extractor.iter_items(doc)

    def parse(self, doc: FeedDocument) -> list[FeedItem]:
        """Parse a feed document into an ordered list of items.

        Args:
            doc: lxml element or element tree of the feed.

        Returns:
            One FeedItem per item/entry in document order; empty when the
            dialect is not recognized.
        """
        dialect, extractor = self._select(doc)
        if extractor is None:
            return []
        items = list(extractor.iter_items(doc))
        logger.debug("Feed parsed", dialect=dialect.value, items=len(items))
        return items

    def _select(self, doc: FeedDocument) -> tuple[Dialect, FeedExtractor | None]:
        dialect = self.detect(doc)
        extractor = self._extractors.get(dialect)
        if extractor is None:
            logger.info("Unrecognized feed dialect, no items extracted", dialect=dialect.value)
        return dialect, extractor


_default_parser = FeedParser()


def parse_feed(doc: FeedDocument) -> list[FeedItem]:
    """Parse ``doc`` with the default extractors."""
    return _default_parser.parse(doc)

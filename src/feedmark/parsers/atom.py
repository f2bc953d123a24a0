"""Atom entry extraction."""

from collections.abc import Iterator

from lxml import etree

from feedmark.models.feed_item import Dialect, FeedItem
from feedmark.parsers.base import FeedDocument
from feedmark.parsers.fields import first_element, iter_descendants, read_attribute, read_text


class AtomExtractor:
    """Extracts ``entry`` elements from the first ``feed`` of an Atom document."""

    dialect = Dialect.ATOM

    def iter_items(self, doc: FeedDocument) -> Iterator[FeedItem]:
        feed = first_element(doc, "feed")
        if feed is None:
            return
        for entry in iter_descendants(feed, "entry"):
            yield FeedItem(
                title=read_text(entry, "title"),
                link=self._alternate_link(entry),
                summary=read_text(entry, "summary"),
            )

    def _alternate_link(self, entry: etree._Element) -> str:
        """Return the href of the first ``link rel="alternate"``, else ""."""
        for link in iter_descendants(entry, "link"):
            if read_attribute(link, "rel") == "alternate":
                return read_attribute(link, "href")
        return ""

"""Feed dialect detection."""

from feedmark.models.feed_item import Dialect
from feedmark.parsers.fields import FeedDocument, first_element

# Checked in order; the first marker present decides the dialect.
DIALECT_MARKERS: tuple[tuple[Dialect, str], ...] = (
    (Dialect.RSS, "rss"),
    (Dialect.ATOM, "feed"),
    (Dialect.RDF, "rdf:RDF"),
)


def detect_dialect(doc: FeedDocument) -> Dialect:
    """Classify a parsed feed document.

    Args:
        doc: lxml element or element tree.

    Returns:
        The dialect of the first marker element found, or ``Dialect.UNKNOWN``.
    """
    for dialect, marker in DIALECT_MARKERS:
        if first_element(doc, marker) is not None:
            return dialect
    return Dialect.UNKNOWN

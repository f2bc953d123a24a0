"""RDF (RSS 1.0) item extraction."""

from collections.abc import Iterator

from feedmark.models.feed_item import Dialect, FeedItem
from feedmark.parsers.base import FeedDocument
from feedmark.parsers.fields import iter_elements, read_attribute


class RdfExtractor:
    """Extracts ``rdf:li`` resources found anywhere in the document.

    RDF list items carry only a resource URI, which serves as both
    title and link.
    """

    dialect = Dialect.RDF

    def iter_items(self, doc: FeedDocument) -> Iterator[FeedItem]:
        for item in iter_elements(doc, "rdf:li"):
            resource = read_attribute(item, "rdf:resource")
            yield FeedItem(title=resource, link=resource)

"""Feed extractor interface using Protocol."""

from collections.abc import Iterator
from typing import Protocol

from feedmark.models.feed_item import Dialect, FeedItem
from feedmark.parsers.fields import FeedDocument


class FeedExtractor(Protocol):
    """Dialect-specific item extraction.

    Implementations never raise for missing or malformed sub-elements;
    each field degrades to an empty string on its own.
    """

    dialect: Dialect

    def iter_items(self, doc: FeedDocument) -> Iterator[FeedItem]:
        """Yield one FeedItem per item element, in document order.

        Args:
            doc: Parsed feed document already classified as this dialect.
        """
        ...

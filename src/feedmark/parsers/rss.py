"""RSS 2.0 item extraction."""

from collections.abc import Iterator

from feedmark.models.feed_item import Dialect, FeedItem
from feedmark.parsers.base import FeedDocument
from feedmark.parsers.fields import first_element, iter_descendants, read_text


class RssExtractor:
    """Extracts ``item`` elements from the first ``channel`` of an RSS feed."""

    dialect = Dialect.RSS

    def iter_items(self, doc: FeedDocument) -> Iterator[FeedItem]:
        channel = first_element(doc, "channel")
        if channel is None:
            return
        for item in iter_descendants(channel, "item"):
            yield FeedItem(
                title=read_text(item, "title"),
                link=read_text(item, "link"),
                summary=read_text(item, "description"),
            )

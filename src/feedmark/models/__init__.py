"""Models package."""

from feedmark.models.feed_item import Dialect, FeedItem

__all__ = [
    "Dialect",
    "FeedItem",
]

"""feedmark - feed normalization for RSS 2.0, Atom and RDF documents."""

from feedmark.documents import load_document, load_document_file
from feedmark.exceptions import DocumentParseError, DocumentReadError, FeedmarkError
from feedmark.models.feed_item import Dialect, FeedItem
from feedmark.parsers.detector import detect_dialect
from feedmark.parsers.feed_parser import FeedParser, parse_feed
from feedmark.parsers.fields import read_text

__version__ = "0.1.0"

__all__ = [
    "Dialect",
    "FeedItem",
    "FeedParser",
    "parse_feed",
    "detect_dialect",
    "read_text",
    "load_document",
    "load_document_file",
    "FeedmarkError",
    "DocumentParseError",
    "DocumentReadError",
]

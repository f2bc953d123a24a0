"""Parsers package."""

from feedmark.parsers.atom import AtomExtractor
from feedmark.parsers.base import FeedDocument, FeedExtractor
from feedmark.parsers.detector import detect_dialect
from feedmark.parsers.feed_parser import FeedParser, default_extractors, parse_feed
from feedmark.parsers.fields import read_attribute, read_text
from feedmark.parsers.rdf import RdfExtractor
from feedmark.parsers.rss import RssExtractor

__all__ = [
    "FeedDocument",
    "FeedExtractor",
    "FeedParser",
    "RssExtractor",
    "AtomExtractor",
    "RdfExtractor",
    "default_extractors",
    "detect_dialect",
    "parse_feed",
    "read_attribute",
    "read_text",
]

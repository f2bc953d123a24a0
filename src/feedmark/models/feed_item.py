"""Normalized feed item model and feed dialect classification."""

from enum import Enum

from pydantic import BaseModel, Field


class Dialect(str, Enum):
    """XML feed dialects recognized by the parser."""

    RSS = "rss"
    ATOM = "atom"
    RDF = "rdf"
    UNKNOWN = "unknown"


class FeedItem(BaseModel):
    """A single normalized entry extracted from a feed.

    Every field is a string; fields that could not be located in the
    source document are empty rather than missing.
    """

    title: str = Field(default="", description="Display title of the item")
    link: str = Field(default="", description="Item URL, possibly relative")
    summary: str = Field(default="", description="Short description, empty when absent")

    model_config = {"frozen": True}

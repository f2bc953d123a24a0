"""Custom exceptions for feedmark.

The normalization engine itself never raises for data problems inside a
recognized feed; these exceptions belong to the document loading layer.
"""


class FeedmarkError(Exception):
    """Base exception class for all feedmark errors."""

    pass


class DocumentParseError(FeedmarkError):
    """Raised when raw feed text cannot be turned into an XML tree.

    Attributes:
        source_id: Identifier of the document that failed (path, URL or label).
    """

    def __init__(self, source_id: str, message: str):
        self.source_id = source_id
        super().__init__(f"Failed to parse {source_id}: {message}")


class DocumentReadError(FeedmarkError):
    """Raised when a local feed file cannot be read.

    Attributes:
        path: The path that could not be read.
    """

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"Failed to read {path}: {message}")

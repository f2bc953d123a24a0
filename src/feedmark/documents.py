"""Raw feed text to lxml tree loading.

Turns feed bytes or text into the parsed document the feed parser consumes.
Parsing never resolves external entities or touches the network.
"""

import re
import sys
from pathlib import Path

import structlog
from lxml import etree

from feedmark.config.settings import settings
from feedmark.exceptions import DocumentParseError, DocumentReadError

logger = structlog.get_logger()

_RE_XML_DECL_ENCODING = re.compile(r"""^(\s*<\?xml[^>]*?encoding\s*=\s*["'])([^"']+)(["'])""")


def _build_parser(recover: bool, huge_tree: bool) -> etree.XMLParser:
    return etree.XMLParser(
        recover=recover,
        resolve_entities="internal",
        no_network=True,
        collect_ids=False,
        huge_tree=huge_tree,
    )


def _to_bytes(content: str | bytes) -> bytes:
    """Encode text input as UTF-8, rewriting any declared encoding to match."""
    if isinstance(content, bytes):
        return content
    content = _RE_XML_DECL_ENCODING.sub(r"\1utf-8\3", content, count=1)
    return content.encode("utf-8")


def load_document(
    content: str | bytes,
    source_id: str = "<memory>",
    recover: bool | None = None,
    huge_tree: bool | None = None,
) -> etree._ElementTree:
    """Parse raw feed content into an XML tree.

    Args:
        content: Feed document as bytes or text.
        source_id: Label used in logs and errors (file path, URL, ...).
        recover: Retry with lxml's recovering parser after a strict
            failure. Defaults to ``settings.xml_recover``.
        huge_tree: Lift lxml's size limits. Defaults to ``settings.xml_huge_tree``.

    Returns:
        Parsed element tree.

    Raises:
        DocumentParseError: When the content is empty or cannot be parsed.
    """
    recover = settings.xml_recover if recover is None else recover
    huge_tree = settings.xml_huge_tree if huge_tree is None else huge_tree

    data = _to_bytes(content)
    if not data.strip():
        raise DocumentParseError(source_id, "Empty document")

    try:
        root = etree.fromstring(data, parser=_build_parser(False, huge_tree))
    except etree.XMLSyntaxError as e:
        if not recover:
            raise DocumentParseError(source_id, str(e)) from e

        logger.warning(
            "Strict XML parse failed, retrying in recover mode",
            source_id=source_id,
            error=str(e),
        )
        try:
            root = etree.fromstring(data, parser=_build_parser(True, huge_tree))
        except etree.XMLSyntaxError as recover_error:
            raise DocumentParseError(source_id, str(recover_error)) from recover_error

    if root is None:
        raise DocumentParseError(source_id, "No root element")

    return root.getroottree()


def load_document_file(
    path: str | Path,
    recover: bool | None = None,
    huge_tree: bool | None = None,
) -> etree._ElementTree:
    """Read a local feed file and parse it.

    ``-`` reads from standard input.

    Raises:
        DocumentReadError: When the file cannot be read.
        DocumentParseError: When its content cannot be parsed.
    """
    source_id = str(path)
    try:
        if source_id == "-":
            content = sys.stdin.buffer.read()
        else:
            content = Path(path).read_bytes()
    except OSError as e:
        raise DocumentReadError(source_id, e.strerror or str(e)) from e

    return load_document(content, source_id=source_id, recover=recover, huge_tree=huge_tree)

"""Tag lookups and fault-isolated field reads over lxml trees.

Lookups match elements by qualified name (``prefix:localname``, or just
``localname`` for unprefixed and default-namespace elements), the way a DOM
``getElementsByTagName`` call does.
"""

from collections.abc import Iterator
from typing import TypeAlias

import structlog
from lxml import etree

logger = structlog.get_logger()

FeedDocument: TypeAlias = etree._Element | etree._ElementTree


def qualified_name(element: etree._Element) -> str:
    """Return the element's tag as written in the source, e.g. ``rdf:li``.

    Comments and processing instructions have no qualified name and yield "".
    """
    tag = element.tag
    if not isinstance(tag, str):
        return ""
    if tag.startswith("{"):
        localname = etree.QName(tag).localname
        return f"{element.prefix}:{localname}" if element.prefix else localname
    return tag


def document_root(doc: FeedDocument) -> etree._Element | None:
    """Return the root element of a tree, or the element itself."""
    if isinstance(doc, etree._ElementTree):
        return doc.getroot()
    return doc


def iter_elements(doc: FeedDocument, tag_name: str) -> Iterator[etree._Element]:
    """Yield matching elements anywhere in the document, root included."""
    root = document_root(doc)
    if root is None:
        return
    for element in root.iter():
        if qualified_name(element) == tag_name:
            yield element


def iter_descendants(element: etree._Element, tag_name: str) -> Iterator[etree._Element]:
    """Yield matching elements below ``element`` in document order."""
    for node in element.iterdescendants():
        if qualified_name(node) == tag_name:
            yield node


def first_element(doc: FeedDocument, tag_name: str) -> etree._Element | None:
    """Return the first matching element in the document, or None."""
    return next(iter_elements(doc, tag_name), None)


def read_text(element: etree._Element, tag_name: str) -> str:
    """Read the text of the first descendant named ``tag_name``.

    Returns the leading text node of that descendant, stripped of
    surrounding whitespace. Missing elements, self-closing or
    whitespace-only elements, and elements that open with a child element
    all yield "". Never raises.

    Args:
        element: Item or entry element to search under.
        tag_name: Qualified tag name, e.g. ``title`` or ``dc:creator``.

    Returns:
        Text content or empty string.
    """
    try:
        match = next(iter_descendants(element, tag_name), None)
        if match is None or not match.text:
            return ""
        return match.text.strip()
    except (AttributeError, TypeError, ValueError) as e:
        logger.debug("Field read failed", tag=tag_name, error=str(e))
        return ""


def read_attribute(element: etree._Element, attribute_name: str) -> str:
    """Read an attribute by qualified name, e.g. ``href`` or ``rdf:resource``.

    Prefixed names are resolved through the element's in-scope namespaces;
    an undeclared prefix is looked up literally. Never raises.
    """
    try:
        prefix, sep, localname = attribute_name.rpartition(":")
        key = attribute_name
        if sep:
            namespace = element.nsmap.get(prefix)
            if namespace:
                key = f"{{{namespace}}}{localname}"
        value = element.get(key)
    except (AttributeError, TypeError, ValueError) as e:
        logger.debug("Attribute read failed", attribute=attribute_name, error=str(e))
        return ""
    return value if value is not None else ""

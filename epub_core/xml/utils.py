"""
XML Utility Functions
=====================

Small helpers shared by the OPF, NCX and XHTML generators. Generated
documents are assembled as text fragments, so every value interpolated
into markup goes through one of these escapers first.
"""

from typing import Optional
import logging

logger = logging.getLogger(__name__)

_TEXT_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
)

_ATTR_ESCAPES = _TEXT_ESCAPES + (
    ('"', "&quot;"),
)


def escape_text(value: str) -> str:
    """
    Escape a string for use as XML character data.

    Args:
        value: Raw text

    Returns:
        Text with &, < and > replaced by entity references

    Example:
        >>> escape_text("Tom & Jerry")
        'Tom &amp; Jerry'
    """
    for char, entity in _TEXT_ESCAPES:
        value = value.replace(char, entity)
    return value


def escape_attr(value: str) -> str:
    """
    Escape a string for use inside a double-quoted XML attribute.

    Args:
        value: Raw attribute value

    Returns:
        Escaped value, safe between double quotes
    """
    for char, entity in _ATTR_ESCAPES:
        value = value.replace(char, entity)
    return value


def element(tag: str, text: Optional[str] = None, **attrib: str) -> str:
    """
    Render a single element as markup.

    Keyword names map onto attribute names: a trailing underscore is
    dropped, ``__`` becomes ``:`` (``opf__role`` -> ``opf:role``) and any
    other ``_`` becomes ``-`` (``media_type`` -> ``media-type``).

    Args:
        tag: Element tag name, prefix included (e.g. "dc:title")
        text: Optional character data; the element is self-closed if None
        **attrib: Attribute values, rendered in keyword order

    Returns:
        Element markup string

    Example:
        >>> element("dc:creator", "Ann", opf__role="aut")
        '<dc:creator opf:role="aut">Ann</dc:creator>'
    """
    attrs = "".join(
        f' {_attr_name(name)}="{escape_attr(str(value))}"'
        for name, value in attrib.items()
    )
    if text is None:
        return f"<{tag}{attrs}/>"
    return f"<{tag}{attrs}>{escape_text(text)}</{tag}>"


def _attr_name(name: str) -> str:
    return name.rstrip("_").replace("__", ":").replace("_", "-")


def line_column_to_offset(data: bytes, line: Optional[int], column: Optional[int]) -> int:
    """
    Convert a parser's line/column position into a byte offset.

    Args:
        data: The encoded document that was parsed
        line: 1-based line number (None or 0 means unknown)
        column: 1-based column number

    Returns:
        0-based byte offset, clamped to the document length
    """
    if not line:
        return 0
    lines = data.split(b"\n")
    offset = sum(len(chunk) + 1 for chunk in lines[:line - 1])
    offset += max((column or 1) - 1, 0)
    return min(offset, len(data))


def has_xml_declaration(text: str) -> bool:
    """Check whether a document already starts with an XML declaration."""
    return text.startswith("<?xml")

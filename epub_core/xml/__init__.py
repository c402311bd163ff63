"""
XML Processing Utilities
========================

Escaping helpers and the pretty-printer used for every generated document.
"""

from epub_core.xml.utils import (
    escape_text,
    escape_attr,
    element,
    has_xml_declaration,
    line_column_to_offset,
)

from epub_core.xml.formatter import (
    format_xml,
    async_format_xml,
)

__all__ = [
    "escape_text",
    "escape_attr",
    "element",
    "has_xml_declaration",
    "line_column_to_offset",
    "format_xml",
    "async_format_xml",
]

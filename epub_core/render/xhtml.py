"""
XHTML Serializer
================

Wraps a content unit's raw body into a complete XHTML 1.1 document.
"""

from typing import List, Optional, Sequence
import logging

from epub_core.errors import ContentEncodingError
from epub_core.model.content import Content
from epub_core.render.files import FileContent
from epub_core.render.numbering import FileCounter, walk_contents
from epub_core.xml.formatter import format_xml
from epub_core.xml.utils import escape_text, has_xml_declaration

logger = logging.getLogger(__name__)

LINK_CSS = '<link href="style.css" rel="stylesheet" type="text/css"/>'

XHTML_TEMPLATE = (
    '<?xml version="1.0" encoding="utf-8"?>'
    '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.1//EN" '
    '"http://www.w3.org/TR/xhtml11/DTD/xhtml11.dtd">\n'
    '<html xmlns="http://www.w3.org/1999/xhtml">'
    '<head><title>{title}</title>{stylesheet}</head>{body}</html>'
)


def decode_body(body: bytes) -> str:
    """
    Decode a content body as UTF-8.

    Raises:
        ContentEncodingError: If the body is not valid UTF-8
    """
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ContentEncodingError(f"Content body is not valid UTF-8: {e}") from e


def to_xhtml(body: bytes, add_stylesheet: bool, title: str) -> str:
    """
    Build the XHTML document for a content body.

    The body is inserted verbatim after the head, so it is expected to
    carry its own ``<body>`` element. A body that already starts with an
    XML declaration is treated as a finished document and returned as is,
    minus any whitespace before the declaration.

    Args:
        body: Raw UTF-8 body bytes
        add_stylesheet: Whether to link style.css from the head
        title: Document title

    Returns:
        XHTML document text

    Raises:
        ContentEncodingError: If the body is not valid UTF-8
    """
    text = decode_body(body)
    document = text.lstrip()
    if has_xml_declaration(document):
        return document

    return XHTML_TEMPLATE.format(
        title=escape_text(title),
        stylesheet=LINK_CSS if add_stylesheet else "",
        body=text,
    )


def content_documents(contents: Optional[Sequence[Content]],
                      add_stylesheet: bool,
                      counter: Optional[FileCounter] = None) -> List[FileContent]:
    """
    Serialize every content unit, in numbering order, without formatting.

    Args:
        contents: Root content units
        add_stylesheet: Whether documents link style.css
        counter: Numbering counter; a fresh one is used if None

    Returns:
        One FileContent per unit, at "OEBPS/<filename>"
    """
    documents = []
    for numbered in walk_contents(contents, counter):
        xhtml = to_xhtml(numbered.content.body, add_stylesheet, numbered.content.title)
        documents.append(FileContent(f"OEBPS/{numbered.filename}", xhtml))
        logger.debug(f"Serialized content {numbered.number}: {numbered.filename}")
    return documents


def content_file_contents(contents: Optional[Sequence[Content]],
                          add_stylesheet: bool,
                          counter: Optional[FileCounter] = None) -> List[FileContent]:
    """Serialize and format every content unit, in numbering order."""
    documents = content_documents(contents, add_stylesheet, counter)
    for document in documents:
        document.data = format_xml(document.data)
    return documents

"""
XML Formatter
=============

Pretty-prints generated XML documents before they are written to the
archive. Parsing doubles as a well-formedness check: anything lxml cannot
parse surfaces as an ``XmlFormatError`` carrying the failing byte offset.
"""

import asyncio
import logging
from concurrent.futures import Executor
from typing import Optional

from lxml import etree

from epub_core.errors import EpubError, WorkerError, XmlFormatError
from epub_core.xml.utils import line_column_to_offset

logger = logging.getLogger(__name__)


def _make_parser() -> etree.XMLParser:
    # External DTDs are referenced by DOCTYPE only; never fetch them.
    return etree.XMLParser(
        remove_blank_text=True,
        resolve_entities=False,
        load_dtd=False,
        no_network=True,
    )


def format_xml(xml_data: str) -> str:
    """
    Format an XML document with two-space indentation.

    The XML declaration and any DOCTYPE of the input are preserved.
    Whitespace-only text between elements is dropped before indenting.

    Args:
        xml_data: XML document text

    Returns:
        Formatted XML document text

    Raises:
        XmlFormatError: If the input is not well-formed XML
    """
    data = xml_data.encode("utf-8")
    try:
        root = etree.fromstring(data, _make_parser())
    except etree.XMLSyntaxError as e:
        line, column = e.position if e.position else (None, None)
        position = line_column_to_offset(data, line, column)
        logger.debug(f"XML formatting failed at byte {position}: {e.msg}")
        raise XmlFormatError(e.msg or str(e), position, line, column) from e

    formatted = etree.tostring(
        root.getroottree(),
        encoding="utf-8",
        xml_declaration=True,
        pretty_print=True,
    )
    return formatted.decode("utf-8")


async def async_format_xml(xml_data: str, executor: Optional[Executor] = None) -> str:
    """
    Format an XML document in a worker so the event loop is not blocked.

    Args:
        xml_data: XML document text
        executor: Executor to run in; the loop's default executor if None

    Returns:
        Formatted XML document text

    Raises:
        XmlFormatError: If the input is not well-formed XML
        WorkerError: If the worker task fails for any other reason
    """
    loop = asyncio.get_running_loop()
    try:
        return await loop.run_in_executor(executor, format_xml, xml_data)
    except EpubError:
        raise
    except asyncio.CancelledError as e:
        raise WorkerError("XML formatting task was cancelled") from e
    except Exception as e:
        raise WorkerError(f"XML formatting task failed: {e}") from e

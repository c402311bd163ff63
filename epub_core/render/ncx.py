"""
Navigation Map (NCX)
====================

Generates ``OEBPS/toc.ncx``. Every content unit becomes a navPoint, and
every in-page reference becomes a navPoint nested inside its unit's.

Three counters drive the output:

- play order: one counter for the whole map, advanced by exactly one
  before each navPoint, content units and references alike.
- file number: the numbering counter, giving each unit the same filename
  the manifest and spine use.
- link number: restarts at 0 for each content unit and runs depth-first
  through that unit's reference chain. It numbers generated ``idNN``
  anchors.

A unit's navPoint id is ``navPoint-<play order>``. A reference's id is
``navPoint-<file number><path>``, where the path lists 1-based sibling
positions down the reference chain, e.g. ``-1``, ``-1-1``, ``-2``.

Within a unit, its references come before its child units.
"""

from typing import Sequence, Tuple
import logging

from epub_core.model.content import Content, ContentReference
from epub_core.model.document import Document
from epub_core.render.files import FileContent, NCX_PATH
from epub_core.render.numbering import FileCounter, next_filename
from epub_core.xml.utils import element, escape_attr, escape_text

logger = logging.getLogger(__name__)

NCX_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<!DOCTYPE ncx PUBLIC "-//NISO//DTD ncx 2005-1//EN" '
    '"http://www.daisy.org/z3986/2005/ncx-2005-1.dtd">\n'
    '<ncx xmlns="http://www.daisy.org/z3986/2005/ncx/" version="2005-1"><head>'
)


def _nav_point(nav_id: str, play_order: int, text: str, src: str, children: str) -> str:
    return (
        f'<navPoint id="{escape_attr(nav_id)}" playOrder="{play_order}">'
        f'<navLabel><text>{escape_text(text)}</text></navLabel>'
        f'<content src="{escape_attr(src)}"/>{children}</navPoint>'
    )


def contents_to_nav_points(contents: Sequence[Content],
                           play_order: FileCounter,
                           file_counter: FileCounter) -> str:
    """
    Render navPoints for a content forest.

    Args:
        contents: Content units at one level of the tree
        play_order: Play order counter shared by the whole map
        file_counter: Numbering counter shared by the whole map

    Returns:
        Concatenated navPoint markup

    Raises:
        ContentFilenameError: If a filename override is invalid
    """
    result = []
    for content in contents:
        current_play_order = play_order.increment()
        filename = next_filename(content, file_counter)
        file_number = file_counter.value

        references = ""
        if content.content_references:
            references = content_references_to_nav_points(
                (file_number, filename),
                play_order,
                "",
                content.content_references,
                FileCounter(),
            )

        subcontents = ""
        if content.subcontents:
            subcontents = contents_to_nav_points(content.subcontents, play_order, file_counter)

        result.append(_nav_point(
            f"navPoint-{current_play_order}",
            current_play_order,
            content.title,
            filename,
            references + subcontents,
        ))
    return "".join(result)


def content_references_to_nav_points(current_xhtml: Tuple[int, str],
                                     play_order: FileCounter,
                                     toc_index: str,
                                     content_references: Sequence[ContentReference],
                                     link_number: FileCounter) -> str:
    """
    Render navPoints for one level of a reference chain.

    Args:
        current_xhtml: (file number, filename) of the owning content unit
        play_order: Play order counter shared by the whole map
        toc_index: Path of the parent reference with a trailing dash, or ""
            at the top of the chain
        content_references: References at this level
        link_number: Link counter of the owning content unit

    Returns:
        Concatenated navPoint markup
    """
    file_number, xhtml = current_xhtml
    prefix, _, last = toc_index.rpartition("-")
    toc_number = int(last) if last.isdigit() else 0

    result = []
    for content_reference in content_references:
        current_link = link_number.increment()
        toc_number += 1
        current_toc = f"{prefix}-{toc_number}"
        current_play_order = play_order.increment()

        children = ""
        if content_reference.children:
            children = content_references_to_nav_points(
                current_xhtml,
                play_order,
                f"{current_toc}-",
                content_reference.children,
                link_number,
            )

        result.append(_nav_point(
            f"navPoint-{file_number}{current_toc}",
            current_play_order,
            content_reference.title,
            content_reference.reference_name(xhtml, current_link),
            children,
        ))
    return "".join(result)


def toc_ncx(document: Document) -> FileContent:
    """
    Generate the navigation document.

    Args:
        document: Document to describe

    Returns:
        Unformatted NCX at OEBPS/toc.ncx

    Raises:
        ContentFilenameError: If any content filename override is invalid
    """
    metadata = document.metadata
    parts = [
        NCX_HEADER,
        metadata.identifier.as_toc_xml(),
        element("meta", name="dtb:depth", content=str(document.level())),
        element("meta", name="dtb:totalPageCount", content="0"),
        element("meta", name="dtb:maxPageNumber", content="0"),
        '</head>\n',
        f'<docTitle><text>{escape_text(metadata.title)}</text></docTitle><navMap>',
    ]

    if document.contents:
        parts.append(contents_to_nav_points(document.contents, FileCounter(), FileCounter()))

    parts.append('</navMap></ncx>')

    logger.debug("Generated toc.ncx")
    return FileContent(NCX_PATH, "".join(parts))

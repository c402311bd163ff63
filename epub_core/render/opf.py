"""
Package Document (OPF)
======================

Generates ``OEBPS/content.opf``: metadata, manifest, spine and guide.

Manifest, spine and guide each walk the content tree separately from a
fresh counter; see ``epub_core.render.numbering``. An invalid filename
override anywhere aborts the whole document.
"""

from typing import Callable, List, Optional
import logging

from epub_core.model.document import Document
from epub_core.render.files import FileContent, OPF_PATH
from epub_core.render.numbering import NumberedContent, walk_contents
from epub_core.xml.utils import element

logger = logging.getLogger(__name__)

OPF_HEADER = (
    '<?xml version="1.0" encoding="utf-8"?>'
    '<package version="2.0" unique-identifier="BookId" xmlns="http://www.idpf.org/2007/opf">\n'
    '<metadata xmlns:dc="http://purl.org/dc/elements/1.1/" xmlns:opf="http://www.idpf.org/2007/opf">'
)

XHTML_MEDIA_TYPE = "application/xhtml+xml"

# The guide lists root units and their direct children only.
GUIDE_MAX_DEPTH = 1


class _Parts:
    """Collects document fragments, skipping absent optional ones."""

    def __init__(self, initial: str):
        self._parts: List[str] = [initial]

    def add(self, value: str) -> None:
        self._parts.append(value)

    def add_optional(self, value: Optional[str]) -> None:
        if value is not None:
            self._parts.append(value)

    def build(self) -> str:
        return "".join(self._parts)


def _add_contents(parts: _Parts, document: Document,
                  render: Callable[[NumberedContent], Optional[str]]) -> None:
    for numbered in walk_contents(document.contents):
        parts.add_optional(render(numbered))


def _manifest_item(numbered: NumberedContent) -> str:
    filename = numbered.filename
    return element("item", id=filename, href=filename, media_type=XHTML_MEDIA_TYPE)


def _spine_itemref(numbered: NumberedContent) -> str:
    return element("itemref", idref=numbered.filename)


def _guide_reference(numbered: NumberedContent) -> Optional[str]:
    if numbered.depth > GUIDE_MAX_DEPTH:
        return None
    ref_type, title = numbered.content.reference_type.type_and_title()
    return element("reference", type=ref_type, title=title, href=numbered.filename)


def content_opf(document: Document) -> FileContent:
    """
    Generate the package document.

    Args:
        document: Document to describe

    Returns:
        Unformatted OPF at OEBPS/content.opf

    Raises:
        ContentFilenameError: If any content filename override is invalid
        FilenameNotFoundError: If a resource path has no filename
    """
    metadata = document.metadata
    parts = _Parts(OPF_HEADER)

    parts.add(metadata.title_as_metadata_xml())
    parts.add(metadata.language.as_metadata_xml())
    parts.add(metadata.identifier.as_metadata_xml())
    parts.add_optional(metadata.creator_as_metadata_xml())
    parts.add_optional(metadata.contributor_as_metadata_xml())
    parts.add_optional(metadata.publisher_as_metadata_xml())
    parts.add_optional(metadata.date_as_metadata_xml())
    parts.add_optional(metadata.subject_as_metadata_xml())
    parts.add_optional(metadata.description_as_metadata_xml())
    parts.add_optional(document.cover_image_as_metadata_xml())

    parts.add('</metadata>\n<manifest>')
    parts.add(element("item", id="ncx", href="toc.ncx", media_type="application/x-dtbncx+xml"))
    if document.stylesheet is not None:
        parts.add(element("item", id="style.css", href="style.css", media_type="text/css"))
    if document.cover_image is not None:
        parts.add(document.cover_image.as_manifest_xml())
    for resource in document.resources:
        parts.add(resource.as_manifest_xml())
    _add_contents(parts, document, _manifest_item)

    parts.add('</manifest>\n<spine toc="ncx">')
    _add_contents(parts, document, _spine_itemref)

    parts.add('</spine>\n<guide>')
    _add_contents(parts, document, _guide_reference)

    parts.add('</guide></package>')

    logger.debug("Generated content.opf")
    return FileContent(OPF_PATH, parts.build())

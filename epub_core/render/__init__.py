"""
Document Generators
===================

Turn a Document into archive files: content numbering, XHTML documents,
the OPF package document and the NCX navigation map.
"""

from epub_core.render.files import (
    FileContent,
    mimetype,
    container,
    display_options,
    stylesheet,
)

from epub_core.render.numbering import (
    FileCounter,
    NumberedContent,
    content_filename,
    next_filename,
    walk_contents,
)

from epub_core.render.xhtml import (
    LINK_CSS,
    to_xhtml,
    content_documents,
    content_file_contents,
)

from epub_core.render.opf import content_opf
from epub_core.render.ncx import (
    toc_ncx,
    contents_to_nav_points,
    content_references_to_nav_points,
)

__all__ = [
    # Files
    "FileContent",
    "mimetype",
    "container",
    "display_options",
    "stylesheet",
    # Numbering
    "FileCounter",
    "NumberedContent",
    "content_filename",
    "next_filename",
    "walk_contents",
    # XHTML
    "LINK_CSS",
    "to_xhtml",
    "content_documents",
    "content_file_contents",
    # OPF / NCX
    "content_opf",
    "toc_ncx",
    "contents_to_nav_points",
    "content_references_to_nav_points",
]

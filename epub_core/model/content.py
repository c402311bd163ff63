"""
Content Tree
============

Content units are the XHTML documents of the book. Each unit can nest
child units (parts > chapters > sections) and carry a chain of in-page
references, which become nested entries in the navigation map pointing
at anchors inside the unit's own document.

Both trees are immutable once built. ``ContentBuilder`` assembles a
``Content``; ``ContentReference.add_child`` returns a new reference.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union


class Role(Enum):
    """Semantic role of a content unit, as used by the OPF guide."""

    ACKNOWLEDGEMENTS = "acknowledgements"
    BIBLIOGRAPHY = "bibliography"
    COLOPHON = "colophon"
    COPYRIGHT = "copyright-page"
    COVER = "cover"
    DEDICATION = "dedication"
    EPIGRAPH = "epigraph"
    FOREWORD = "foreword"
    GLOSSARY = "glossary"
    INDEX = "index"
    LOI = "loi"
    LOT = "lot"
    NOTES = "notes"
    PREFACE = "preface"
    TEXT = "text"
    TITLE_PAGE = "title-page"
    TOC = "toc"


@dataclass(frozen=True)
class ReferenceType:
    """A content unit's role together with its human-readable title."""

    role: Role
    title: str

    def type_and_title(self) -> Tuple[str, str]:
        return self.role.value, self.title


@dataclass(frozen=True)
class ContentReference:
    """
    In-page navigation entry, e.g. a sub-heading inside a chapter.

    Attributes:
        title: Label shown in the navigation map
        anchor: Explicit fragment id in the owning document; when None a
            sequential ``idNN`` anchor is generated
        children: Nested references
    """

    title: str
    anchor: Optional[str] = None
    children: Tuple['ContentReference', ...] = ()

    def add_child(self, child: 'ContentReference') -> 'ContentReference':
        return replace(self, children=self.children + (child,))

    def add_children(self, children: Iterable['ContentReference']) -> 'ContentReference':
        return replace(self, children=self.children + tuple(children))

    def level(self) -> int:
        """Nesting depth below this reference, following the first child only."""
        if not self.children:
            return 0
        return 1 + self.children[0].level()

    def reference_name(self, xhtml: str, link_number: int) -> str:
        """
        Link target for this reference.

        Args:
            xhtml: Filename of the owning content document
            link_number: Sequential link number used when no anchor is set

        Returns:
            "<xhtml>#<anchor>" or "<xhtml>#idNN"
        """
        if self.anchor is not None:
            return f"{xhtml}#{self.anchor}"
        return f"{xhtml}#id{link_number:02d}"


Body = Union[bytes, bytearray, memoryview, str]


@dataclass(frozen=True)
class Content:
    """
    A content unit and its subtree.

    ``filename`` overrides the generated sequential name. It must end in
    ``.xhtml``, but that is only checked when documents are generated.
    """

    body: bytes
    reference_type: ReferenceType
    subcontents: Tuple['Content', ...] = ()
    content_references: Tuple[ContentReference, ...] = ()
    filename: Optional[str] = None

    @property
    def title(self) -> str:
        return self.reference_type.title

    def level(self) -> int:
        # Only the first child is followed, so a deeper later sibling is
        # not counted. dtb:depth values depend on this.
        if not self.subcontents:
            return 0
        return 1 + self.subcontents[0].level()

    def level_reference_content(self) -> int:
        """Depth combining the first reference chain and the first child subtree."""
        references_level = 0
        if self.content_references:
            references_level = 1 + self.content_references[0].level()

        subcontents_level = 0
        if self.subcontents:
            subcontents_level = 1 + self.subcontents[0].level_reference_content()

        return max(references_level, subcontents_level)


def _to_bytes(body: Body) -> bytes:
    if isinstance(body, str):
        return body.encode("utf-8")
    return bytes(body)


class ContentBuilder:
    """
    Fluent builder for Content.

    Example:
        chapter = (ContentBuilder(b"<body><h1>One</h1></body>",
                                  ReferenceType(Role.TEXT, "Chapter 1"))
                   .add_content_reference(ContentReference("Section 1.1"))
                   .add_child(section)
                   .build())
    """

    def __init__(self, body: Body, reference_type: ReferenceType):
        self._body = _to_bytes(body)
        self._reference_type = reference_type
        self._subcontents: List[Content] = []
        self._content_references: List[ContentReference] = []
        self._filename: Optional[str] = None

    def add_child(self, content: Content) -> 'ContentBuilder':
        self._subcontents.append(content)
        return self

    def add_children(self, contents: Iterable[Content]) -> 'ContentBuilder':
        self._subcontents.extend(contents)
        return self

    def add_content_reference(self, content_reference: ContentReference) -> 'ContentBuilder':
        self._content_references.append(content_reference)
        return self

    def add_content_references(self, content_references: Iterable[ContentReference]) -> 'ContentBuilder':
        self._content_references.extend(content_references)
        return self

    def filename(self, name: str) -> 'ContentBuilder':
        self._filename = name
        return self

    def build(self) -> Content:
        return Content(
            body=self._body,
            reference_type=self._reference_type,
            subcontents=tuple(self._subcontents),
            content_references=tuple(self._content_references),
            filename=self._filename,
        )

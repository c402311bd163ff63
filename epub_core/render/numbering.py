"""
Content Numbering
=================

Assigns archive filenames to content units. Units are numbered in
pre-order (a unit before its children, siblings in order), starting at 1,
and a unit without an explicit filename is named ``c<NN>.xhtml``.

Manifest, spine, guide, content documents and the navigation map each walk
the tree on their own. They agree on every filename because numbering is a
pure function of traversal order and explicit overrides: every walk starts
from a fresh ``FileCounter`` and visits nodes in the same order.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from epub_core.errors import ContentFilenameError
from epub_core.model.content import Content

CONTENT_EXTENSION = ".xhtml"
CONTENT_PREFIX = "c"


class FileCounter:
    """Mutable counter owned by exactly one traversal."""

    def __init__(self, start: int = 0):
        self.value = start

    def increment(self) -> int:
        self.value += 1
        return self.value

    def __repr__(self) -> str:
        return f"FileCounter({self.value})"


@dataclass(frozen=True)
class NumberedContent:
    """A content unit with its resolved number and filename."""

    number: int
    filename: str
    content: Content
    depth: int


def content_filename(content: Content, number: int) -> str:
    """
    Resolve the filename of a content unit.

    Args:
        content: Content unit
        number: Its position in numbering order (1-based)

    Returns:
        The explicit filename, or the sequential name for ``number``

    Raises:
        ContentFilenameError: If an explicit filename lacks the .xhtml extension
    """
    if content.filename is not None:
        if not content.filename.endswith(CONTENT_EXTENSION):
            raise ContentFilenameError(content.filename)
        return content.filename
    return f"{CONTENT_PREFIX}{number:02d}{CONTENT_EXTENSION}"


def next_filename(content: Content, counter: FileCounter) -> str:
    """Advance the counter for ``content`` and return its filename."""
    return content_filename(content, counter.increment())


def walk_contents(contents: Optional[Sequence[Content]],
                  counter: Optional[FileCounter] = None,
                  depth: int = 0) -> Iterator[NumberedContent]:
    """
    Walk a content forest in numbering order.

    Args:
        contents: Root units (or a subtree's children)
        counter: Counter to advance; a fresh one is created if None
        depth: Depth of ``contents`` (0 for roots)

    Yields:
        NumberedContent for every unit, parents before children

    Raises:
        ContentFilenameError: When a unit with an invalid override is reached
    """
    if counter is None:
        counter = FileCounter()
    for content in contents or ():
        number = counter.increment()
        yield NumberedContent(number, content_filename(content, number), content, depth)
        yield from walk_contents(content.subcontents, counter, depth + 1)

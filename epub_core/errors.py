"""
Error Types
===========

Every failure raised while building or packaging an EPUB derives from
``EpubError``. Errors are terminal for the packaging call that raised them;
the archive buffer is discarded and nothing reaches the output sink.
"""

from typing import Optional


class EpubError(Exception):
    """Base exception for all EPUB building and packaging errors."""


class EpubIOError(EpubError):
    """Reading a resource or writing the output sink failed."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ArchiveError(EpubError):
    """The underlying ZIP writer rejected an entry or failed to finalize."""


class ContentEncodingError(EpubError):
    """A content body is not valid UTF-8 text."""


class XmlFormatError(EpubError):
    """
    Generated XML could not be parsed by the formatter.

    Attributes:
        position: Byte offset in the input at which parsing failed
        line: 1-based line number reported by the parser
        column: 1-based column number reported by the parser
    """

    def __init__(self, message: str, position: int = 0,
                 line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(f"Error at position {position}: {message}")
        self.position = position
        self.line = line
        self.column = column


class FilenameNotFoundError(EpubError):
    """A resource path has no extractable filename."""

    def __init__(self, path: str):
        super().__init__(f"Filename not found: {path}")
        self.path = path


class ContentFilenameError(EpubError):
    """An explicit content filename does not end with '.xhtml'."""

    def __init__(self, filename: str):
        super().__init__(f"Content filename must end with '.xhtml'. Got '{filename}'")
        self.filename = filename


class WorkerError(EpubError):
    """An offloaded task failed unexpectedly or was cancelled."""

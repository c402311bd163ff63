"""
Packaging Framework
===================

Assembles EPUB archives from a Document.

Components:
- BasePackager: Abstract base class for packagers
- PackageResult: Container for packaging results
- EpubPackager: Synchronous packager
- AsyncEpubPackager: asyncio packager with concurrent resource reads
"""

from epub_core.packaging.base import (
    ArchiveWriter,
    BasePackager,
    PackageResult,
    ZipCompression,
)

from epub_core.packaging.zip_packager import (
    EpubPackager,
)

from epub_core.packaging.async_packager import (
    AsyncEpubPackager,
)

__all__ = [
    # Base classes
    "ArchiveWriter",
    "BasePackager",
    "PackageResult",
    "ZipCompression",
    # Packagers
    "EpubPackager",
    "AsyncEpubPackager",
]

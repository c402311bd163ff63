"""
Base Packaging Classes
======================

Shared machinery for the EPUB packagers. The archive is assembled in an
in-memory buffer and written to the caller's sink in one piece only after
every entry was added successfully, so a failed run never leaves a partial
archive behind.

Entry order is fixed:

    mimetype (always stored)
    META-INF/container.xml
    META-INF/com.apple.ibooks.display-options.xml
    OEBPS/style.css          (if a stylesheet is set)
    cover image              (if set)
    resources                (in declaration order)
    content documents        (in numbering order)
    OEBPS/content.opf
    OEBPS/toc.ncx
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Dict, Any, Optional
import io
import logging
import time
import zipfile
import zlib

from epub_core.config.settings import PackagingConfig
from epub_core.errors import ArchiveError, EpubIOError
from epub_core.model.document import Document
from epub_core.model.resource import Resource, ResourceReader, read_resource_file
from epub_core.render.files import (
    FileContent,
    MIMETYPE_PATH,
    container,
    display_options,
    mimetype,
    stylesheet,
)

logger = logging.getLogger(__name__)

_ZIP_ERRORS = (zipfile.BadZipFile, zipfile.LargeZipFile, ValueError, zlib.error)


class ZipCompression(Enum):
    """Compression applied to every entry except mimetype."""

    STORED = "stored"
    DEFLATED = "deflate"

    @property
    def zip_method(self) -> int:
        if self is ZipCompression.DEFLATED:
            return zipfile.ZIP_DEFLATED
        return zipfile.ZIP_STORED


@dataclass
class PackageResult:
    """
    Container for packaging results.

    Attributes:
        entries: Archive entry names, in the order they were written
        compression: Compression used for non-mimetype entries
        total_size_bytes: Size of the archive written to the sink
        contents_packaged: Number of content documents
        resources_packaged: Number of resources, cover image included
        metadata: Additional packaging metadata
    """
    entries: List[str] = field(default_factory=list)
    compression: ZipCompression = ZipCompression.STORED
    total_size_bytes: int = 0
    contents_packaged: int = 0
    resources_packaged: int = 0
    metadata: Dict[str, Any] = field(default_factory=dict)

    def summary(self) -> str:
        """Generate a text summary of packaging results."""
        lines = [
            f"Entries: {len(self.entries)}",
            f"Compression: {self.compression.value}",
            f"Contents: {self.contents_packaged}",
            f"Resources: {self.resources_packaged}",
        ]

        if self.total_size_bytes > 0:
            size_kb = self.total_size_bytes / 1024
            lines.append(f"Size: {size_kb:.1f} KB")

        return "\n".join(lines)


class ArchiveWriter:
    """
    In-memory ZIP archive for a single packaging run.

    Entries are added in order; ``finish`` closes the archive and returns
    its bytes. Nothing leaves memory until the caller writes those bytes.
    Used as a context manager, the archive is closed on exit whether or
    not ``finish`` was reached.

    Example:
        with ArchiveWriter(ZipCompression.DEFLATED, config) as archive:
            archive.add_all(files)
            data = archive.finish()
    """

    def __init__(self, compression: ZipCompression, config: PackagingConfig):
        self.compression = compression
        self.config = config
        self.result = PackageResult(compression=compression)

        level = config.compression_level
        if compression is ZipCompression.DEFLATED and level is not None and not -1 <= level <= 9:
            raise ArchiveError(f"Invalid compression level for deflate: {level}")

        self._buffer = io.BytesIO()
        try:
            self._zip = zipfile.ZipFile(
                self._buffer, "w",
                compression=compression.zip_method,
                compresslevel=level,
            )
        except _ZIP_ERRORS as e:
            raise ArchiveError(f"Failed to open archive: {e}") from e

    def __enter__(self) -> 'ArchiveWriter':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.discard()

    @property
    def closed(self) -> bool:
        return self._zip.fp is None

    def _zip_info(self, filepath: str) -> zipfile.ZipInfo:
        info = zipfile.ZipInfo(filepath, date_time=time.localtime(time.time())[:6])
        if filepath == MIMETYPE_PATH:
            info.compress_type = zipfile.ZIP_STORED
        else:
            info.compress_type = self.compression.zip_method
        info.external_attr = (self.config.unix_permissions & 0xFFFF) << 16
        return info

    def add(self, file_content: FileContent) -> None:
        """
        Append one entry to the archive.

        Raises:
            ArchiveError: If the ZIP writer rejects the entry
        """
        try:
            self._zip.writestr(
                self._zip_info(file_content.filepath),
                file_content.to_bytes(),
                compresslevel=self.config.compression_level,
            )
        except _ZIP_ERRORS as e:
            raise ArchiveError(f"Failed to add {file_content.filepath}: {e}") from e
        self.result.entries.append(file_content.filepath)
        logger.debug(f"Added archive entry: {file_content.filepath}")

    def add_all(self, file_contents: List[FileContent]) -> None:
        for file_content in file_contents:
            self.add(file_content)

    def finish(self) -> bytes:
        """
        Close the archive and return its bytes.

        Raises:
            ArchiveError: If the central directory cannot be written
        """
        try:
            self._zip.close()
        except _ZIP_ERRORS as e:
            raise ArchiveError(f"Failed to finalize archive: {e}") from e
        data = self._buffer.getvalue()
        self.result.total_size_bytes = len(data)
        return data

    def discard(self) -> None:
        """Close the archive without producing output; a no-op after ``finish``."""
        if self.closed:
            return
        try:
            self._zip.close()
        except _ZIP_ERRORS as e:
            logger.debug(f"Discarding unfinished archive: {e}")


class BasePackager(ABC):
    """
    Abstract base class for EPUB packagers.

    Subclasses implement ``package``. Each call opens its own
    ``ArchiveWriter``, so one packager can serve several documents.

    Example:
        class MyPackager(BasePackager):
            def package(self, document, sink) -> PackageResult:
                with self._open_archive(document) as archive:
                    archive.add_all(self._preamble(document))
                    ...
                    data = archive.finish()
                self._write_sink(sink, data)
                return archive.result
    """

    def __init__(self,
                 compression: Optional[ZipCompression] = None,
                 config: Optional[PackagingConfig] = None,
                 resource_reader: Optional[ResourceReader] = None):
        """
        Initialize packager.

        Args:
            compression: Compression for non-mimetype entries; taken from
                the config when None
            config: Packaging configuration; defaults if None
            resource_reader: Callback returning a resource's bytes;
                reads from disk if None
        """
        self.config = config or PackagingConfig()
        self.compression = compression or ZipCompression(self.config.compression)
        self.resource_reader = resource_reader or read_resource_file

    @abstractmethod
    def package(self, document: Document, sink: Any) -> Any:
        """
        Write ``document`` as an EPUB archive to ``sink``.

        Args:
            document: Document to package
            sink: Output receiving the finished archive

        Returns:
            PackageResult (or an awaitable of one)
        """
        pass

    def _open_archive(self, document: Document) -> ArchiveWriter:
        archive = ArchiveWriter(self.compression, self.config)
        archive.result.metadata.update(
            title=document.metadata.title,
            identifier=document.metadata.identifier.urn,
        )
        return archive

    def _preamble(self, document: Document) -> List[FileContent]:
        """Fixed leading entries plus the stylesheet, when present."""
        files = [mimetype(), container(), display_options()]
        if document.stylesheet is not None:
            files.append(stylesheet(document.stylesheet))
        return files

    @staticmethod
    def _resources_of(document: Document) -> List[Resource]:
        """Cover image first, then the other resources."""
        resources = list(document.resources)
        if document.cover_image is not None:
            resources.insert(0, document.cover_image)
        return resources

    @staticmethod
    def _write_sink(sink: Any, data: bytes) -> Any:
        try:
            return sink.write(data)
        except OSError as e:
            raise EpubIOError(f"Failed to write archive to output: {e}") from e

    @staticmethod
    def _read_error(resource: Resource, error: Exception) -> EpubIOError:
        """Typed error for a resource reader that failed with ``error``."""
        return EpubIOError(f"Failed to read resource {resource}: {error}", str(resource.path))

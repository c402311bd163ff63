"""
EPUB Packager
=============

Synchronous EPUB packaging: resources are read and documents are
formatted inline, one step after another.
"""

from typing import BinaryIO, List
import logging

from epub_core.errors import EpubError
from epub_core.model.document import Document
from epub_core.packaging.base import BasePackager, PackageResult
from epub_core.render.files import FileContent
from epub_core.render.ncx import toc_ncx
from epub_core.render.opf import content_opf
from epub_core.render.xhtml import content_file_contents
from epub_core.xml.formatter import format_xml

logger = logging.getLogger(__name__)


class EpubPackager(BasePackager):
    """
    Synchronous EPUB packager.

    Example:
        packager = EpubPackager(compression=ZipCompression.DEFLATED)
        with open("book.epub", "wb") as sink:
            result = packager.package(document, sink)
        print(result.summary())
    """

    def package(self, document: Document, sink: BinaryIO) -> PackageResult:
        """
        Write ``document`` as an EPUB archive to ``sink``.

        Args:
            document: Document to package
            sink: Binary writable; receives the whole archive in one write,
                and nothing at all if packaging fails

        Returns:
            PackageResult describing the archive

        Raises:
            EpubError: Any packaging failure; see epub_core.errors
        """
        title = document.metadata.title
        logger.info(f"Packaging EPUB '{title}' ({self.compression.value})")

        try:
            with self._open_archive(document) as archive:
                archive.add_all(self._preamble(document))

                resources = self._read_resources(document)
                archive.add_all(resources)
                archive.result.resources_packaged = len(resources)

                contents = content_file_contents(document.contents, document.stylesheet is not None)
                archive.add_all(contents)
                archive.result.contents_packaged = len(contents)

                archive.add(self._formatted(content_opf(document)))
                archive.add(self._formatted(toc_ncx(document)))

                data = archive.finish()

            self._write_sink(sink, data)
        except EpubError as e:
            logger.error(f"Packaging EPUB '{title}' failed: {e}")
            raise

        logger.info(f"Created EPUB '{title}' ({archive.result.total_size_bytes} bytes)")
        return archive.result

    def _read_resources(self, document: Document) -> List[FileContent]:
        files = []
        for resource in self._resources_of(document):
            archive_path = resource.archive_path
            try:
                data = self.resource_reader(resource)
            except EpubError:
                raise
            except Exception as e:
                raise self._read_error(resource, e) from e
            files.append(FileContent(archive_path, data))
        return files

    @staticmethod
    def _formatted(file_content: FileContent) -> FileContent:
        return FileContent(file_content.filepath, format_xml(file_content.data))

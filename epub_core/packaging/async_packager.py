"""
Async EPUB Packager
===================

asyncio counterpart of ``EpubPackager``. Resource files are read
concurrently in a thread pool, and XML formatting runs in the same pool
so the event loop is never blocked by it. The archive layout is identical
to the synchronous packager's.
"""

from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Any, List
import asyncio
import inspect
import logging

from epub_core.errors import EpubError, EpubIOError, WorkerError
from epub_core.model.document import Document
from epub_core.packaging.base import BasePackager, PackageResult
from epub_core.render.files import FileContent
from epub_core.render.ncx import toc_ncx
from epub_core.render.opf import content_opf
from epub_core.render.xhtml import content_documents
from epub_core.xml.formatter import async_format_xml

logger = logging.getLogger(__name__)


class AsyncEpubPackager(BasePackager):
    """
    Asynchronous EPUB packager.

    The sink may be a regular binary file object or an asyncio-style
    writer: an awaitable ``write`` result is awaited, and ``drain()`` is
    awaited when the sink has one.

    Example:
        packager = AsyncEpubPackager(compression=ZipCompression.DEFLATED)
        with open("book.epub", "wb") as sink:
            result = await packager.package(document, sink)
    """

    async def package(self, document: Document, sink: Any) -> PackageResult:
        """
        Write ``document`` as an EPUB archive to ``sink``.

        Args:
            document: Document to package
            sink: Binary writable or asyncio-style writer; receives nothing
                if packaging fails

        Returns:
            PackageResult describing the archive

        Raises:
            EpubError: Any packaging failure; see epub_core.errors
        """
        title = document.metadata.title
        logger.info(f"Packaging EPUB '{title}' asynchronously ({self.compression.value})")

        executor = ThreadPoolExecutor(max_workers=self.config.max_workers,
                                      thread_name_prefix="epub-core")
        try:
            with self._open_archive(document) as archive:
                archive.add_all(self._preamble(document))

                resources = await self._read_resources(document, executor)
                archive.add_all(resources)
                archive.result.resources_packaged = len(resources)

                contents = content_documents(document.contents, document.stylesheet is not None)
                for content in contents:
                    content.data = await async_format_xml(content.data, executor)
                archive.add_all(contents)
                archive.result.contents_packaged = len(contents)

                archive.add(await self._formatted(content_opf(document), executor))
                archive.add(await self._formatted(toc_ncx(document), executor))

                data = archive.finish()

            await self._write_async_sink(sink, data)
        except EpubError as e:
            logger.error(f"Packaging EPUB '{title}' failed: {e}")
            raise
        finally:
            # Workers may outlive a cancelled run; shutting down must not wait for them.
            executor.shutdown(wait=False, cancel_futures=True)

        logger.info(f"Created EPUB '{title}' ({archive.result.total_size_bytes} bytes)")
        return archive.result

    async def _read_resources(self, document: Document, executor: Executor) -> List[FileContent]:
        """
        Read the cover and all resources concurrently.

        Every read is awaited before any failure is reported; the first
        failure in declaration order is then raised.
        """
        resources = self._resources_of(document)
        archive_paths = [resource.archive_path for resource in resources]

        loop = asyncio.get_running_loop()
        results = await asyncio.gather(
            *(loop.run_in_executor(executor, self.resource_reader, resource)
              for resource in resources),
            return_exceptions=True,
        )

        for resource, result in zip(resources, results):
            if isinstance(result, EpubError):
                raise result
            if isinstance(result, Exception):
                raise self._read_error(resource, result) from result
            if isinstance(result, BaseException):
                raise WorkerError(f"Reading resource {resource} was interrupted: {result!r}") from result

        return [FileContent(path, data) for path, data in zip(archive_paths, results)]

    @staticmethod
    async def _formatted(file_content: FileContent, executor: Executor) -> FileContent:
        return FileContent(file_content.filepath,
                           await async_format_xml(file_content.data, executor))

    @classmethod
    async def _write_async_sink(cls, sink: Any, data: bytes) -> None:
        pending = cls._write_sink(sink, data)
        try:
            if inspect.isawaitable(pending):
                await pending
            drain = getattr(sink, "drain", None)
            if drain is not None:
                await drain()
        except OSError as e:
            raise EpubIOError(f"Failed to write archive to output: {e}") from e

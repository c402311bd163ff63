"""
Document Aggregate
==================

``Document`` owns everything that goes into one archive: metadata, the
optional stylesheet and cover, auxiliary resources and the content forest.
It is assembled with ``EpubBuilder`` and handed to a packager once.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Iterable, List, Optional, Tuple, Union
import logging

from epub_core.model.content import Content
from epub_core.model.metadata import Metadata
from epub_core.model.resource import ImageType, Resource
from epub_core.xml.utils import element

if TYPE_CHECKING:
    from epub_core.config.settings import PackagingConfig
    from epub_core.packaging.base import PackageResult, ZipCompression

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document:
    """
    Complete description of one EPUB.

    Attributes:
        metadata: Book metadata
        stylesheet: CSS bytes written to OEBPS/style.css, if any
        cover_image: Cover image resource, if any
        resources: Other embedded files, in archive order
        contents: Root content units, in reading order
    """

    metadata: Metadata
    stylesheet: Optional[bytes] = None
    cover_image: Optional[Resource] = None
    resources: Tuple[Resource, ...] = ()
    contents: Tuple[Content, ...] = ()

    def level(self) -> int:
        """
        Navigation depth reported as ``dtb:depth``.

        0 without content; otherwise one more than the deepest root unit,
        measured both by child units alone and by child units plus
        reference chains.
        """
        if not self.contents:
            return 0
        level_subcontents = max(content.level() + 1 for content in self.contents)
        level_references = max(content.level_reference_content() + 1 for content in self.contents)
        return max(level_subcontents, level_references)

    def cover_image_as_metadata_xml(self) -> Optional[str]:
        if self.cover_image is None:
            return None
        return element("meta", name="cover", content=self.cover_image.filename)


class EpubBuilder:
    """
    Fluent builder for a Document, with packaging shortcuts.

    Example:
        with open("book.epub", "wb") as sink:
            (EpubBuilder(MetadataBuilder("My Book").creator("Ann").build())
             .stylesheet(b"body { margin: 0 }")
             .cover_image("cover.jpg", ImageType.JPG)
             .add_content(chapter)
             .create(sink, ZipCompression.DEFLATED))
    """

    def __init__(self, metadata: Metadata):
        self._metadata = metadata
        self._stylesheet: Optional[bytes] = None
        self._cover_image: Optional[Resource] = None
        self._resources: List[Resource] = []
        self._contents: List[Content] = []

    def stylesheet(self, stylesheet: Union[bytes, str]) -> 'EpubBuilder':
        if isinstance(stylesheet, str):
            stylesheet = stylesheet.encode("utf-8")
        self._stylesheet = bytes(stylesheet)
        return self

    def cover_image(self, path: Union[str, Path], image_type: ImageType) -> 'EpubBuilder':
        self._cover_image = Resource.image(path, image_type)
        return self

    def add_resource(self, resource: Resource) -> 'EpubBuilder':
        self._resources.append(resource)
        return self

    def add_resources(self, resources: Iterable[Resource]) -> 'EpubBuilder':
        self._resources.extend(resources)
        return self

    def add_content(self, content: Content) -> 'EpubBuilder':
        self._contents.append(content)
        return self

    def add_contents(self, contents: Iterable[Content]) -> 'EpubBuilder':
        self._contents.extend(contents)
        return self

    def build(self) -> Document:
        document = Document(
            metadata=self._metadata,
            stylesheet=self._stylesheet,
            cover_image=self._cover_image,
            resources=tuple(self._resources),
            contents=tuple(self._contents),
        )
        logger.debug(f"Built document '{self._metadata.title}' with {len(self._resources)} resources "
                     f"and {len(self._contents)} root contents")
        return document

    def create(self, sink: BinaryIO,
               compression: Optional['ZipCompression'] = None,
               config: Optional['PackagingConfig'] = None) -> 'PackageResult':
        """
        Build the document and write the EPUB to ``sink``.

        Args:
            sink: Binary writable; receives the archive in a single write
            compression: Overrides the configured compression
            config: Packaging configuration; defaults if None

        Returns:
            PackageResult describing the archive
        """
        from epub_core.packaging.zip_packager import EpubPackager

        return EpubPackager(compression=compression, config=config).package(self.build(), sink)

    async def async_create(self, sink,
                           compression: Optional['ZipCompression'] = None,
                           config: Optional['PackagingConfig'] = None) -> 'PackageResult':
        """Asynchronous counterpart of ``create``."""
        from epub_core.packaging.async_packager import AsyncEpubPackager

        packager = AsyncEpubPackager(compression=compression, config=config)
        return await packager.package(self.build(), sink)

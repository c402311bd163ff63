"""
Resources
=========

Auxiliary files embedded in the archive next to the content documents:
images, fonts, audio and video. A resource only records where its bytes
live; reading them happens during packaging through a ``ResourceReader``.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Union
import logging

from epub_core.errors import EpubIOError, FilenameNotFoundError
from epub_core.xml.utils import element

logger = logging.getLogger(__name__)


class ImageType(Enum):
    JPG = "image/jpeg"
    PNG = "image/png"
    GIF = "image/gif"
    SVG = "image/svg+xml"


class ResourceKind(Enum):
    IMAGE = "image"
    FONT = "font"
    AUDIO = "audio"
    VIDEO = "video"


_KIND_MEDIA_TYPES = {
    ResourceKind.FONT: "application/vnd.ms-opentype",
    ResourceKind.AUDIO: "audio/mpeg",
    ResourceKind.VIDEO: "video/mp4",
}


@dataclass(frozen=True)
class Resource:
    """
    A file to embed in the archive.

    Use the ``image``, ``font``, ``audio`` and ``video`` constructors
    rather than building instances directly.

    Attributes:
        kind: Resource variant
        path: Location of the file on disk
        image_type: Image subtype; set for images only
    """

    kind: ResourceKind
    path: Path
    image_type: Optional[ImageType] = None

    @classmethod
    def image(cls, path: Union[str, Path], image_type: ImageType) -> 'Resource':
        return cls(ResourceKind.IMAGE, Path(path), image_type)

    @classmethod
    def font(cls, path: Union[str, Path]) -> 'Resource':
        return cls(ResourceKind.FONT, Path(path))

    @classmethod
    def audio(cls, path: Union[str, Path]) -> 'Resource':
        return cls(ResourceKind.AUDIO, Path(path))

    @classmethod
    def video(cls, path: Union[str, Path]) -> 'Resource':
        return cls(ResourceKind.VIDEO, Path(path))

    @property
    def media_type(self) -> str:
        if self.kind is ResourceKind.IMAGE:
            return self.image_type.value
        return _KIND_MEDIA_TYPES[self.kind]

    @property
    def filename(self) -> str:
        """
        Filename of the resource inside the archive.

        Raises:
            FilenameNotFoundError: If the path has no final component
        """
        name = self.path.name
        if not name or name in (".", ".."):
            raise FilenameNotFoundError(str(self.path))
        return name

    @property
    def archive_path(self) -> str:
        return f"OEBPS/{self.filename}"

    def as_manifest_xml(self) -> str:
        filename = self.filename
        return element("item", id=filename, href=filename, media_type=self.media_type)

    def __str__(self) -> str:
        return str(self.path)


# Type alias for resource reader callback
ResourceReader = Callable[[Resource], bytes]


def read_resource_file(resource: Resource) -> bytes:
    """
    Read a resource's bytes from disk.

    Args:
        resource: Resource to read

    Returns:
        File content

    Raises:
        EpubIOError: If the file cannot be read
    """
    try:
        data = resource.path.read_bytes()
    except OSError as e:
        raise EpubIOError(f"Failed to read resource {resource}: {e}", str(resource.path)) from e
    logger.debug(f"Read resource {resource} ({len(data)} bytes)")
    return data

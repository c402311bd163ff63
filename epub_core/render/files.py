"""
Archive Files
=============

``FileContent`` pairs an archive path with the data written there. This
module also holds the fixed files every EPUB starts with.
"""

from dataclasses import dataclass
from typing import Union

MIMETYPE_PATH = "mimetype"
CONTAINER_PATH = "META-INF/container.xml"
DISPLAY_OPTIONS_PATH = "META-INF/com.apple.ibooks.display-options.xml"
STYLESHEET_PATH = "OEBPS/style.css"
OPF_PATH = "OEBPS/content.opf"
NCX_PATH = "OEBPS/toc.ncx"

CONTAINER_XML = """<?xml version="1.0" encoding="UTF-8"?>
<container version="1.0" xmlns="urn:oasis:names:tc:opendocument:xmlns:container">
    <rootfiles>
        <rootfile full-path="OEBPS/content.opf" media-type="application/oebps-package+xml"/>
   </rootfiles>
</container>
"""

DISPLAY_OPTIONS_XML = """<?xml version="1.0" encoding="utf-8"?>
<display_options>
\t<platform name="*">
\t\t<option name="specified-fonts">true</option>
\t</platform>
</display_options>
"""


@dataclass
class FileContent:
    """A single archive entry: its path and its text or binary data."""

    filepath: str
    data: Union[str, bytes]

    def to_bytes(self) -> bytes:
        if isinstance(self.data, str):
            return self.data.encode("utf-8")
        return self.data


def mimetype() -> FileContent:
    return FileContent(MIMETYPE_PATH, b"application/epub+zip")


def container() -> FileContent:
    return FileContent(CONTAINER_PATH, CONTAINER_XML)


def display_options() -> FileContent:
    return FileContent(DISPLAY_OPTIONS_PATH, DISPLAY_OPTIONS_XML)


def stylesheet(data: bytes) -> FileContent:
    return FileContent(STYLESHEET_PATH, data)

"""
EPUB Core Library
=================

A library for building EPUB 2.0.1 books from in-memory content:

- Immutable document model with fluent builders
- Deterministic content numbering and TOC depth calculation
- XHTML, OPF and NCX generation
- Synchronous and asyncio archive packaging

Architecture
------------

    epub_core/
    ├── model/       - Metadata, resources, content trees, builders
    ├── render/      - Numbering, XHTML, OPF and NCX generators
    ├── xml/         - Escaping helpers and the XML pretty-printer
    ├── packaging/   - ZIP archive assembly (sync and async)
    ├── config/      - Configuration management
    └── errors.py    - Error hierarchy

Usage
-----

    from epub_core import (
        ContentBuilder, EpubBuilder, MetadataBuilder, ReferenceType, Role,
    )

    metadata = MetadataBuilder("My Book").creator("Jane Doe").build()
    chapter = ContentBuilder(
        "<body><h1>Chapter 1</h1></body>",
        ReferenceType(Role.TEXT, "Chapter 1"),
    ).build()

    with open("book.epub", "wb") as sink:
        EpubBuilder(metadata).add_content(chapter).create(sink)

    # Or, inside a coroutine:
    await EpubBuilder(metadata).add_content(chapter).async_create(sink)

"""

__version__ = "1.0.0"
__author__ = "EPUB Core Team"

from epub_core.errors import (
    EpubError,
    EpubIOError,
    ArchiveError,
    ContentEncodingError,
    XmlFormatError,
    FilenameNotFoundError,
    ContentFilenameError,
    WorkerError,
)

from epub_core.config.settings import (
    PackagingConfig,
    load_config,
    configure_logging,
)

from epub_core.model import (
    Identifier,
    IdentifierScheme,
    Language,
    Metadata,
    MetadataBuilder,
    ImageType,
    Resource,
    ResourceKind,
    Content,
    ContentBuilder,
    ContentReference,
    ReferenceType,
    Role,
    Document,
    EpubBuilder,
)

from epub_core.packaging import (
    AsyncEpubPackager,
    EpubPackager,
    PackageResult,
    ZipCompression,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "EpubError",
    "EpubIOError",
    "ArchiveError",
    "ContentEncodingError",
    "XmlFormatError",
    "FilenameNotFoundError",
    "ContentFilenameError",
    "WorkerError",
    # Config
    "PackagingConfig",
    "load_config",
    "configure_logging",
    # Model
    "Identifier",
    "IdentifierScheme",
    "Language",
    "Metadata",
    "MetadataBuilder",
    "ImageType",
    "Resource",
    "ResourceKind",
    "Content",
    "ContentBuilder",
    "ContentReference",
    "ReferenceType",
    "Role",
    "Document",
    "EpubBuilder",
    # Packaging
    "AsyncEpubPackager",
    "EpubPackager",
    "PackageResult",
    "ZipCompression",
]

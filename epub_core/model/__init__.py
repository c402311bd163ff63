"""
Document Model
==============

Immutable description of a book: metadata, resources, and the content
and reference trees, together with their fluent builders.
"""

from epub_core.model.metadata import (
    Identifier,
    IdentifierScheme,
    Language,
    Metadata,
    MetadataBuilder,
)

from epub_core.model.resource import (
    ImageType,
    Resource,
    ResourceKind,
    ResourceReader,
    read_resource_file,
)

from epub_core.model.content import (
    Content,
    ContentBuilder,
    ContentReference,
    ReferenceType,
    Role,
)

from epub_core.model.document import (
    Document,
    EpubBuilder,
)

__all__ = [
    # Metadata
    "Identifier",
    "IdentifierScheme",
    "Language",
    "Metadata",
    "MetadataBuilder",
    # Resources
    "ImageType",
    "Resource",
    "ResourceKind",
    "ResourceReader",
    "read_resource_file",
    # Content
    "Content",
    "ContentBuilder",
    "ContentReference",
    "ReferenceType",
    "Role",
    # Document
    "Document",
    "EpubBuilder",
]

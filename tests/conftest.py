"""
Shared fixtures for the epub_core test suite.
"""

from datetime import datetime, timezone

import pytest

from epub_core.model import (
    ContentBuilder,
    ContentReference,
    Identifier,
    MetadataBuilder,
    ReferenceType,
    Role,
)


@pytest.fixture
def metadata():
    """Metadata with a fixed identifier and date."""
    return (MetadataBuilder("Test Book")
            .identifier(Identifier.uuid("1234"))
            .creator("Ann Author")
            .date(datetime(2024, 1, 2, tzinfo=timezone.utc))
            .build())


@pytest.fixture
def make_content():
    """Factory for content units with a simple, well-formed body."""

    def _make(title, children=(), references=(), filename=None, role=Role.TEXT):
        builder = ContentBuilder(f"<body><p>{title}</p></body>", ReferenceType(role, title))
        builder.add_children(children)
        builder.add_content_references(references)
        if filename is not None:
            builder.filename(filename)
        return builder.build()

    return _make


@pytest.fixture
def reference_chain():
    """Parent -> child -> grandchild, followed by a sibling reference."""
    grandchild = ContentReference("Grandchild")
    child = ContentReference("Child").add_child(grandchild)
    return [ContentReference("Parent").add_child(child), ContentReference("Sibling")]


@pytest.fixture
def fake_reader():
    """Resource reader that returns deterministic bytes without touching disk."""

    def _read(resource):
        return f"data:{resource.filename}".encode("utf-8")

    return _read

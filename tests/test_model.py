"""
Document Model Tests

Run with: pytest tests/test_model.py -v
"""

import logging
from pathlib import Path

import pytest

from epub_core.errors import EpubIOError, FilenameNotFoundError
from epub_core.model import (
    ContentBuilder,
    ContentReference,
    Document,
    EpubBuilder,
    Identifier,
    ImageType,
    Language,
    MetadataBuilder,
    ReferenceType,
    Resource,
    Role,
    read_resource_file,
)


class TestMetadata:
    """Tests for Metadata and its builder."""

    def test_defaults(self):
        """Only the title should be required."""
        metadata = MetadataBuilder("Book").build()
        assert metadata.title == "Book"
        assert metadata.language is Language.ENGLISH
        assert metadata.identifier.urn.startswith("urn:uuid:")
        assert metadata.date is not None
        assert metadata.creator is None

    def test_absent_fields_render_nothing(self):
        """Optional fields should only render when set."""
        metadata = MetadataBuilder("Book").date(None).build()
        assert metadata.creator_as_metadata_xml() is None
        assert metadata.publisher_as_metadata_xml() is None
        assert metadata.date_as_metadata_xml() is None

    def test_creator_and_contributor_roles(self):
        """Creator should be the author and contributor the translator."""
        metadata = MetadataBuilder("Book").creator("Ann").contributor("Bob").build()
        assert metadata.creator_as_metadata_xml() == '<dc:creator opf:role="aut">Ann</dc:creator>'
        assert metadata.contributor_as_metadata_xml() == '<dc:contributor opf:role="trl">Bob</dc:contributor>'

    def test_values_are_escaped(self):
        """Markup characters in values should be escaped."""
        metadata = MetadataBuilder("Tom & Jerry <2>").build()
        assert metadata.title_as_metadata_xml() == "<dc:title>Tom &amp; Jerry &lt;2&gt;</dc:title>"

    def test_isbn_identifier(self):
        """ISBN identifiers should use the isbn urn."""
        identifier = Identifier.isbn("9780000000000")
        assert identifier.urn == "urn:isbn:9780000000000"
        assert identifier.as_metadata_xml() == (
            '<dc:identifier id="BookId" opf:scheme="ISBN">urn:isbn:9780000000000</dc:identifier>'
        )
        assert identifier.as_toc_xml() == '<meta name="dtb:uid" content="urn:isbn:9780000000000"/>'

    def test_language_xml(self):
        """Language should render its ISO code."""
        assert Language.SPANISH.as_metadata_xml() == "<dc:language>es</dc:language>"


class TestResource:
    """Tests for resource media types and filenames."""

    def test_media_types(self):
        """Each kind should map to a fixed media type."""
        assert Resource.image("a/b.png", ImageType.PNG).media_type == "image/png"
        assert Resource.image("a/b.svg", ImageType.SVG).media_type == "image/svg+xml"
        assert Resource.font("f.otf").media_type == "application/vnd.ms-opentype"
        assert Resource.audio("s.mp3").media_type == "audio/mpeg"
        assert Resource.video("v.mp4").media_type == "video/mp4"

    def test_filename_from_path(self):
        """The filename should be the final path component."""
        resource = Resource.font("assets/fonts/serif.otf")
        assert resource.filename == "serif.otf"
        assert resource.archive_path == "OEBPS/serif.otf"

    def test_missing_filename_raises(self):
        """A path without a final component should fail."""
        with pytest.raises(FilenameNotFoundError):
            Resource.font("").filename

    def test_manifest_item(self):
        """Resources should render as manifest items keyed by filename."""
        resource = Resource.image("img/cover.jpg", ImageType.JPG)
        assert resource.as_manifest_xml() == (
            '<item id="cover.jpg" href="cover.jpg" media-type="image/jpeg"/>'
        )

    def test_read_resource_file(self, tmp_path):
        """The default reader should return the file's bytes."""
        path = tmp_path / "font.otf"
        path.write_bytes(b"\x00\x01font")
        assert read_resource_file(Resource.font(path)) == b"\x00\x01font"

    def test_read_missing_file_raises(self, tmp_path):
        """A missing file should surface as EpubIOError."""
        with pytest.raises(EpubIOError) as exc_info:
            read_resource_file(Resource.font(tmp_path / "missing.otf"))
        assert exc_info.value.path == str(tmp_path / "missing.otf")


class TestContentReference:
    """Tests for in-page references."""

    def test_add_child_returns_new_reference(self):
        """add_child should leave the original untouched."""
        parent = ContentReference("Parent")
        updated = parent.add_child(ContentReference("Child"))
        assert parent.children == ()
        assert [c.title for c in updated.children] == ["Child"]

    def test_level_follows_first_child(self, reference_chain):
        """Reference depth should follow the first child chain."""
        parent, sibling = reference_chain
        assert parent.level() == 2
        assert sibling.level() == 0

    def test_generated_anchor(self):
        """A reference without an anchor should get a sequential one."""
        assert ContentReference("A").reference_name("c01.xhtml", 3) == "c01.xhtml#id03"

    def test_explicit_anchor(self):
        """An explicit anchor should be used as is."""
        reference = ContentReference("A", anchor="intro")
        assert reference.reference_name("c01.xhtml", 3) == "c01.xhtml#intro"


class TestContentDepth:
    """Tests for the depth calculator."""

    def test_leaf_has_no_depth(self, make_content):
        """A unit without children or references should have depth 0."""
        leaf = make_content("Leaf")
        assert leaf.level() == 0
        assert leaf.level_reference_content() == 0

    def test_only_first_child_counts(self, make_content):
        """A deeper later sibling should not raise the depth."""
        shallow = make_content("Shallow")
        deep = make_content("Deep", children=[make_content("Deeper", children=[make_content("Deepest")])])
        root = make_content("Root", children=[shallow, deep])

        assert root.level() == 1
        assert Document(metadata=MetadataBuilder("B").build(), contents=(root,)).level() == 2

    def test_references_deepen_combined_level(self, make_content, reference_chain):
        """A reference chain should count towards the combined depth."""
        root = make_content("Root", references=reference_chain)
        assert root.level() == 0
        assert root.level_reference_content() == 3

    def test_combined_level_through_first_child(self, make_content):
        """The first child's references should count through the child."""
        child = make_content("Child", references=[ContentReference("Ref")])
        root = make_content("Root", children=[child])
        assert root.level_reference_content() == 2

    def test_document_level(self, metadata, make_content, reference_chain):
        """Document depth should be one more than the deepest root."""
        contents = (
            make_content("Flat"),
            make_content("Refs", references=reference_chain),
        )
        assert Document(metadata=metadata).level() == 0
        assert Document(metadata=metadata, contents=contents[:1]).level() == 1
        assert Document(metadata=metadata, contents=contents).level() == 4


class TestBuilders:
    """Tests for the fluent builders."""

    def test_content_builder_accepts_text(self):
        """A str body should be stored as UTF-8 bytes."""
        content = ContentBuilder("<body>é</body>", ReferenceType(Role.TEXT, "T")).build()
        assert content.body == "<body>é</body>".encode("utf-8")
        assert content.title == "T"

    def test_content_builder_collects_children(self, make_content):
        """Children and references should be kept in insertion order."""
        content = (ContentBuilder(b"<body/>", ReferenceType(Role.TEXT, "T"))
                   .add_child(make_content("A"))
                   .add_children([make_content("B"), make_content("C")])
                   .add_content_reference(ContentReference("R1"))
                   .filename("t.xhtml")
                   .build())
        assert [c.title for c in content.subcontents] == ["A", "B", "C"]
        assert [r.title for r in content.content_references] == ["R1"]
        assert content.filename == "t.xhtml"

    def test_epub_builder(self, metadata, make_content):
        """EpubBuilder should assemble an immutable Document."""
        document = (EpubBuilder(metadata)
                    .stylesheet("body { margin: 0 }")
                    .cover_image("img/cover.png", ImageType.PNG)
                    .add_resource(Resource.font("serif.otf"))
                    .add_content(make_content("One"))
                    .build())
        assert document.stylesheet == b"body { margin: 0 }"
        assert document.cover_image.path == Path("img/cover.png")
        assert len(document.resources) == 1
        assert len(document.contents) == 1
        assert document.cover_image_as_metadata_xml() == '<meta name="cover" content="cover.png"/>'

    def test_build_is_logged(self, metadata, make_content, caplog):
        """build() should log the assembled document at debug level."""
        with caplog.at_level(logging.DEBUG, logger="epub_core.model.document"):
            EpubBuilder(metadata).add_content(make_content("One")).build()
        assert "Built document 'Test Book' with 0 resources and 1 root contents" in caplog.text

    def test_reference_type(self):
        """type_and_title should return the role string and title."""
        assert ReferenceType(Role.COPYRIGHT, "Rights").type_and_title() == ("copyright-page", "Rights")

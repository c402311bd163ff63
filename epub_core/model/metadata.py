"""
Book Metadata
=============

Descriptive metadata for the package document. Metadata is immutable once
built; the OPF and NCX generators only consume its read accessors.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
import uuid

from epub_core.xml.utils import element


class Language(str, Enum):
    """Book language as an ISO 639-1 code."""

    ARABIC = "ar"
    BULGARIAN = "bg"
    CHINESE = "zh"
    CROATIAN = "hr"
    CZECH = "cs"
    DANISH = "da"
    DUTCH = "nl"
    ENGLISH = "en"
    ESTONIAN = "et"
    FINNISH = "fi"
    FRENCH = "fr"
    GREEK = "el"
    GERMAN = "de"
    HEBREW = "he"
    HUNGARIAN = "hu"
    ICELANDIC = "is"
    INDONESIAN = "id"
    IRISH = "ga"
    ITALIAN = "it"
    JAPANESE = "ja"
    KOREAN = "ko"
    LATVIAN = "lv"
    LITHUANIAN = "lt"
    MACEDONIAN = "mk"
    MALAY = "ms"
    MALTESE = "mt"
    NORWEGIAN = "no"
    PERSIAN = "fa"
    POLISH = "pl"
    PORTUGUESE = "pt"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    SERBIAN = "sr"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SPANISH = "es"
    SWAHILI = "sw"
    SWEDISH = "sv"
    TAGALOG = "tl"
    THAI = "th"
    TURKISH = "tr"
    UKRAINIAN = "uk"
    URDU = "ur"
    VIETNAMESE = "vi"
    WELSH = "cy"
    YIDDISH = "yi"

    def as_metadata_xml(self) -> str:
        return element("dc:language", self.value)


class IdentifierScheme(str, Enum):
    UUID = "UUID"
    ISBN = "ISBN"


@dataclass(frozen=True)
class Identifier:
    """
    Unique book identifier.

    Attributes:
        scheme: UUID or ISBN
        value: Bare identifier value (without the urn prefix)
    """

    scheme: IdentifierScheme
    value: str

    @classmethod
    def uuid(cls, value: Optional[str] = None) -> 'Identifier':
        """Create a UUID identifier, generating a random one if no value is given."""
        return cls(IdentifierScheme.UUID, value or str(uuid.uuid4()))

    @classmethod
    def isbn(cls, value: str) -> 'Identifier':
        return cls(IdentifierScheme.ISBN, value)

    @property
    def urn(self) -> str:
        return f"urn:{self.scheme.value.lower()}:{self.value}"

    def as_metadata_xml(self) -> str:
        return element("dc:identifier", self.urn, id="BookId", opf__scheme=self.scheme.value)

    def as_toc_xml(self) -> str:
        return element("meta", name="dtb:uid", content=self.urn)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Metadata:
    """
    Immutable book metadata.

    Only ``title`` is required. ``language`` defaults to English, the
    identifier to a random UUID and the date to the moment of creation.
    """

    title: str
    language: Language = Language.ENGLISH
    identifier: Identifier = field(default_factory=Identifier.uuid)
    creator: Optional[str] = None
    contributor: Optional[str] = None
    publisher: Optional[str] = None
    date: Optional[datetime] = field(default_factory=_now)
    subject: Optional[str] = None
    description: Optional[str] = None

    def title_as_metadata_xml(self) -> str:
        return element("dc:title", self.title)

    def creator_as_metadata_xml(self) -> Optional[str]:
        if self.creator is None:
            return None
        return element("dc:creator", self.creator, opf__role="aut")

    def contributor_as_metadata_xml(self) -> Optional[str]:
        if self.contributor is None:
            return None
        return element("dc:contributor", self.contributor, opf__role="trl")

    def publisher_as_metadata_xml(self) -> Optional[str]:
        if self.publisher is None:
            return None
        return element("dc:publisher", self.publisher)

    def date_as_metadata_xml(self) -> Optional[str]:
        if self.date is None:
            return None
        return element("dc:date", self.date.strftime("%Y-%m-%d"), opf__event="publication")

    def subject_as_metadata_xml(self) -> Optional[str]:
        if self.subject is None:
            return None
        return element("dc:subject", self.subject)

    def description_as_metadata_xml(self) -> Optional[str]:
        if self.description is None:
            return None
        return element("dc:description", self.description)


class MetadataBuilder:
    """
    Fluent builder for Metadata.

    Example:
        metadata = (MetadataBuilder("My Book")
                    .creator("Ann Author")
                    .language(Language.SPANISH)
                    .build())
    """

    def __init__(self, title: str):
        self._metadata = Metadata(title=title)

    def _set(self, **changes) -> 'MetadataBuilder':
        self._metadata = replace(self._metadata, **changes)
        return self

    def language(self, language: Language) -> 'MetadataBuilder':
        return self._set(language=language)

    def identifier(self, identifier: Identifier) -> 'MetadataBuilder':
        return self._set(identifier=identifier)

    def creator(self, creator: str) -> 'MetadataBuilder':
        return self._set(creator=creator)

    def contributor(self, contributor: str) -> 'MetadataBuilder':
        return self._set(contributor=contributor)

    def publisher(self, publisher: str) -> 'MetadataBuilder':
        return self._set(publisher=publisher)

    def date(self, date: Optional[datetime]) -> 'MetadataBuilder':
        return self._set(date=date)

    def subject(self, subject: str) -> 'MetadataBuilder':
        return self._set(subject=subject)

    def description(self, description: str) -> 'MetadataBuilder':
        return self._set(description=description)

    def build(self) -> Metadata:
        return self._metadata

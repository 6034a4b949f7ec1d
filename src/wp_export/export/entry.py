"""Translation entries and the references tagging their origin."""

from dataclasses import dataclass, field
from typing import Mapping, Optional, Union


@dataclass(frozen=True)
class TranslationEntryRef:
    """Where an exported string comes from."""

    object_type: str  # e.g. "post" or "term"
    field_type: str  # e.g. "post_title", "post_content"
    object_id: int
    field_id: Optional[str] = None  # identifies the field inside the object
    field_comment: Optional[str] = None  # note meant for the translators
    encoding: Optional[str] = None  # encoding format of the field group

    @classmethod
    def from_dict(cls, data: Mapping) -> "TranslationEntryRef":
        """Create from a mapping, ignoring unknown keys."""
        return cls(
            object_type=data.get("object_type", ""),
            field_type=data.get("field_type", ""),
            object_id=data.get("object_id", 0),
            field_id=data.get("field_id"),
            field_comment=data.get("field_comment"),
            encoding=data.get("encoding"),
        )

    @classmethod
    def coerce(cls, ref: Union["TranslationEntryRef", Mapping]) -> "TranslationEntryRef":
        """Return ``ref`` as a TranslationEntryRef, converting mappings."""
        if isinstance(ref, cls):
            return ref
        return cls.from_dict(ref)


@dataclass
class TranslationEntry:
    """A source string with its translations."""

    singular: str
    translations: list[str] = field(default_factory=list)
    context: str = ""
    extracted_comments: str = ""

    @property
    def key(self) -> tuple[str, str]:
        """Catalogue key: entries sharing it are the same message."""
        return (self.context, self.singular)

    @property
    def translation(self) -> str:
        return self.translations[0] if self.translations else ""

    @classmethod
    def from_ref(
        cls,
        ref: Union[TranslationEntryRef, Mapping],
        source: str,
        target: str = "",
    ) -> "TranslationEntry":
        """Build an entry for ``source`` tagged with ``ref``."""
        ref = TranslationEntryRef.coerce(ref)
        return cls(
            singular=source,
            translations=[target],
            context=ref.field_id or "",
            extracted_comments=ref.field_comment or "",
        )

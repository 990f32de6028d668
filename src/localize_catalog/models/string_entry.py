"""Data models for the canonical multi-language catalog."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .string_value import StringValue, SimpleValue


class TranslationState(str, Enum):
    """Translation state of a single (key, language) pair."""

    TRANSLATED = "translated"
    NEEDS_REVIEW = "needs_review"
    NEW = "new"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "TranslationState":
        """
        Map a raw state string onto the three canonical states.

        Accepts String Catalog states and XLIFF 1.2 target states:
        - missing, 'translated', 'final', 'signed-off', 'reviewed' and any
          other unknown state -> translated
        - 'stale', 'needs_review' and XLIFF 'needs-review-*' -> needs review
        - 'new' and the remaining XLIFF 'needs-*' states -> new
        """
        if not raw:
            return cls.TRANSLATED
        state = raw.strip().lower()
        if state in ("stale", "needs_review") or state.startswith("needs-review"):
            return cls.NEEDS_REVIEW
        if state == "new" or state.startswith("needs-"):
            return cls.NEW
        return cls.TRANSLATED


@dataclass
class Localization:
    """A value for one language together with its translation state."""

    value: StringValue
    state: TranslationState = TranslationState.TRANSLATED

    @property
    def is_translated(self) -> bool:
        """
        Check whether this localization holds usable translator work.

        Simple values count when non-empty and in state 'translated'; plural
        values count as soon as any variant is populated.
        """
        if isinstance(self.value, SimpleValue):
            return self.value.text != "" and self.state is TranslationState.TRANSLATED
        return self.value.is_populated()


@dataclass
class StringEntry:
    """Represents a single localizable key across all languages."""

    key: str
    localizations: Dict[str, Localization] = field(default_factory=dict)
    comment: Optional[str] = None
    extraction_state: Optional[str] = None  # manual, extracted_with_value, stale

    def get_source_value(self, source_language: str = "en") -> str:
        """Get the source language text for this key, falling back to the key itself."""
        loc = self.localizations.get(source_language)
        if loc and isinstance(loc.value, SimpleValue) and loc.value.text:
            return loc.value.text
        return self.key

    def has_translation(self, language: str) -> bool:
        """Check if this key has a usable translation for the given language."""
        loc = self.localizations.get(language)
        return loc is not None and loc.is_translated

    def set_translation(
        self,
        language: str,
        value: StringValue,
        state: TranslationState = TranslationState.TRANSLATED,
    ) -> None:
        """Set the value for the given language."""
        self.localizations[language] = Localization(value=value, state=state)


@dataclass
class Catalog:
    """A complete multi-language catalog: key -> language -> Localization."""

    source_language: str
    strings: Dict[str, StringEntry] = field(default_factory=dict)
    version: str = "1.0"

    @property
    def languages(self) -> List[str]:
        """All language codes observed in the entries, sorted."""
        found = set()
        for entry in self.strings.values():
            found.update(entry.localizations.keys())
        return sorted(found)

    def entry(self, key: str) -> StringEntry:
        """Get the entry for a key, creating an empty one if needed."""
        if key not in self.strings:
            self.strings[key] = StringEntry(key=key)
        return self.strings[key]

    def language_slice(self, language: str) -> Dict[str, StringValue]:
        """Get key -> value for one language, for single-language writers."""
        return {
            key: entry.localizations[language].value
            for key, entry in self.strings.items()
            if language in entry.localizations
        }

    def get_untranslated_keys(self, target_language: str) -> List[str]:
        """Get list of keys that don't have translations for the target language."""
        return [
            key for key, entry in self.strings.items()
            if not entry.has_translation(target_language)
        ]

    @classmethod
    def from_language_slice(
        cls,
        values: Dict[str, StringValue],
        language: str,
        state: TranslationState = TranslationState.TRANSLATED,
    ) -> "Catalog":
        """Wrap the output of a single-language parser in a catalog."""
        catalog = cls(source_language=language)
        for key, value in values.items():
            catalog.entry(key).set_translation(language, value, state)
        return catalog

"""Parser for Apple's .xcstrings JSON format (Xcode 15+)."""

import json
import logging
from typing import Dict, Any, Optional

from ..errors import ParseError, ValidationError
from ..models.string_entry import Catalog, Localization, StringEntry, TranslationState
from ..models.string_value import PluralValue, SimpleValue
from .base import BaseParser

logger = logging.getLogger(__name__)


class XCStringsParser(BaseParser):
    """Parser for .xcstrings files."""

    SUFFIXES = (".xcstrings",)

    def parse_string(self, content: str, source_name: str = "<string>") -> Catalog:
        """
        Parse .xcstrings content from a string.

        Args:
            content: JSON string content
            source_name: Name used in error messages

        Returns:
            Catalog with every language of the file

        Raises:
            ParseError: If the JSON is invalid or lacks 'sourceLanguage'/'strings'
        """
        if not content.strip():
            return Catalog(source_language="en")

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ParseError(source_name, f"Invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ParseError(source_name, "Invalid .xcstrings structure: top level is not an object")
        if not isinstance(data.get("strings"), dict) or not data.get("sourceLanguage"):
            raise ParseError(
                source_name, "Invalid .xcstrings structure: missing 'strings' or 'sourceLanguage'"
            )

        return self._parse_data(data, source_name)

    def _parse_data(self, data: Dict[str, Any], source_name: str) -> Catalog:
        """Parse the JSON data structure into our model."""
        catalog = Catalog(
            source_language=data["sourceLanguage"],
            version=data.get("version", "1.0"),
        )

        for key, entry_data in data["strings"].items():
            if not isinstance(entry_data, dict):
                raise ParseError(source_name, f"Entry '{key}' is not an object")
            catalog.strings[key] = self._parse_string_entry(key, entry_data, source_name)

        return catalog

    def _parse_string_entry(self, key: str, entry_data: Dict[str, Any], source_name: str) -> StringEntry:
        """Parse a single string entry."""
        entry = StringEntry(
            key=key,
            comment=entry_data.get("comment"),
            extraction_state=entry_data.get("extractionState"),
        )

        localizations = entry_data.get("localizations") or {}
        if not isinstance(localizations, dict):
            raise ParseError(source_name, f"Entry '{key}' has malformed 'localizations'")

        for lang, loc_data in localizations.items():
            if not isinstance(loc_data, dict):
                logger.warning("%s: dropping '%s' [%s]: localization is not an object", source_name, key, lang)
                continue
            try:
                localization = self._parse_localization(loc_data, key, source_name)
            except ValidationError as e:
                logger.warning("%s: dropping '%s' [%s]: %s", source_name, key, lang, e)
                continue
            if localization is not None:
                entry.localizations[lang] = localization

        return entry

    def _parse_localization(self, loc_data: Dict[str, Any], key: str, source_name: str) -> Optional[Localization]:
        """Parse a localization entry; returns None for unsupported variations."""
        if "stringUnit" in loc_data:
            su = self._expect_object(loc_data["stringUnit"] or {}, f"'{key}' stringUnit", source_name)
            return Localization(
                value=SimpleValue(self._unit_text(su, key, source_name)),
                state=TranslationState.parse(su.get("state")),
            )

        variations = self._expect_object(loc_data.get("variations") or {}, f"'{key}' variations", source_name)
        plural = variations.get("plural")
        if plural is None:
            logger.debug("Skipping unsupported variations: %s", ", ".join(variations))
            return None
        plural = self._expect_object(plural, f"'{key}' plural variations", source_name)

        variants = {}
        states = {}
        for quantity, variant in plural.items():
            variant = self._expect_object(variant or {}, f"'{key}' plural '{quantity}'", source_name)
            su = self._expect_object(
                variant.get("stringUnit") or {}, f"'{key}' plural '{quantity}' stringUnit", source_name
            )
            variants[quantity] = self._unit_text(su, key, source_name)
            states[quantity] = su.get("state")

        return Localization(
            value=PluralValue(variants),
            state=TranslationState.parse(states.get("other")),
        )

    @staticmethod
    def _expect_object(value: Any, what: str, source_name: str) -> Dict[str, Any]:
        if not isinstance(value, dict):
            raise ParseError(source_name, f"Invalid .xcstrings structure: {what} is not an object")
        return value

    @staticmethod
    def _unit_text(su: Dict[str, Any], key: str, source_name: str) -> str:
        value = su.get("value", "")
        if not isinstance(value, str):
            raise ParseError(source_name, f"Invalid .xcstrings structure: '{key}' value is not a string")
        return value

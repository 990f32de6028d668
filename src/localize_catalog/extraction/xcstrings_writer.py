"""Writer for Apple's .xcstrings JSON format (Xcode 15+)."""

import json
from typing import Dict, Any
from pathlib import Path

from ..models.string_entry import Catalog, StringEntry, Localization
from ..models.string_value import PluralValue


class XCStringsWriter:
    """Writer for .xcstrings files."""

    def write(self, catalog: Catalog, output_path: str) -> None:
        """
        Write a Catalog to disk.

        Args:
            catalog: The Catalog to write
            output_path: Path to write the file to
        """
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            f.write(self.to_string(catalog))
            f.write("\n")  # Trailing newline

    def to_string(self, catalog: Catalog) -> str:
        """
        Convert a Catalog to a JSON string.

        Args:
            catalog: The Catalog to convert

        Returns:
            JSON string representation
        """
        data = self._to_dict(catalog)
        return json.dumps(data, indent=2, ensure_ascii=False)

    def _to_dict(self, catalog: Catalog) -> Dict[str, Any]:
        """Convert Catalog to dictionary for JSON serialization."""
        strings_dict = {}
        for key in sorted(catalog.strings.keys()):
            strings_dict[key] = self._entry_to_dict(catalog.strings[key])

        return {
            "sourceLanguage": catalog.source_language,
            "strings": strings_dict,
            "version": catalog.version,
        }

    def _entry_to_dict(self, entry: StringEntry) -> Dict[str, Any]:
        """Convert a StringEntry to dictionary."""
        entry_dict: Dict[str, Any] = {}

        if entry.comment:
            entry_dict["comment"] = entry.comment

        if entry.extraction_state:
            entry_dict["extractionState"] = entry.extraction_state

        if entry.localizations:
            entry_dict["localizations"] = {
                lang: self._localization_to_dict(entry.localizations[lang])
                for lang in sorted(entry.localizations.keys())
            }

        return entry_dict

    def _localization_to_dict(self, loc: Localization) -> Dict[str, Any]:
        """Convert a Localization to dictionary."""
        state = loc.state.value

        if isinstance(loc.value, PluralValue):
            plural = {
                quantity: {"stringUnit": {"state": state, "value": text}}
                for quantity, text in loc.value.texts()
            }
            return {"variations": {"plural": plural}}

        return {"stringUnit": {"state": state, "value": loc.value.text}}

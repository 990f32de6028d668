"""Shared fixtures for the catalog tests."""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from localize_catalog.models import Catalog, Localization, PluralValue, SimpleValue, StringEntry, TranslationState


def make_xcstrings(strings: Dict[str, Any], source_language: str = "en") -> str:
    """Build .xcstrings JSON from a {key: {lang: value-or-(value, state)}} mapping."""
    document: Dict[str, Any] = {"sourceLanguage": source_language, "strings": {}, "version": "1.0"}
    for key, localizations in strings.items():
        entry: Dict[str, Any] = {}
        if localizations:
            entry["localizations"] = {}
            for lang, value in localizations.items():
                text, state = value if isinstance(value, tuple) else (value, "translated")
                entry["localizations"][lang] = {"stringUnit": {"state": state, "value": text}}
        document["strings"][key] = entry
    return json.dumps(document, indent=2)


@pytest.fixture
def write_file(tmp_path: Path):
    """Write a file below tmp_path and return its path as a string."""

    def _write(relative_path: str, content: str) -> str:
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def sample_catalog() -> Catalog:
    """Three keys: fully translated, partially translated and a plural."""
    catalog = Catalog(source_language="en")

    greeting = catalog.entry("greeting")
    greeting.comment = "Shown on the home screen"
    greeting.set_translation("en", SimpleValue("Hello world"))
    greeting.set_translation("fr", SimpleValue("Bonjour le monde"))

    farewell = catalog.entry("farewell")
    farewell.set_translation("en", SimpleValue("Goodbye"))
    farewell.set_translation("fr", SimpleValue(""), TranslationState.NEW)

    items = catalog.entry("items_count")
    items.set_translation("en", PluralValue({"one": "%d item", "other": "%d items"}))

    return catalog


def translated(text: str) -> Localization:
    return Localization(SimpleValue(text), TranslationState.TRANSLATED)


def untranslated(text: str = "") -> Localization:
    return Localization(SimpleValue(text), TranslationState.NEW)


def entry_with(key: str, **localizations: Localization) -> StringEntry:
    return StringEntry(key=key, localizations=dict(localizations))

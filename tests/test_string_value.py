"""Tests for the value and catalog models."""

import pytest

from localize_catalog.errors import ValidationError
from localize_catalog.models import (
    Catalog,
    Localization,
    PluralValue,
    SimpleValue,
    StringEntry,
    TranslationState,
    ValueKind,
    is_plural,
)


class TestPluralValue:
    def test_requires_other(self):
        with pytest.raises(ValidationError):
            PluralValue({"one": "%d item"})

    def test_rejects_empty_other(self):
        with pytest.raises(ValidationError):
            PluralValue({"one": "%d item", "other": ""})

    def test_rejects_unknown_quantity(self):
        with pytest.raises(ValidationError):
            PluralValue({"several": "x", "other": "y"})

    def test_variants_are_normalized(self):
        value = PluralValue({"other": "%d items", "zero": "", "one": "%d item", "few": "%d itemy"})

        assert list(value.variants) == ["one", "few", "other"]
        assert value.other == "%d items"

    def test_kind_tag(self):
        assert PluralValue({"other": "x"}).kind is ValueKind.PLURAL
        assert SimpleValue("x").kind is ValueKind.SIMPLE
        assert is_plural(PluralValue({"other": "x"}))
        assert not is_plural(SimpleValue("x"))


class TestTranslationState:
    @pytest.mark.parametrize("raw, expected", [
        (None, TranslationState.TRANSLATED),
        ("", TranslationState.TRANSLATED),
        ("translated", TranslationState.TRANSLATED),
        ("needs_review", TranslationState.NEEDS_REVIEW),
        ("stale", TranslationState.NEEDS_REVIEW),
        ("new", TranslationState.NEW),
        ("reviewed", TranslationState.TRANSLATED),
        ("final", TranslationState.TRANSLATED),
        ("needs-review-translation", TranslationState.NEEDS_REVIEW),
        ("needs-translation", TranslationState.NEW),
        ("Needs-L10N", TranslationState.NEW),
    ])
    def test_parse(self, raw, expected):
        assert TranslationState.parse(raw) is expected


class TestLocalization:
    def test_simple_needs_text_and_state(self):
        assert Localization(SimpleValue("Hi")).is_translated
        assert not Localization(SimpleValue("")).is_translated
        assert not Localization(SimpleValue("Hi"), TranslationState.NEEDS_REVIEW).is_translated
        assert not Localization(SimpleValue("Hi"), TranslationState.NEW).is_translated

    def test_plural_counts_when_populated(self):
        value = PluralValue({"other": "%d items"})
        assert Localization(value, TranslationState.NEW).is_translated


class TestCatalog:
    def test_languages_derived_from_entries(self, sample_catalog):
        assert sample_catalog.languages == ["en", "fr"]

    def test_language_slice(self, sample_catalog):
        fr = sample_catalog.language_slice("fr")

        assert set(fr) == {"greeting", "farewell"}
        assert fr["greeting"] == SimpleValue("Bonjour le monde")

    def test_untranslated_keys(self, sample_catalog):
        assert sample_catalog.get_untranslated_keys("fr") == ["farewell", "items_count"]

    def test_from_language_slice(self):
        catalog = Catalog.from_language_slice({"a": SimpleValue("A")}, "de")

        assert catalog.source_language == "de"
        assert catalog.strings["a"].localizations["de"] == Localization(SimpleValue("A"))

    def test_source_value_falls_back_to_key(self):
        entry = StringEntry(key="Welcome back")
        assert entry.get_source_value("en") == "Welcome back"

        entry.set_translation("en", SimpleValue("Welcome!"))
        assert entry.get_source_value("en") == "Welcome!"

"""Tests for word counting."""

import pytest

from localize_catalog.analysis import WordCounter
from localize_catalog.models import Catalog, PluralValue, SimpleValue, Source, TranslationState


class TestCountWords:
    @pytest.mark.parametrize("text, expected", [
        ("%d items left", 2),
        ("Hello world", 2),
        ("%1$@ sent you %2$d messages", 3),
        ("Line one\\nLine two", 4),
        ("Tabs\\tand\\rreturns", 3),
        ("  spaced   out  ", 2),
        ("%@", 0),
        ("", 0),
    ])
    def test_count_words(self, text, expected):
        assert WordCounter().count_words(text) == expected


class TestCountCatalog:
    def test_translated_and_pending(self, sample_catalog):
        sample_catalog.entry("orphan key")

        counts = WordCounter().count_catalog(sample_catalog)

        # en: "Hello world" + "Goodbye" + plural ("%d item", "%d items")
        assert counts.by_language["en"].translated == 5
        assert counts.by_language["en"].pending == 0
        # fr: "Bonjour le monde" translated, "farewell" pending with the source "Goodbye"
        assert counts.by_language["fr"].translated == 3
        assert counts.by_language["fr"].pending == 1
        assert counts.by_language["fr"].total == 4
        # "orphan key" has no localizations and only adds to the file's pending total
        assert counts.translated == 8
        assert counts.pending == 3
        assert counts.total == 11

    def test_needs_review_counts_source_words(self):
        catalog = Catalog(source_language="en")
        entry = catalog.entry("title")
        entry.set_translation("en", SimpleValue("Welcome to the app"))
        entry.set_translation("de", SimpleValue("Willkommen"), TranslationState.NEEDS_REVIEW)

        counts = WordCounter().count_catalog(catalog)

        assert counts.by_language["de"].pending == 4
        assert counts.by_language["de"].translated == 0

    def test_pending_uses_key_without_source_value(self):
        catalog = Catalog(source_language="en")
        catalog.entry("Save changes").set_translation("fr", SimpleValue(""), TranslationState.NEW)

        counts = WordCounter().count_catalog(catalog)

        assert counts.by_language["fr"].pending == 2

    def test_plural_variants_are_summed(self):
        catalog = Catalog(source_language="en")
        catalog.entry("n").set_translation("en", PluralValue({"one": "One apple", "other": "%d red apples"}))

        assert WordCounter().count_catalog(catalog).translated == 4


class TestCount:
    def test_totals_across_files(self):
        result = WordCounter().count_sources([
            Source("en.json", '{"a": "one two", "b": "three"}'),
            Source("fr.json", '{"a": "un deux trois"}'),
            Source("de.json", "{broken"),
        ])

        assert set(result.file_counts) == {"en.json", "fr.json"}
        assert result.total_words == 6
        assert result.translated == 6
        assert result.pending == 0
        assert result.skipped_sources == ["de.json"]

"""Tests for the .xcstrings parser and writer."""

import json

import pytest

from localize_catalog.errors import ParseError
from localize_catalog.extraction import XCStringsParser, XCStringsWriter
from localize_catalog.models import PluralValue, SimpleValue, TranslationState

XCSTRINGS = {
    "sourceLanguage": "en",
    "version": "1.0",
    "strings": {
        "title": {
            "comment": "Screen title",
            "extractionState": "manual",
            "localizations": {
                "en": {"stringUnit": {"state": "translated", "value": "Home"}},
                "de": {"stringUnit": {"state": "stale", "value": "Start"}},
                "fr": {"stringUnit": {"state": "reviewed", "value": "Accueil"}},
            },
        },
        "items_count": {
            "localizations": {
                "en": {
                    "variations": {
                        "plural": {
                            "one": {"stringUnit": {"state": "translated", "value": "%lld item"}},
                            "other": {"stringUnit": {"state": "translated", "value": "%lld items"}},
                        }
                    }
                },
                "de": {
                    "variations": {
                        "plural": {
                            "one": {"stringUnit": {"state": "new", "value": "%lld Eintrag"}},
                        }
                    }
                },
            },
        },
        "device_specific": {
            "localizations": {
                "en": {"variations": {"device": {"iphone": {"stringUnit": {"value": "Tap"}}}}},
            },
        },
        "Untouched key": {},
    },
}


@pytest.fixture
def catalog():
    return XCStringsParser().parse_string(json.dumps(XCSTRINGS))


class TestXCStringsParser:
    def test_metadata(self, catalog):
        entry = catalog.strings["title"]

        assert catalog.source_language == "en"
        assert entry.comment == "Screen title"
        assert entry.extraction_state == "manual"

    def test_states(self, catalog):
        localizations = catalog.strings["title"].localizations

        assert localizations["en"].state is TranslationState.TRANSLATED
        assert localizations["de"].state is TranslationState.NEEDS_REVIEW
        assert localizations["fr"].state is TranslationState.TRANSLATED

    def test_plural(self, catalog):
        en = catalog.strings["items_count"].localizations["en"]

        assert en.value == PluralValue({"one": "%lld item", "other": "%lld items"})

    def test_plural_without_other_is_dropped(self, catalog):
        assert "de" not in catalog.strings["items_count"].localizations

    def test_device_variations_are_skipped(self, catalog):
        assert catalog.strings["device_specific"].localizations == {}

    def test_key_without_localizations(self, catalog):
        assert catalog.strings["Untouched key"].localizations == {}

    def test_empty_content(self):
        catalog = XCStringsParser().parse_string("")

        assert catalog.source_language == "en"
        assert catalog.strings == {}

    @pytest.mark.parametrize("content", [
        "{not json",
        "[]",
        '{"strings": {}}',
        '{"sourceLanguage": "en"}',
    ])
    def test_invalid_documents(self, content):
        with pytest.raises(ParseError):
            XCStringsParser().parse_string(content, source_name="broken.xcstrings")

    @pytest.mark.parametrize("localization", [
        {"stringUnit": "oops"},
        {"stringUnit": {"value": 42}},
        {"variations": ["plural"]},
        {"variations": {"plural": ["other"]}},
        {"variations": {"plural": {"other": "x"}}},
        {"variations": {"plural": {"other": {"stringUnit": "x"}}}},
    ])
    def test_malformed_localization_shapes(self, localization):
        content = json.dumps({
            "sourceLanguage": "en",
            "strings": {"title": {"localizations": {"en": localization}}},
        })

        with pytest.raises(ParseError) as exc_info:
            XCStringsParser().parse_string(content, source_name="bad.xcstrings")

        assert exc_info.value.source_name == "bad.xcstrings"


class TestXCStringsWriter:
    def test_output_shape(self, catalog):
        data = json.loads(XCStringsWriter().to_string(catalog))

        assert data["sourceLanguage"] == "en"
        assert list(data["strings"]) == sorted(data["strings"])
        assert data["strings"]["title"]["localizations"]["de"] == {
            "stringUnit": {"state": "needs_review", "value": "Start"}
        }
        assert data["strings"]["items_count"]["localizations"]["en"]["variations"]["plural"]["one"] == {
            "stringUnit": {"state": "translated", "value": "%lld item"}
        }

    def test_optional_fields_omitted(self, catalog):
        data = json.loads(XCStringsWriter().to_string(catalog))

        assert data["strings"]["Untouched key"] == {}

    def test_round_trip(self, catalog):
        parser = XCStringsParser()

        assert parser.parse_string(XCStringsWriter().to_string(catalog)) == catalog

    def test_write_adds_trailing_newline(self, catalog, tmp_path):
        output = tmp_path / "out" / "Localizable.xcstrings"
        XCStringsWriter().write(catalog, str(output))

        content = output.read_text(encoding="utf-8")
        assert content.endswith("}\n")
        assert XCStringsParser().parse(str(output)).strings["title"].localizations["en"].value == SimpleValue("Home")

"""Tests for the .properties parser and writer."""

from localize_catalog.extraction import PropertiesParser, PropertiesWriter
from localize_catalog.models import PluralValue, SimpleValue


class TestPropertiesParser:
    def test_separators(self):
        result = PropertiesParser().parse_string(
            "greeting=Hello\n"
            "farewell : Goodbye\n"
            "title Home screen\n"
        )

        assert result == {
            "greeting": SimpleValue("Hello"),
            "farewell": SimpleValue("Goodbye"),
            "title": SimpleValue("Home screen"),
        }

    def test_comments_and_blank_lines(self):
        result = PropertiesParser().parse_string("# comment\n! another\n\nkey=value\n")

        assert result == {"key": SimpleValue("value")}

    def test_line_continuation(self):
        result = PropertiesParser().parse_string("long=first part \\\n    second part\n")

        assert result["long"].text == "first part second part"

    def test_escapes(self):
        result = PropertiesParser().parse_string("msg=Caf\\u00e9\\nline two\nkey\\=with\\:sep=x\n")

        assert result["msg"].text == "Café\nline two"
        assert result["key=with:sep"].text == "x"


class TestPropertiesWriter:
    def test_plural_variants_become_suffixed_keys(self):
        output = PropertiesWriter().to_string({
            "items": PluralValue({"one": "%d item", "other": "%d items"}),
        })

        assert output == "items.one=%d item\nitems.other=%d items"

    def test_round_trip(self):
        original = {
            "with space": SimpleValue("value"),
            "multiline": SimpleValue("a\nb"),
            "leading": SimpleValue("  padded"),
            "unicode": SimpleValue("日本語"),
        }

        assert PropertiesParser().parse_string(PropertiesWriter().to_string(original)) == original

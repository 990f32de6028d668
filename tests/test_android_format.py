"""Tests for the Android strings.xml parser and writer."""

import pytest

from localize_catalog.errors import ParseError
from localize_catalog.extraction import AndroidXmlParser, AndroidXmlWriter
from localize_catalog.extraction.android_parser import escape_android, unescape_android
from localize_catalog.extraction.android_writer import sanitize_resource_name
from localize_catalog.models import PluralValue, SimpleValue

STRINGS_XML = """<?xml version="1.0" encoding="utf-8"?>
<resources>
    <!-- App name -->
    <string name="app_name">Demo</string>
    <string name="apostrophe">It\\'s \\"quoted\\"</string>
    <string name="styled">Hello <b>World</b></string>
    <string name="escaped_at">\\@username</string>
    <plurals name="items">
        <item quantity="one">1 item</item>
        <item quantity="other">%d items</item>
    </plurals>
    <plurals name="broken">
        <item quantity="one">just one</item>
    </plurals>
    <string-array name="planets">
        <item>Mercury</item>
        <item>Venus</item>
    </string-array>
</resources>
"""


@pytest.fixture
def parsed():
    return AndroidXmlParser().parse_string(STRINGS_XML, source_name="strings.xml")


class TestAndroidXmlParser:
    def test_plain_string(self, parsed):
        assert parsed["app_name"] == SimpleValue("Demo")

    def test_escapes(self, parsed):
        assert parsed["apostrophe"].text == 'It\'s "quoted"'
        assert parsed["escaped_at"].text == "@username"

    def test_markup_is_stripped(self, parsed):
        assert parsed["styled"].text == "Hello World"

    def test_plurals(self, parsed):
        assert parsed["items"] == PluralValue({"one": "1 item", "other": "%d items"})

    def test_plurals_without_other_are_dropped(self, parsed):
        assert "broken" not in parsed

    def test_string_array_is_flattened(self, parsed):
        assert parsed["planets.0"].text == "Mercury"
        assert parsed["planets.1"].text == "Venus"

    def test_invalid_xml(self):
        with pytest.raises(ParseError):
            AndroidXmlParser().parse_string("<resources><string name='a'>x</resources>")

    def test_wrong_root(self):
        with pytest.raises(ParseError):
            AndroidXmlParser().parse_string("<manifest/>")


class TestAndroidEscapes:
    def test_unicode_and_control_escapes(self):
        assert unescape_android("Tab\\tNew\\nline \\u00e9") == "Tab\tNew\nline é"

    def test_escape_leading_reference_chars(self):
        assert escape_android("@home") == "\\@home"
        assert escape_android("?attr") == "\\?attr"
        assert escape_android("mail@example.com") == "mail@example.com"


class TestAndroidXmlWriter:
    def test_document_shape(self):
        output = AndroidXmlWriter().to_string({
            "app_name": SimpleValue("Demo"),
            "items": PluralValue({"one": "1 item", "other": "%d items"}),
        })

        assert output.startswith("<?xml")
        assert '<string name="app_name">Demo</string>' in output
        assert '<item quantity="one">1 item</item>' in output

    def test_names_are_sanitized(self):
        assert sanitize_resource_name("Welcome back, %@!") == "Welcome_back_____"
        assert sanitize_resource_name("home.title") == "home.title"

    def test_string_array_is_rebuilt(self):
        output = AndroidXmlWriter().to_string({
            "planets.0": SimpleValue("Mercury"),
            "planets.1": SimpleValue("Venus"),
        })

        assert '<string-array name="planets">' in output
        assert "planets.0" not in output

    def test_gapped_indices_stay_strings(self):
        output = AndroidXmlWriter().to_string({
            "planets.0": SimpleValue("Mercury"),
            "planets.2": SimpleValue("Earth"),
        })

        assert "string-array" not in output
        assert '<string name="planets.2">Earth</string>' in output

    def test_round_trip(self, parsed):
        parser = AndroidXmlParser()

        assert parser.parse_string(AndroidXmlWriter().to_string(parsed)) == parsed

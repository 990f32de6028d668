"""Tests for the XLIFF parser."""

import pytest

from localize_catalog.errors import ParseError
from localize_catalog.extraction import XliffParser
from localize_catalog.models import Localization, SimpleValue, TranslationState

XLIFF = """<?xml version="1.0" encoding="UTF-8"?>
<xliff xmlns="urn:oasis:names:tc:xliff:document:1.2" version="1.2">
  <file original="App/en.lproj/Localizable.strings" source-language="en" target-language="de" datatype="plaintext">
    <body>
      <trans-unit id="title">
        <source>Home</source>
        <target state="translated">Start</target>
        <note>Screen title</note>
      </trans-unit>
      <trans-unit id="save">
        <source>Save</source>
        <target state="needs-review-translation">Sichern</target>
      </trans-unit>
      <trans-unit id="cancel">
        <source>Cancel</source>
      </trans-unit>
      <trans-unit id="ok">
        <source>OK</source>
        <target state="new">OK</target>
      </trans-unit>
      <trans-unit>
        <source>No id</source>
      </trans-unit>
    </body>
  </file>
</xliff>
"""


@pytest.fixture
def catalog():
    return XliffParser().parse_string(XLIFF, source_name="de.xliff")


class TestXliffParser:
    def test_languages(self, catalog):
        assert catalog.source_language == "en"
        assert catalog.languages == ["de", "en"]
        assert list(catalog.strings) == ["title", "save", "cancel", "ok"]

    def test_target_and_source(self, catalog):
        entry = catalog.strings["title"]

        assert entry.localizations["de"] == Localization(SimpleValue("Start"))
        assert entry.localizations["en"] == Localization(SimpleValue("Home"))
        assert entry.comment == "Screen title"

    def test_states(self, catalog):
        assert catalog.strings["save"].localizations["de"].state is TranslationState.NEEDS_REVIEW
        assert catalog.strings["ok"].localizations["de"].state is TranslationState.NEW
        assert not catalog.strings["ok"].has_translation("de")

    def test_missing_target_is_pending(self, catalog):
        assert catalog.strings["cancel"].localizations["de"] == Localization(SimpleValue(""), TranslationState.NEW)

    def test_target_language_from_caller(self):
        content = (
            '<xliff version="1.2"><file source-language="en">'
            '<body><trans-unit id="a"><source>A</source><target>Á</target></trans-unit></body>'
            "</file></xliff>"
        )

        catalog = XliffParser().parse_string(content, default_language="hu")

        assert catalog.strings["a"].localizations["hu"].value == SimpleValue("Á")

    def test_missing_target_language(self):
        content = '<xliff version="1.2"><file source-language="en"><body/></file></xliff>'

        with pytest.raises(ParseError):
            XliffParser().parse_string(content, source_name="x.xliff")

    @pytest.mark.parametrize("content", [
        "<xliff><file>",
        "<resources/>",
    ])
    def test_invalid_documents(self, content):
        with pytest.raises(ParseError) as exc_info:
            XliffParser().parse_string(content, source_name="bad.xliff")

        assert exc_info.value.source_name == "bad.xliff"

    def test_parse_from_disk(self, write_file):
        path = write_file("de.xliff", XLIFF)

        assert XliffParser().parse(path).strings["title"].localizations["de"].value == SimpleValue("Start")

"""Parser for XLIFF 1.2 translation exchange files (``.xliff``)."""

import logging
from typing import Optional

from lxml import etree

from ..errors import ParseError
from ..models.string_entry import Catalog, Localization, TranslationState
from ..models.string_value import SimpleValue
from .base import BaseParser

logger = logging.getLogger(__name__)


def _local_name(element: "etree._Element") -> str:
    return etree.QName(element).localname


class XliffParser(BaseParser):
    """
    Parser for XLIFF files as exported by Xcode and most TMS tools.

    Each ``<trans-unit id=k>`` becomes an entry. The ``<target>`` is stored
    under the file's ``target-language`` with its ``state`` attribute; a
    missing target is recorded as an empty, new localization. The
    ``<source>`` text is stored under ``source-language`` as translated.
    """

    SUFFIXES = (".xliff",)

    def parse_string(
        self,
        content: str,
        source_name: str = "<string>",
        default_language: Optional[str] = None,
    ) -> Catalog:
        """
        Parse XLIFF content into a catalog.

        Args:
            content: XML content
            source_name: Name used in error messages
            default_language: Target language for <file> elements without
                a 'target-language' attribute

        Raises:
            ParseError: If the XML is malformed, the root is not <xliff> or a
                file has no target language
        """
        if not content.strip():
            return Catalog(source_language=default_language or "en")

        parser = etree.XMLParser(remove_comments=True, resolve_entities=False)
        try:
            root = etree.fromstring(content.encode("utf-8"), parser)
        except etree.XMLSyntaxError as e:
            raise ParseError(source_name, f"Invalid XML: {e}") from e

        if _local_name(root) != "xliff":
            raise ParseError(source_name, f"Expected <xliff> root element, got <{_local_name(root)}>")

        files = [el for el in root.iter() if isinstance(el.tag, str) and _local_name(el) == "file"]
        source_language = (files[0].get("source-language") if files else None) or default_language or "en"
        catalog = Catalog(source_language=source_language)

        for file_element in files:
            self._parse_file(file_element, catalog, source_name, default_language)

        return catalog

    def _parse_file(
        self,
        file_element: "etree._Element",
        catalog: Catalog,
        source_name: str,
        default_language: Optional[str],
    ) -> None:
        target_language = file_element.get("target-language") or default_language
        if not target_language:
            raise ParseError(source_name, "Missing 'target-language' on <file> and no language code given")
        source_language = file_element.get("source-language")

        for unit in file_element.iter():
            if not isinstance(unit.tag, str) or _local_name(unit) != "trans-unit":
                continue
            key = unit.get("id")
            if not key:
                logger.debug("%s: skipping <trans-unit> without id", source_name)
                continue

            source_el = self._child(unit, "source")
            target_el = self._child(unit, "target")
            entry = catalog.entry(key)

            if source_language and source_language != target_language and source_el is not None:
                entry.localizations.setdefault(
                    source_language, Localization(SimpleValue(self._text(source_el)))
                )

            if target_el is None:
                entry.localizations[target_language] = Localization(SimpleValue(""), TranslationState.NEW)
            else:
                entry.localizations[target_language] = Localization(
                    SimpleValue(self._text(target_el)),
                    TranslationState.parse(target_el.get("state")),
                )

            note_el = self._child(unit, "note")
            if note_el is not None and not entry.comment:
                entry.comment = self._text(note_el) or None

    @staticmethod
    def _child(element: "etree._Element", name: str) -> Optional["etree._Element"]:
        for child in element:
            if isinstance(child.tag, str) and _local_name(child) == name:
                return child
        return None

    @staticmethod
    def _text(element: "etree._Element") -> str:
        return "".join(element.itertext())

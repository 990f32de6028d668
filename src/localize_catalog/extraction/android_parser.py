"""Parser for Android strings.xml resources."""

import logging
import re
from typing import Dict

from lxml import etree

from ..errors import ParseError, ValidationError
from ..models.string_value import PluralValue, SimpleValue, StringValue
from .base import BaseParser

logger = logging.getLogger(__name__)

_ESCAPE_PATTERN = re.compile(r"\\u([0-9a-fA-F]{4})|\\(.)", re.DOTALL)
_ESCAPES = {"n": "\n", "t": "\t"}


def unescape_android(text: str) -> str:
    """Decode Android backslash escapes (``\\'``, ``\\"``, ``\\n``, ``\\@`` ...)."""

    def _replace(match: "re.Match[str]") -> str:
        if match.group(1):
            return chr(int(match.group(1), 16))
        return _ESCAPES.get(match.group(2), match.group(2))

    return _ESCAPE_PATTERN.sub(_replace, text)


def escape_android(text: str) -> str:
    """Inverse of unescape_android; XML escaping is left to the serializer."""
    text = (
        text.replace("\\", "\\\\")
        .replace("\n", "\\n")
        .replace("\t", "\\t")
        .replace("'", "\\'")
        .replace('"', '\\"')
    )
    if text.startswith(("@", "?")):
        text = "\\" + text
    return text


class AndroidXmlParser(BaseParser):
    """
    Parser for Android ``strings.xml`` files.

    - ``<string name=k>`` becomes a simple value with inner markup stripped
    - ``<plurals name=k>`` becomes a plural value (requires an 'other' item)
    - ``<string-array name=k>`` items are flattened to ``k.0``, ``k.1``, ...
    """

    SUFFIXES = (".xml",)

    def parse_string(self, content: str, source_name: str = "<string>") -> Dict[str, StringValue]:
        """
        Parse strings.xml content into key -> value.

        Raises:
            ParseError: If the XML is malformed or the root is not <resources>
        """
        if not content.strip():
            return {}

        parser = etree.XMLParser(remove_comments=True, resolve_entities=False)
        try:
            root = etree.fromstring(content.encode("utf-8"), parser)
        except etree.XMLSyntaxError as e:
            raise ParseError(source_name, f"Invalid XML: {e}") from e

        if root.tag != "resources":
            raise ParseError(source_name, f"Expected <resources> root element, got <{root.tag}>")

        result: Dict[str, StringValue] = {}
        for element in root:
            if not isinstance(element.tag, str):
                continue
            name = element.get("name")
            if not name:
                continue

            if element.tag == "string":
                result[name] = SimpleValue(self._text(element))
            elif element.tag == "plurals":
                variants = {
                    item.get("quantity", ""): self._text(item)
                    for item in element.findall("item")
                }
                try:
                    result[name] = PluralValue(variants)
                except ValidationError as e:
                    logger.warning("%s: dropping plurals '%s': %s", source_name, name, e)
            elif element.tag == "string-array":
                for index, item in enumerate(element.findall("item")):
                    result[f"{name}.{index}"] = SimpleValue(self._text(item))

        return result

    def _text(self, element: "etree._Element") -> str:
        """Plain text of an element, inner markup stripped."""
        return unescape_android("".join(element.itertext()))

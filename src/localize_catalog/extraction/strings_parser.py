"""Parser for Apple's legacy .strings format."""

import re
from typing import Dict

from ..errors import ParseError
from ..models.string_value import SimpleValue, StringValue
from .base import BaseParser


class StringsParser(BaseParser):
    """
    Parser for .strings files.

    Block and line comments are stripped before matching. A ``//`` directly
    preceded by ``:`` is kept so URLs such as ``https://`` survive, but other
    ``//`` sequences inside quoted values are still treated as comments.
    """

    SUFFIXES = (".strings",)

    COMMENT_PATTERN = re.compile(r"/\*[\s\S]*?\*/|([^:]|^)//.*$", re.MULTILINE)
    ENTRY_PATTERN = re.compile(r'"((?:\\.|[^"\\])*)"\s*=\s*"((?:\\.|[^"\\])*)"\s*;')

    def parse_string(self, content: str, source_name: str = "<string>") -> Dict[str, StringValue]:
        """
        Parse .strings content into key -> SimpleValue.

        Args:
            content: Raw file content
            source_name: Name used in error messages

        Returns:
            Mapping of unescaped keys to values

        Raises:
            ParseError: If non-comment content contains no key/value pairs
        """
        strings: Dict[str, StringValue] = {}
        without_comments = self.COMMENT_PATTERN.sub(r"\1", content)

        for match in self.ENTRY_PATTERN.finditer(without_comments):
            key = unescape_strings(match.group(1))
            strings[key] = SimpleValue(unescape_strings(match.group(2)))

        stripped = content.strip()
        if not strings and stripped and not stripped.startswith(("/*", "//")):
            raise ParseError(source_name, "Invalid .strings file format. No key-value pairs found.")

        return strings


def unescape_strings(text: str) -> str:
    return text.replace('\\"', '"').replace("\\n", "\n")


def escape_strings(text: str) -> str:
    return text.replace('"', '\\"').replace("\n", "\\n")

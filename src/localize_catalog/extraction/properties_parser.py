"""Parser for Java .properties files."""

import re
from typing import Dict, Iterator

from ..models.string_value import SimpleValue, StringValue
from .base import BaseParser

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_KEY_VALUE = re.compile(r"^((?:\\.|[^\\=:\s])*)\s*[=:]?\s*(.*)$", re.DOTALL)
_ESCAPE = re.compile(r"\\(?:u([0-9a-fA-F]{4})|(.))", re.DOTALL)
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def unescape_properties(text: str) -> str:
    def _replace(match: "re.Match[str]") -> str:
        if match.group(1):
            return chr(int(match.group(1), 16))
        return _ESCAPES.get(match.group(2), match.group(2))

    return _ESCAPE.sub(_replace, text)


def escape_properties(text: str, is_key: bool = False) -> str:
    text = (
        text.replace("\\", "\\\\")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\f", "\\f")
    )
    if is_key:
        return re.sub(r"([=:\s#!])", r"\\\1", text)
    if text.startswith(" "):
        text = "\\" + text
    return text


class PropertiesParser(BaseParser):
    """Parser for .properties files (``key=value``, ``key: value`` or ``key value``)."""

    SUFFIXES = (".properties",)

    def parse_string(self, content: str, source_name: str = "<string>") -> Dict[str, StringValue]:
        result: Dict[str, StringValue] = {}
        for line in self._logical_lines(content):
            match = _KEY_VALUE.match(line)
            key, value = match.group(1), match.group(2)
            result[unescape_properties(key)] = SimpleValue(unescape_properties(value))
        return result

    def _logical_lines(self, content: str) -> Iterator[str]:
        """Join backslash-continued lines and drop blanks and comments."""
        pending = None
        for raw in _LINE_BREAK.split(content):
            line = raw.lstrip(" \t\f")
            if pending is None and (not line or line[0] in "#!"):
                continue

            trailing = len(line) - len(line.rstrip("\\"))
            continued = trailing % 2 == 1
            if continued:
                line = line[:-1]

            pending = line if pending is None else pending + line
            if not continued:
                yield pending
                pending = None

        if pending:
            yield pending

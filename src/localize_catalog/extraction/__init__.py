"""Format parsers, writers and the extension registry."""

from .xcstrings_parser import XCStringsParser
from .xcstrings_writer import XCStringsWriter
from .strings_parser import StringsParser
from .strings_writer import StringsWriter
from .stringsdict_parser import StringsDictParser
from .stringsdict_writer import StringsDictWriter
from .android_parser import AndroidXmlParser
from .android_writer import AndroidXmlWriter
from .json_parser import JsonParser
from .json_writer import JsonWriter
from .properties_parser import PropertiesParser
from .properties_writer import PropertiesWriter
from .xliff_parser import XliffParser
from .formats import FileFormat, guess_language_code, parse_source, parser_for, render_catalog

__all__ = [
    "XCStringsParser",
    "XCStringsWriter",
    "StringsParser",
    "StringsWriter",
    "StringsDictParser",
    "StringsDictWriter",
    "AndroidXmlParser",
    "AndroidXmlWriter",
    "JsonParser",
    "JsonWriter",
    "PropertiesParser",
    "PropertiesWriter",
    "XliffParser",
    "FileFormat",
    "guess_language_code",
    "parse_source",
    "parser_for",
    "render_catalog",
]

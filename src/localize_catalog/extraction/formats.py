"""Extension-based format registry and catalog rendering."""

import re
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Union

from ..errors import ParseError, UnsupportedFormatError
from ..models.source import Source
from ..models.string_entry import Catalog
from ..models.string_value import is_plural
from .android_parser import AndroidXmlParser
from .android_writer import AndroidXmlWriter
from .json_parser import JsonParser
from .json_writer import JsonWriter
from .properties_parser import PropertiesParser
from .properties_writer import PropertiesWriter
from .strings_parser import StringsParser
from .strings_writer import StringsWriter
from .stringsdict_parser import StringsDictParser
from .stringsdict_writer import StringsDictWriter
from .xcstrings_parser import XCStringsParser
from .xcstrings_writer import XCStringsWriter
from .xliff_parser import XliffParser


class FileFormat(str, Enum):
    """Supported on-disk formats, keyed by file extension."""

    STRINGS = ".strings"
    STRINGSDICT = ".stringsdict"
    XCSTRINGS = ".xcstrings"
    ANDROID = ".xml"
    JSON = ".json"
    PROPERTIES = ".properties"
    XLIFF = ".xliff"

    @classmethod
    def from_name(cls, file_name: str) -> "FileFormat":
        suffix = Path(file_name).suffix.lower()
        try:
            return cls(suffix)
        except ValueError:
            raise UnsupportedFormatError(file_name, f"Unsupported file format: {suffix or '(none)'}") from None


SingleLanguageParser = Union[StringsParser, StringsDictParser, AndroidXmlParser, JsonParser, PropertiesParser]

_PARSERS = {
    FileFormat.STRINGS: StringsParser,
    FileFormat.STRINGSDICT: StringsDictParser,
    FileFormat.ANDROID: AndroidXmlParser,
    FileFormat.JSON: JsonParser,
    FileFormat.PROPERTIES: PropertiesParser,
}

_LPROJ_PATTERN = re.compile(r"([a-z]{2,3}(?:[-_][a-z0-9]+)?)\.lproj", re.IGNORECASE)
_ANDROID_VALUES_PATTERN = re.compile(r"values-([a-z]{2,3})(?:-r([a-z]{2}))?(?:$|[/\\])", re.IGNORECASE)
_BARE_CODE_PATTERN = re.compile(r"^[a-z]{2,3}(?:[-_][a-z0-9]+)?$", re.IGNORECASE)
_BUNDLE_PATTERN = re.compile(r"_([a-z]{2,3}(?:[-_][A-Za-z]{2})?)\.properties$")


def guess_language_code(file_name: str) -> str:
    """
    Infer a language code from a file path.

    Recognizes ``fr.lproj/…``, Android ``values-fr`` / ``values-pt-rBR`` folders,
    Java bundle names such as ``strings_fr.properties`` and bare
    ``fr.json`` / ``pt-BR.strings`` file names.

    Returns:
        The language code, or an empty string when nothing matches
    """
    match = _LPROJ_PATTERN.search(file_name)
    if match:
        return match.group(1)

    match = _ANDROID_VALUES_PATTERN.search(file_name)
    if match:
        return f"{match.group(1)}-{match.group(2)}" if match.group(2) else match.group(1)

    match = _BUNDLE_PATTERN.search(file_name)
    if match:
        return match.group(1).replace("_", "-")

    stem = Path(file_name).stem
    if _BARE_CODE_PATTERN.match(stem):
        return stem
    return ""


def parser_for(file_format: FileFormat) -> SingleLanguageParser:
    """Get a parser for a single-language format."""
    return _PARSERS[file_format]()


def parse_source(source: Source, default_language: Optional[str] = None) -> Catalog:
    """
    Parse any supported source into a Catalog.

    Args:
        source: The raw source; its name selects the parser
        default_language: Used when the source has no language code and none can be guessed

    Returns:
        Catalog holding the source's entries

    Raises:
        UnsupportedFormatError: If the extension is not supported
        ParseError: If the content is malformed or no language can be determined
    """
    file_format = FileFormat.from_name(source.name)
    if file_format is FileFormat.XCSTRINGS:
        return XCStringsParser().parse_string(source.content, source_name=source.name)

    language = source.language_code or guess_language_code(source.name) or default_language
    if file_format is FileFormat.XLIFF:
        return XliffParser().parse_string(source.content, source_name=source.name, default_language=language)

    if not language:
        raise ParseError(source.name, "Missing language code for single-language file")

    values = parser_for(file_format).parse_string(source.content, source_name=source.name)
    return Catalog.from_language_slice(values, language)


def android_values_folder(language: str) -> str:
    """``pt-BR`` -> ``values-pt-rBR``."""
    parts = re.split(r"[-_]", language, maxsplit=1)
    if len(parts) == 2 and len(parts[1]) == 2:
        return f"values-{parts[0]}-r{parts[1].upper()}"
    return f"values-{language}"


def render_catalog(catalog: Catalog, file_format: FileFormat, nested_json: bool = False) -> Dict[str, str]:
    """
    Serialize a catalog into one or more files.

    Args:
        catalog: The catalog to render
        file_format: Target format
        nested_json: Emit nested objects instead of dotted keys for JSON

    Returns:
        Relative output path -> file content. Languages with nothing to write
        for the format are omitted.
    """
    if file_format is FileFormat.XLIFF:
        raise UnsupportedFormatError("Localizable.xliff", "XLIFF is an input-only format")
    if file_format is FileFormat.XCSTRINGS:
        return {"Localizable.xcstrings": XCStringsWriter().to_string(catalog) + "\n"}

    outputs: Dict[str, str] = {}
    for language in catalog.languages:
        values = catalog.language_slice(language)
        if file_format is FileFormat.STRINGS:
            content = StringsWriter().to_string(values)
            path = f"{language}.lproj/Localizable.strings"
        elif file_format is FileFormat.STRINGSDICT:
            if not any(is_plural(v) for v in values.values()):
                continue
            content = StringsDictWriter().to_string(values)
            path = f"{language}.lproj/Localizable.stringsdict"
        elif file_format is FileFormat.ANDROID:
            content = AndroidXmlWriter().to_string(values)
            path = f"{android_values_folder(language)}/strings.xml"
        elif file_format is FileFormat.JSON:
            content = JsonWriter(nested=nested_json).to_string(values)
            path = f"{language}.json"
        else:  # FileFormat.PROPERTIES
            content = PropertiesWriter().to_string(values)
            path = f"strings_{language}.properties"

        if content.strip():
            outputs[path] = content if content.endswith("\n") else content + "\n"
    return outputs

"""Parser for Apple's .stringsdict plural plists."""

import logging
import plistlib
import re
from typing import Any, Dict, Optional
from xml.parsers.expat import ExpatError

from ..errors import ParseError, ValidationError
from ..models.string_value import PLURAL_CATEGORIES, PluralValue, StringValue
from .base import BaseParser

logger = logging.getLogger(__name__)

FORMAT_KEY = "NSStringLocalizedFormatKey"


class StringsDictParser(BaseParser):
    """
    Parser for .stringsdict files.

    Each top-level key names an entry holding ``NSStringLocalizedFormatKey``
    and a variable dict keyed by quantity class. Only the plural variants
    are kept; entries lacking 'other' are dropped.
    """

    SUFFIXES = (".stringsdict",)

    VARIABLE_PATTERN = re.compile(r"%#@([^@]+)@")

    def parse_string(self, content: str, source_name: str = "<string>") -> Dict[str, StringValue]:
        """
        Parse .stringsdict content into key -> PluralValue.

        Args:
            content: Plist XML content
            source_name: Name used in error and log messages

        Returns:
            Mapping of keys to plural values

        Raises:
            ParseError: If the plist is malformed or its root is not a dict
        """
        if not content.strip():
            return {}

        try:
            data = plistlib.loads(content.encode("utf-8"))
        except (ExpatError, ValueError) as e:
            raise ParseError(source_name, f"Invalid plist: {e}") from e

        if not isinstance(data, dict):
            raise ParseError(source_name, "Invalid .stringsdict structure: root is not a dict")

        result: Dict[str, StringValue] = {}
        for key, entry in data.items():
            try:
                result[key] = self._parse_entry(entry)
            except ValidationError as e:
                logger.warning("%s: dropping '%s': %s", source_name, key, e)

        return result

    def _parse_entry(self, entry: Any) -> PluralValue:
        if not isinstance(entry, dict):
            raise ValidationError("entry is not a dict")

        variable = self._find_variable(entry)
        if variable is None:
            raise ValidationError("no plural variable dict found")

        variants = {
            quantity: text
            for quantity, text in variable.items()
            if quantity in PLURAL_CATEGORIES and isinstance(text, str)
        }
        return PluralValue(variants)

    def _find_variable(self, entry: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Prefer the variable named in the format key, else the first nested dict."""
        format_key = entry.get(FORMAT_KEY)
        if isinstance(format_key, str):
            match = self.VARIABLE_PATTERN.search(format_key)
            if match and isinstance(entry.get(match.group(1)), dict):
                return entry[match.group(1)]

        for value in entry.values():
            if isinstance(value, dict):
                return value
        return None

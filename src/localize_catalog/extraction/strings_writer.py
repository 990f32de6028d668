"""Writer for Apple's legacy .strings format."""

import logging
from typing import Dict

from ..models.string_value import StringValue, is_plural
from .strings_parser import escape_strings

logger = logging.getLogger(__name__)


class StringsWriter:
    """Writer for .strings files. Plural values belong in .stringsdict and are skipped."""

    def to_string(self, values: Dict[str, StringValue]) -> str:
        """
        Render one language slice as .strings content.

        Args:
            values: key -> value for a single language

        Returns:
            One ``"key" = "value";`` line per simple value, sorted by key
        """
        lines = []
        for key in sorted(values):
            value = values[key]
            if is_plural(value):
                logger.debug("Skipping plural '%s' in .strings output", key)
                continue
            lines.append(f'"{escape_strings(key)}" = "{escape_strings(value.text)}";')
        return "\n".join(lines)

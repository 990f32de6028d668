"""Writer for Apple's .stringsdict plural plists."""

import logging
import plistlib
from typing import Any, Dict

from ..models.string_value import StringValue, is_plural
from .stringsdict_parser import FORMAT_KEY

logger = logging.getLogger(__name__)

VARIABLE_NAME = "value"


class StringsDictWriter:
    """Writer for .stringsdict files. Simple values belong in .strings and are skipped."""

    def to_string(self, values: Dict[str, StringValue]) -> str:
        data: Dict[str, Any] = {}
        for key in sorted(values):
            value = values[key]
            if not is_plural(value):
                logger.debug("Skipping simple value '%s' in .stringsdict output", key)
                continue

            variable: Dict[str, str] = {
                "NSStringFormatSpecTypeKey": "NSStringPluralRuleType",
                "NSStringFormatValueTypeKey": "d",
            }
            variable.update(value.texts())
            data[key] = {
                FORMAT_KEY: f"%#@{VARIABLE_NAME}@",
                VARIABLE_NAME: variable,
            }

        return plistlib.dumps(data, fmt=plistlib.FMT_XML, sort_keys=False).decode("utf-8")

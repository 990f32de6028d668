"""Writer for Java .properties files."""

from typing import Dict

from ..models.string_value import StringValue, is_plural
from .properties_parser import escape_properties


class PropertiesWriter:
    """Writer for .properties files. Plural variants become ``key.<quantity>`` lines."""

    def to_string(self, values: Dict[str, StringValue]) -> str:
        lines = []
        for key in sorted(values):
            value = values[key]
            if is_plural(value):
                for quantity, text in value.texts():
                    lines.append(f"{escape_properties(f'{key}.{quantity}', is_key=True)}={escape_properties(text)}")
            else:
                lines.append(f"{escape_properties(key, is_key=True)}={escape_properties(value.text)}")
        return "\n".join(lines)

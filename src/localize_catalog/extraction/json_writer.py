"""Writer for flat or nested JSON translation files."""

import json
from typing import Any, Dict

from ..models.string_value import StringValue, is_plural
from .json_parser import PLURAL_TAG


class JsonWriter:
    """Writer for JSON translation files, flat by default."""

    def __init__(self, nested: bool = False):
        self.nested = nested

    def to_string(self, values: Dict[str, StringValue]) -> str:
        flat = {key: self._encode(values[key]) for key in sorted(values)}
        data = self._nest(flat) if self.nested else flat
        return json.dumps(data, indent=2, ensure_ascii=False)

    def _encode(self, value: StringValue) -> Any:
        if is_plural(value):
            encoded: Dict[str, Any] = {PLURAL_TAG: True}
            encoded.update(value.texts())
            return encoded
        return value.text

    def _nest(self, flat: Dict[str, Any]) -> Dict[str, Any]:
        """
        Expand dotted keys into nested objects.

        When a path segment is already taken by a leaf, the rest of the key
        is stored as a literal dotted key at that level so flattening gives
        back the original key.
        """
        root: Dict[str, Any] = {}
        for key, encoded in flat.items():
            parts = key.split(".")
            node = root
            for depth, part in enumerate(parts[:-1]):
                child = node.get(part)
                if child is None:
                    child = node[part] = {}
                elif not isinstance(child, dict) or PLURAL_TAG in child:
                    node[".".join(parts[depth:])] = encoded
                    break
                node = child
            else:
                node[parts[-1]] = encoded
        return root

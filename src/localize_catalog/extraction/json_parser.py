"""Parser for flat or nested JSON translation files."""

import json
import logging
from typing import Any, Dict, Optional

from ..errors import ParseError, ValidationError
from ..models.string_value import PluralValue, SimpleValue, StringValue
from .base import BaseParser

logger = logging.getLogger(__name__)

# Discriminator marking a JSON object as a plural value
PLURAL_TAG = "_isPlural"


class JsonParser(BaseParser):
    """
    Parser for i18next-style JSON.

    Nested objects are flattened depth-first into dotted keys. An object
    tagged with ``"_isPlural": true`` is read as a plural value and its
    children are not visited.
    """

    SUFFIXES = (".json",)

    def parse_string(self, content: str, source_name: str = "<string>") -> Dict[str, StringValue]:
        """
        Parse JSON content into dotted key -> value.

        Raises:
            ParseError: If the JSON is invalid or the top level is not an object
        """
        if not content.strip():
            return {}

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ParseError(source_name, f"Invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ParseError(source_name, "Top-level JSON value must be an object")

        result: Dict[str, StringValue] = {}
        self._walk(data, None, result, source_name)
        return result

    def _walk(
        self,
        node: Any,
        prefix: Optional[str],
        result: Dict[str, StringValue],
        source_name: str,
    ) -> None:
        if isinstance(node, dict):
            if prefix is not None and node.get(PLURAL_TAG) is True:
                self._add_plural(node, prefix, result, source_name)
                return
            children = node.items()
        elif isinstance(node, list):
            children = ((str(i), item) for i, item in enumerate(node))
        else:
            if node is None:
                return
            if isinstance(node, bool):
                node = "true" if node else "false"
            result[prefix or ""] = SimpleValue(str(node))
            return

        for child_key, child in children:
            key = child_key if prefix is None else f"{prefix}.{child_key}"
            self._walk(child, key, result, source_name)

    def _add_plural(
        self, node: Dict[str, Any], key: str, result: Dict[str, StringValue], source_name: str
    ) -> None:
        variants = {q: v for q, v in node.items() if q != PLURAL_TAG and isinstance(v, str)}
        try:
            result[key] = PluralValue(variants)
        except ValidationError as e:
            logger.warning("%s: dropping plural '%s': %s", source_name, key, e)

"""Writer for Android strings.xml resources."""

import re
from typing import Dict, List, Set

from lxml import etree

from ..models.string_value import StringValue, is_plural
from .android_parser import escape_android

_INVALID_NAME_CHARS = re.compile(r"[^A-Za-z0-9_.]")
_ARRAY_ITEM = re.compile(r"^(.+)\.(0|[1-9][0-9]*)$")


def sanitize_resource_name(key: str) -> str:
    """Android resource names only allow letters, digits, '_' and '.'."""
    return _INVALID_NAME_CHARS.sub("_", key)


class AndroidXmlWriter:
    """Writer for Android ``strings.xml`` files."""

    def to_string(self, values: Dict[str, StringValue]) -> str:
        """
        Render one language slice as a strings.xml document.

        Contiguous simple keys ``k.0 .. k.n`` are written back as a
        ``<string-array name="k">``.
        """
        arrays = self._collect_arrays(values)
        array_members: Set[str] = {
            f"{base}.{i}" for base, size in arrays.items() for i in range(size)
        }

        root = etree.Element("resources")
        for key in sorted(values):
            match = _ARRAY_ITEM.match(key)
            if key in array_members:
                if match and match.group(2) == "0":
                    self._add_array(root, match.group(1), values, arrays[match.group(1)])
                continue

            value = values[key]
            if is_plural(value):
                plurals = etree.SubElement(root, "plurals", name=sanitize_resource_name(key))
                for quantity, text in value.texts():
                    item = etree.SubElement(plurals, "item", quantity=quantity)
                    item.text = escape_android(text)
            else:
                element = etree.SubElement(root, "string", name=sanitize_resource_name(key))
                element.text = escape_android(value.text)

        return etree.tostring(
            root, pretty_print=True, xml_declaration=True, encoding="utf-8"
        ).decode("utf-8")

    def _add_array(
        self, root: "etree._Element", base: str, values: Dict[str, StringValue], size: int
    ) -> None:
        array = etree.SubElement(root, "string-array", name=sanitize_resource_name(base))
        for index in range(size):
            item = etree.SubElement(array, "item")
            item.text = escape_android(values[f"{base}.{index}"].text)

    def _collect_arrays(self, values: Dict[str, StringValue]) -> Dict[str, int]:
        """Find bases whose simple items form a contiguous 0..n-1 run."""
        indices: Dict[str, List[int]] = {}
        for key, value in values.items():
            match = _ARRAY_ITEM.match(key)
            if match and not is_plural(value):
                indices.setdefault(match.group(1), []).append(int(match.group(2)))

        return {
            base: len(found)
            for base, found in indices.items()
            if base not in values and sorted(found) == list(range(len(found)))
        }

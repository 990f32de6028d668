"""Rename keys by matching values across catalogs."""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ..models.string_value import SimpleValue, StringValue

logger = logging.getLogger(__name__)

_PREVIEW_LENGTH = 20


@dataclass
class RenamedKey:
    old_key: str
    new_key: str
    via_value: str


@dataclass
class RenameResult:
    """Renamed values plus a record of what changed."""

    values: Dict[str, StringValue] = field(default_factory=dict)
    renamed: List[RenamedKey] = field(default_factory=list)
    logs: List[str] = field(default_factory=list)


def rename_keys(
    source: Dict[str, StringValue],
    key_reference: Dict[str, StringValue],
    value_references: Sequence[Dict[str, StringValue]],
) -> RenameResult:
    """
    Move the source's values onto the keys another project uses for the same text.

    For each source key K:
    1. look K up in ``key_reference`` to get its text T (e.g. the English value
       in the project the source came from)
    2. find the first key K' whose text equals T in ``value_references``,
       searched in the given order (e.g. the English file of the target project)
    3. store the source value under K'; keys with no match keep their name

    Source order is preserved. When two source keys land on the same name the
    later one wins and a warning is logged.

    Args:
        source: key -> value of the file to rename
        key_reference: key -> value sharing the source's keys
        value_references: key -> value files sharing the wanted keys

    Returns:
        RenameResult with the renamed values
    """
    result = RenameResult()
    reverse_indexes = [_reverse_index(values) for values in value_references]

    for key, value in source.items():
        new_key = key
        text = _text(key_reference.get(key))
        if text:
            new_key = _find_key(text, reverse_indexes) or key
            if new_key != key:
                result.renamed.append(RenamedKey(key, new_key, text))
                result.logs.append(f'Renamed "{key}" -> "{new_key}" (via value: "{_preview(text)}")')

        if new_key in result.values:
            result.logs.append(f'WARNING: "{key}" overwrote an earlier value for "{new_key}"')
            logger.warning("Key collision on '%s' while renaming '%s'", new_key, key)
        result.values[new_key] = value

    logger.info("Renamed %d of %d keys", len(result.renamed), len(source))
    return result


def _reverse_index(values: Dict[str, StringValue]) -> Dict[str, str]:
    """text -> first key with that text; plural values never match."""
    index: Dict[str, str] = {}
    for key, value in values.items():
        text = _text(value)
        if text:
            index.setdefault(text, key)
    return index


def _find_key(text: str, reverse_indexes: Sequence[Dict[str, str]]) -> Optional[str]:
    for index in reverse_indexes:
        if text in index:
            return index[text]
    return None


def _text(value: Optional[StringValue]) -> str:
    if isinstance(value, SimpleValue):
        return value.text
    return ""


def _preview(text: str) -> str:
    if len(text) > _PREVIEW_LENGTH:
        return text[:_PREVIEW_LENGTH] + "..."
    return text

"""Data models for localization catalogs."""

from .string_value import (
    PLURAL_CATEGORIES,
    ValueKind,
    SimpleValue,
    PluralValue,
    StringValue,
    is_plural,
)
from .string_entry import TranslationState, Localization, StringEntry, Catalog
from .source import Source
from .merge_result import (
    ConflictVariant,
    MergeConflict,
    MissingKey,
    FileStats,
    MergeReport,
    MergeResult,
    ConflictAnalysis,
)

__all__ = [
    "PLURAL_CATEGORIES",
    "ValueKind",
    "SimpleValue",
    "PluralValue",
    "StringValue",
    "is_plural",
    "TranslationState",
    "Localization",
    "StringEntry",
    "Catalog",
    "Source",
    "ConflictVariant",
    "MergeConflict",
    "MissingKey",
    "FileStats",
    "MergeReport",
    "MergeResult",
    "ConflictAnalysis",
]

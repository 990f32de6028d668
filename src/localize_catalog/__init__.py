"""Parse, merge, convert and analyze app localization catalogs."""

__version__ = "0.1.0"

from .errors import ConflictError, LocalizeError, ParseError, UnsupportedFormatError, ValidationError
from .models import Catalog, Localization, PluralValue, SimpleValue, Source, StringEntry, TranslationState
from .merge import MergeEngine, combine_sources, merge_into_catalog, rename_keys

__all__ = [
    "__version__",
    "ConflictError",
    "LocalizeError",
    "ParseError",
    "UnsupportedFormatError",
    "ValidationError",
    "Catalog",
    "Localization",
    "PluralValue",
    "SimpleValue",
    "Source",
    "StringEntry",
    "TranslationState",
    "MergeEngine",
    "combine_sources",
    "merge_into_catalog",
    "rename_keys",
]

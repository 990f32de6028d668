"""Smart merge, conflict analysis and catalog building."""

from .fold import FoldOutcome, FoldDecision, EntryFold, fold_localization, fold_entries
from .merge_engine import MergeEngine, NamedCatalog
from .combine import combine_sources, merge_into_catalog
from .rename import RenamedKey, RenameResult, rename_keys

__all__ = [
    "FoldOutcome",
    "FoldDecision",
    "EntryFold",
    "fold_localization",
    "fold_entries",
    "MergeEngine",
    "NamedCatalog",
    "combine_sources",
    "merge_into_catalog",
    "RenamedKey",
    "RenameResult",
    "rename_keys",
]

"""Data models for merge results, reports and conflicts."""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List

from .string_entry import Catalog, StringEntry

UNRESOLVED_CONFLICT_REASON = "Unresolved conflict, used default."


@dataclass
class ConflictVariant:
    """One source's competing entry for a conflicting key."""

    source_name: str
    entry: StringEntry


@dataclass
class MergeConflict:
    """A key whose translated values differ between sources."""

    key: str
    variants: List[ConflictVariant] = field(default_factory=list)
    languages: List[str] = field(default_factory=list)  # languages that truly conflict

    def variant_for(self, source_name: str) -> StringEntry:
        """Get the entry a given source contributed to this conflict."""
        for variant in self.variants:
            if variant.source_name == source_name:
                return variant.entry
        raise KeyError(f"Source '{source_name}' does not take part in conflict '{self.key}'")


@dataclass
class MissingKey:
    """A key that needed attention during the merge."""

    key: str
    reason: str


@dataclass
class FileStats:
    """Per-source statistics."""

    file_name: str
    key_count: int
    language_count: int


@dataclass
class MergeReport:
    """Structured report of a merge run."""

    total_keys: int = 0
    merged_keys_count: int = 0  # keys present in two or more sources
    conflicts_resolved: int = 0
    file_stats: List[FileStats] = field(default_factory=list)
    missing_keys: List[MissingKey] = field(default_factory=list)
    skipped_sources: List[str] = field(default_factory=list)
    logs: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class MergeResult:
    """Merged catalog together with its report."""

    catalog: Catalog
    report: MergeReport


@dataclass
class ConflictAnalysis:
    """Result of a read-only conflict detection pass."""

    conflicts: List[MergeConflict] = field(default_factory=list)
    source_language_warnings: List[str] = field(default_factory=list)
    skipped_sources: List[str] = field(default_factory=list)

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicts)

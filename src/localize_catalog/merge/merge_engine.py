"""Smart merge of several catalogs describing the same localization project."""

import copy
import dataclasses
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from ..errors import ConflictError, ParseError
from ..extraction.formats import parse_source
from ..models.merge_result import (
    UNRESOLVED_CONFLICT_REASON,
    ConflictAnalysis,
    ConflictVariant,
    FileStats,
    MergeConflict,
    MergeReport,
    MergeResult,
    MissingKey,
)
from ..models.source import Source
from ..models.string_entry import Catalog, StringEntry
from .fold import EntryFold, fold_entries

logger = logging.getLogger(__name__)

NamedCatalog = Tuple[str, Catalog]


class MergeEngine:
    """
    Folds N catalogs into one.

    Keys found in a single source are copied as-is. Keys found in several
    sources are folded pairwise in source order: translated values win over
    untranslated ones, and differing translated values are a conflict.
    Conflicts are settled by caller resolutions first, then by defaulting
    to the earliest translated value in each conflicting language.

    Inputs are never mutated; source order must be stable for the output
    to be deterministic.
    """

    def __init__(self, default_language: Optional[str] = None):
        """
        Initialize the engine.

        Args:
            default_language: Language assigned to single-language sources
                whose language cannot be determined
        """
        self.default_language = default_language

    def merge_sources(
        self,
        sources: Sequence[Source],
        resolutions: Optional[Dict[str, StringEntry]] = None,
        strict: bool = False,
    ) -> MergeResult:
        """
        Parse and merge raw sources. Malformed sources are skipped.

        Args:
            sources: Files to merge, in priority order
            resolutions: Caller-chosen entries for conflicting keys
            strict: Raise ConflictError instead of defaulting unresolved conflicts

        Returns:
            MergeResult with the merged catalog and the report
        """
        if not sources:
            raise ValueError("No sources to merge")

        named, skipped, logs = self.load_sources(sources)
        result = self.merge(named, resolutions=resolutions, strict=strict)
        result.report.skipped_sources = skipped
        result.report.logs = logs + result.report.logs
        return result

    def merge(
        self,
        named_catalogs: Sequence[NamedCatalog],
        resolutions: Optional[Dict[str, StringEntry]] = None,
        strict: bool = False,
    ) -> MergeResult:
        """
        Merge already parsed catalogs.

        Args:
            named_catalogs: (source name, catalog) pairs in priority order
            resolutions: key -> chosen entry; bypasses the fold for that key
            strict: Raise ConflictError instead of defaulting unresolved conflicts

        Returns:
            MergeResult with the merged catalog and the report

        Raises:
            ConflictError: If strict and some conflict has no resolution
        """
        resolutions = resolutions or {}
        report = MergeReport()

        for name, catalog in named_catalogs:
            languages = catalog.languages
            report.file_stats.append(FileStats(name, len(catalog.strings), len(languages)))
            report.logs.append(f"Loaded {name}: {len(catalog.strings)} keys, {len(languages)} languages")

        for warning in self._source_language_warnings(named_catalogs):
            report.logs.append(f"WARNING: {warning}")

        if named_catalogs:
            first = named_catalogs[0][1]
            merged = Catalog(source_language=first.source_language, version=first.version)
        else:
            merged = Catalog(source_language=self.default_language or "en")

        all_keys = self._key_union(named_catalogs)
        unresolved: List[MergeConflict] = []

        for key in all_keys:
            contributions = self._contributions(named_catalogs, key)
            if len(contributions) > 1:
                report.merged_keys_count += 1

            if key in resolutions:
                merged.strings[key] = dataclasses.replace(copy.deepcopy(resolutions[key]), key=key)
                report.conflicts_resolved += 1
                report.logs.append(f"Resolved '{key}' using provided resolution")
                continue

            if len(contributions) == 1:
                merged.strings[key] = copy.deepcopy(contributions[0][1])
                continue

            folded = self._fold_key(contributions, report.logs)
            if folded.has_conflict:
                # Conflicting languages already hold the earliest translated value
                unresolved.append(self._conflict(key, contributions, folded))
                merged.strings[key] = folded.entry
                report.missing_keys.append(MissingKey(key, UNRESOLVED_CONFLICT_REASON))
                report.logs.append(
                    f"WARNING: Conflict on '{key}' ({', '.join(folded.conflicting_languages)}), "
                    "kept the earliest translated value"
                )
            else:
                merged.strings[key] = folded.entry

        if strict and unresolved:
            raise ConflictError(unresolved)

        report.total_keys = len(all_keys)
        report.logs.append(
            f"Merged {report.total_keys} keys ({report.merged_keys_count} shared, "
            f"{report.conflicts_resolved} resolved, {len(unresolved)} defaulted)"
        )
        logger.info(
            "Merged %d sources into %d keys (%d unresolved conflicts)",
            len(named_catalogs), report.total_keys, len(unresolved),
        )
        return MergeResult(catalog=merged, report=report)

    def analyze_conflicts(self, sources: Sequence[Source]) -> ConflictAnalysis:
        """Parse sources and report conflicts without merging. Malformed sources are skipped."""
        named, skipped, _ = self.load_sources(sources)
        analysis = self.find_conflicts(named)
        analysis.skipped_sources = skipped
        return analysis

    def find_conflicts(self, named_catalogs: Sequence[NamedCatalog]) -> ConflictAnalysis:
        """
        Run the fold without defaulting and collect every conflicting key.

        Args:
            named_catalogs: (source name, catalog) pairs in priority order

        Returns:
            ConflictAnalysis listing each conflict with all competing entries,
            plus warnings for divergent source languages
        """
        analysis = ConflictAnalysis(
            source_language_warnings=self._source_language_warnings(named_catalogs)
        )
        for key in self._key_union(named_catalogs):
            contributions = self._contributions(named_catalogs, key)
            if len(contributions) < 2:
                continue
            folded = self._fold_key(contributions)
            if folded.has_conflict:
                analysis.conflicts.append(self._conflict(key, contributions, folded))
        return analysis

    def load_sources(self, sources: Sequence[Source]) -> Tuple[List[NamedCatalog], List[str], List[str]]:
        """
        Parse sources, skipping the ones that fail.

        Returns:
            Tuple of (named catalogs, skipped source names, log lines)
        """
        named: List[NamedCatalog] = []
        skipped: List[str] = []
        logs: List[str] = []

        for source in sources:
            try:
                catalog = parse_source(source, default_language=self.default_language)
            except ParseError as e:
                logger.warning("Skipping %s: %s", source.name, e.message)
                skipped.append(source.name)
                logs.append(f"WARNING: Skipped {source.name}: {e.message}")
                continue
            named.append((source.name, catalog))

        return named, skipped, logs

    @staticmethod
    def resolutions_from_source(source_name: str, conflicts: Sequence[MergeConflict]) -> Dict[str, StringEntry]:
        """Resolve every conflict the named source takes part in with that source's entry."""
        resolutions = {}
        for conflict in conflicts:
            for variant in conflict.variants:
                if variant.source_name == source_name:
                    resolutions[conflict.key] = variant.entry
                    break
        return resolutions

    def _fold_key(
        self,
        contributions: List[Tuple[str, StringEntry]],
        logs: Optional[List[str]] = None,
    ) -> EntryFold:
        """Fold all contributions for one key pairwise, in source order."""
        accumulated = EntryFold(entry=copy.deepcopy(contributions[0][1]))
        conflicting: List[str] = []

        for name, entry in contributions[1:]:
            step = fold_entries(accumulated.entry, entry)
            for language in step.conflicting_languages:
                if language not in conflicting:
                    conflicting.append(language)
            if logs is not None:
                for language in step.adopted_languages:
                    logs.append(f"'{entry.key}' [{language}]: took translated value from {name}")
            accumulated = step

        accumulated.conflicting_languages = sorted(conflicting)
        return accumulated

    def _conflict(
        self,
        key: str,
        contributions: List[Tuple[str, StringEntry]],
        folded: EntryFold,
    ) -> MergeConflict:
        return MergeConflict(
            key=key,
            variants=[ConflictVariant(name, copy.deepcopy(entry)) for name, entry in contributions],
            languages=list(folded.conflicting_languages),
        )

    def _contributions(self, named_catalogs: Sequence[NamedCatalog], key: str) -> List[Tuple[str, StringEntry]]:
        return [
            (name, catalog.strings[key])
            for name, catalog in named_catalogs
            if key in catalog.strings
        ]

    def _key_union(self, named_catalogs: Sequence[NamedCatalog]) -> List[str]:
        """All keys in first-seen order."""
        seen: Dict[str, None] = {}
        for _, catalog in named_catalogs:
            for key in catalog.strings:
                seen.setdefault(key, None)
        return list(seen)

    def _source_language_warnings(self, named_catalogs: Sequence[NamedCatalog]) -> List[str]:
        if not named_catalogs:
            return []
        base_name, base = named_catalogs[0]
        return [
            f"{name} declares source language '{catalog.source_language}', "
            f"but {base_name} declares '{base.source_language}'"
            for name, catalog in named_catalogs[1:]
            if catalog.source_language != base.source_language
        ]

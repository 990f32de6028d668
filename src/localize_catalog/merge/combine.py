"""Build or update a multi-language catalog from per-language files."""

import copy
import logging
from typing import Optional, Sequence, Tuple

from ..errors import ParseError
from ..extraction.formats import guess_language_code, parse_source
from ..models.merge_result import FileStats, MergeReport, MergeResult
from ..models.source import Source
from ..models.string_entry import Catalog, Localization, StringEntry

logger = logging.getLogger(__name__)


def combine_sources(sources: Sequence[Source], source_language: Optional[str] = None) -> MergeResult:
    """
    Combine per-language files (e.g. ``en.lproj/Localizable.strings`` and
    ``fr.lproj/Localizable.strings``) into one catalog.

    Args:
        sources: Files to combine; each single-language file needs a language code
        source_language: Source language of the result; defaults to the first file's language

    Returns:
        MergeResult holding the new catalog and a report

    Raises:
        ValueError: If there are no sources or a file has no language code
    """
    if not sources:
        raise ValueError("No files to process.")

    missing = [
        s.name for s in sources
        if s.suffix not in (".xcstrings", ".xliff") and not (s.language_code or guess_language_code(s.name))
    ]
    if missing:
        raise ValueError(f"Missing language code for: {', '.join(missing)}")

    first = sources[0]
    catalog = Catalog(
        source_language=source_language or first.language_code or guess_language_code(first.name) or "en"
    )
    return _import(catalog, sources)


def merge_into_catalog(catalog: Catalog, sources: Sequence[Source]) -> MergeResult:
    """
    Import per-language files into an existing catalog.

    Incoming translated values replace existing ones; incoming untranslated
    values never replace an existing translation. The given catalog is not
    modified.
    """
    return _import(copy.deepcopy(catalog), sources)


def _import(catalog: Catalog, sources: Sequence[Source]) -> MergeResult:
    report = MergeReport()
    for source in sources:
        try:
            parsed = parse_source(source)
        except ParseError as e:
            logger.warning("Skipping %s: %s", source.name, e.message)
            report.skipped_sources.append(source.name)
            report.logs.append(f"WARNING: Skipped {source.name}: {e.message}")
            continue

        report.file_stats.append(FileStats(source.name, len(parsed.strings), len(parsed.languages)))
        added, updated = _import_catalog(catalog, parsed)
        report.logs.append(f"Imported {source.name}: {added} added, {updated} updated")

    report.total_keys = len(catalog.strings)
    return MergeResult(catalog=catalog, report=report)


def _import_catalog(target: Catalog, incoming: Catalog) -> Tuple[int, int]:
    added = updated = 0
    for key, entry in incoming.strings.items():
        is_new = key not in target.strings
        target_entry = target.entry(key)
        if is_new:
            target_entry.comment = entry.comment
            target_entry.extraction_state = entry.extraction_state or "manual"
            added += 1

        for language, localization in entry.localizations.items():
            if _accept(target_entry, language, localization):
                if not is_new:
                    updated += 1
                target_entry.localizations[language] = copy.deepcopy(localization)
    return added, updated


def _accept(entry: StringEntry, language: str, incoming: Localization) -> bool:
    current = entry.localizations.get(language)
    if current is None:
        return True
    if current == incoming:
        return False
    return incoming.is_translated or not current.is_translated


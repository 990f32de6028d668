"""Translation coverage per language."""

from dataclasses import dataclass
from typing import List

from ..models.string_entry import Catalog


@dataclass
class LanguageCoverage:
    language: str
    translated: int
    pending: int  # present but not translated (new, needs_review, empty)
    missing: int
    percent_complete: float


def analyze_coverage(catalog: Catalog) -> List[LanguageCoverage]:
    """Count translated, pending and missing keys for every language in the catalog."""
    total_keys = len(catalog.strings)
    results = []

    for language in catalog.languages:
        translated = pending = missing = 0
        for entry in catalog.strings.values():
            localization = entry.localizations.get(language)
            if localization is None:
                missing += 1
            elif localization.is_translated:
                translated += 1
            else:
                pending += 1

        results.append(LanguageCoverage(
            language=language,
            translated=translated,
            pending=pending,
            missing=missing,
            percent_complete=round(translated / total_keys * 100, 1) if total_keys else 0.0,
        ))

    return results

"""Find identical localized values across files, keys and languages."""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from ..errors import ParseError
from ..extraction.formats import parse_source
from ..models.source import Source
from ..models.string_entry import Catalog

logger = logging.getLogger(__name__)


@dataclass
class DuplicateLocation:
    """Where a value was found."""

    file_name: str
    key: str  # plural variants are reported as "key.<quantity>"
    language: str


@dataclass
class DuplicateGroup:
    """A value shared by two or more locations."""

    value: str
    locations: List[DuplicateLocation] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.locations)


@dataclass
class DuplicateReport:
    exact: List[DuplicateGroup] = field(default_factory=list)
    loose: List[DuplicateGroup] = field(default_factory=list)  # case/whitespace-insensitive
    skipped_sources: List[str] = field(default_factory=list)


class DuplicateFinder:
    """
    Groups identical values.

    Exact matching compares trimmed values. Loose matching additionally
    lower-cases and collapses whitespace runs. Empty values are ignored.
    """

    def __init__(self, default_language: str = "en"):
        self.default_language = default_language

    def find_in_sources(self, sources: Sequence[Source]) -> DuplicateReport:
        """Parse sources (skipping malformed ones) and find duplicates."""
        named: List[Tuple[str, Catalog]] = []
        skipped: List[str] = []
        for source in sources:
            try:
                named.append((source.name, parse_source(source, default_language=self.default_language)))
            except ParseError as e:
                logger.warning("Skipping %s for duplicate checking: %s", source.name, e.message)
                skipped.append(source.name)

        report = self.find(named)
        report.skipped_sources = skipped
        return report

    def find(self, named_catalogs: Sequence[Tuple[str, Catalog]]) -> DuplicateReport:
        """
        Find duplicate values across catalogs.

        Args:
            named_catalogs: (file name, catalog) pairs

        Returns:
            DuplicateReport with exact and loose groups, largest first
        """
        exact: Dict[str, List[DuplicateLocation]] = {}
        loose: Dict[str, List[DuplicateLocation]] = {}

        for file_name, catalog in named_catalogs:
            for key, entry in catalog.strings.items():
                for language in sorted(entry.localizations):
                    value = entry.localizations[language].value
                    for suffix, text in value.texts():
                        trimmed = text.strip()
                        if not trimmed:
                            continue
                        location = DuplicateLocation(
                            file_name=file_name,
                            key=f"{key}.{suffix}" if suffix else key,
                            language=language,
                        )
                        exact.setdefault(trimmed, []).append(location)
                        loose.setdefault(self.normalize(trimmed), []).append(location)

        return DuplicateReport(exact=self._groups(exact), loose=self._groups(loose))

    @staticmethod
    def normalize(text: str) -> str:
        return " ".join(text.split()).lower()

    def _groups(self, by_value: Dict[str, List[DuplicateLocation]]) -> List[DuplicateGroup]:
        groups = [
            DuplicateGroup(value=value, locations=locations)
            for value, locations in by_value.items()
            if len(locations) > 1
        ]
        groups.sort(key=lambda g: (-g.count, g.value))
        return groups

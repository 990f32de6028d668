"""Word counts per file and language, split into translated and pending."""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from ..errors import ParseError
from ..extraction.formats import parse_source
from ..models.source import Source
from ..models.string_entry import Catalog

logger = logging.getLogger(__name__)


@dataclass
class LanguageWordCount:
    translated: int = 0
    pending: int = 0
    total: int = 0


@dataclass
class FileWordCount:
    total: int = 0
    translated: int = 0
    pending: int = 0
    by_language: Dict[str, LanguageWordCount] = field(default_factory=dict)


@dataclass
class WordCountResult:
    total_words: int = 0
    translated: int = 0
    pending: int = 0
    file_counts: Dict[str, FileWordCount] = field(default_factory=dict)
    skipped_sources: List[str] = field(default_factory=list)


class WordCounter:
    """
    Counts words in localized values.

    Format specifiers are not words:
    - %@, %d, %s, ... - single conversions
    - %1$@, %2$d - positional conversions
    - \\n, \\r, \\t - literal escape sequences
    They are replaced by whitespace before splitting on whitespace runs.
    """

    NOISE_PATTERN = re.compile(r"%(\d+\$)?[@diuxXfeEgGcsp]|\\(n|r|t)")

    def __init__(self, default_language: str = "en"):
        self.default_language = default_language

    def count_words(self, text: str) -> int:
        """Count the words in a single string."""
        if not text:
            return 0
        return len(self.NOISE_PATTERN.sub(" ", text).split())

    def count_catalog(self, catalog: Catalog) -> FileWordCount:
        """
        Count one catalog.

        Translated localizations contribute their own words (all plural
        variants summed). Untranslated ones contribute the source text's
        words as pending. Keys without any localization add their source
        words to the file's pending total only.
        """
        counts = FileWordCount()

        for key, entry in catalog.strings.items():
            source_words = self.count_words(entry.get_source_value(catalog.source_language))

            if not entry.localizations:
                counts.pending += source_words
                continue

            for language, localization in entry.localizations.items():
                lang_counts = counts.by_language.setdefault(language, LanguageWordCount())
                if localization.is_translated:
                    words = sum(self.count_words(text) for _, text in localization.value.texts())
                    lang_counts.translated += words
                    counts.translated += words
                else:
                    lang_counts.pending += source_words
                    counts.pending += source_words

        for lang_counts in counts.by_language.values():
            lang_counts.total = lang_counts.translated + lang_counts.pending
        counts.total = counts.translated + counts.pending
        counts.by_language = dict(sorted(counts.by_language.items()))
        return counts

    def count(self, named_catalogs: Sequence[Tuple[str, Catalog]]) -> WordCountResult:
        """Count several catalogs and aggregate the totals."""
        result = WordCountResult()
        for file_name, catalog in named_catalogs:
            file_count = self.count_catalog(catalog)
            result.file_counts[file_name] = file_count
            result.total_words += file_count.total
            result.translated += file_count.translated
            result.pending += file_count.pending
        return result

    def count_sources(self, sources: Sequence[Source]) -> WordCountResult:
        """Parse sources (skipping malformed ones) and count them."""
        named: List[Tuple[str, Catalog]] = []
        skipped: List[str] = []
        for source in sources:
            try:
                named.append((source.name, parse_source(source, default_language=self.default_language)))
            except ParseError as e:
                logger.warning("Skipping %s for word count: %s", source.name, e.message)
                skipped.append(source.name)

        result = self.count(named)
        result.skipped_sources = skipped
        return result

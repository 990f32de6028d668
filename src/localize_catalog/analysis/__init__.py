"""Read-only analyses over catalogs."""

from .duplicate_finder import DuplicateFinder, DuplicateGroup, DuplicateLocation, DuplicateReport
from .word_counter import WordCounter, WordCountResult, FileWordCount, LanguageWordCount
from .coverage import LanguageCoverage, analyze_coverage

__all__ = [
    "DuplicateFinder",
    "DuplicateGroup",
    "DuplicateLocation",
    "DuplicateReport",
    "WordCounter",
    "WordCountResult",
    "FileWordCount",
    "LanguageWordCount",
    "LanguageCoverage",
    "analyze_coverage",
]

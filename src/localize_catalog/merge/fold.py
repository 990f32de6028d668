"""
Per-(key, language) fold used by the smart merge.

Two localizations of the same key and language always land in one of three
states:

- AGREE: structurally equal, nothing to decide
- ONE_SIDED: only one side carries translator work (or neither does), and
  that side is kept
- CONFLICT: both sides are translated but differ

No I/O happens here; the merge engine layers sources, resolutions and
reporting on top of these functions.
"""

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..models.string_entry import Localization, StringEntry


class FoldOutcome(str, Enum):
    AGREE = "agree"
    ONE_SIDED = "one_sided"
    CONFLICT = "conflict"


@dataclass
class FoldDecision:
    """Outcome of folding two localizations; ``winner`` is kept in the merged entry."""

    outcome: FoldOutcome
    winner: Optional[Localization]
    from_right: bool = False


@dataclass
class EntryFold:
    """Result of folding two entries for the same key."""

    entry: StringEntry
    conflicting_languages: List[str] = field(default_factory=list)
    adopted_languages: List[str] = field(default_factory=list)  # taken from the right side

    @property
    def has_conflict(self) -> bool:
        return bool(self.conflicting_languages)


def fold_localization(left: Optional[Localization], right: Optional[Localization]) -> FoldDecision:
    """
    Fold two localizations of one (key, language) pair.

    Args:
        left: Localization from the earlier source (or None if absent)
        right: Localization from the later source (or None if absent)

    Returns:
        FoldDecision. On CONFLICT the left side is reported as winner so
        callers that defer resolution keep the earlier value.
    """
    if left == right:
        return FoldDecision(FoldOutcome.AGREE, left)

    left_translated = left is not None and left.is_translated
    right_translated = right is not None and right.is_translated

    if left_translated and right_translated:
        return FoldDecision(FoldOutcome.CONFLICT, left)
    if left_translated:
        return FoldDecision(FoldOutcome.ONE_SIDED, left)
    if right_translated:
        return FoldDecision(FoldOutcome.ONE_SIDED, right, from_right=True)

    # Neither side has usable work: keep the earlier one when it exists
    if left is not None:
        return FoldDecision(FoldOutcome.ONE_SIDED, left)
    return FoldDecision(FoldOutcome.ONE_SIDED, right, from_right=True)


def fold_entries(left: StringEntry, right: StringEntry) -> EntryFold:
    """
    Fold two entries language by language.

    Metadata (comment, extraction state) comes from the left entry when set.
    The returned entry never shares objects with the inputs.
    """
    if left == right:
        return EntryFold(entry=copy.deepcopy(left))

    merged = StringEntry(
        key=left.key,
        comment=left.comment or right.comment,
        extraction_state=left.extraction_state or right.extraction_state,
    )
    result = EntryFold(entry=merged)

    for language in sorted(set(left.localizations) | set(right.localizations)):
        decision = fold_localization(left.localizations.get(language), right.localizations.get(language))
        if decision.outcome is FoldOutcome.CONFLICT:
            result.conflicting_languages.append(language)
        elif decision.from_right:
            result.adopted_languages.append(language)
        if decision.winner is not None:
            merged.localizations[language] = copy.deepcopy(decision.winner)

    return result

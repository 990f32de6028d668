"""Exception types raised by the catalog parsers and the merge engine."""

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .models.merge_result import MergeConflict


class LocalizeError(Exception):
    """Base class for all catalog errors."""


class ParseError(LocalizeError):
    """A source could not be parsed (invalid XML/JSON/plist, unbalanced quoting)."""

    def __init__(self, source_name: str, message: str):
        self.source_name = source_name
        self.message = message
        super().__init__(f"{source_name}: {message}")


class UnsupportedFormatError(ParseError):
    """No parser is registered for the file extension."""


class ValidationError(LocalizeError):
    """A value is well-formed but semantically incomplete (e.g. a plural without 'other')."""


class ConflictError(LocalizeError):
    """Raised by strict merges when conflicting keys were left unresolved."""

    def __init__(self, conflicts: List["MergeConflict"]):
        self.conflicts = conflicts
        keys = ", ".join(c.key for c in conflicts[:5])
        more = f" (+{len(conflicts) - 5} more)" if len(conflicts) > 5 else ""
        super().__init__(f"{len(conflicts)} unresolved conflict(s): {keys}{more}")

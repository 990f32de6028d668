"""Canonical value model: a localized value is either simple text or a plural set."""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Dict, Iterator, Tuple, Union

from ..errors import ValidationError

# Fixed CLDR order used by every serializer
PLURAL_CATEGORIES: Tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")


class ValueKind(str, Enum):
    """Discriminator tag for StringValue."""

    SIMPLE = "simple"
    PLURAL = "plural"


@dataclass
class SimpleValue:
    """A plain localized string."""

    text: str
    kind: ClassVar[ValueKind] = ValueKind.SIMPLE

    def texts(self) -> Iterator[Tuple[str, str]]:
        """Yield (suffix, text) pairs; simple values have an empty suffix."""
        yield "", self.text

    def is_populated(self) -> bool:
        return self.text != ""


@dataclass
class PluralValue:
    """
    A set of plural variants keyed by CLDR quantity class.

    The 'other' variant is mandatory and must be non-empty. Variants are
    normalized into the fixed order zero, one, two, few, many, other and
    empty variants other than 'other' are discarded.

    Raises:
        ValidationError: If 'other' is missing/empty or an unknown class is used
    """

    variants: Dict[str, str] = field(default_factory=dict)
    kind: ClassVar[ValueKind] = ValueKind.PLURAL

    def __post_init__(self) -> None:
        unknown = [q for q in self.variants if q not in PLURAL_CATEGORIES]
        if unknown:
            raise ValidationError(f"Unknown plural quantity class(es): {', '.join(sorted(unknown))}")
        if not self.variants.get("other"):
            raise ValidationError("Plural value is missing the mandatory 'other' variant")
        self.variants = {
            q: self.variants[q]
            for q in PLURAL_CATEGORIES
            if self.variants.get(q)
        }

    def texts(self) -> Iterator[Tuple[str, str]]:
        """Yield (quantity, text) pairs in canonical order."""
        yield from self.variants.items()

    def is_populated(self) -> bool:
        return any(self.variants.values())

    @property
    def other(self) -> str:
        return self.variants["other"]


StringValue = Union[SimpleValue, PluralValue]


def is_plural(value: StringValue) -> bool:
    """Check the discriminator tag rather than the value's shape."""
    return value.kind is ValueKind.PLURAL

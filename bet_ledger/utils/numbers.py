"""
Numeric field parsing.

Bet fields arrive from the editor and the store as numbers, numeric text,
empty strings or None. Every numeric field is parsed here into a tagged
ParsedNumber before any arithmetic touches it.
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any, Optional


class NumberKind(str, Enum):
    """Whether a field holds a usable number."""

    NUMERIC = "numeric"
    UNSET = "unset"


@dataclass(frozen=True)
class ParsedNumber:
    """A field value after parsing: numeric with a finite value, or unset."""

    kind: NumberKind
    value: float = 0.0

    @property
    def is_numeric(self) -> bool:
        return self.kind == NumberKind.NUMERIC

    def or_zero(self) -> float:
        """Value if numeric, else 0 (zero contribution)."""
        return self.value if self.is_numeric else 0.0

    def or_none(self) -> Optional[float]:
        return self.value if self.is_numeric else None


UNSET = ParsedNumber(NumberKind.UNSET)


def numeric(value: float) -> ParsedNumber:
    """Build a numeric ParsedNumber."""
    return ParsedNumber(NumberKind.NUMERIC, float(value))


def parse_number(raw: Any) -> ParsedNumber:
    """
    Parse any finite number.

    Accepts int, float, Decimal, Fraction and numeric strings. Booleans,
    blank or non-numeric text, NaN and infinities are unset.

    Args:
        raw: Field value as stored or typed

    Returns:
        ParsedNumber tagged numeric or unset
    """
    if raw is None or isinstance(raw, bool):
        return UNSET

    if isinstance(raw, (int, float, Decimal, Fraction)):
        try:
            value = float(raw)
        except (OverflowError, ValueError):
            return UNSET
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return UNSET
        try:
            value = float(text)
        except ValueError:
            return UNSET
    else:
        return UNSET

    if not math.isfinite(value):
        return UNSET
    return numeric(value)


def parse_positive(raw: Any) -> ParsedNumber:
    """
    Parse a number that only counts when strictly positive.

    Used for stake, odds and place terms: zero or negative values are unset.
    """
    parsed = parse_number(raw)
    if parsed.is_numeric and parsed.value > 0:
        return parsed
    return UNSET


def finite_or(value: float, fallback: float) -> float:
    """Return value if finite, else fallback."""
    return value if math.isfinite(value) else fallback

"""
Presentation views over computed bets.

Sorting, searching and paging only rearrange rows that already carry
their running profit/loss; they never recompute it.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from config import settings
from bet_ledger.models import BetRecord, ComputedBet, Outcome
from bet_ledger.utils.numbers import parse_number

NUMERIC_FIELDS = ("odds", "stake", "place_fraction", "manual_profit_loss")
FIGURE_FIELDS = ("profit_loss", "running_profit_loss")
SEARCH_FIELDS = ("bookie", "horse", "trainer", "jockey")
SORTABLE_FIELDS = ("id",) + BetRecord.editable_fields() + FIGURE_FIELDS


@dataclass
class Page:
    """One page of a view."""

    items: list[ComputedBet] = field(default_factory=list)
    page: int = 1
    page_size: int = 25
    total_items: int = 0

    @property
    def total_pages(self) -> int:
        if self.total_items == 0:
            return 1
        return (self.total_items + self.page_size - 1) // self.page_size

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1


def _sort_value(bet: ComputedBet, field_name: str) -> Any:
    """Comparable value for a field, or None if it should sort last."""
    value = getattr(bet, field_name)

    if field_name in NUMERIC_FIELDS:
        return parse_number(value).or_none()
    if field_name in FIGURE_FIELDS:
        return value
    if field_name == "is_each_way":
        return int(bool(value))
    if field_name == "outcome":
        outcome = Outcome.parse(value)
        return outcome.value if outcome else None

    text = str(value or "").strip()
    return text.casefold() if text else None


def sort_bets(
    bets: Sequence[ComputedBet],
    field_name: str,
    descending: bool = False,
) -> list[ComputedBet]:
    """
    Sort computed bets by a field; blank or unset values go last either way.

    Raises:
        ValueError: If the field is not sortable
    """
    if field_name not in SORTABLE_FIELDS:
        raise ValueError(f"Cannot sort by {field_name!r}. Choose from {', '.join(SORTABLE_FIELDS)}")

    present = [b for b in bets if _sort_value(b, field_name) is not None]
    missing = [b for b in bets if _sort_value(b, field_name) is None]
    present.sort(key=lambda b: _sort_value(b, field_name), reverse=descending)
    return present + missing


def search_bets(bets: Sequence[ComputedBet], text: str) -> list[ComputedBet]:
    """Bets whose bookie, horse, trainer or jockey contains the text (case-insensitive)."""
    needle = text.strip().casefold()
    if not needle:
        return list(bets)
    return [
        b for b in bets
        if any(needle in str(getattr(b, name) or "").casefold() for name in SEARCH_FIELDS)
    ]


def paginate(
    bets: Sequence[ComputedBet],
    page: int = 1,
    page_size: Optional[int] = None,
) -> Page:
    """Slice out one page; out-of-range page numbers are clamped."""
    if page_size is None or page_size <= 0:
        page_size = settings.ledger.page_size

    result = Page(page_size=page_size, total_items=len(bets))
    result.page = min(max(page, 1), result.total_pages)

    start = (result.page - 1) * page_size
    result.items = list(bets[start:start + page_size])
    return result


def build_view(
    bets: Sequence[ComputedBet],
    sort_by: Optional[str] = None,
    descending: bool = False,
    search: Optional[str] = None,
    page: int = 1,
    page_size: Optional[int] = None,
) -> Page:
    """Search, then sort, then page a computed ledger."""
    rows = search_bets(bets, search) if search else list(bets)
    if sort_by:
        rows = sort_bets(rows, sort_by, descending)
    return paginate(rows, page, page_size)

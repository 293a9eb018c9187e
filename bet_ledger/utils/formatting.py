"""Money and odds display helpers."""

from typing import Any, Optional

from config import settings
from bet_ledger.utils.numbers import parse_number, parse_positive


def format_money(value: float, symbol: Optional[str] = None) -> str:
    """
    Format an amount as currency with thousands separators.

    Examples:
        format_money(1234.5) -> "£1,234.50"
        format_money(-4) -> "-£4.00"
    """
    if symbol is None:
        symbol = settings.ledger.currency_symbol

    amount = round(value, 2)
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_odds(odds: Any) -> str:
    """Odds as 'N/1', blank when unset."""
    parsed = parse_positive(odds)
    if not parsed.is_numeric:
        return ""
    return f"{parsed.value:g}/1"


def format_place_terms(place_fraction: Any, is_each_way: bool) -> str:
    """Place terms as '1/N', blank for win-only bets or unset terms."""
    if not is_each_way:
        return ""
    parsed = parse_positive(place_fraction)
    if not parsed.is_numeric:
        return ""
    return f"1/{parsed.value:g}"


def format_amount(value: Any) -> str:
    """Plain number for a raw numeric field, blank when unset."""
    parsed = parse_number(value)
    if not parsed.is_numeric:
        return ""
    return f"{parsed.value:.2f}"

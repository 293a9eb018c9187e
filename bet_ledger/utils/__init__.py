"""Utility functions."""

from bet_ledger.utils.formatting import (
    format_amount,
    format_money,
    format_odds,
    format_place_terms,
)
from bet_ledger.utils.numbers import (
    UNSET,
    NumberKind,
    ParsedNumber,
    finite_or,
    parse_number,
    parse_positive,
)
from bet_ledger.utils.stakes import (
    calculate_outlay,
    calculate_stake,
    suggest_stakes,
)

__all__ = [
    # Formatting
    "format_amount",
    "format_money",
    "format_odds",
    "format_place_terms",
    # Number parsing
    "UNSET",
    "NumberKind",
    "ParsedNumber",
    "finite_or",
    "parse_number",
    "parse_positive",
    # Stake utilities
    "calculate_outlay",
    "calculate_stake",
    "suggest_stakes",
]

"""Profit/loss calculation for the ledger."""

from bet_ledger.calculator.engine import (
    LedgerResult,
    calculate_ledger,
    calculate_profit_loss,
    compute_bets,
    summarize,
)

__all__ = [
    "LedgerResult",
    "calculate_ledger",
    "calculate_profit_loss",
    "compute_bets",
    "summarize",
]

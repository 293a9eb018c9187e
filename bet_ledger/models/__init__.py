"""Data models for the bet ledger."""

from bet_ledger.models.bet import (
    BetRecord,
    ComputedBet,
    Outcome,
    RawNumber,
)
from bet_ledger.models.stats import LedgerStats

__all__ = [
    # Bet models
    "BetRecord",
    "ComputedBet",
    "Outcome",
    "RawNumber",
    # Stats models
    "LedgerStats",
]

"""
Ledger summary model.

Derived from a full computed ledger and a starting bank; never stored.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LedgerStats:
    """Bank position and outcome tallies for the whole ledger."""

    starting_bank: float = 0.0
    current_bank: float = 0.0
    running_profit_loss: float = 0.0

    wins: int = 0
    places: int = 0
    losses: int = 0
    total_bets: int = 0  # Everything not Pending

    @property
    def strike_rate(self) -> float:
        """Wins as a percentage of settled bets."""
        if self.total_bets == 0:
            return 0.0
        return (self.wins / self.total_bets) * 100

    @property
    def bankroll_change_percent(self) -> float:
        """Percentage change from the starting bank."""
        if self.starting_bank == 0:
            return 0.0
        return (self.running_profit_loss / self.starting_bank) * 100

"""
Bet data models.

A BetRecord is one row of the ledger as the user edits it. A ComputedBet is
the same row with its derived profit/loss figures attached.
"""

from dataclasses import dataclass, field, fields
from datetime import date as date_type
from enum import Enum
from typing import Any, Optional, Union

# A numeric field as edited: a number, numeric text, "" or None
RawNumber = Union[float, int, str, None]


class Outcome(str, Enum):
    """Settled result of a bet."""

    WON = "Won"
    PLACED = "Placed"
    LOST = "Lost"
    VOID = "Void"
    PENDING = "Pending"

    @classmethod
    def parse(cls, value: Any) -> Optional["Outcome"]:
        """Outcome for a stored/typed value, or None if it is not one of the five."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass
class BetRecord:
    """One wagered bet."""

    id: str
    bookie: str = ""
    date: str = field(default_factory=lambda: date_type.today().isoformat())  # YYYY-MM-DD
    horse: str = ""
    trainer: str = ""
    jockey: str = ""

    odds: RawNumber = None  # Decimal odds, 8 means 8/1
    stake: RawNumber = None  # Unit stake; each-way outlay is twice this
    is_each_way: bool = False
    place_fraction: RawNumber = None  # Place leg pays odds / place_fraction

    outcome: Union[Outcome, str] = Outcome.PENDING

    # Replaces the computed figure entirely (free bets, odds boosts)
    manual_profit_loss: RawNumber = None

    @classmethod
    def editable_fields(cls) -> tuple[str, ...]:
        """Names of the fields the editor may change."""
        return tuple(f.name for f in fields(cls) if f.name != "id")

    @property
    def is_settled(self) -> bool:
        """Anything but Pending, including outcomes the enum doesn't know."""
        return Outcome.parse(self.outcome) != Outcome.PENDING


@dataclass
class ComputedBet(BetRecord):
    """A BetRecord with its derived, non-persisted figures."""

    profit_loss: float = 0.0
    running_profit_loss: float = 0.0

    @classmethod
    def from_record(
        cls,
        bet: BetRecord,
        profit_loss: float,
        running_profit_loss: float,
    ) -> "ComputedBet":
        """Copy a record's fields and attach its figures."""
        values = {f.name: getattr(bet, f.name) for f in fields(BetRecord)}
        return cls(
            **values,
            profit_loss=profit_loss,
            running_profit_loss=running_profit_loss,
        )

    def to_record(self) -> BetRecord:
        """Strip the derived figures."""
        return BetRecord(**{f.name: getattr(self, f.name) for f in fields(BetRecord)})

"""
Ledger editing session.

Holds the working set of bets and the starting bank, applies edits one
field at a time, and recomputes figures from scratch whenever they are
asked for. Load and save go through the record store; on failure the
working set is left exactly as it was.
"""

import time
from dataclasses import replace
from datetime import date
from typing import Any, Optional, Sequence

from config import LedgerSettings, settings
from config.logging_config import get_logger
from bet_ledger.calculator import LedgerResult, calculate_ledger
from bet_ledger.database.store import LedgerStore, StoreError
from bet_ledger.editor.notifications import (
    LOAD_FAILED,
    SAVE_FAILED,
    SAVE_SUCCEEDED,
    Notification,
)
from bet_ledger.editor.views import Page, build_view
from bet_ledger.models import BetRecord, ComputedBet, LedgerStats, Outcome
from bet_ledger.utils.numbers import parse_number

logger = get_logger(__name__)

NUMERIC_FIELDS = frozenset({"odds", "stake", "place_fraction", "manual_profit_loss"})
TEXT_FIELDS = frozenset({"bookie", "horse", "trainer", "jockey"})
TRUE_STRINGS = frozenset({"true", "1", "yes", "y", "on"})


class BetNotFoundError(KeyError):
    """No bet with that id in the working set."""


def normalize_field(field_name: str, value: Any) -> Any:
    """
    Convert editor input for a field into the value stored on the record.

    Numeric fields become a float or None (blank or non-numeric input
    clears the field).

    Raises:
        ValueError: For an unknown or read-only field, an invalid outcome
            or a malformed date
    """
    if field_name not in BetRecord.editable_fields():
        raise ValueError(f"Field {field_name!r} cannot be edited")

    if field_name in NUMERIC_FIELDS:
        return parse_number(value).or_none()

    if field_name in TEXT_FIELDS:
        return "" if value is None else str(value)

    if field_name == "is_each_way":
        if isinstance(value, str):
            return value.strip().lower() in TRUE_STRINGS
        return bool(value)

    if field_name == "outcome":
        outcome = Outcome.parse(value)
        if outcome is None:
            choices = ", ".join(o.value for o in Outcome)
            raise ValueError(f"Invalid outcome {value!r}. Must be one of {choices}")
        return outcome

    if field_name == "date":
        return date.fromisoformat(str(value).strip()).isoformat()

    return value


class LedgerSession:
    """
    The editable ledger.

    Responsibilities:
    - Own the working set of bets in ledger order
    - Apply add / update / delete edits
    - Recompute bets and stats on request (never cached)
    - Load and save through the store without corrupting the working set
    """

    def __init__(
        self,
        store: LedgerStore,
        bets: Optional[Sequence[BetRecord]] = None,
        starting_bank: Optional[float] = None,
        defaults: Optional[LedgerSettings] = None,
    ) -> None:
        """
        Args:
            store: Record store for load/save
            bets: Initial working set (default empty; usually filled by load())
            starting_bank: Bank before the first bet (default from settings)
            defaults: Defaults for new bets (default from settings)
        """
        self._store = store
        self._defaults = defaults or settings.ledger
        self._bets: list[BetRecord] = list(bets or [])
        self._starting_bank = 0.0
        self.set_starting_bank(
            self._defaults.starting_bank if starting_bank is None else starting_bank
        )

        self.is_loading = False
        self.is_saving = False

    @property
    def bets(self) -> tuple[BetRecord, ...]:
        """Working set in ledger order (read-only snapshot)."""
        return tuple(self._bets)

    @property
    def starting_bank(self) -> float:
        return self._starting_bank

    def set_starting_bank(self, value: Any) -> float:
        """Set the starting bank; input that isn't a number counts as 0."""
        self._starting_bank = parse_number(value).or_zero()
        return self._starting_bank

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def _new_id(self) -> str:
        existing = {b.id for b in self._bets}
        bet_id = f"bet-{int(time.time() * 1000)}"
        suffix = 1
        candidate = bet_id
        while candidate in existing:
            suffix += 1
            candidate = f"{bet_id}-{suffix}"
        return candidate

    def _index_of(self, bet_id: str) -> int:
        for i, bet in enumerate(self._bets):
            if bet.id == bet_id:
                return i
        raise BetNotFoundError(bet_id)

    def add_bet(self) -> BetRecord:
        """Append a blank pending bet dated today and return it."""
        bet = BetRecord(
            id=self._new_id(),
            date=date.today().isoformat(),
            is_each_way=self._defaults.default_each_way,
            place_fraction=self._defaults.default_place_fraction,
            outcome=Outcome.PENDING,
        )
        self._bets = self._bets + [bet]
        logger.debug("Bet added", bet_id=bet.id)
        return bet

    def update_bet(self, bet_id: str, field_name: str, value: Any) -> BetRecord:
        """
        Change one field of one bet.

        Returns:
            The updated record

        Raises:
            BetNotFoundError: If no bet has this id
            ValueError: If the field or value is not acceptable
        """
        index = self._index_of(bet_id)
        updated = replace(self._bets[index], **{field_name: normalize_field(field_name, value)})

        bets = list(self._bets)
        bets[index] = updated
        self._bets = bets

        logger.debug("Bet updated", bet_id=bet_id, field=field_name)
        return updated

    def delete_bet(self, bet_id: str) -> bool:
        """Remove a bet. Returns False if it wasn't there."""
        remaining = [b for b in self._bets if b.id != bet_id]
        removed = len(remaining) != len(self._bets)
        self._bets = remaining
        if removed:
            logger.debug("Bet deleted", bet_id=bet_id)
        return removed

    # ------------------------------------------------------------------
    # Figures
    # ------------------------------------------------------------------

    def result(self) -> LedgerResult:
        return calculate_ledger(self._bets, self._starting_bank)

    def computed_bets(self) -> list[ComputedBet]:
        return self.result().computed_bets

    def stats(self) -> LedgerStats:
        return self.result().stats

    def view(
        self,
        sort_by: Optional[str] = None,
        descending: bool = False,
        search: Optional[str] = None,
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> Page:
        """Sorted/filtered/paged rows; running totals are in ledger order."""
        return build_view(
            self.computed_bets(),
            sort_by=sort_by,
            descending=descending,
            search=search,
            page=page,
            page_size=page_size,
        )

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    async def load(self) -> Optional[Notification]:
        """
        Replace the working set with the stored ledger.

        Returns:
            None on success, an error notification on failure
        """
        self.is_loading = True
        try:
            bets = await self._store.load_all()
        except StoreError as e:
            logger.error("Ledger load failed", error=str(e))
            return Notification.error(LOAD_FAILED)
        finally:
            self.is_loading = False

        self._bets = list(bets)
        return None

    async def save(self) -> Notification:
        """Write the working set to the store."""
        self.is_saving = True
        try:
            await self._store.save_all(list(self._bets))
        except StoreError as e:
            logger.error("Ledger save failed", error=str(e))
            return Notification.error(SAVE_FAILED)
        finally:
            self.is_saving = False

        return Notification.success(SAVE_SUCCEEDED)

"""
Database repositories for the ledger table.

Converts between BetRecord values and BetRow rows.
"""

from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from config.logging_config import get_logger
from bet_ledger.database.schema import BetRow
from bet_ledger.models import BetRecord, Outcome
from bet_ledger.utils.numbers import parse_number

logger = get_logger(__name__)


def record_to_row(bet: BetRecord, position: int) -> BetRow:
    """Build a row for a record; numeric fields that don't parse are stored as NULL."""
    outcome = Outcome.parse(bet.outcome)
    return BetRow(
        id=bet.id,
        position=position,
        bookie=bet.bookie or "",
        date=bet.date,
        horse=bet.horse or "",
        trainer=bet.trainer or "",
        jockey=bet.jockey or "",
        odds=parse_number(bet.odds).or_none(),
        stake=parse_number(bet.stake).or_none(),
        is_each_way=bool(bet.is_each_way),
        place_fraction=parse_number(bet.place_fraction).or_none(),
        outcome=outcome.value if outcome else str(bet.outcome),
        manual_profit_loss=parse_number(bet.manual_profit_loss).or_none(),
    )


def row_to_record(row: BetRow) -> BetRecord:
    """Build a record from a stored row."""
    return BetRecord(
        id=row.id,
        bookie=row.bookie or "",
        date=row.date,
        horse=row.horse or "",
        trainer=row.trainer or "",
        jockey=row.jockey or "",
        odds=row.odds,
        stake=row.stake,
        is_each_way=bool(row.is_each_way),
        place_fraction=row.place_fraction,
        outcome=Outcome.parse(row.outcome) or row.outcome,
        manual_profit_loss=row.manual_profit_loss,
    )


class BetRepository:
    """Repository for ledger rows."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def load_all(self) -> list[BetRecord]:
        """All bets in ledger order."""
        result = await self.session.execute(select(BetRow).order_by(BetRow.position))
        return [row_to_record(row) for row in result.scalars().all()]

    async def replace_all(self, bets: Sequence[BetRecord]) -> int:
        """
        Replace the whole table with the given bets.

        Runs inside the caller's session; the caller commits or rolls back.

        Returns:
            Number of rows written
        """
        await self.session.execute(delete(BetRow))
        self.session.add_all([record_to_row(bet, i) for i, bet in enumerate(bets)])
        await self.session.flush()
        logger.debug("Ledger rows replaced", rows=len(bets))
        return len(bets)

"""
Ledger record store.

Whole-collection load and replace over the bets table. Transient
database errors are retried; anything that still fails surfaces as
StoreError.
"""

from collections import Counter
from typing import Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError

from config.logging_config import get_logger
from bet_ledger.database.connection import DatabaseConnection, db
from bet_ledger.database.repositories import BetRepository
from bet_ledger.models import BetRecord
from bet_ledger.database.retries import with_async_retry

logger = get_logger(__name__)


class StoreError(Exception):
    """Loading or saving the ledger failed."""


class LedgerStore:
    """Loads and saves the full list of bets."""

    def __init__(self, database: Optional[DatabaseConnection] = None) -> None:
        self._db = database or db

    async def initialize(self) -> None:
        """Connect and create tables if not already done."""
        if not self._db.is_initialized:
            await self._db.initialize()

    async def close(self) -> None:
        await self._db.close()

    async def load_all(self) -> list[BetRecord]:
        """
        Fetch every bet in ledger order.

        Raises:
            StoreError: If the database cannot be read
        """
        try:
            await self.initialize()
            bets = await self._load()
        except (SQLAlchemyError, OSError) as e:
            logger.error("Failed to load ledger", error=str(e))
            raise StoreError("Failed to load ledger") from e

        logger.info("Ledger loaded", bets=len(bets))
        return bets

    async def save_all(self, bets: Sequence[BetRecord]) -> None:
        """
        Replace the stored ledger with these bets, all or nothing.

        Raises:
            StoreError: On duplicate bet ids or if the database write fails
        """
        duplicates = sorted(bet_id for bet_id, n in Counter(b.id for b in bets).items() if n > 1)
        if duplicates:
            logger.error("Refusing to save ledger with duplicate ids", ids=duplicates)
            raise StoreError(f"Duplicate bet ids: {', '.join(duplicates)}")

        try:
            await self.initialize()
            written = await self._replace(list(bets))
        except (SQLAlchemyError, OSError) as e:
            logger.error("Failed to save ledger", bets=len(bets), error=str(e))
            raise StoreError("Failed to save ledger") from e

        logger.info("Ledger saved", bets=written)

    @with_async_retry()
    async def _load(self) -> list[BetRecord]:
        async with self._db.session() as session:
            return await BetRepository(session).load_all()

    @with_async_retry()
    async def _replace(self, bets: list[BetRecord]) -> int:
        async with self._db.session() as session:
            return await BetRepository(session).replace_all(bets)

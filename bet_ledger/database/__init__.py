"""Database module."""

from bet_ledger.database.connection import DatabaseConnection, db
from bet_ledger.database.repositories import BetRepository, record_to_row, row_to_record
from bet_ledger.database.retries import RETRIABLE_EXCEPTIONS, with_async_retry
from bet_ledger.database.schema import Base, BetRow
from bet_ledger.database.seed import sample_bets
from bet_ledger.database.store import LedgerStore, StoreError

__all__ = [
    # Connection
    "DatabaseConnection",
    "db",
    # Repositories
    "BetRepository",
    "record_to_row",
    "row_to_record",
    # Retries
    "RETRIABLE_EXCEPTIONS",
    "with_async_retry",
    # Schema
    "Base",
    "BetRow",
    # Store
    "LedgerStore",
    "StoreError",
    "sample_bets",
]

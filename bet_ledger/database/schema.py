"""
SQLAlchemy ORM models for database tables.

Defines the database schema using SQLAlchemy 2.0 style.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Float, Index, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class BetRow(Base):
    """One ledger row. The whole table is replaced on every save."""

    __tablename__ = "bets"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False)  # Ledger order

    bookie: Mapped[str] = mapped_column(String(100), default="")
    date: Mapped[str] = mapped_column(String(10), nullable=False)  # YYYY-MM-DD
    horse: Mapped[str] = mapped_column(String(200), default="")
    trainer: Mapped[str] = mapped_column(String(200), default="")
    jockey: Mapped[str] = mapped_column(String(200), default="")

    # Unset numeric fields are NULL
    odds: Mapped[Optional[float]] = mapped_column(Float)
    stake: Mapped[Optional[float]] = mapped_column(Float)
    is_each_way: Mapped[bool] = mapped_column(Boolean, default=False)
    place_fraction: Mapped[Optional[float]] = mapped_column(Float)

    outcome: Mapped[str] = mapped_column(String(20), default="Pending")
    manual_profit_loss: Mapped[Optional[float]] = mapped_column(Float)

    saved_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    __table_args__ = (Index("idx_bets_position", "position"),)

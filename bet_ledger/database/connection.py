"""
Database connection factory.

Supports SQLite (default, local file) and PostgreSQL.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from config import DatabaseType, settings
from config.logging_config import get_logger

logger = get_logger(__name__)


class DatabaseConnection:
    """Manages database connection and session factory."""

    def __init__(
        self,
        url: Optional[str] = None,
        database_type: Optional[DatabaseType] = None,
    ) -> None:
        """
        Args:
            url: Connection URL (default from settings)
            database_type: Backend type (default from settings)
        """
        self._url = url or settings.database_url
        self._database_type = database_type or settings.database_type
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def is_initialized(self) -> bool:
        return self._session_factory is not None

    def _get_connection_url(self) -> str:
        """Get the async connection URL for the configured backend."""
        url = self._url

        if self._database_type == DatabaseType.SQLITE:
            # Convert sqlite:/// to sqlite+aiosqlite:///
            if url.startswith("sqlite:///"):
                db_path = url.replace("sqlite:///", "")
                Path(db_path).parent.mkdir(parents=True, exist_ok=True)
                return url.replace("sqlite:///", "sqlite+aiosqlite:///")
        elif self._database_type == DatabaseType.POSTGRESQL:
            # Convert postgresql:// to postgresql+asyncpg://
            if url.startswith("postgresql://"):
                return url.replace("postgresql://", "postgresql+asyncpg://")

        return url

    async def initialize(self) -> None:
        """Initialize the database connection and create tables."""
        url = self._get_connection_url()
        logger.info("Initializing database", url=url.split("@")[-1])  # Don't log credentials

        self._engine = create_async_engine(
            url,
            echo=settings.log_level == "DEBUG",
            pool_pre_ping=True,
        )

        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

        await self._create_tables()
        logger.info("Database initialized successfully")

    async def _create_tables(self) -> None:
        """Create all tables if they don't exist."""
        from bet_ledger.database.schema import Base

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get a database session as a context manager; commits on success."""
        if self._session_factory is None:
            raise RuntimeError("Database not initialized. Call initialize() first.")

        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def close(self) -> None:
        """Close the database connection."""
        if self._engine:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Database connection closed")


# Global database instance
db = DatabaseConnection()

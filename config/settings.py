"""
Application settings using Pydantic.

Loads configuration from environment variables with validation and type coercion.
"""

from enum import Enum
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseType(str, Enum):
    """Database backend type."""

    SQLITE = "sqlite"
    POSTGRESQL = "postgresql"


class LedgerSettings(BaseSettings):
    """Ledger defaults and display configuration."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="LEDGER_", extra="ignore")

    starting_bank: float = Field(
        default=100.0,
        description="Starting bank used when none is supplied (GBP)",
    )
    default_place_fraction: float = Field(
        default=5.0,
        gt=0,
        description="Place terms divisor for new each-way bets (5 = 1/5 odds)",
    )
    default_each_way: bool = Field(
        default=True,
        description="Whether new bets start as each-way",
    )
    currency_symbol: str = Field(default="£", description="Currency symbol for display")
    stake_percents: str = Field(
        default="2,5",
        description="Comma-separated bank percentages for stake suggestions",
    )
    page_size: int = Field(default=25, gt=0, description="Rows per page in ledger views")

    def get_stake_percents(self) -> list[float]:
        """Get stake suggestion percentages as a list."""
        return [float(p.strip()) for p in self.stake_percents.split(",") if p.strip()]


class StoreSettings(BaseSettings):
    """Record store retry configuration."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="STORE_", extra="ignore")

    retry_attempts: int = Field(default=3, ge=1, description="Attempts per load/save")
    retry_wait_seconds: float = Field(
        default=0.5,
        ge=0,
        description="Initial backoff between attempts",
    )
    retry_max_wait_seconds: float = Field(
        default=5.0,
        ge=0,
        description="Maximum backoff between attempts",
    )


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    database_type: DatabaseType = Field(
        default=DatabaseType.SQLITE,
        alias="DATABASE_TYPE",
        description="Database backend type",
    )
    database_url: str = Field(
        default="sqlite:///data/bet_ledger.db",
        alias="DATABASE_URL",
        description="Database connection URL",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Logging level",
    )
    log_file: Path = Field(
        default=Path("data/logs/ledger.log"),
        alias="LOG_FILE",
        description="Log file path",
    )
    log_json: bool = Field(
        default=False,
        alias="LOG_JSON",
        description="Emit JSON log lines instead of console output",
    )

    # Sub-settings (loaded from same .env)
    ledger: LedgerSettings = Field(default_factory=LedgerSettings)
    store: StoreSettings = Field(default_factory=StoreSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper


# Global settings instance - import this
settings = Settings()

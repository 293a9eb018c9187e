"""Configuration module."""

from config.settings import (
    DatabaseType,
    LedgerSettings,
    Settings,
    StoreSettings,
    settings,
)

__all__ = [
    "DatabaseType",
    "LedgerSettings",
    "Settings",
    "StoreSettings",
    "settings",
]

"""
Tests for configuration.

Run with: python -m pytest tests/test_settings.py -v
"""

import pytest
from pydantic import ValidationError

from config import LedgerSettings, Settings


def test_stake_percents_parsed():
    assert LedgerSettings(stake_percents="2, 5,10").get_stake_percents() == [2.0, 5.0, 10.0]


def test_log_level_normalised(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert Settings().log_level == "DEBUG"


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        Settings()


def test_ledger_settings_from_env(monkeypatch):
    monkeypatch.setenv("LEDGER_STARTING_BANK", "250")
    monkeypatch.setenv("LEDGER_DEFAULT_EACH_WAY", "false")
    ledger = LedgerSettings()
    assert ledger.starting_bank == 250
    assert ledger.default_each_way is False


def test_place_fraction_must_be_positive():
    with pytest.raises(ValidationError):
        LedgerSettings(default_place_fraction=0)

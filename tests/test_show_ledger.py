"""
Tests for the show_ledger script.

Run with: python -m pytest tests/test_show_ledger.py -v
"""

import importlib.util
from pathlib import Path

import pytest
import structlog

from config import settings
from bet_ledger.database import StoreError, sample_bets
from bet_ledger.editor.notifications import LOAD_FAILED

SCRIPT = Path(__file__).parent.parent / "scripts" / "show_ledger.py"


@pytest.fixture(scope="module")
def show_ledger():
    spec = importlib.util.spec_from_file_location("show_ledger", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class ScriptedStore:
    """Store whose successive loads return (or raise) the given results."""

    def __init__(self, *loads):
        self.loads = list(loads)
        self.saved = None
        self.closed = False

    async def load_all(self):
        result = self.loads.pop(0)
        if isinstance(result, Exception):
            raise result
        return list(result)

    async def save_all(self, bets):
        self.saved = list(bets)

    async def close(self):
        self.closed = True


@pytest.fixture
def logging_calls(show_ledger, monkeypatch):
    calls = []
    monkeypatch.setattr(show_ledger, "setup_logging", lambda **kwargs: calls.append(kwargs))
    return calls


@pytest.fixture
def use_store(show_ledger, monkeypatch):
    def install(store):
        monkeypatch.setattr(show_ledger, "LedgerStore", lambda: store)
        return store
    return install


class TestShowLedger:
    """Tests for main()."""

    @pytest.mark.asyncio
    async def test_logging_uses_configured_file(
        self, show_ledger, logging_calls, use_store, monkeypatch, tmp_path
    ):
        log_file = tmp_path / "logs" / "ledger.log"
        monkeypatch.setattr(settings, "log_file", log_file)
        use_store(ScriptedStore(sample_bets()))

        assert await show_ledger.main() == 0
        assert logging_calls[0]["log_file"] == log_file
        assert logging_calls[0]["log_level"] == settings.log_level

    @pytest.mark.asyncio
    async def test_prints_table_and_summary(self, show_ledger, logging_calls, use_store, capsys):
        store = use_store(ScriptedStore(sample_bets()))

        assert await show_ledger.main(starting_bank=100) == 0
        out = capsys.readouterr().out
        assert "Northcliff" in out
        assert "Page 1 of 1" in out
        assert "£131.30" in out
        assert store.closed

    @pytest.mark.asyncio
    async def test_seeds_empty_store(self, show_ledger, logging_calls, use_store, capsys):
        store = use_store(ScriptedStore([], sample_bets()))

        assert await show_ledger.main(seed=True) == 0
        assert [b.id for b in store.saved] == [b.id for b in sample_bets()]
        assert "Northcliff" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_load_failure_exits_nonzero(self, show_ledger, logging_calls, use_store, capsys):
        store = use_store(ScriptedStore(StoreError("Failed to load ledger")))

        assert await show_ledger.main() == 1
        assert LOAD_FAILED in capsys.readouterr().out
        assert store.closed

    @pytest.mark.asyncio
    async def test_reload_failure_after_seeding_exits_nonzero(
        self, show_ledger, logging_calls, use_store, capsys
    ):
        store = use_store(ScriptedStore([], StoreError("Failed to load ledger")))

        assert await show_ledger.main(seed=True) == 1
        out = capsys.readouterr().out
        assert LOAD_FAILED in out
        assert "TOTALS" not in out
        assert store.closed

    @pytest.mark.asyncio
    async def test_log_context_cleared_on_exit(self, show_ledger, logging_calls, use_store):
        use_store(ScriptedStore(sample_bets()))

        await show_ledger.main()
        assert structlog.contextvars.get_contextvars() == {}

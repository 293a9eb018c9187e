"""
Tests for the ledger editing session.

Run with: python -m pytest tests/test_session.py -v
"""

from datetime import date

import pytest

from config import LedgerSettings
from bet_ledger.database.store import StoreError
from bet_ledger.editor import BetNotFoundError, LedgerSession, NotificationType
from bet_ledger.models import BetRecord, Outcome


class FakeStore:
    """In-memory store that can be told to fail."""

    def __init__(self, bets=None):
        self.saved = list(bets or [])
        self.fail_load = False
        self.fail_save = False
        self.save_calls = 0

    async def load_all(self):
        if self.fail_load:
            raise StoreError("Failed to load ledger")
        return list(self.saved)

    async def save_all(self, bets):
        self.save_calls += 1
        if self.fail_save:
            raise StoreError("Failed to save ledger")
        self.saved = list(bets)


@pytest.fixture
def store(three_bet_ledger):
    return FakeStore(three_bet_ledger)


@pytest.fixture
def session(store):
    return LedgerSession(store, bets=store.saved, starting_bank=100)


class TestEditing:
    """Tests for add/update/delete."""

    def test_add_bet_defaults(self, session):
        bet = session.add_bet()
        assert bet.outcome == Outcome.PENDING
        assert bet.is_each_way is True
        assert bet.place_fraction == 5
        assert bet.odds is None and bet.stake is None
        assert bet.manual_profit_loss is None
        assert bet.date == date.today().isoformat()
        assert bet.id.startswith("bet-")
        assert session.bets[-1] == bet

    def test_added_ids_are_unique(self, session):
        ids = {session.add_bet().id for _ in range(5)}
        assert len(ids) == 5

    def test_defaults_from_settings(self, store):
        defaults = LedgerSettings(default_each_way=False, default_place_fraction=4, starting_bank=50)
        session = LedgerSession(store, defaults=defaults)
        bet = session.add_bet()
        assert bet.is_each_way is False
        assert bet.place_fraction == 4
        assert session.starting_bank == 50

    def test_update_numeric_field_from_text(self, session):
        bet = session.add_bet()
        session.update_bet(bet.id, "stake", "2")
        session.update_bet(bet.id, "odds", "8")
        updated = session.update_bet(bet.id, "outcome", "Won")
        assert updated.stake == 2.0
        assert updated.odds == 8.0
        assert updated.outcome == Outcome.WON
        assert session.computed_bets()[-1].profit_loss == pytest.approx(19.2)

    def test_blank_input_clears_field(self, session):
        bet = session.add_bet()
        session.update_bet(bet.id, "stake", "2")
        assert session.update_bet(bet.id, "stake", "").stake is None

    def test_update_each_way_from_text(self, session):
        bet = session.add_bet()
        assert session.update_bet(bet.id, "is_each_way", "false").is_each_way is False
        assert session.update_bet(bet.id, "is_each_way", "on").is_each_way is True

    def test_update_replaces_record(self, session):
        """Edits produce new records; earlier snapshots are unchanged."""
        before = session.bets
        session.update_bet(before[0].id, "horse", "Renamed")
        assert before[0].horse == "Northcliff"
        assert session.bets[0].horse == "Renamed"

    def test_update_unknown_bet(self, session):
        with pytest.raises(BetNotFoundError):
            session.update_bet("bet-missing", "stake", 2)

    @pytest.mark.parametrize("field_name", ["id", "profit_loss", "colour"])
    def test_update_rejects_field(self, session, field_name):
        with pytest.raises(ValueError):
            session.update_bet(session.bets[0].id, field_name, "x")

    def test_update_rejects_bad_outcome(self, session):
        with pytest.raises(ValueError):
            session.update_bet(session.bets[0].id, "outcome", "Scratched")

    def test_update_rejects_bad_date(self, session):
        with pytest.raises(ValueError):
            session.update_bet(session.bets[0].id, "date", "next tuesday")

    def test_delete_bet(self, session):
        bet_id = session.bets[1].id
        assert session.delete_bet(bet_id) is True
        assert [b.id for b in session.bets] == ["bet-1", "bet-3"]
        assert session.delete_bet(bet_id) is False


class TestFigures:
    """Figures are recomputed from the working set on every call."""

    def test_stats_follow_edits(self, session):
        assert session.stats().current_bank == pytest.approx(116.4)
        session.update_bet(session.bets[0].id, "outcome", Outcome.VOID)
        assert session.stats().current_bank == pytest.approx(97.2)

    def test_starting_bank(self, session):
        session.set_starting_bank("250")
        assert session.stats().starting_bank == 250
        assert session.set_starting_bank("lots") == 0

    def test_view_keeps_ledger_running_totals(self, session):
        page = session.view(sort_by="profit_loss")
        assert [b.profit_loss for b in page.items] == pytest.approx([-4, 1.2, 19.2])
        assert [b.running_profit_loss for b in page.items] == pytest.approx([16.4, 20.4, 19.2])


class TestPersistence:
    """Load and save through the store."""

    @pytest.mark.asyncio
    async def test_load(self, store, three_bet_ledger):
        session = LedgerSession(store)
        assert await session.load() is None
        assert list(session.bets) == three_bet_ledger
        assert session.is_loading is False

    @pytest.mark.asyncio
    async def test_load_failure_keeps_working_set(self, session, store):
        await session.load()
        session.add_bet()
        before = session.bets

        store.fail_load = True
        notification = await session.load()

        assert notification.type == NotificationType.ERROR
        assert notification.message == "Failed to load data."
        assert session.bets == before

    @pytest.mark.asyncio
    async def test_save(self, session, store):
        bet = session.add_bet()
        notification = await session.save()
        assert notification.ok
        assert notification.message == "Ledger saved successfully!"
        assert store.saved[-1] == bet
        assert session.is_saving is False

    @pytest.mark.asyncio
    async def test_save_failure_keeps_working_set(self, session, store):
        session.add_bet()
        before = session.bets
        store.fail_save = True

        notification = await session.save()

        assert not notification.ok
        assert notification.message == "Failed to save data. Please try again."
        assert session.bets == before
        assert session.is_saving is False

    @pytest.mark.asyncio
    async def test_notification_ids_increase(self, session, store):
        first = await session.save()
        store.fail_save = True
        second = await session.save()
        assert second.id > first.id


def test_session_accepts_plain_records(store):
    session = LedgerSession(store, starting_bank=0)
    assert isinstance(session.add_bet(), BetRecord)

"""Shared fixtures for ledger tests."""

import pytest

from bet_ledger.models import BetRecord, Outcome


@pytest.fixture
def make_bet():
    """Factory for bet records with settled-bet defaults."""
    counter = {"n": 0}

    def _make(**overrides) -> BetRecord:
        counter["n"] += 1
        values = {
            "id": f"bet-{counter['n']}",
            "date": "2024-02-23",
            "odds": 8,
            "stake": 2,
            "is_each_way": False,
            "place_fraction": None,
            "outcome": Outcome.PENDING,
        }
        values.update(overrides)
        return BetRecord(**values)

    return _make


@pytest.fixture
def three_bet_ledger(make_bet) -> list[BetRecord]:
    """Each-way win, each-way place, each-way loss: P/L 19.2, 1.2, -4."""
    return [
        make_bet(is_each_way=True, place_fraction=5, outcome=Outcome.WON, horse="Northcliff"),
        make_bet(is_each_way=True, place_fraction=5, outcome=Outcome.PLACED, horse="Bedford Flyer"),
        make_bet(is_each_way=True, place_fraction=5, outcome=Outcome.LOST, horse="Cobh Harour"),
    ]

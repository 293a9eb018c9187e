"""Demo ledger used to populate an empty store."""

from bet_ledger.models import BetRecord, Outcome


def sample_bets() -> list[BetRecord]:
    """A short run of settled each-way and win-only bets."""
    return [
        BetRecord(
            id="bet-1", bookie="365", date="2024-02-23", odds=8, stake=2.00,
            outcome=Outcome.WON, horse="Northcliff",
            trainer="Mike Murphy & Michael Keady", jockey="Harry Davies",
            is_each_way=True, place_fraction=5,
        ),
        BetRecord(
            id="bet-2", bookie="365", date="2024-02-23", odds=26, stake=2.00,
            outcome=Outcome.PLACED, horse="One Last Hug",
            trainer="Jim Goldie", jockey="Jim Goldie",
            is_each_way=True, place_fraction=5,
        ),
        BetRecord(
            id="bet-3", bookie="365", date="2024-02-24", odds=13, stake=2.00,
            outcome=Outcome.LOST, horse="Cobh Harour",
            trainer="Mark Loughnane", jockey="Mark Loughnane",
            is_each_way=False, place_fraction=None,
        ),
        BetRecord(
            id="bet-4", bookie="365", date="2024-02-24", odds=13, stake=2.00,
            outcome=Outcome.PLACED, horse="Solly Attwell",
            trainer="Cian Collins", jockey="SW Flanagan",
            is_each_way=True, place_fraction=4,
        ),
        BetRecord(
            id="bet-5", bookie="365", date="2024-02-26", odds=8, stake=2.00,
            outcome=Outcome.PLACED, horse="Bedford Flyer",
            trainer="Michael Appleby", jockey="Hollie Doyle",
            is_each_way=True, place_fraction=5,
        ),
    ]

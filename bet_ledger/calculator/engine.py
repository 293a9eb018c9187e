"""
Ledger Calculator.

Turns an ordered list of bet records and a starting bank into per-bet
profit/loss, a running total in ledger order, and summary stats.

Pure and total: no I/O, no shared state, and malformed numeric fields
contribute zero instead of raising.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from bet_ledger.models import BetRecord, ComputedBet, LedgerStats, Outcome
from bet_ledger.utils.numbers import finite_or, parse_number, parse_positive


@dataclass(frozen=True)
class LedgerResult:
    """Computed bets in ledger order plus the summary."""

    computed_bets: list[ComputedBet] = field(default_factory=list)
    stats: LedgerStats = field(default_factory=LedgerStats)


def _each_way_profit_loss(
    outcome: Optional[Outcome],
    stake: float,
    odds: float,
    place_fraction: float,
) -> float:
    """Each-way: stake on the win leg and the same stake on the place leg."""
    if place_fraction <= 0:
        return 0.0

    win_profit = stake * odds
    place_profit = stake * (odds / place_fraction)

    if outcome == Outcome.WON:
        return win_profit + place_profit
    if outcome == Outcome.PLACED:
        # Place leg pays, win leg stake is lost
        return place_profit - stake
    if outcome == Outcome.LOST:
        return -stake * 2
    # Void returns both stakes; Pending is unsettled
    return 0.0


def _win_only_profit_loss(outcome: Optional[Outcome], stake: float, odds: float) -> float:
    """Win-only: a single stake, and a place counts as a loss."""
    if outcome == Outcome.WON:
        return stake * odds
    if outcome in (Outcome.PLACED, Outcome.LOST):
        return -stake
    return 0.0


def calculate_profit_loss(bet: BetRecord) -> float:
    """
    Net profit/loss of a single bet.

    A numeric manual override wins outright; otherwise the bet needs a
    positive stake and positive odds before the payout rules apply.

    Args:
        bet: The bet record

    Returns:
        Profit (positive) or loss (negative); 0 for unsettled or incomplete bets
    """
    manual = parse_number(bet.manual_profit_loss)
    if manual.is_numeric:
        return manual.value

    stake = parse_positive(bet.stake).or_zero()
    odds = parse_positive(bet.odds).or_zero()
    if stake <= 0 or odds <= 0:
        return 0.0

    outcome = Outcome.parse(bet.outcome)

    if bet.is_each_way:
        place_fraction = parse_positive(bet.place_fraction).or_zero()
        result = _each_way_profit_loss(outcome, stake, odds, place_fraction)
    else:
        result = _win_only_profit_loss(outcome, stake, odds)

    return finite_or(result, 0.0)


def compute_bets(bets: Sequence[BetRecord]) -> list[ComputedBet]:
    """
    Attach profit/loss and running profit/loss to every bet.

    Order and length are preserved; the running total is accumulated in
    the order given.
    """
    computed = []
    running_total = 0.0

    for bet in bets:
        profit_loss = calculate_profit_loss(bet)
        running_total = finite_or(running_total + profit_loss, running_total)
        computed.append(ComputedBet.from_record(bet, profit_loss, running_total))

    return computed


def summarize(
    bets: Sequence[BetRecord],
    computed: Sequence[ComputedBet],
    starting_bank: Any,
) -> LedgerStats:
    """
    Build the ledger summary.

    Bank figures come from the last computed row; outcome tallies are
    counted over the original records.

    Args:
        bets: Records in ledger order
        computed: Output of compute_bets for the same records
        starting_bank: Bank before the first bet (non-numeric counts as 0)

    Returns:
        LedgerStats
    """
    bank = parse_number(starting_bank).or_zero()
    running_profit_loss = computed[-1].running_profit_loss if computed else 0.0

    outcomes = [Outcome.parse(b.outcome) for b in bets]

    return LedgerStats(
        starting_bank=bank,
        current_bank=finite_or(bank + running_profit_loss, bank),
        running_profit_loss=running_profit_loss,
        wins=sum(1 for o in outcomes if o == Outcome.WON),
        places=sum(1 for o in outcomes if o == Outcome.PLACED),
        losses=sum(1 for o in outcomes if o == Outcome.LOST),
        total_bets=sum(1 for b in bets if b.is_settled),
    )


def calculate_ledger(bets: Sequence[BetRecord], starting_bank: Any) -> LedgerResult:
    """Compute every bet and the summary in one pass over the ledger."""
    computed = compute_bets(bets)
    return LedgerResult(
        computed_bets=computed,
        stats=summarize(bets, computed, starting_bank),
    )

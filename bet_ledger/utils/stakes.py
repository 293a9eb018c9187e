"""
Stake calculation utilities.

Suggests unit stakes as a percentage of the current bank and works out
the total outlay of a bet.
"""

from typing import Optional, Sequence

from config import settings
from bet_ledger.models import BetRecord
from bet_ledger.utils.numbers import parse_positive


def calculate_stake(bank: float, percent: float) -> float:
    """
    Stake as a percentage of the bank.

    Args:
        bank: Current bank
        percent: Percentage to stake (2.0 = 2%)

    Returns:
        Stake rounded to 2 decimal places, never negative
    """
    if bank <= 0 or percent <= 0:
        return 0.0
    return round(bank * (percent / 100), 2)


def suggest_stakes(
    bank: float,
    percents: Optional[Sequence[float]] = None,
) -> dict[float, float]:
    """
    Stake suggestions for each configured percentage.

    Args:
        bank: Current bank
        percents: Percentages to use (default from settings, 2% and 5%)

    Returns:
        Mapping of percentage to suggested stake
    """
    if percents is None:
        percents = settings.ledger.get_stake_percents()
    return {percent: calculate_stake(bank, percent) for percent in percents}


def calculate_outlay(bet: BetRecord) -> float:
    """
    Total money put down on a bet.

    Each-way bets stake the unit twice (win leg and place leg).
    """
    stake = parse_positive(bet.stake).or_zero()
    return stake * 2 if bet.is_each_way else stake

"""
Ledger Report.

Plain-text rendering of the computed ledger and the bank summary.
"""

from typing import Optional, Sequence

from bet_ledger.models import ComputedBet, LedgerStats
from bet_ledger.utils.formatting import (
    format_amount,
    format_money,
    format_odds,
    format_place_terms,
)
from bet_ledger.utils.stakes import suggest_stakes

COLUMNS = (
    ("Date", 10),
    ("Bookie", 8),
    ("Horse", 18),
    ("Jockey", 16),
    ("Odds", 6),
    ("Stake", 7),
    ("E/W", 3),
    ("Terms", 5),
    ("Outcome", 7),
    ("Profit/Loss", 11),
    ("Running P/L", 11),
)


def _cell(text: str, width: int) -> str:
    if len(text) > width:
        text = text[: width - 1] + "…"
    return text.ljust(width)


class LedgerReportGenerator:
    """Formats ledger rows and stats for the terminal or a file."""

    def format_table(self, bets: Sequence[ComputedBet]) -> str:
        """One line per bet under a header row."""
        header = " ".join(_cell(name, width) for name, width in COLUMNS)
        lines = [header, "-" * len(header)]

        for bet in bets:
            outcome = getattr(bet.outcome, "value", bet.outcome)
            values = (
                bet.date,
                bet.bookie,
                bet.horse,
                bet.jockey,
                format_odds(bet.odds),
                format_amount(bet.stake),
                "Y" if bet.is_each_way else "",
                format_place_terms(bet.place_fraction, bet.is_each_way),
                str(outcome),
                format_money(bet.profit_loss),
                format_money(bet.running_profit_loss),
            )
            lines.append(
                " ".join(_cell(value, width) for value, (_, width) in zip(values, COLUMNS))
            )

        if not bets:
            lines.append("No bets")

        return "\n".join(lines)

    def format_summary(
        self,
        stats: LedgerStats,
        stake_percents: Optional[Sequence[float]] = None,
    ) -> str:
        """Bank figures, stake suggestions and outcome totals."""
        lines = [
            "BANK",
            f"  Start:                 {format_money(stats.starting_bank)}",
            f"  Current:               {format_money(stats.current_bank)}",
            f"  Running Profit / Loss: {format_money(stats.running_profit_loss)}"
            f" ({stats.bankroll_change_percent:+.1f}%)",
        ]

        for percent, stake in suggest_stakes(stats.current_bank, stake_percents).items():
            lines.append(f"  Spend per bet {percent:g}%:    {format_money(stake)}")

        lines += [
            "",
            "TOTALS",
            f"  Wins:        {stats.wins}",
            f"  Places:      {stats.places}",
            f"  Losses:      {stats.losses}",
            f"  Total Bets:  {stats.total_bets}",
            f"  Strike Rate: {stats.strike_rate:.1f}%",
        ]
        return "\n".join(lines)

    def format_file(self, bets: Sequence[ComputedBet], stats: LedgerStats) -> str:
        """Table followed by the summary."""
        return f"{self.format_table(bets)}\n\n{self.format_summary(stats)}"


# Global instance
report_generator = LedgerReportGenerator()

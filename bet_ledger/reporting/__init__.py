"""Reporting module."""

from bet_ledger.reporting.ledger_report import (
    LedgerReportGenerator,
    report_generator,
)

__all__ = [
    "LedgerReportGenerator",
    "report_generator",
]

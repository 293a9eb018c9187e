"""Ledger editing, notifications and views."""

from bet_ledger.editor.notifications import Notification, NotificationType
from bet_ledger.editor.session import BetNotFoundError, LedgerSession, normalize_field
from bet_ledger.editor.views import (
    SORTABLE_FIELDS,
    Page,
    build_view,
    paginate,
    search_bets,
    sort_bets,
)

__all__ = [
    # Session
    "BetNotFoundError",
    "LedgerSession",
    "normalize_field",
    # Notifications
    "Notification",
    "NotificationType",
    # Views
    "SORTABLE_FIELDS",
    "Page",
    "build_view",
    "paginate",
    "search_bets",
    "sort_bets",
]

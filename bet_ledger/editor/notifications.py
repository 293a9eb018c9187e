"""
User-facing notifications for load and save results.
"""

import itertools
from dataclasses import dataclass, field
from enum import Enum

LOAD_FAILED = "Failed to load data."
SAVE_SUCCEEDED = "Ledger saved successfully!"
SAVE_FAILED = "Failed to save data. Please try again."

_ids = itertools.count(1)


class NotificationType(str, Enum):
    """Notification severity."""

    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """A message to show the user once."""

    message: str
    type: NotificationType
    id: int = field(default_factory=lambda: next(_ids))

    @property
    def ok(self) -> bool:
        return self.type == NotificationType.SUCCESS

    @classmethod
    def success(cls, message: str) -> "Notification":
        return cls(message=message, type=NotificationType.SUCCESS)

    @classmethod
    def error(cls, message: str) -> "Notification":
        return cls(message=message, type=NotificationType.ERROR)

"""In-memory activity log shown under the product table."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from config import ACTIVITY_LOG_LIMIT, ACTIVITY_USER


class ActivityAction(str, Enum):
    ADDED = "Added"
    EDITED = "Edited"
    DELETED = "Deleted"
    MARKED_OUT_OF_STOCK = "Marked Out of Stock"
    IMPORTED = "Imported"


@dataclass(frozen=True)
class ActivityEntry:
    action: ActivityAction
    product: str
    time: datetime = field(default_factory=datetime.now)
    user: str = ACTIVITY_USER

    @property
    def time_label(self) -> str:
        return self.time.strftime("%Y-%m-%d %H:%M:%S")


class ActivityLog:
    """Bounded, newest-first record of user actions.

    Not persisted: the log lives as long as the page session.
    """

    def __init__(self, limit: int = ACTIVITY_LOG_LIMIT, user: str = ACTIVITY_USER):
        self.limit = limit
        self.user = user
        self._entries: deque[ActivityEntry] = deque(maxlen=limit)

    def record(self, action: ActivityAction, product) -> ActivityEntry:
        """Prepend an entry for *product* (a name, or a raw id when unknown)."""
        entry = ActivityEntry(action=action, product=str(product), user=self.user)
        self._entries.appendleft(entry)
        return entry

    @property
    def entries(self) -> list[ActivityEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

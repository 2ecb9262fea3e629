"""Per-employee audit trail.

The log is append-only: entries are frozen and the log exposes no way to
remove or edit them. ``details`` is a rendered snapshot taken when the
event happened, so it stays meaningful after the contract it describes
has been cancelled.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Iterator, Tuple


class LogAction(str, Enum):
    CREATED = "Employee Added"
    CONTRACT_CREATED = "Contract Created"
    WORK_LOGGED = "Work Logged"
    CONTRACT_CANCELLED = "Contract Cancelled"


@dataclass(frozen=True)
class LogEntry:
    timestamp: datetime
    action: LogAction
    details: str


class AuditLog:
    """Ordered, append-only sequence of :class:`LogEntry`."""

    def __init__(self):
        self._entries: list[LogEntry] = []

    def append(self, timestamp: datetime, action: LogAction, details: str) -> LogEntry:
        entry = LogEntry(timestamp=timestamp, action=LogAction(action), details=details)
        self._entries.append(entry)
        return entry

    def entries(self) -> Tuple[LogEntry, ...]:
        return tuple(self._entries)

    def filter(self, action: LogAction) -> Tuple[LogEntry, ...]:
        return tuple(e for e in self._entries if e.action is action)

    def __len__(self):
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(tuple(self._entries))

"""Human-readable log of processing status transitions."""

import threading
from collections import deque
from dataclasses import dataclass
from pathlib import Path

from inbox_renamer.logging.logger import Log
from inbox_renamer.processor.models import (
    Completed,
    Failed,
    MovedToReview,
    Processing,
    ProcessingStatus,
    Queued,
    Renamed,
)

MAX_ENTRIES = 50


@dataclass(frozen=True)
class LogEntry:
    title: str
    details: str


def describe_status(status: ProcessingStatus) -> LogEntry:
    if isinstance(status, Queued):
        return LogEntry("Queued", status.path.name)
    if isinstance(status, Processing):
        return LogEntry("Processing", status.path.name)

    name = status.path.name
    outcome = status.outcome
    if isinstance(outcome, Renamed):
        return LogEntry("Renamed", f"{name} -> {outcome.new_path.name}")
    if isinstance(outcome, MovedToReview):
        return LogEntry("Review", f"{name} -> {outcome.review_path.name}")
    reason = str(outcome.error) or type(outcome.error).__name__
    return LogEntry("Failed", f"{name}: {reason}")


class ProcessingLog:
    """Status sink keeping the most recent entries, newest first."""

    def __init__(self, max_entries: int = MAX_ENTRIES) -> None:
        self._entries: deque[LogEntry] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def __call__(self, status: ProcessingStatus) -> None:
        entry = describe_status(status)
        self._append(entry)
        if isinstance(status, Completed) and isinstance(status.outcome, Failed):
            Log.warning(f"{entry.title}: {entry.details}")
        else:
            Log.info(f"{entry.title}: {entry.details}")

    def watching(self, folder: Path) -> None:
        entry = LogEntry("Watching", str(folder))
        self._append(entry)
        Log.info(f"{entry.title}: {entry.details}")

    @property
    def entries(self) -> list[LogEntry]:
        with self._lock:
            return list(self._entries)

    def _append(self, entry: LogEntry) -> None:
        with self._lock:
            self._entries.appendleft(entry)

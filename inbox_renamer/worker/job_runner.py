from collections.abc import Callable
from pathlib import Path

from inbox_renamer.logging.logger import Log
from inbox_renamer.processor.models import (
    Completed,
    Failed,
    Processing,
    ProcessingOutcome,
    ProcessingStatus,
)
from inbox_renamer.processor.processor import Processor

StatusSink = Callable[[ProcessingStatus], None]


class JobRunner:
    """Run one document, catch exceptions, and report status transitions."""

    def __init__(self, processor: Processor, status_sink: StatusSink) -> None:
        self._processor = processor
        self._status_sink = status_sink

    def run(self, path: Path) -> ProcessingOutcome:
        """Process ``path``; failures become a ``Failed`` outcome, never an exception."""
        self._status_sink(Processing(path))
        outcome: ProcessingOutcome
        try:
            outcome = self._processor.process(path)
        except Exception as exc:
            outcome = self._handle_failure(path, exc)
        self._status_sink(Completed(path, outcome))
        return outcome

    def _handle_failure(self, path: Path, exc: Exception) -> Failed:
        """No retry: the file stays put until another change event triggers it."""
        Log.error(f"Processing {path.name} failed: {exc}")
        return Failed(error=exc)

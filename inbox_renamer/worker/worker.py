import queue
import time
from pathlib import Path

from inbox_renamer.logging.logger import Log
from inbox_renamer.processor.models import Queued
from inbox_renamer.watcher.events import ChangeEvent, EventFlag
from inbox_renamer.watcher.folder_watcher import EventChannel
from inbox_renamer.watcher.trigger_filter import TriggerFilter
from inbox_renamer.worker.dedup_queue import DedupWorkQueue
from inbox_renamer.worker.job_runner import JobRunner, StatusSink


class Worker:
    """Channel loop: collect a batch -> filter -> dispatch.

    Events arriving within ``latency_seconds`` of the first one form a batch;
    events for the same path within a batch are coalesced into one. A ``None``
    on the channel stops the loop after the current batch.
    """

    def __init__(
        self,
        channel: EventChannel,
        trigger_filter: TriggerFilter,
        work_queue: DedupWorkQueue,
        job_runner: JobRunner,
        status_sink: StatusSink,
        latency_seconds: float = 0.5,
    ) -> None:
        self._channel = channel
        self._trigger_filter = trigger_filter
        self._work_queue = work_queue
        self._job_runner = job_runner
        self._status_sink = status_sink
        self._latency_seconds = latency_seconds
        self._stopping = False

    def run(self, max_batches: int | None = None) -> None:
        """Main loop. Runs until a stop sentinel arrives or it is interrupted.

        If max_batches is set, stop after dispatching that many batches (for testing).
        """
        Log.info("Worker started, waiting for change events")
        batches_done = 0
        try:
            while not self._stopping:
                if max_batches is not None and batches_done >= max_batches:
                    break
                for event in self._next_batch():
                    self.dispatch(event)
                batches_done += 1
        except KeyboardInterrupt:
            Log.info("Worker shutting down gracefully")
        Log.info("Worker stopped")

    def dispatch(self, event: ChangeEvent) -> bool:
        """Hand an accepted event's path to the dedup queue."""
        if not self._trigger_filter.accepts(event):
            Log.debug(f"Ignoring {event.flags} for {event.path}")
            return False
        path = event.path
        return self._work_queue.enqueue(
            path,
            lambda: self._job_runner.run(path),
            on_accept=lambda: self._status_sink(Queued(path)),
        )

    def _next_batch(self) -> list[ChangeEvent]:
        first = self._channel.get()
        if first is None:
            self._stopping = True
            return []

        merged: dict[Path, EventFlag] = {first.path: first.flags}
        deadline = time.monotonic() + self._latency_seconds
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                break
            try:
                event = self._channel.get(timeout=remaining)
            except queue.Empty:
                break
            if event is None:
                self._stopping = True
                break
            merged[event.path] = merged.get(event.path, EventFlag.NONE) | event.flags
        return [ChangeEvent(path=path, flags=flags) for path, flags in merged.items()]

import queue
import threading
from pathlib import Path

from inbox_renamer.config.settings import Settings
from inbox_renamer.logging.logger import Log
from inbox_renamer.processor.processor import Processor, build_processor
from inbox_renamer.watcher.folder_watcher import EventChannel, FolderWatcher
from inbox_renamer.watcher.trigger_filter import TriggerFilter
from inbox_renamer.worker.dedup_queue import DedupWorkQueue
from inbox_renamer.worker.job_runner import JobRunner, StatusSink
from inbox_renamer.worker.worker import Worker


class ProcessingCoordinator:
    """Wires folder watcher -> channel -> worker -> dedup queue -> processor.

    The watcher thread only publishes events; one worker thread filters them
    and dispatches accepted paths to the pool.
    """

    def __init__(
        self,
        root: Path,
        processor: Processor,
        status_sink: StatusSink,
        *,
        extension: str = "pdf",
        max_workers: int = 4,
        channel_size: int = 256,
        latency_seconds: float = 0.5,
    ) -> None:
        self._root = root.resolve()
        self._channel: EventChannel = queue.Queue(maxsize=channel_size)
        self._work_queue = DedupWorkQueue(max_workers=max_workers)
        self._watcher = FolderWatcher(self._root, self._channel)
        self._worker = Worker(
            channel=self._channel,
            trigger_filter=TriggerFilter(self._root, extension),
            work_queue=self._work_queue,
            job_runner=JobRunner(processor, status_sink),
            status_sink=status_sink,
            latency_seconds=latency_seconds,
        )
        self._thread: threading.Thread | None = None

    @property
    def root(self) -> Path:
        return self._root

    @property
    def channel(self) -> EventChannel:
        return self._channel

    def start(self) -> None:
        if self._thread is not None:
            return
        self._thread = threading.Thread(
            target=self._worker.run, name="change-events", daemon=True
        )
        self._thread.start()
        self._watcher.start()
        Log.info(f"Coordinator started for {self._root}")

    def stop(self) -> None:
        """Stop watching, drain the worker loop, then wait for in-flight documents."""
        self._watcher.stop()
        if self._thread is not None:
            self._channel.put(None)
            self._thread.join()
            self._thread = None
        self._work_queue.shutdown(wait=True)
        Log.info("Coordinator stopped")


def build_coordinator(settings: Settings, status_sink: StatusSink) -> ProcessingCoordinator:
    """Build a coordinator for ``settings.watch_folder``."""
    if settings.watch_folder is None:
        raise ValueError("WATCH_FOLDER is not configured")
    root = settings.watch_folder.expanduser().resolve()
    return ProcessingCoordinator(
        root=root,
        processor=build_processor(settings, root),
        status_sink=status_sink,
        extension=settings.document_extension,
        max_workers=settings.max_workers,
        channel_size=settings.event_channel_size,
        latency_seconds=settings.event_latency_seconds,
    )

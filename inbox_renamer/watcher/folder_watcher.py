"""Bridges watchdog callbacks into the change-event channel."""

import os
import queue
from collections.abc import Callable
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver

from inbox_renamer.logging.logger import Log
from inbox_renamer.watcher.events import ChangeEvent, EventFlag

EventChannel = queue.Queue[ChangeEvent | None]


class ChannelEventHandler(FileSystemEventHandler):
    """Translates watchdog events into ``ChangeEvent`` values on a bounded channel.

    ``put`` blocks the observer thread while the channel is full.
    """

    def __init__(self, channel: EventChannel) -> None:
        super().__init__()
        self._channel = channel

    def on_created(self, event: FileSystemEvent) -> None:
        self._publish(event.src_path, EventFlag.CREATED, event.is_directory)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._publish(event.src_path, EventFlag.MODIFIED, event.is_directory)

    def on_closed(self, event: FileSystemEvent) -> None:
        # inotify reports the end of a write as a close, not a modification.
        self._publish(event.src_path, EventFlag.MODIFIED, event.is_directory)

    def on_moved(self, event: FileSystemEvent) -> None:
        self._publish(event.dest_path, EventFlag.RENAMED, event.is_directory)

    def _publish(self, raw_path: str | bytes, flag: EventFlag, is_directory: bool) -> None:
        flags = flag if is_directory else flag | EventFlag.ITEM_IS_FILE
        self._channel.put(ChangeEvent(path=Path(os.fsdecode(raw_path)), flags=flags))


class FolderWatcher:
    """Watches a single folder, non-recursively, and feeds the channel."""

    def __init__(
        self,
        folder: Path,
        channel: EventChannel,
        observer_factory: Callable[[], BaseObserver] = Observer,
    ) -> None:
        self._folder = folder
        self._handler = ChannelEventHandler(channel)
        self._observer_factory = observer_factory
        self._observer: BaseObserver | None = None

    def start(self) -> None:
        observer = self._observer_factory()
        observer.schedule(self._handler, str(self._folder), recursive=False)
        observer.start()
        self._observer = observer
        Log.info(f"Watching {self._folder}")

    def stop(self) -> None:
        if self._observer is None:
            return
        self._observer.stop()
        self._observer.join()
        self._observer = None
        Log.info(f"Stopped watching {self._folder}")

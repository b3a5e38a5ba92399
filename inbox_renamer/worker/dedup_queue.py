import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from inbox_renamer.logging.logger import Log


class DedupWorkQueue:
    """Runs at most one task per path at a time on a shared thread pool.

    A path is pending from the moment ``enqueue`` accepts it until its task
    returns or raises. Enqueuing a pending path is a no-op.
    """

    def __init__(self, max_workers: int = 4) -> None:
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="document"
        )
        self._lock = threading.Lock()
        self._pending: set[Path] = set()

    def enqueue(
        self,
        path: Path,
        task: Callable[[], object],
        on_accept: Callable[[], None] | None = None,
    ) -> bool:
        """Schedule ``task`` for ``path`` unless one is already in flight.

        ``on_accept`` runs synchronously before the task is submitted.
        Returns True if the task was scheduled.
        """
        with self._lock:
            if path in self._pending:
                Log.debug(f"{path.name} is already being processed, skipping")
                return False
            self._pending.add(path)
        try:
            if on_accept is not None:
                on_accept()
            self._executor.submit(self._run, path, task)
        except BaseException:
            self._release(path)
            raise
        return True

    def is_pending(self, path: Path) -> bool:
        with self._lock:
            return path in self._pending

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def _run(self, path: Path, task: Callable[[], object]) -> None:
        try:
            task()
        except Exception as exc:
            Log.exception(f"Unhandled error while processing {path.name}: {exc}")
        finally:
            self._release(path)

    def _release(self, path: Path) -> None:
        with self._lock:
            self._pending.discard(path)

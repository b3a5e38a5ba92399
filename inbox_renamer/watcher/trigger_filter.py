import re
from pathlib import Path

from inbox_renamer.watcher.events import ACTIVITY_FLAGS, ChangeEvent, EventFlag

_NORMALIZED_NAME = re.compile(r"^\d{4}-\d{2}-\d{2}_", re.ASCII)


class TriggerFilter:
    """Decides whether a change event denotes a newly arrived document."""

    def __init__(self, root: Path, extension: str = "pdf") -> None:
        self._root = root.resolve()
        self._suffix = f".{extension.lower()}"

    def accepts(self, event: ChangeEvent) -> bool:
        path = event.path
        if EventFlag.ITEM_IS_FILE not in event.flags:
            return False
        if not event.flags & ACTIVITY_FLAGS:
            return False
        if path.suffix.lower() != self._suffix:
            return False
        # Only direct children of the root; the review folder is nested.
        if path.parent.resolve() != self._root:
            return False
        if path.name.startswith("."):
            return False
        # Already renamed by us.
        if _NORMALIZED_NAME.match(path.name):
            return False
        return True

import enum
from dataclasses import dataclass
from pathlib import Path


class EventFlag(enum.Flag):
    NONE = 0
    ITEM_IS_FILE = enum.auto()
    CREATED = enum.auto()
    RENAMED = enum.auto()
    MODIFIED = enum.auto()


ACTIVITY_FLAGS = EventFlag.CREATED | EventFlag.RENAMED | EventFlag.MODIFIED


@dataclass(frozen=True)
class ChangeEvent:
    """A single filesystem change reported for the watched folder."""

    path: Path
    flags: EventFlag

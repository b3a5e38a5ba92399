from datetime import date, datetime
from pathlib import Path


def creation_date(path: Path) -> date | None:
    """Local calendar date the file was created, if the platform records it.

    Relies on ``st_birthtime`` (macOS, BSD, Windows); returns None where the
    filesystem does not expose a birth time or the file cannot be stat'ed.
    """
    try:
        stat = path.stat()
    except OSError:
        return None
    birthtime = getattr(stat, "st_birthtime", None)
    if birthtime is None:
        return None
    return datetime.fromtimestamp(birthtime).date()

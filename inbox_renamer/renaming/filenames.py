import os
import re
import string
from pathlib import Path

_ALLOWED = frozenset(string.ascii_letters + string.digits + "-_ ")
_UNDERSCORE_RUNS = re.compile(r"_+")


def normalize_filename_component(value: str) -> str:
    """Reduce any string to ``[A-Za-z0-9_-]`` with single, inner underscores.

    Total and idempotent: ``normalize(normalize(s)) == normalize(s)``.
    """
    mapped = "".join(char if char in _ALLOWED else "_" for char in value)
    collapsed = _UNDERSCORE_RUNS.sub("_", mapped.replace(" ", "_"))
    return collapsed.strip("_")


def unique_path(base_name: str, extension: str, folder: Path) -> Path:
    """First of ``base.ext``, ``base_1.ext``, ``base_2.ext``, ... not yet taken in folder.

    Dangling symlinks count as taken.
    """
    candidate = folder / f"{base_name}.{extension}"
    index = 1
    while os.path.lexists(candidate):
        candidate = folder / f"{base_name}_{index}.{extension}"
        index += 1
    return candidate

import shutil
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture()
def requires_tesseract() -> None:
    if shutil.which("tesseract") is None:
        pytest.skip("tesseract binary not available")


@pytest.fixture()
def drop_into(inbox: Path) -> Callable[..., Path]:
    """Move a PDF into the watched folder the way a scanner would."""

    def _drop(source: Path, name: str | None = None) -> Path:
        target = inbox / (name or source.name)
        source.rename(target)
        return target

    return _drop

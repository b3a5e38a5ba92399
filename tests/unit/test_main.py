from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from inbox_renamer import main as main_module


@pytest.fixture(autouse=True)
def _quiet_logging() -> Iterator[None]:
    with patch.object(main_module.Log, "configure"):
        yield


class TestMain:
    def test_fails_without_watch_folder(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("WATCH_FOLDER", raising=False)
        monkeypatch.chdir(Path(__file__).parent)

        assert main_module.main() == 1

    def test_fails_for_missing_directory(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("WATCH_FOLDER", str(tmp_path / "missing"))

        assert main_module.main() == 1

    def test_runs_until_interrupted(
        self, monkeypatch: pytest.MonkeyPatch, inbox: Path
    ) -> None:
        monkeypatch.setenv("WATCH_FOLDER", str(inbox))
        coordinator = MagicMock()
        coordinator.root = inbox

        with (
            patch.object(main_module, "build_coordinator", return_value=coordinator),
            patch.object(main_module.time, "sleep", side_effect=KeyboardInterrupt),
        ):
            assert main_module.main() == 0

        coordinator.start.assert_called_once()
        coordinator.stop.assert_called_once()

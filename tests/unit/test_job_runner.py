from pathlib import Path
from unittest.mock import MagicMock

from inbox_renamer.acquisition.exceptions import AcquisitionError
from inbox_renamer.processor.models import (
    Completed,
    Failed,
    Processing,
    ProcessingStatus,
    Renamed,
)
from inbox_renamer.processor.processor import Processor
from inbox_renamer.worker.job_runner import JobRunner

DOCUMENT = Path("/inbox/scan.pdf")


def _make_runner() -> tuple[JobRunner, MagicMock, list[ProcessingStatus]]:
    """Create a JobRunner with a mocked processor and a recording sink."""
    mock_processor = MagicMock(spec=Processor)
    statuses: list[ProcessingStatus] = []
    runner = JobRunner(mock_processor, statuses.append)
    return runner, mock_processor, statuses


class TestSuccessfulProcessing:
    def test_calls_processor(self) -> None:
        runner, mock_processor, _statuses = _make_runner()

        runner.run(DOCUMENT)

        mock_processor.process.assert_called_once_with(DOCUMENT)

    def test_returns_outcome(self) -> None:
        runner, mock_processor, _statuses = _make_runner()
        outcome = Renamed(new_path=Path("/inbox/2024-01-01_X.pdf"))
        mock_processor.process.return_value = outcome

        assert runner.run(DOCUMENT) == outcome

    def test_reports_processing_then_completed(self) -> None:
        runner, mock_processor, statuses = _make_runner()
        outcome = Renamed(new_path=Path("/inbox/2024-01-01_X.pdf"))
        mock_processor.process.return_value = outcome

        runner.run(DOCUMENT)

        assert statuses == [Processing(DOCUMENT), Completed(DOCUMENT, outcome)]


class TestFailure:
    def test_exception_becomes_failed_outcome(self) -> None:
        runner, mock_processor, _statuses = _make_runner()
        error = AcquisitionError("Unable to open PDF: scan.pdf")
        mock_processor.process.side_effect = error

        outcome = runner.run(DOCUMENT)

        assert outcome == Failed(error=error)

    def test_failure_is_reported_as_completed(self) -> None:
        runner, mock_processor, statuses = _make_runner()
        mock_processor.process.side_effect = RuntimeError("boom")

        runner.run(DOCUMENT)

        assert statuses[0] == Processing(DOCUMENT)
        assert isinstance(statuses[1], Completed)
        assert isinstance(statuses[1].outcome, Failed)
        assert str(statuses[1].outcome.error) == "boom"

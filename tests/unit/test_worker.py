import queue
from pathlib import Path
from unittest.mock import MagicMock, patch

from inbox_renamer.processor.models import Queued
from inbox_renamer.watcher.events import ChangeEvent, EventFlag
from inbox_renamer.watcher.folder_watcher import EventChannel
from inbox_renamer.watcher.trigger_filter import TriggerFilter
from inbox_renamer.worker.dedup_queue import DedupWorkQueue
from inbox_renamer.worker.job_runner import JobRunner
from inbox_renamer.worker.worker import Worker

ROOT = Path("/inbox")
FILE_CREATED = EventFlag.ITEM_IS_FILE | EventFlag.CREATED


def _make_worker(
    accepts: bool = True,
) -> tuple[Worker, EventChannel, MagicMock, MagicMock, MagicMock]:
    """Create a Worker with a real channel and mocked collaborators."""
    channel: EventChannel = queue.Queue()
    mock_filter = MagicMock(spec=TriggerFilter)
    mock_filter.accepts.return_value = accepts
    mock_queue = MagicMock(spec=DedupWorkQueue)
    mock_queue.enqueue.return_value = True
    mock_runner = MagicMock(spec=JobRunner)
    mock_sink = MagicMock()
    worker = Worker(
        channel=channel,
        trigger_filter=mock_filter,
        work_queue=mock_queue,
        job_runner=mock_runner,
        status_sink=mock_sink,
        latency_seconds=0.05,
    )
    return worker, channel, mock_queue, mock_runner, mock_sink


def _event(name: str, flags: EventFlag = FILE_CREATED) -> ChangeEvent:
    return ChangeEvent(path=ROOT / name, flags=flags)


class TestWorkerDispatch:
    def test_dispatches_accepted_event(self) -> None:
        worker, channel, mock_queue, _runner, _sink = _make_worker()
        channel.put(_event("scan.pdf"))
        channel.put(None)

        worker.run()

        mock_queue.enqueue.assert_called_once()
        assert mock_queue.enqueue.call_args.args[0] == ROOT / "scan.pdf"

    def test_dispatches_multiple_paths(self) -> None:
        worker, channel, mock_queue, _runner, _sink = _make_worker()
        channel.put(_event("a.pdf"))
        channel.put(_event("b.pdf"))
        channel.put(None)

        worker.run()

        paths = [c.args[0] for c in mock_queue.enqueue.call_args_list]
        assert paths == [ROOT / "a.pdf", ROOT / "b.pdf"]

    def test_rejected_event_is_not_enqueued(self) -> None:
        worker, channel, mock_queue, _runner, _sink = _make_worker(accepts=False)
        channel.put(_event("scan.pdf"))
        channel.put(None)

        worker.run()

        mock_queue.enqueue.assert_not_called()

    def test_task_runs_job_for_path(self) -> None:
        worker, _channel, mock_queue, mock_runner, _sink = _make_worker()

        worker.dispatch(_event("scan.pdf"))

        task = mock_queue.enqueue.call_args.args[1]
        task()
        mock_runner.run.assert_called_once_with(ROOT / "scan.pdf")

    def test_accept_callback_reports_queued(self) -> None:
        worker, _channel, mock_queue, _runner, mock_sink = _make_worker()

        worker.dispatch(_event("scan.pdf"))

        on_accept = mock_queue.enqueue.call_args.kwargs["on_accept"]
        mock_sink.assert_not_called()
        on_accept()
        mock_sink.assert_called_once_with(Queued(ROOT / "scan.pdf"))


class TestWorkerBatching:
    def test_coalesces_events_for_same_path(self) -> None:
        worker, channel, mock_queue, _runner, _sink = _make_worker()
        channel.put(_event("scan.pdf", FILE_CREATED))
        channel.put(_event("scan.pdf", EventFlag.ITEM_IS_FILE | EventFlag.MODIFIED))
        channel.put(None)

        with patch.object(worker, "dispatch", wraps=worker.dispatch) as spy:
            worker.run()

        spy.assert_called_once_with(
            ChangeEvent(
                path=ROOT / "scan.pdf",
                flags=EventFlag.ITEM_IS_FILE | EventFlag.CREATED | EventFlag.MODIFIED,
            )
        )
        assert mock_queue.enqueue.call_count == 1

    def test_events_after_latency_window_form_new_batch(self) -> None:
        worker, channel, mock_queue, _runner, _sink = _make_worker()
        channel.put(_event("scan.pdf"))

        worker.run(max_batches=1)
        channel.put(_event("scan.pdf"))
        worker.run(max_batches=1)

        assert mock_queue.enqueue.call_count == 2


class TestWorkerShutdown:
    def test_stops_on_sentinel(self) -> None:
        worker, channel, mock_queue, _runner, _sink = _make_worker()
        channel.put(None)

        worker.run()  # Should return

        mock_queue.enqueue.assert_not_called()

    def test_handles_keyboard_interrupt(self) -> None:
        worker, _channel, _queue, _runner, _sink = _make_worker()

        with patch.object(worker, "_next_batch", side_effect=KeyboardInterrupt):
            worker.run()  # Should not raise

"""Tests for TaskQueue coordination."""

import threading
from concurrent.futures import Future

from pfind.search.models import DirEntry
from pfind.search.queue import TaskQueue


def _dir(path: str) -> DirEntry:
    return DirEntry(path=path, is_directory=True, is_symlink=False, is_regular_file=False)


def _finished_future() -> Future[object]:
    future: Future[object] = Future()
    future.set_result(None)
    return future


class TestPushPop:
    """Tests for basic queue ordering."""

    def test_fifo_order(self) -> None:
        """Entries come out in the order they were pushed."""
        queue = TaskQueue()
        queue.push(_dir("a"))
        queue.push(_dir("b"))

        assert len(queue) == 2
        assert queue.pop_or_wait() == _dir("a")
        assert queue.pop_or_wait() == _dir("b")
        assert len(queue) == 0

    def test_drained_when_empty_and_idle(self) -> None:
        """An empty queue with nothing outstanding signals termination."""
        queue = TaskQueue()

        assert queue.pop_or_wait() is None


class TestOutstandingScans:
    """Tests for waiting on in-flight scans."""

    def test_completion_reaps_outstanding(self) -> None:
        """Completed scans are removed from the outstanding set."""
        queue = TaskQueue()
        future = _finished_future()
        queue.track(future)
        assert queue.outstanding == 1

        queue.complete(future)

        assert queue.pop_or_wait() is None
        assert queue.outstanding == 0

    def test_waits_for_work_from_running_scan(self) -> None:
        """The dispatcher blocks until a running scan pushes or finishes."""
        queue = TaskQueue()
        future: Future[object] = Future()
        queue.track(future)

        def finish_scan() -> None:
            queue.push(_dir("child"))
            future.set_result(None)
            queue.complete(future)

        timer = threading.Timer(0.05, finish_scan)
        timer.start()
        try:
            assert queue.pop_or_wait() == _dir("child")
            assert queue.pop_or_wait() is None
        finally:
            timer.join()

    def test_keeps_waiting_while_other_scans_run(self) -> None:
        """One finished scan does not end the run while another is in flight."""
        queue = TaskQueue()
        first: Future[object] = Future()
        second: Future[object] = Future()
        queue.track(first)
        queue.track(second)
        queue.complete(first)
        released = threading.Event()

        def finish_second() -> None:
            released.set()
            queue.complete(second)

        timer = threading.Timer(0.05, finish_second)
        timer.start()
        try:
            assert queue.pop_or_wait() is None
            assert released.is_set()
        finally:
            timer.join()


class TestCancel:
    """Tests for cancellation."""

    def test_cancel_drops_pending_and_wakes(self) -> None:
        """cancel() clears pending work and releases the dispatcher."""
        queue = TaskQueue()
        queue.push(_dir("a"))

        queue.cancel()

        assert queue.cancelled
        assert len(queue) == 0
        assert queue.pop_or_wait() is None

    def test_cancel_releases_waiting_dispatcher(self) -> None:
        """A dispatcher blocked on running scans is woken by cancel()."""
        queue = TaskQueue()
        queue.track(Future())

        timer = threading.Timer(0.05, queue.cancel)
        timer.start()
        try:
            assert queue.pop_or_wait() is None
            assert queue.outstanding == 1
        finally:
            timer.join()

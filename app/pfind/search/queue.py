"""Pending-directory queue with outstanding-scan bookkeeping.

The queue is the rendezvous point between the dispatcher and the scan
workers. One lock guards both the pending entries and the set of
in-flight scans, and one condition is notified on every push, every
scan completion and on cancellation. The dispatcher therefore sees a
consistent view when it decides the traversal has drained: nothing
pending and nothing running, checked under the same lock.
"""

import logging
import threading
from collections import deque
from concurrent.futures import Future

from pfind.search.models import DirEntry

logger = logging.getLogger(__name__)


class TaskQueue:
    """FIFO of directories awaiting a scan.

    Growth is unbounded: the queue holds every discovered directory that
    has not been dispatched yet, which for very wide trees can be large.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._changed = threading.Condition(self._lock)
        self._pending: deque[DirEntry] = deque()
        self._outstanding: set[Future[object]] = set()
        self._completed: list[Future[object]] = []
        self._cancelled = threading.Event()

    @property
    def cancelled(self) -> bool:
        """True once ``cancel`` has been called."""
        return self._cancelled.is_set()

    @property
    def outstanding(self) -> int:
        """Number of scans dispatched but not yet reaped."""
        with self._lock:
            return len(self._outstanding)

    def __len__(self) -> int:
        with self._lock:
            return len(self._pending)

    def push(self, entry: DirEntry) -> None:
        """Queue a directory and wake the dispatcher."""
        with self._changed:
            self._pending.append(entry)
            self._changed.notify()

    def track(self, future: Future[object]) -> None:
        """Register a dispatched scan as outstanding.

        Must be called before the scan can report completion through
        ``complete``.
        """
        with self._lock:
            self._outstanding.add(future)

    def complete(self, future: Future[object]) -> None:
        """Report a finished scan and wake the dispatcher.

        Intended as a ``Future.add_done_callback`` target. Everything the
        scan pushed is already queued by the time this runs.
        """
        with self._changed:
            self._completed.append(future)
            self._changed.notify()

    def cancel(self) -> None:
        """Stop the traversal: wake the dispatcher and refuse new work."""
        with self._changed:
            self._cancelled.set()
            self._pending.clear()
            self._changed.notify_all()

    def pop_or_wait(self) -> DirEntry | None:
        """Block until there is a directory to dispatch or nothing is left.

        Returns:
            The next directory to scan, or None once the queue is empty
            with no scan outstanding (or the traversal was cancelled).
        """
        with self._changed:
            while True:
                self._changed.wait_for(self._has_news)
                self._reap()

                if self._cancelled.is_set():
                    logger.debug("Queue cancelled with %d scans in flight", len(self._outstanding))
                    return None
                if self._pending:
                    return self._pending.popleft()
                if not self._outstanding:
                    return None

    def _has_news(self) -> bool:
        # Caller holds the lock.
        return (
            bool(self._pending)
            or bool(self._completed)
            or not self._outstanding
            or self._cancelled.is_set()
        )

    def _reap(self) -> None:
        # Caller holds the lock.
        if self._completed:
            self._outstanding.difference_update(self._completed)
            self._completed.clear()

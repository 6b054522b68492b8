"""Concurrent traversal engine.

The Finder validates the root, seeds the task queue with it and runs
the dispatch loop on the calling thread: pop a directory, submit a scan
for it to the worker pool, repeat. Each finished scan reports back to
the queue, so the loop wakes on new directories and on completions
alike, and stops once the queue is empty with no scan in flight.

Only running scans add directories to the queue, and a scan reports
completion after its last push. An empty queue with nothing outstanding
is therefore final.
"""

import functools
import logging
import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor

from pfind.core.errors import ErrorKind, FindError
from pfind.search.models import DirEntry, ScanOutcome, SearchRequest, TraversalResult
from pfind.search.output import EntryPrinter
from pfind.search.queue import TaskQueue
from pfind.search.scanner import DirectoryScanner

logger = logging.getLogger(__name__)


def validate_root(root: str | None) -> str:
    """Check that the search root is an existing directory.

    Args:
        root: Root path from the request.

    Returns:
        The root path, unchanged.

    Raises:
        FindError: PATH_MISSING, PATH_NOT_FOUND or PATH_NOT_DIRECTORY.
    """
    if root is None:
        raise FindError(ErrorKind.PATH_MISSING)
    if not os.path.exists(root):
        raise FindError(ErrorKind.PATH_NOT_FOUND)
    if not os.path.isdir(root):
        raise FindError(ErrorKind.PATH_NOT_DIRECTORY)
    return root


class Finder:
    """Runs one search.

    Args:
        request: Root and filters to search with.
        printer: Output sink. Defaults to printing on stdout.
        max_workers: Concurrent scan limit. None uses the thread pool
            default.
    """

    def __init__(
        self,
        request: SearchRequest,
        *,
        printer: EntryPrinter | None = None,
        max_workers: int | None = None,
    ) -> None:
        self._request = request
        self._printer = printer or EntryPrinter(request.filters)
        self._max_workers = max_workers
        self._queue = TaskQueue()
        self._scanner = DirectoryScanner(self._queue, self._printer)

        self._stats_lock = threading.Lock()
        self._scanned = 0
        self._failed: list[str] = []
        self._errors: list[BaseException] = []

    def cancel(self) -> None:
        """Interrupt a running search. Safe to call from any thread."""
        self._queue.cancel()

    @property
    def cancelled(self) -> bool:
        """Check if the search was interrupted."""
        return self._queue.cancelled

    def run(self) -> TraversalResult:
        """Validate the root and traverse it until no work remains.

        Returns:
            Traversal summary.

        Raises:
            FindError: If the root is missing, absent or not a directory.
                Raised before any output is produced.
            OSError: If the output stream fails. The search is cancelled
                and the first error is re-raised once the workers stop.
        """
        root = validate_root(self._request.root)
        if self._request.filters.is_empty:
            logger.debug("No filters given, printing every entry under %s", root)
        self._queue.push(DirEntry.from_path(root))

        pool = ThreadPoolExecutor(max_workers=self._max_workers, thread_name_prefix="pfind-scan")
        try:
            self._dispatch(pool)
        except BaseException:
            self.cancel()
            raise
        finally:
            pool.shutdown(wait=True, cancel_futures=self._queue.cancelled)
            if not self._errors:
                self._printer.flush()

        if self._errors:
            raise self._errors[0]

        with self._stats_lock:
            result = TraversalResult(
                directories_scanned=self._scanned,
                entries_matched=self._printer.matched,
                failed_directories=tuple(self._failed),
                cancelled=self._queue.cancelled,
            )
        logger.debug(
            "Traversal finished: %d directories, %d matches, %d failures%s",
            result.directories_scanned,
            result.entries_matched,
            len(result.failed_directories),
            " (cancelled)" if result.cancelled else "",
        )
        return result

    def _dispatch(self, pool: ThreadPoolExecutor) -> None:
        while (entry := self._queue.pop_or_wait()) is not None:
            future = pool.submit(self._scanner.scan, entry)
            self._queue.track(future)
            # Runs immediately if the scan already finished.
            future.add_done_callback(functools.partial(self._on_scan_done, entry))

    def _on_scan_done(self, entry: DirEntry, future: Future[ScanOutcome]) -> None:
        if not future.cancelled():
            error = future.exception()
            with self._stats_lock:
                if error is not None:
                    self._errors.append(error)
                elif (outcome := future.result()) is ScanOutcome.LISTED:
                    self._scanned += 1
                elif outcome is ScanOutcome.FAILED:
                    self._failed.append(entry.path)
            if error is not None:
                self._queue.cancel()
        self._queue.complete(future)

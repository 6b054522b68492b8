"""Single-directory scan unit.

A scan lists one directory's immediate children. Subdirectories go
back onto the task queue for another worker; everything else is
offered to the printer right away. Symlinked directories are never
entered.
"""

import logging
import os

from pfind.search.models import DirEntry, ScanOutcome
from pfind.search.output import EntryPrinter
from pfind.search.queue import TaskQueue

logger = logging.getLogger(__name__)


class DirectoryScanner:
    """Scans directories on behalf of the dispatcher.

    One instance is shared by all workers; it keeps no per-scan state.

    Args:
        queue: Queue receiving child directories.
        printer: Printer for matching entries.
    """

    def __init__(self, queue: TaskQueue, printer: EntryPrinter) -> None:
        self._queue = queue
        self._printer = printer

    def scan(self, entry: DirEntry) -> ScanOutcome:
        """Scan one directory.

        The directory itself is offered to the printer before any of its
        children. Permission errors are skipped silently. Any other OS
        error raised while listing aborts this directory only; children
        found before the failure stay queued.

        Args:
            entry: Directory to expand.

        Returns:
            LISTED if every child was enumerated, FAILED if listing
            stopped on an OS error, SKIPPED otherwise.

        Raises:
            OSError: If the printer cannot write. Output failures are not
                listing failures and end the whole search.
        """
        if self._queue.cancelled:
            return ScanOutcome.SKIPPED

        if entry.is_symlink:
            logger.debug("Not following symlink: %s", entry.path)
            return ScanOutcome.SKIPPED

        self._printer.consider(entry)

        try:
            it = os.scandir(entry.path)
        except PermissionError:
            logger.debug("Permission denied, skipping: %s", entry.path)
            return ScanOutcome.SKIPPED
        except OSError as e:
            return self._listing_failed(entry, e)

        with it:
            while True:
                if self._queue.cancelled:
                    return ScanOutcome.SKIPPED
                try:
                    os_entry = next(it)
                except StopIteration:
                    break
                except OSError as e:
                    return self._listing_failed(entry, e)

                try:
                    child = DirEntry.from_os_entry(os_entry)
                except PermissionError:
                    logger.debug("Permission denied, skipping: %s", os_entry.path)
                    continue
                except FileNotFoundError:
                    # Removed between listing and stat.
                    continue

                if child.is_directory:
                    self._queue.push(child)
                else:
                    self._printer.consider(child)

        return ScanOutcome.LISTED

    def _listing_failed(self, entry: DirEntry, error: OSError) -> ScanOutcome:
        logger.warning("Cannot read directory %s: %s", entry.path, error.strerror or error)
        return ScanOutcome.FAILED

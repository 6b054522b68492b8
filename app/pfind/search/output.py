"""Serialized printing of matched entries."""

import sys
import threading
from typing import TextIO

from pfind.search.filters import FilterSpec
from pfind.search.models import DirEntry


class EntryPrinter:
    """Writes the paths of matching entries, one whole line at a time.

    Scan workers call ``consider`` concurrently. The lock is taken once
    per written line, so lines never interleave and filtering runs
    outside the lock.

    Args:
        filters: Filter every entry is tested against.
        stream: Text sink. Defaults to the current ``sys.stdout``,
            resolved on each write.
    """

    def __init__(self, filters: FilterSpec, stream: TextIO | None = None) -> None:
        self._filters = filters
        self._stream = stream
        self._lock = threading.Lock()
        self._matched = 0

    @property
    def matched(self) -> int:
        """Number of lines written so far."""
        with self._lock:
            return self._matched

    def consider(self, entry: DirEntry) -> bool:
        """Print the entry if it passes the filter.

        Args:
            entry: Candidate entry.

        Returns:
            True if the entry matched and was written.
        """
        if not self._filters.matches(entry):
            return False

        line = f"{entry.path}\n"
        with self._lock:
            (self._stream or sys.stdout).write(line)
            self._matched += 1
        return True

    def flush(self) -> None:
        """Flush the underlying stream."""
        with self._lock:
            (self._stream or sys.stdout).flush()

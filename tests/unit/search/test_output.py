"""Tests for EntryPrinter."""

import io
import threading
from unittest.mock import patch

from pfind.search.filters import FilterSpec
from pfind.search.models import DirEntry, EntryType
from pfind.search.output import EntryPrinter


def _file(path: str) -> DirEntry:
    return DirEntry(path=path, is_directory=False, is_symlink=False, is_regular_file=True)


class TestConsider:
    """Tests for EntryPrinter.consider."""

    def test_writes_matching_entry(self) -> None:
        """A matching entry is written as one line."""
        stream = io.StringIO()
        printer = EntryPrinter(FilterSpec(), stream)

        assert printer.consider(_file("root/a.txt")) is True
        assert stream.getvalue() == "root/a.txt\n"
        assert printer.matched == 1

    def test_skips_non_matching_entry(self) -> None:
        """A filtered-out entry produces no output."""
        stream = io.StringIO()
        printer = EntryPrinter(FilterSpec(entry_type=EntryType.DIRECTORY), stream)

        assert printer.consider(_file("root/a.txt")) is False
        assert stream.getvalue() == ""
        assert printer.matched == 0

    def test_defaults_to_current_stdout(self) -> None:
        """Without a stream the printer writes to sys.stdout at call time."""
        printer = EntryPrinter(FilterSpec())
        captured = io.StringIO()

        with patch("sys.stdout", captured):
            printer.consider(_file("x"))
            printer.flush()

        assert captured.getvalue() == "x\n"


class TestConcurrentWriters:
    """Tests for line integrity under concurrent writers."""

    def test_lines_never_interleave(self) -> None:
        """Every line written by concurrent threads arrives intact."""
        stream = io.StringIO()
        printer = EntryPrinter(FilterSpec(), stream)
        expected: set[str] = set()
        threads: list[threading.Thread] = []

        for worker in range(8):
            paths = [f"worker{worker}/{'x' * 200}/{i}" for i in range(200)]
            expected.update(paths)

            def write_all(paths: list[str] = paths) -> None:
                for path in paths:
                    printer.consider(_file(path))

            threads.append(threading.Thread(target=write_all))

        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        lines = stream.getvalue().splitlines()
        assert len(lines) == len(expected)
        assert set(lines) == expected
        assert printer.matched == len(expected)

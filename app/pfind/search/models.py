"""Search domain models.

This module defines the data structures that flow through a search:
directory entries read from the filesystem, the type classification
used by ``-type``, the request handed to the engine, and the summary
returned once a traversal drains.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pfind.search.filters import FilterSpec


class EntryType(str, Enum):
    """Entry classification selectable with ``-type``.

    Attributes:
        DIRECTORY: Directory (code ``d``).
        FILE: Regular file (code ``f``).
    """

    DIRECTORY = "d"
    FILE = "f"

    @classmethod
    def from_code(cls, code: str) -> EntryType | None:
        """Look up an entry type by its single-letter code.

        Args:
            code: Value given to ``-type``.

        Returns:
            Matching EntryType, or None if the code is not recognised.
        """
        try:
            return cls(code)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class DirEntry:
    """A filesystem entry captured at enumeration time.

    ``is_directory`` and ``is_regular_file`` follow symlinks, so a link
    to a directory reports ``is_directory=True`` and ``is_symlink=True``.

    Attributes:
        path: Path as built during traversal (root path joined with names).
        is_directory: Entry is, or points to, a directory.
        is_symlink: Entry itself is a symbolic link.
        is_regular_file: Entry is, or points to, a regular file.
    """

    path: str
    is_directory: bool
    is_symlink: bool
    is_regular_file: bool

    @property
    def name(self) -> str:
        """Final path component, ignoring trailing separators."""
        stripped = self.path.rstrip(os.sep)
        if os.altsep:
            stripped = stripped.rstrip(os.altsep)
        return os.path.basename(stripped) or self.path

    @classmethod
    def from_path(cls, path: str) -> DirEntry:
        """Probe a path directly, e.g. the traversal root."""
        return cls(
            path=path,
            is_directory=os.path.isdir(path),
            is_symlink=os.path.islink(path),
            is_regular_file=os.path.isfile(path),
        )

    @classmethod
    def from_os_entry(cls, entry: os.DirEntry[str]) -> DirEntry:
        """Build from an ``os.scandir`` entry.

        Raises:
            OSError: If the entry cannot be stat'ed.
        """
        return cls(
            path=entry.path,
            is_directory=entry.is_dir(),
            is_symlink=entry.is_symlink(),
            is_regular_file=entry.is_file(),
        )


class ScanOutcome(str, Enum):
    """How a single directory scan ended.

    Attributes:
        LISTED: Every child was enumerated.
        SKIPPED: Nothing was listed (symlink, permission denied or
            cancelled).
        FAILED: Listing stopped part way on an OS error.
    """

    LISTED = "listed"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """Fully resolved input for one search.

    Attributes:
        root: Directory to search, None if the user gave none.
        filters: Entry filters to apply.
    """

    root: str | None
    filters: FilterSpec


@dataclass(frozen=True, slots=True)
class TraversalResult:
    """Summary of a finished traversal.

    Attributes:
        directories_scanned: Number of directories listed completely. Skipped
            symlinks and unreadable directories are not counted.
        entries_matched: Number of lines written to the output.
        failed_directories: Directories whose listing failed part way.
        cancelled: True if the run was interrupted before draining.
    """

    directories_scanned: int
    entries_matched: int
    failed_directories: tuple[str, ...] = ()
    cancelled: bool = False

    @property
    def success(self) -> bool:
        """Check if the traversal drained without being cancelled."""
        return not self.cancelled

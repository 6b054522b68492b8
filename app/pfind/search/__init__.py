"""Directory search engine.

This package provides the entry filters, the serialized printer, the
task queue, the per-directory scanner and the Finder that coordinates
them.
"""

from pfind.search.engine import Finder, validate_root
from pfind.search.filters import FilterSpec
from pfind.search.models import (
    DirEntry,
    EntryType,
    ScanOutcome,
    SearchRequest,
    TraversalResult,
)
from pfind.search.output import EntryPrinter
from pfind.search.patterns import CompiledPattern, compile_glob, glob_to_regex
from pfind.search.queue import TaskQueue
from pfind.search.scanner import DirectoryScanner

__all__ = [
    "CompiledPattern",
    "DirEntry",
    "DirectoryScanner",
    "EntryPrinter",
    "EntryType",
    "FilterSpec",
    "Finder",
    "ScanOutcome",
    "SearchRequest",
    "TaskQueue",
    "TraversalResult",
    "compile_glob",
    "glob_to_regex",
    "validate_root",
]

"""Entry filters.

A FilterSpec combines the optional ``-type``, ``-name`` and ``-iname``
constraints. It holds no mutable state, so scan workers share one
instance without locking.
"""

from dataclasses import dataclass

from pfind.search.models import DirEntry, EntryType
from pfind.search.patterns import CompiledPattern


@dataclass(frozen=True, slots=True)
class FilterSpec:
    """Conjunction of entry constraints.

    Attributes:
        entry_type: Required entry type, or None for any type.
        name: Case-sensitive name pattern, or None.
        iname: Case-insensitive name pattern, or None.
    """

    entry_type: EntryType | None = None
    name: CompiledPattern | None = None
    iname: CompiledPattern | None = None

    def matches(self, entry: DirEntry) -> bool:
        """Check an entry against every constraint that is set.

        Args:
            entry: Entry to test.

        Returns:
            True if all set constraints hold (always True with none set).
        """
        if self.entry_type is EntryType.DIRECTORY and not entry.is_directory:
            return False
        if self.entry_type is EntryType.FILE and not entry.is_regular_file:
            return False

        if self.name is None and self.iname is None:
            return True

        name = entry.name
        if self.name is not None and not self.name.matches(name):
            return False
        return self.iname is None or self.iname.matches(name)

    @property
    def is_empty(self) -> bool:
        """True when no constraint is set."""
        return self.entry_type is None and self.name is None and self.iname is None

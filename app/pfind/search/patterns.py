"""Glob-to-regex translation for name filters.

Only ``*`` is special: it matches any run of characters, including an
empty one. Every other character matches itself, so translation never
fails and any user input yields a usable pattern.
"""

import re
from dataclasses import dataclass, field


def glob_to_regex(glob: str) -> str:
    """Translate a glob into an anchored regular expression.

    Args:
        glob: Pattern where ``*`` is the only wildcard.

    Returns:
        Regular expression source matching the whole name.
    """
    parts = [re.escape(literal) for literal in glob.split("*")]
    return r"\A" + ".*".join(parts) + r"\Z"


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """A compiled name pattern.

    Attributes:
        glob: The pattern as the user typed it.
        ignore_case: Whether matching is case-insensitive.
    """

    glob: str
    ignore_case: bool = False
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        flags = re.DOTALL | (re.IGNORECASE if self.ignore_case else 0)
        object.__setattr__(self, "_regex", re.compile(glob_to_regex(self.glob), flags))

    def matches(self, name: str) -> bool:
        """Check whether the whole name matches the pattern."""
        return self._regex.match(name) is not None


def compile_glob(glob: str, *, ignore_case: bool = False) -> CompiledPattern:
    """Compile a glob for name matching.

    Args:
        glob: Pattern where ``*`` matches any run of characters.
        ignore_case: Match case-insensitively (``-iname``).

    Returns:
        CompiledPattern ready for matching.
    """
    return CompiledPattern(glob=glob, ignore_case=ignore_case)

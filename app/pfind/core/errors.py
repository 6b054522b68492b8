"""Error taxonomy for pfind.

Every failure that can stop a search before it starts maps to one
ErrorKind. The kind's value doubles as the process exit status, and
each kind has a default message that callers may override.
"""

from enum import IntEnum


class ErrorKind(IntEnum):
    """Pre-flight failure kinds.

    Attributes:
        DUPLICATE_MODIFIER: A filter modifier was given more than once.
        UNKNOWN_MODIFIER: An argument is not a recognised modifier.
        GENERIC: Malformed argument sequence or other invalid input.
        PATH_MISSING: No root directory was supplied.
        PATH_NOT_FOUND: The root directory does not exist.
        PATH_NOT_DIRECTORY: The root exists but is not a directory.
    """

    DUPLICATE_MODIFIER = 1
    UNKNOWN_MODIFIER = 2
    GENERIC = 3
    PATH_MISSING = 4
    PATH_NOT_FOUND = 5
    PATH_NOT_DIRECTORY = 6


DEFAULT_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.DUPLICATE_MODIFIER: "Use one modifier at most one time!",
    ErrorKind.UNKNOWN_MODIFIER: "Unknown modifier!",
    ErrorKind.GENERIC: "Generic error",
    ErrorKind.PATH_MISSING: "Please specify a directory to proceed!",
    ErrorKind.PATH_NOT_FOUND: "The path is not accessible or does not exist!",
    ErrorKind.PATH_NOT_DIRECTORY: "The path is not a directory!",
}


class FindError(Exception):
    """Raised when a search cannot start.

    Args:
        kind: Failure classification.
        message: Optional message replacing the kind's default text.
    """

    def __init__(self, kind: ErrorKind, message: str | None = None) -> None:
        self.kind = kind
        self.message = message if message is not None else DEFAULT_MESSAGES[kind]
        super().__init__(self.message)

    @property
    def exit_code(self) -> int:
        """Process exit status for this error."""
        return int(self.kind)

    def __repr__(self) -> str:
        return f"FindError({self.kind.name}, {self.message!r})"

"""Custom exception hierarchy for task-shell.

Every error a user can trigger by typing a bad command inherits from
:class:`CommandError`.  Those never reach the CLI error boundary: the
command processor catches them at the handler boundary and hands the
message to the presenter.  Anything else that crosses a layer boundary
must still inherit from :class:`TaskShellError`.

Hierarchy
---------
TaskShellError
├── CommandError
│   ├── EmptyDescriptionError
│   ├── MalformedArgumentsError
│   ├── DateTimeParseError
│   ├── EmptyKeywordError
│   ├── InvalidIndexError
│   ├── OutOfRangeIndexError
│   └── UnknownCommandError
└── EnvironmentError
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum


class ErrorKind(Enum):
    """Closed set of user-correctable failure kinds."""

    EMPTY_DESCRIPTION = "empty-description"
    MALFORMED_ARGUMENTS = "malformed-arguments"
    DATETIME_PARSE = "datetime-parse"
    EMPTY_KEYWORD = "empty-keyword"
    INVALID_INDEX = "invalid-index"
    OUT_OF_RANGE_INDEX = "out-of-range-index"
    UNKNOWN_COMMAND = "unknown-command"


class TaskShellError(Exception):
    """Base exception for all task-shell errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command errors --------------------------------------------------------

class CommandError(TaskShellError):
    """A command line the user can correct and re-issue.

    Subclasses pin :attr:`kind` so the dispatch layer can report which
    failure happened without inspecting the class.
    """

    kind: ErrorKind


class EmptyDescriptionError(CommandError):
    """Raised when a todo/deadline/event has no description."""

    kind = ErrorKind.EMPTY_DESCRIPTION


class MalformedArgumentsError(CommandError):
    """Raised when a ``/by``, ``/from`` or ``/to`` split goes wrong."""

    kind = ErrorKind.MALFORMED_ARGUMENTS


class DateTimeParseError(CommandError):
    """Raised when a date/time fragment is not a recognised timestamp."""

    kind = ErrorKind.DATETIME_PARSE


class EmptyKeywordError(CommandError):
    """Raised when ``find`` is given no search term."""

    kind = ErrorKind.EMPTY_KEYWORD


class InvalidIndexError(CommandError):
    """Raised when the task number token is missing or not an integer."""

    kind = ErrorKind.INVALID_INDEX


class OutOfRangeIndexError(CommandError):
    """Raised by the task collection for a position it does not hold."""

    kind = ErrorKind.OUT_OF_RANGE_INDEX

    def __init__(self, position: int, size: int) -> None:
        self.position: int = position
        self.size: int = size
        if size == 0:
            hint = "The task list is empty."
        else:
            hint = f"Pick a task number between 1 and {size}."
        super().__init__(f"There is no task number {position + 1}.", hint=hint)


class UnknownCommandError(CommandError):
    """Raised when the first token is not a recognised operation.

    Holds the whole unknown-command notice; the presenter renders it
    from here.
    """

    kind = ErrorKind.UNKNOWN_COMMAND
    MESSAGE = "I'm sorry, but I don't know what that means."

    def __init__(self, keywords: Sequence[str]) -> None:
        self.keywords: tuple[str, ...] = tuple(keywords)
        super().__init__(self.MESSAGE, hint="Commands: " + ", ".join(self.keywords))


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(TaskShellError):
    """Raised when a required runtime dependency is not available."""

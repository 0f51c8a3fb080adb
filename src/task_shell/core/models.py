"""Domain models for task-shell.

Tasks are plain mutable dataclasses: the only state change a task ever
sees is its completion flag, and that change is made exclusively through
the owning :class:`~task_shell.core.task_list.TaskList`.  Models carry
no I/O and no rendering beyond a compact ``__str__``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from task_shell.core.datetime_parser import format_datetime


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

class Operation(Enum):
    """Closed set of operations a command line can classify into.

    The value is the keyword the user types.  :attr:`UNKNOWN` has no
    keyword and catches everything else, including empty input.
    """

    LIST = "list"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    DELETE = "delete"
    MARK = "mark"
    UNMARK = "unmark"
    FIND = "find"
    EXIT = "bye"
    UNKNOWN = ""

    @classmethod
    def from_keyword(cls, keyword: str) -> Operation:
        """Map a (case-insensitive) keyword to its operation."""
        normalized = keyword.lower()
        if not normalized:
            return cls.UNKNOWN
        try:
            return cls(normalized)
        except ValueError:
            return cls.UNKNOWN

    @classmethod
    def keywords(cls) -> list[str]:
        """Every keyword a user can type, in declaration order."""
        return [op.value for op in cls if op is not cls.UNKNOWN]


# ---------------------------------------------------------------------------
# Tasks
# ---------------------------------------------------------------------------

@dataclass
class Task:
    """Common state for every task variant."""

    description: str
    done: bool = False

    type_icon = "?"

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    @property
    def schedule(self) -> str:
        """Human-readable timing, empty for tasks without dates."""
        return ""

    def mark_done(self) -> None:
        self.done = True

    def mark_not_done(self) -> None:
        self.done = False

    def __str__(self) -> str:
        text = f"[{self.type_icon}][{self.status_icon}] {self.description}"
        if self.schedule:
            text += f" ({self.schedule})"
        return text


@dataclass
class Todo(Task):
    """A task with no date attached."""

    type_icon = "T"


@dataclass(kw_only=True)
class Deadline(Task):
    """A task that must be done before :attr:`by`."""

    by: datetime

    type_icon = "D"

    @property
    def schedule(self) -> str:
        return f"by: {format_datetime(self.by)}"


@dataclass(kw_only=True)
class Event(Task):
    """A task that spans :attr:`start` to :attr:`end`."""

    start: datetime
    end: datetime

    type_icon = "E"

    @property
    def schedule(self) -> str:
        return f"from: {format_datetime(self.start)} to: {format_datetime(self.end)}"

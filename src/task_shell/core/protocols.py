"""Protocols (interfaces) consumed by the command processor.

The processor depends ONLY on these contracts, never on the concrete
:class:`~task_shell.core.task_list.TaskList` or the Rich presenter, so
either side can be swapped (or faked in tests) without touching the
parsing logic.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from task_shell.core.models import Task


class TaskCollection(Protocol):
    """Ordered, mutable sequence of tasks addressed by 0-based position.

    Every position-taking method must reject positions outside
    ``0 <= position < len(collection)`` by raising
    :class:`~task_shell.exceptions.OutOfRangeIndexError` *before*
    mutating anything.
    """

    def add(self, task: Task) -> None:
        """Append *task* to the end of the collection."""
        ...  # pragma: no cover

    def delete(self, position: int) -> Task:
        """Remove and return the task at *position*."""
        ...  # pragma: no cover

    def mark(self, position: int) -> Task:
        """Set the completion flag of the task at *position*."""
        ...  # pragma: no cover

    def unmark(self, position: int) -> Task:
        """Clear the completion flag of the task at *position*."""
        ...  # pragma: no cover

    def find(self, keyword: str) -> list[Task]:
        """Return tasks whose description contains *keyword* (case-sensitive)."""
        ...  # pragma: no cover

    def all(self) -> list[Task]:
        """Return every task in collection order."""
        ...  # pragma: no cover


class Presenter(Protocol):
    """Contract for whatever renders results to the user.

    Implementations hold no logic: they only display what they are
    given.  Confirmation methods receive the affected task and the full
    updated task list.
    """

    def show_welcome(self) -> None: ...  # pragma: no cover

    def show_farewell(self) -> None: ...  # pragma: no cover

    def show_task_list(self, tasks: Sequence[Task]) -> None: ...  # pragma: no cover

    def show_task_added(self, task: Task, tasks: Sequence[Task]) -> None: ...  # pragma: no cover

    def show_task_deleted(self, task: Task, tasks: Sequence[Task]) -> None: ...  # pragma: no cover

    def show_task_marked(self, task: Task, tasks: Sequence[Task]) -> None: ...  # pragma: no cover

    def show_task_unmarked(self, task: Task, tasks: Sequence[Task]) -> None: ...  # pragma: no cover

    def show_error(self, message: str, hint: str | None = None) -> None: ...  # pragma: no cover

    def show_unknown_command(self) -> None: ...  # pragma: no cover

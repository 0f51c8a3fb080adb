"""In-memory task collection.

Positions are 0-based here; the command processor is the only place
that translates from the 1-based numbers users type.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from task_shell.core.models import Task
from task_shell.exceptions import OutOfRangeIndexError

logger = logging.getLogger(__name__)


class TaskList:
    """Ordered, mutable list of tasks.

    Parameters
    ----------
    tasks:
        Optional initial tasks, kept in the given order.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks) if tasks is not None else []

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, task: Task) -> None:
        self._tasks.append(task)
        logger.debug("Added task #%d: %s", len(self._tasks), task)

    def delete(self, position: int) -> Task:
        self._check_position(position)
        task = self._tasks.pop(position)
        logger.debug("Deleted task #%d: %s", position + 1, task)
        return task

    def mark(self, position: int) -> Task:
        self._check_position(position)
        task = self._tasks[position]
        task.mark_done()
        logger.debug("Marked task #%d as done", position + 1)
        return task

    def unmark(self, position: int) -> Task:
        self._check_position(position)
        task = self._tasks[position]
        task.mark_not_done()
        logger.debug("Marked task #%d as not done", position + 1)
        return task

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find(self, keyword: str) -> list[Task]:
        return [task for task in self._tasks if keyword in task.description]

    def all(self) -> list[Task]:
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def __bool__(self) -> bool:
        return len(self._tasks) > 0

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _check_position(self, position: int) -> None:
        """Reject negative and past-the-end positions before any mutation."""
        if not 0 <= position < len(self._tasks):
            raise OutOfRangeIndexError(position, len(self._tasks))

"""Shared pytest fixtures and configuration for the task-shell test suite.

Guidelines
----------
* No terminal interaction: the prompt is mocked or bypassed.
* Core tests use :class:`RecordingPresenter` instead of Rich.
* Tests must not depend on OS state.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Any

import pytest

from task_shell.core.models import Deadline, Event, Task, Todo
from task_shell.core.task_list import TaskList


class RecordingPresenter:
    """Presenter fake that records ``(method, args)`` for every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def last(self, name: str) -> tuple[Any, ...]:
        for call_name, args in reversed(self.calls):
            if call_name == name:
                return args
        raise AssertionError(f"{name} was never called")

    def show_welcome(self) -> None:
        self._record("show_welcome")

    def show_farewell(self) -> None:
        self._record("show_farewell")

    def show_task_list(self, tasks: Sequence[Task]) -> None:
        self._record("show_task_list", list(tasks))

    def show_task_added(self, task: Task, tasks: Sequence[Task]) -> None:
        self._record("show_task_added", task, list(tasks))

    def show_task_deleted(self, task: Task, tasks: Sequence[Task]) -> None:
        self._record("show_task_deleted", task, list(tasks))

    def show_task_marked(self, task: Task, tasks: Sequence[Task]) -> None:
        self._record("show_task_marked", task, list(tasks))

    def show_task_unmarked(self, task: Task, tasks: Sequence[Task]) -> None:
        self._record("show_task_unmarked", task, list(tasks))

    def show_error(self, message: str, hint: str | None = None) -> None:
        self._record("show_error", message, hint)

    def show_unknown_command(self) -> None:
        self._record("show_unknown_command")


@pytest.fixture()
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture()
def tasks() -> TaskList:
    return TaskList()


@pytest.fixture()
def three_tasks() -> TaskList:
    return TaskList(
        [
            Todo("read book"),
            Deadline("return book", by=datetime(2026, 10, 15, 18, 0)),
            Event(
                "project meeting",
                start=datetime(2026, 10, 16, 14, 0),
                end=datetime(2026, 10, 16, 16, 0),
            ),
        ]
    )

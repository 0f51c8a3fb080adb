"""Core layer: command parsing, task model, and the task collection.

Rules
-----
* No ``print()`` calls and no input reading.
* No filesystem or network I/O.
* No imports from ``cli``.
"""

from task_shell.core.command_processor import (
    CommandProcessor,
    CommandResult,
    classify,
    extract_task_index,
    is_exit_command,
)
from task_shell.core.datetime_parser import format_datetime, parse_datetime
from task_shell.core.models import Deadline, Event, Operation, Task, Todo
from task_shell.core.protocols import Presenter, TaskCollection
from task_shell.core.task_list import TaskList

__all__: list[str] = [
    "CommandProcessor",
    "CommandResult",
    "Deadline",
    "Event",
    "Operation",
    "Presenter",
    "Task",
    "TaskCollection",
    "TaskList",
    "Todo",
    "classify",
    "extract_task_index",
    "format_datetime",
    "is_exit_command",
    "parse_datetime",
]

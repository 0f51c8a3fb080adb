"""Rich presenter that renders task lists and messages.

Implements the :class:`~task_shell.core.protocols.Presenter` protocol.
Display only: nothing here inspects a command or touches the task
collection.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from task_shell.cli.console import get_rich_console
from task_shell.core.models import Operation, Task
from task_shell.exceptions import EnvironmentError, UnknownCommandError

EMPTY_LIST_MESSAGE: str = "No tasks to show."


def _escape(text: str) -> str:
    """Escape Rich markup in user-supplied text."""
    try:
        from rich.markup import escape
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return escape(text)


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for task rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


# ---------------------------------------------------------------------------
# Presentation helpers (pure, no I/O)
# ---------------------------------------------------------------------------

def _task_count_line(tasks: Sequence[Task]) -> str:
    """``"Now you have 3 tasks in the list."``"""
    noun = "task" if len(tasks) == 1 else "tasks"
    return f"Now you have {len(tasks)} {noun} in the list."


def build_task_table(tasks: Sequence[Task], *, title: str | None = None) -> Any:
    """Build a Rich table with one row per task, numbered from 1."""
    table_class = _import_rich_table()
    table = table_class(
        title=title,
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Type", justify="center", width=4)
    table.add_column("Done", justify="center", width=4)
    table.add_column("Description", justify="left", min_width=16)
    table.add_column("When", justify="left")

    for number, task in enumerate(tasks, start=1):
        table.add_row(
            str(number),
            task.type_icon,
            "[green]X[/green]" if task.done else "",
            _escape(task.description),
            task.schedule,
        )
    return table


# ---------------------------------------------------------------------------
# Presenter
# ---------------------------------------------------------------------------

class RichPresenter:
    """Presenter that writes to a Rich console.

    Parameters
    ----------
    console:
        Optional ``rich.console.Console``.  Defaults to a stdout console;
        tests pass one that records output.
    """

    def __init__(self, console: Any | None = None) -> None:
        self._console: Any = console if console is not None else get_rich_console()

    def show_welcome(self) -> None:
        self._console.print("[bold cyan]Hello! What can I do for you?[/bold cyan]")

    def show_farewell(self) -> None:
        self._console.print("[bold cyan]Bye. Hope to see you again soon![/bold cyan]")

    def show_task_list(self, tasks: Sequence[Task]) -> None:
        if not tasks:
            self._console.print(f"[dim]{EMPTY_LIST_MESSAGE}[/dim]")
            return
        self._console.print(build_task_table(tasks))

    def show_task_added(self, task: Task, tasks: Sequence[Task]) -> None:
        self._confirm("Got it. I've added this task:", task, tasks)

    def show_task_deleted(self, task: Task, tasks: Sequence[Task]) -> None:
        self._confirm("Noted. I've removed this task:", task, tasks)

    def show_task_marked(self, task: Task, tasks: Sequence[Task]) -> None:
        self._confirm("Nice! I've marked this task as done:", task, tasks)

    def show_task_unmarked(self, task: Task, tasks: Sequence[Task]) -> None:
        self._confirm("OK, I've marked this task as not done yet:", task, tasks)

    def show_error(self, message: str, hint: str | None = None) -> None:
        self._console.print(f"[bold red]OOPS!!![/bold red] {_escape(message)}")
        if hint:
            self._console.print(f"[yellow]Hint:[/yellow] {_escape(hint)}")

    def show_unknown_command(self) -> None:
        notice = UnknownCommandError(Operation.keywords())
        self.show_error(str(notice), notice.hint)

    def _confirm(self, headline: str, task: Task, tasks: Sequence[Task]) -> None:
        self._console.print(f"[bold green]{headline}[/bold green]")
        self._console.print(f"  {task}", markup=False)
        self._console.print(_task_count_line(tasks))
        self.show_task_list(tasks)

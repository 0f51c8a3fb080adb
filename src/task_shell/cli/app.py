"""CLI application entry point and session loop for task-shell.

This module is the **sole error boundary** for the entire application.
It catches :class:`~task_shell.exceptions.TaskShellError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No parsing logic lives here. Each line is handed to a
  :class:`~task_shell.core.command_processor.CommandProcessor`.
* ``bye`` is detected here, before a processor is ever built for it.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable

from task_shell.cli import exit_codes
from task_shell.cli.console import console
from task_shell.core.command_processor import CommandProcessor, is_exit_command
from task_shell.core.protocols import Presenter, TaskCollection
from task_shell.exceptions import TaskShellError
from task_shell.logging_config import configure_logging
from task_shell.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``task-shell``: interactive session
    * ``task-shell -e "todo read" -e list``: run commands, then exit
    * ``task-shell --version``
    """
    parser = argparse.ArgumentParser(
        prog="task-shell",
        description="Single-user, in-memory task tracking shell.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-e",
        "--execute",
        action="append",
        metavar="COMMAND",
        default=None,
        help="Run COMMAND instead of reading input. May be repeated.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        metavar="LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ERROR). Overrides LOG_LEVEL.",
    )
    return parser


# ---------------------------------------------------------------------------
# Session loop
# ---------------------------------------------------------------------------

def run_session(
    lines: Iterable[str],
    tasks: TaskCollection,
    presenter: Presenter,
) -> int:
    """Process *lines* one at a time against *tasks*.

    The session ends at the first ``bye`` or when *lines* runs out;
    either way the farewell is shown.  Blank lines are skipped.

    Returns
    -------
    int
        Number of commands handed to a processor.
    """
    presenter.show_welcome()
    processed = 0
    for line in lines:
        if not line.strip():
            continue
        if is_exit_command(line):
            logger.debug("Exit command received after %d command(s)", processed)
            break
        result = CommandProcessor(line).process(tasks, presenter)
        processed += 1
        if not result.ok:
            logger.info("Command failed (%s): %s", result.error_kind.value, result.message)
    presenter.show_farewell()
    return processed


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the task-shell CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    from task_shell.cli.presenter import RichPresenter
    from task_shell.cli.prompt import input_lines
    from task_shell.core.task_list import TaskList

    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    lines: Iterable[str] = args.execute if args.execute is not None else input_lines()
    run_session(lines, TaskList(), RichPresenter())
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except TaskShellError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)

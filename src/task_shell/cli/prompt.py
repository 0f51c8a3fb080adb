"""Interactive command-line reader for the CLI layer.

Reads one command at a time with a questionary autocomplete prompt whose
suggestions are the command keywords.  Lines come straight from the
stream when stdin is not a terminal (piped or redirected input), where
an interactive prompt cannot run.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

from task_shell.core.models import Operation
from task_shell.exceptions import EnvironmentError

PROMPT_MESSAGE: str = ">"


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def prompt_command() -> str | None:
    """Ask for one command line.

    Returns
    -------
    str | None
        The typed line, or ``None`` when the user cancels with
        Ctrl+C / Ctrl+D.
    """
    questionary = _import_questionary()
    answer: str | None = questionary.autocomplete(
        PROMPT_MESSAGE,
        choices=Operation.keywords(),
        qmark="",
        ignore_case=True,
    ).ask()
    return answer


def interactive_lines() -> Iterator[str]:
    """Yield command lines from the interactive prompt until cancelled."""
    while True:
        line = prompt_command()
        if line is None:
            return
        yield line


def stream_lines(stream: TextIO) -> Iterator[str]:
    """Yield command lines from *stream* without trailing newlines."""
    for line in stream:
        yield line.rstrip("\r\n")


def input_lines(stream: TextIO | None = None) -> Iterator[str]:
    """Pick the line source for the session."""
    source = stream if stream is not None else sys.stdin
    if source.isatty():
        return interactive_lines()
    return stream_lines(source)

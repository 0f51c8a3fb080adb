"""Rich console access for the task-shell CLI.

The presenter draws task tables on a stdout console.  The error
boundary in :mod:`task_shell.cli.app` writes through :data:`console`,
a stderr proxy that still works, as plain text, when Rich is missing.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from task_shell.exceptions import EnvironmentError

_MARKUP_TAG = re.compile(r"\[/?[a-z][a-z ]*\]")


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Task output goes to stdout; boundary messages pass ``stderr=True``."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr, highlight=False)


def strip_markup(text: str) -> str:
	"""Drop style tags such as ``[bold red]`` from a boundary message."""
	return _MARKUP_TAG.sub("", text)


class _ConsoleProxy:
	"""stderr writer for the error boundary."""

	def print(self, *objects: object) -> None:
		try:
			rich_console = get_rich_console(stderr=True)
		except EnvironmentError:
			print(*(strip_markup(str(obj)) for obj in objects), file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()

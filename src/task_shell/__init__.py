"""task-shell: single-user, in-memory task tracking command interpreter.

Reads one line of free text at a time, turns it into a validated task
operation, and renders the outcome with Rich.
"""

from task_shell.version import __version__

__all__: list[str] = ["__version__"]

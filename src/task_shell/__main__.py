"""Allow ``python -m task_shell`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m task_shell`` behaves identically to the ``task-shell``
console script.
"""

from __future__ import annotations

from task_shell.cli.app import cli

if __name__ == "__main__":
    cli()

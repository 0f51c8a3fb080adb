"""Process exit statuses returned by the ``task-shell`` command.

Command failures inside a session (bad task number, unparseable date,
unknown keyword) are reported in the session and never change the
exit status; only the outcome of the process as a whole does.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The session ended with ``bye`` or when input ran out."""

GENERAL_ERROR: int = 1
"""The session could not start or continue, e.g. Rich is missing."""

UNEXPECTED_ERROR: int = 2
"""A bug: an exception other than TaskShellError reached ``cli()``."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C at the prompt (128 + SIGINT)."""

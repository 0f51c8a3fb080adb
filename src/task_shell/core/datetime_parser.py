"""Date/time parsing for deadline and event fragments.

Accepts a small set of explicit ``strptime`` layouts rather than
guessing: a fragment either matches one of :data:`ACCEPTED_FORMATS`
exactly or is rejected with a message that lists what would have been
accepted.
"""

from __future__ import annotations

from datetime import datetime

from task_shell.exceptions import DateTimeParseError

ACCEPTED_FORMATS: tuple[tuple[str, str], ...] = (
    ("%Y-%m-%d %H%M", "2026-10-15 1800"),
    ("%Y-%m-%d %H:%M", "2026-10-15 18:00"),
    ("%Y-%m-%d", "2026-10-15"),
    ("%d/%m/%Y %H%M", "15/10/2026 1800"),
    ("%d/%m/%Y %H:%M", "15/10/2026 18:00"),
    ("%d/%m/%Y", "15/10/2026"),
)
"""``(strptime layout, example)`` pairs, tried in order."""

DISPLAY_FORMAT: str = "%b %d %Y %H:%M"


def parse_datetime(text: str) -> datetime:
    """Parse *text* into a naive :class:`~datetime.datetime`.

    Date-only layouts resolve to midnight.

    Raises
    ------
    DateTimeParseError
        If *text* is empty or matches none of :data:`ACCEPTED_FORMATS`.
    """
    stripped = text.strip()
    if stripped:
        for layout, _ in ACCEPTED_FORMATS:
            try:
                return datetime.strptime(stripped, layout)
            except ValueError:
                continue
    examples = ", ".join(example for _, example in ACCEPTED_FORMATS)
    raise DateTimeParseError(
        f"Could not understand the date/time '{stripped}'.",
        hint=f"Try one of: {examples}",
    )


def format_datetime(value: datetime) -> str:
    """Render *value* for task listings, e.g. ``Oct 15 2026 18:00``."""
    return value.strftime(DISPLAY_FORMAT)

"""Command processor: turns one raw input line into a task operation.

Pipeline for a single line:

1. **Classify**: the first whitespace-delimited token, lower-cased,
   selects an :class:`~task_shell.core.models.Operation`.
2. **Extract**: a pure parser pulls the operation's arguments out of
   the rest of the line and raises a
   :class:`~task_shell.exceptions.CommandError` subclass if they are
   unusable.
3. **Apply**: exactly one call into the task collection.
4. **Report**: exactly one presenter call, success or failure.

Guarantees
----------
* No ``print()`` and no input reading; all output goes through the
  injected presenter.
* No :class:`CommandError` escapes :meth:`CommandProcessor.process`.
* A failed command performs zero mutations: every argument, date
  included, is validated before the collection is touched, and the
  collection validates positions before mutating.
* Exit detection is a pure classification.  Callers check
  :func:`is_exit_command` before building a processor; there is no
  hidden state that makes :meth:`CommandProcessor.process` behave
  differently depending on call order.  A processor handed a ``bye``
  line reports it as an unknown command.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from task_shell.core.datetime_parser import parse_datetime
from task_shell.core.models import Deadline, Event, Operation, Todo
from task_shell.core.protocols import Presenter, TaskCollection
from task_shell.exceptions import (
    CommandError,
    EmptyDescriptionError,
    EmptyKeywordError,
    ErrorKind,
    InvalidIndexError,
    MalformedArgumentsError,
    UnknownCommandError,
)

logger = logging.getLogger(__name__)

BY_MARKER: str = "/by"
FROM_MARKER: str = "/from"
TO_MARKER: str = "/to"

USAGE: dict[Operation, str] = {
    Operation.LIST: "list",
    Operation.TODO: "todo <description>",
    Operation.DEADLINE: f"deadline <description> {BY_MARKER} <date/time>",
    Operation.EVENT: f"event <description> {FROM_MARKER} <date/time> {TO_MARKER} <date/time>",
    Operation.DELETE: "delete <task number>",
    Operation.MARK: "mark <task number>",
    Operation.UNMARK: "unmark <task number>",
    Operation.FIND: "find <keyword>",
    Operation.EXIT: "bye",
}

_INDEX_PATTERN = re.compile(r"[+-]?[0-9]+")


# ---------------------------------------------------------------------------
# Classification (pure)
# ---------------------------------------------------------------------------

def classify(raw: str) -> Operation:
    """Return the operation selected by the first token of *raw*."""
    tokens = raw.split()
    if not tokens:
        return Operation.UNKNOWN
    return Operation.from_keyword(tokens[0])


def is_exit_command(raw: str) -> bool:
    """True iff the trimmed line is exactly ``bye`` (any case)."""
    return raw.strip().lower() == Operation.EXIT.value


# ---------------------------------------------------------------------------
# Argument extraction (pure)
# ---------------------------------------------------------------------------

def _remainder(raw: str) -> str:
    """Everything after the keyword token, trimmed."""
    parts = raw.strip().split(maxsplit=1)
    return parts[1].strip() if len(parts) == 2 else ""


def _usage_hint(operation: Operation) -> str:
    return f"Usage: {USAGE[operation]}"


def _split_exactly(text: str, marker: str, operation: Operation, message: str) -> tuple[str, str]:
    """Split *text* on the literal *marker* into exactly two trimmed parts.

    The split is a plain substring split: a description that itself
    contains *marker* produces extra parts and is rejected.
    """
    parts = text.split(marker)
    if len(parts) != 2:
        raise MalformedArgumentsError(message, hint=_usage_hint(operation))
    return parts[0].strip(), parts[1].strip()


def _require_description(remainder: str, operation: Operation) -> None:
    if not remainder:
        raise EmptyDescriptionError(
            f"The description of a {operation.value} cannot be empty.",
            hint=_usage_hint(operation),
        )


def _require_fragment(fragment: str, marker: str, operation: Operation) -> None:
    if not fragment:
        raise MalformedArgumentsError(
            f"Please provide a date/time after {marker}.",
            hint=_usage_hint(operation),
        )


def parse_todo(raw: str) -> Todo:
    """Build a :class:`Todo` from ``todo <description>``."""
    description = _remainder(raw)
    _require_description(description, Operation.TODO)
    return Todo(description)


def parse_deadline(raw: str) -> Deadline:
    """Build a :class:`Deadline` from ``deadline <description> /by <when>``."""
    remainder = _remainder(raw)
    _require_description(remainder, Operation.DEADLINE)
    description, by_text = _split_exactly(
        remainder,
        BY_MARKER,
        Operation.DEADLINE,
        "Please provide both a description and a deadline for a deadline task.",
    )
    _require_description(description, Operation.DEADLINE)
    _require_fragment(by_text, BY_MARKER, Operation.DEADLINE)
    return Deadline(description, by=parse_datetime(by_text))


def parse_event(raw: str) -> Event:
    """Build an :class:`Event` from ``event <description> /from <a> /to <b>``."""
    remainder = _remainder(raw)
    _require_description(remainder, Operation.EVENT)
    description, schedule = _split_exactly(
        remainder,
        FROM_MARKER,
        Operation.EVENT,
        "Please provide a description, start time, and end time for an event task.",
    )
    start_text, end_text = _split_exactly(
        schedule,
        TO_MARKER,
        Operation.EVENT,
        "Please provide both a starting and an ending date/time for the event.",
    )
    _require_description(description, Operation.EVENT)
    _require_fragment(start_text, FROM_MARKER, Operation.EVENT)
    _require_fragment(end_text, TO_MARKER, Operation.EVENT)
    start = parse_datetime(start_text)
    end = parse_datetime(end_text)
    return Event(description, start=start, end=end)


def parse_keyword(raw: str) -> str:
    """Return the search term of ``find <keyword>``."""
    keyword = _remainder(raw)
    if not keyword:
        raise EmptyKeywordError(
            "Please provide a keyword to search for.",
            hint=_usage_hint(Operation.FIND),
        )
    return keyword


def extract_task_index(raw: str) -> int:
    """Return the 0-based position named by the second token of *raw*.

    This is the single place where the 1-based task number a user types
    becomes a 0-based position.  Whether the position exists is left to
    the task collection.

    Raises
    ------
    InvalidIndexError
        If the second token is missing or is not a base-10 integer.
    """
    operation = classify(raw)
    hint = _usage_hint(operation) if operation in USAGE else None
    tokens = raw.split()
    if len(tokens) < 2:
        raise InvalidIndexError("Please specify a task number.", hint=hint)
    token = tokens[1]
    if not _INDEX_PATTERN.fullmatch(token):
        raise InvalidIndexError(f"'{token}' is not a valid task number.", hint=hint)
    return int(token) - 1


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of processing one command line."""

    operation: Operation
    error: CommandError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> ErrorKind | None:
        return self.error.kind if self.error is not None else None

    @property
    def message(self) -> str | None:
        return str(self.error) if self.error is not None else None


# ---------------------------------------------------------------------------
# Processor
# ---------------------------------------------------------------------------

Handler = Callable[[TaskCollection, Presenter], None]


class CommandProcessor:
    """Processes exactly one raw command line.

    Parameters
    ----------
    raw:
        The unprocessed input line.  It is never modified.
    """

    def __init__(self, raw: str) -> None:
        self._raw: str = raw
        self._operation: Operation = classify(raw)

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def operation(self) -> Operation:
        return self._operation

    def is_exit_command(self) -> bool:
        return is_exit_command(self._raw)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def process(self, tasks: TaskCollection, presenter: Presenter) -> CommandResult:
        """Apply the command to *tasks* and report through *presenter*.

        Every :class:`CommandError` raised by a handler is converted into
        a failed :class:`CommandResult` and one presenter call.
        """
        handler = self._handler_for(self._operation)
        logger.debug("Dispatching %s for %r", self._operation.name, self._raw)
        try:
            handler(tasks, presenter)
        except CommandError as exc:
            logger.debug("Rejected %r (%s): %s", self._raw, exc.kind.value, exc)
            self._report_failure(exc, presenter)
            return CommandResult(self._operation, error=exc)
        return CommandResult(self._operation)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _handler_for(self, operation: Operation) -> Handler:
        match operation:
            case Operation.LIST:
                return self._handle_list
            case Operation.TODO:
                return self._handle_todo
            case Operation.DEADLINE:
                return self._handle_deadline
            case Operation.EVENT:
                return self._handle_event
            case Operation.DELETE:
                return self._handle_delete
            case Operation.MARK:
                return self._handle_mark
            case Operation.UNMARK:
                return self._handle_unmark
            case Operation.FIND:
                return self._handle_find
            case Operation.EXIT | Operation.UNKNOWN:
                # ``bye`` ends a session only at the call site; here it
                # is not a command.
                return self._handle_unknown

    @staticmethod
    def _report_failure(error: CommandError, presenter: Presenter) -> None:
        if error.kind is ErrorKind.UNKNOWN_COMMAND:
            presenter.show_unknown_command()
        else:
            presenter.show_error(str(error), error.hint)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _handle_list(self, tasks: TaskCollection, presenter: Presenter) -> None:
        presenter.show_task_list(tasks.all())

    def _handle_todo(self, tasks: TaskCollection, presenter: Presenter) -> None:
        task = parse_todo(self._raw)
        tasks.add(task)
        presenter.show_task_added(task, tasks.all())

    def _handle_deadline(self, tasks: TaskCollection, presenter: Presenter) -> None:
        task = parse_deadline(self._raw)
        tasks.add(task)
        presenter.show_task_added(task, tasks.all())

    def _handle_event(self, tasks: TaskCollection, presenter: Presenter) -> None:
        task = parse_event(self._raw)
        tasks.add(task)
        presenter.show_task_added(task, tasks.all())

    def _handle_delete(self, tasks: TaskCollection, presenter: Presenter) -> None:
        position = extract_task_index(self._raw)
        task = tasks.delete(position)
        presenter.show_task_deleted(task, tasks.all())

    def _handle_mark(self, tasks: TaskCollection, presenter: Presenter) -> None:
        position = extract_task_index(self._raw)
        task = tasks.mark(position)
        presenter.show_task_marked(task, tasks.all())

    def _handle_unmark(self, tasks: TaskCollection, presenter: Presenter) -> None:
        position = extract_task_index(self._raw)
        task = tasks.unmark(position)
        presenter.show_task_unmarked(task, tasks.all())

    def _handle_find(self, tasks: TaskCollection, presenter: Presenter) -> None:
        keyword = parse_keyword(self._raw)
        presenter.show_task_list(tasks.find(keyword))

    def _handle_unknown(self, tasks: TaskCollection, presenter: Presenter) -> None:
        raise UnknownCommandError(Operation.keywords())

"""Smoke tests for package wiring and the exception hierarchy."""

from __future__ import annotations

import pytest

from task_shell import __version__
from task_shell.cli import exit_codes
from task_shell.core import CommandProcessor, TaskList
from task_shell.exceptions import (
    CommandError,
    DateTimeParseError,
    EmptyDescriptionError,
    EmptyKeywordError,
    EnvironmentError,
    ErrorKind,
    InvalidIndexError,
    MalformedArgumentsError,
    OutOfRangeIndexError,
    TaskShellError,
    UnknownCommandError,
)


class TestVersion:
    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


class TestExceptions:
    @pytest.mark.parametrize(
        ("exc_class", "kind"),
        [
            (EmptyDescriptionError, ErrorKind.EMPTY_DESCRIPTION),
            (MalformedArgumentsError, ErrorKind.MALFORMED_ARGUMENTS),
            (DateTimeParseError, ErrorKind.DATETIME_PARSE),
            (EmptyKeywordError, ErrorKind.EMPTY_KEYWORD),
            (InvalidIndexError, ErrorKind.INVALID_INDEX),
            (OutOfRangeIndexError, ErrorKind.OUT_OF_RANGE_INDEX),
            (UnknownCommandError, ErrorKind.UNKNOWN_COMMAND),
        ],
    )
    def test_command_errors_carry_kind(
        self, exc_class: type[CommandError], kind: ErrorKind
    ) -> None:
        assert issubclass(exc_class, CommandError)
        assert issubclass(exc_class, TaskShellError)
        assert exc_class.kind is kind

    def test_every_kind_has_an_error(self) -> None:
        kinds = {
            cls.kind
            for cls in (
                EmptyDescriptionError,
                MalformedArgumentsError,
                DateTimeParseError,
                EmptyKeywordError,
                InvalidIndexError,
                OutOfRangeIndexError,
                UnknownCommandError,
            )
        }
        assert kinds == set(ErrorKind)

    def test_environment_error_is_not_a_command_error(self) -> None:
        assert issubclass(EnvironmentError, TaskShellError)
        assert not issubclass(EnvironmentError, CommandError)

    def test_hint_is_stored(self) -> None:
        err = TaskShellError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert MalformedArgumentsError("boom").hint is None

    def test_out_of_range_records_position(self) -> None:
        err = OutOfRangeIndexError(4, 2)
        assert err.position == 4
        assert err.size == 2
        assert str(err) == "There is no task number 5."

    def test_unknown_command_builds_hint_from_keywords(self) -> None:
        err = UnknownCommandError(["list", "bye"])
        assert str(err) == UnknownCommandError.MESSAGE
        assert err.keywords == ("list", "bye")
        assert err.hint == "Commands: list, bye"


class TestExitCodes:
    def test_values(self) -> None:
        assert exit_codes.SUCCESS == 0
        assert exit_codes.GENERAL_ERROR == 1
        assert exit_codes.UNEXPECTED_ERROR == 2
        assert exit_codes.KEYBOARD_INTERRUPT == 130


class TestPublicApi:
    def test_core_exports(self) -> None:
        result = CommandProcessor("list").process(TaskList(), _NullPresenter())
        assert result.ok


class _NullPresenter:
    def show_task_list(self, tasks: object) -> None:
        pass

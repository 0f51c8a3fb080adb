"""Tests for the Rich presenter (cli/presenter.py).

Output is captured with a Rich console writing to ``StringIO`` with
colour disabled, so assertions run against plain text.
"""

from __future__ import annotations

import io
from datetime import datetime

import pytest
from rich.console import Console

from task_shell.cli.presenter import (
    EMPTY_LIST_MESSAGE,
    RichPresenter,
    _task_count_line,
    build_task_table,
)
from task_shell.core.models import Deadline, Todo
from task_shell.exceptions import UnknownCommandError


def _presenter() -> tuple[RichPresenter, io.StringIO]:
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, color_system=None, highlight=False)
    return RichPresenter(console), buffer


class TestTaskCountLine:
    def test_singular(self) -> None:
        assert _task_count_line([Todo("a")]) == "Now you have 1 task in the list."

    def test_plural(self) -> None:
        assert _task_count_line([]) == "Now you have 0 tasks in the list."


class TestBuildTaskTable:
    def test_one_row_per_task(self) -> None:
        table = build_task_table([Todo("a"), Todo("b", done=True)])
        assert table.row_count == 2
        assert len(table.columns) == 5


class TestRichPresenter:
    def test_task_list_numbers_from_one(self) -> None:
        presenter, buffer = _presenter()
        presenter.show_task_list(
            [Todo("read book"), Deadline("return book", by=datetime(2026, 10, 15, 18, 0))]
        )
        output = buffer.getvalue()
        assert "read book" in output
        assert "return book" in output
        assert "by: Oct 15 2026 18:00" in output
        assert " 1 " in output
        assert " 2 " in output

    def test_empty_list(self) -> None:
        presenter, buffer = _presenter()
        presenter.show_task_list([])
        assert EMPTY_LIST_MESSAGE in buffer.getvalue()

    def test_added_confirmation_includes_task_and_count(self) -> None:
        presenter, buffer = _presenter()
        task = Todo("read book")
        presenter.show_task_added(task, [task])
        output = buffer.getvalue()
        assert "Got it. I've added this task:" in output
        assert "[T][ ] read book" in output
        assert "Now you have 1 task in the list." in output

    @pytest.mark.parametrize(
        ("method", "headline"),
        [
            ("show_task_deleted", "Noted. I've removed this task:"),
            ("show_task_marked", "Nice! I've marked this task as done:"),
            ("show_task_unmarked", "OK, I've marked this task as not done yet:"),
        ],
    )
    def test_confirmations(self, method: str, headline: str) -> None:
        presenter, buffer = _presenter()
        getattr(presenter, method)(Todo("a"), [])
        output = buffer.getvalue()
        assert headline in output
        assert EMPTY_LIST_MESSAGE in output

    def test_error_with_hint(self) -> None:
        presenter, buffer = _presenter()
        presenter.show_error("Something broke.", "Try again.")
        output = buffer.getvalue()
        assert "OOPS!!! Something broke." in output
        assert "Hint: Try again." in output

    def test_error_text_is_not_markup(self) -> None:
        presenter, buffer = _presenter()
        presenter.show_error("'[/x]' is not a valid task number.")
        assert "[/x]" in buffer.getvalue()

    def test_description_brackets_survive_table(self) -> None:
        presenter, buffer = _presenter()
        presenter.show_task_list([Todo("fix [bold] tag")])
        assert "fix [bold] tag" in buffer.getvalue()

    def test_unknown_command_lists_keywords(self) -> None:
        presenter, buffer = _presenter()
        presenter.show_unknown_command()
        output = buffer.getvalue()
        assert UnknownCommandError.MESSAGE in output
        assert "deadline" in output

    def test_welcome_and_farewell(self) -> None:
        presenter, buffer = _presenter()
        presenter.show_welcome()
        presenter.show_farewell()
        output = buffer.getvalue()
        assert "Hello!" in output
        assert "Bye." in output

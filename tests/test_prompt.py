"""Tests for the interactive line reader (cli/prompt.py).

questionary is mocked, so nothing touches the terminal.
"""

from __future__ import annotations

import io
import sys
from unittest.mock import MagicMock, patch

import pytest

from task_shell.cli.prompt import (
    PROMPT_MESSAGE,
    input_lines,
    interactive_lines,
    prompt_command,
    stream_lines,
)
from task_shell.core.models import Operation
from task_shell.exceptions import EnvironmentError


class TestPromptCommand:
    def test_autocompletes_keywords(self) -> None:
        questionary = MagicMock()
        questionary.autocomplete.return_value.ask.return_value = "todo read"
        with patch("task_shell.cli.prompt._import_questionary", return_value=questionary):
            assert prompt_command() == "todo read"
        args, kwargs = questionary.autocomplete.call_args
        assert args == (PROMPT_MESSAGE,)
        assert kwargs["choices"] == Operation.keywords()

    def test_cancel_returns_none(self) -> None:
        questionary = MagicMock()
        questionary.autocomplete.return_value.ask.return_value = None
        with patch("task_shell.cli.prompt._import_questionary", return_value=questionary):
            assert prompt_command() is None

    def test_missing_questionary(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(sys.modules, "questionary", None)
        with pytest.raises(EnvironmentError, match="questionary is not installed"):
            prompt_command()


class TestLineSources:
    def test_interactive_stops_on_cancel(self) -> None:
        with patch(
            "task_shell.cli.prompt.prompt_command",
            side_effect=["todo a", "list", None, "never"],
        ):
            assert list(interactive_lines()) == ["todo a", "list"]

    def test_stream_strips_newlines(self) -> None:
        stream = io.StringIO("todo a\r\nlist\n  \nbye")
        assert list(stream_lines(stream)) == ["todo a", "list", "  ", "bye"]

    def test_non_tty_reads_stream(self) -> None:
        stream = io.StringIO("list\n")
        assert list(input_lines(stream)) == ["list"]

    def test_tty_uses_prompt(self) -> None:
        stream = MagicMock()
        stream.isatty.return_value = True
        with patch("task_shell.cli.prompt.prompt_command", side_effect=["list", None]):
            assert list(input_lines(stream)) == ["list"]

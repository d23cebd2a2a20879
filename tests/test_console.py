"""Tests for console sinks and the optional Rich dependency (cli/console.py).

These tests verify that command output renders the same with and
without Rich installed, and that raw mode passes text through verbatim.
"""

from __future__ import annotations

import io
import sys

import pytest

from coltype.cli import exit_codes
from coltype.cli.app import main
from coltype.cli.console import ConsoleIo, OutputMode, console, strip_markup


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)


class TestStripMarkup:
    def test_removes_tags(self) -> None:
        assert strip_markup("[bold cyan]Title:[/bold cyan] x") == "Title: x"

    def test_keeps_plain_brackets(self) -> None:
        assert strip_markup("list [1, 2]") == "list [1, 2]"


class TestConsoleIo:
    def test_markup_rendered(self, console_io: ConsoleIo, buffer: io.StringIO) -> None:
        console_io.out("[bold]Hi[/bold]")
        assert buffer.getvalue() == "Hi\n"

    def test_newlines(self, console_io: ConsoleIo, buffer: io.StringIO) -> None:
        console_io.out("Hi", 2)
        console_io.out()
        assert buffer.getvalue() == "Hi\n\n\n"

    def test_raw_passthrough(self, console_io: ConsoleIo, buffer: io.StringIO) -> None:
        console_io.set_output_as(OutputMode.RAW)
        console_io.out("<shells>[bold]</shells>")
        assert console_io.output_mode is OutputMode.RAW
        assert buffer.getvalue() == "<shells>[bold]</shells>\n"

    def test_literal_text_keeps_brackets(self, console_io: ConsoleIo, buffer: io.StringIO) -> None:
        console_io.out("/srv/[bold]x[/bold]", markup=False)
        assert console_io.output_mode is OutputMode.MARKUP
        assert buffer.getvalue() == "/srv/[bold]x[/bold]\n"

    def test_long_lines_not_wrapped(self, console_io: ConsoleIo, buffer: io.StringIO) -> None:
        line = "x" * 200
        console_io.out(line)
        assert buffer.getvalue() == line + "\n"

    def test_default_stream_is_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        ConsoleIo().out("hello")
        assert capsys.readouterr().out == "hello\n"


class TestWithoutRich:
    def test_markup_stripped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _hide_rich(monkeypatch)
        buffer = io.StringIO()
        ConsoleIo(buffer).out("[bold]Hi[/bold]", 2)
        assert buffer.getvalue() == "Hi\n\n"

    def test_literal_text_kept_verbatim(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _hide_rich(monkeypatch)
        buffer = io.StringIO()
        ConsoleIo(buffer).out("/srv/[bold]x[/bold]", markup=False)
        assert buffer.getvalue() == "/srv/[bold]x[/bold]\n"

    def test_help_works_without_rich(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _hide_rich(monkeypatch)
        buffer = io.StringIO()
        code = main(["help"], io=ConsoleIo(buffer))
        assert code == exit_codes.SUCCESS
        assert "Available Commands:" in buffer.getvalue()
        assert "[bold" not in buffer.getvalue()

    def test_version_flag_without_rich(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _hide_rich(monkeypatch)
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_error_proxy_falls_back_to_stderr(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)
        console.print("[bold red]Error:[/bold red] boom")
        assert capsys.readouterr().err == "Error: boom\n"

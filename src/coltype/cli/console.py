"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.

Two sinks live here:

* :data:`console` — stderr, used by the error boundary.
* :class:`ConsoleIo` — stdout, used by commands.  Messages carry Rich
  markup unless the sink is switched to :attr:`OutputMode.RAW`, which
  writes pre-formatted text (e.g. XML) verbatim.
"""

from __future__ import annotations

import re
import sys
from enum import Enum
from typing import Any, TextIO

from coltype.exceptions import EnvironmentError

_MARKUP_TAG_RE = re.compile(r"\[/?[a-z#@][^\[\]]*\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(file: TextIO | None = None, *, stderr: bool = False) -> Any:
    """Create a Rich console writing to *file* (stdout/stderr when ``None``)."""
    console_class = _load_rich_console_class()
    return console_class(
        file=file,
        stderr=stderr,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


def strip_markup(text: str) -> str:
    """Remove Rich markup tags such as ``[bold]`` and ``[/bold]``."""
    return _MARKUP_TAG_RE.sub("", text)


class _ConsoleProxy:
    """Minimal ``print``-compatible stderr proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console(stderr=True)
        except EnvironmentError:
            print(*(strip_markup(str(obj)) for obj in objects), file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()


class OutputMode(Enum):
    """How :class:`ConsoleIo` treats outgoing messages."""

    MARKUP = "markup"
    RAW = "raw"


class ConsoleIo:
    """Line-oriented output sink for commands.

    Parameters
    ----------
    stream:
        Target text stream.  ``None`` (default) resolves ``sys.stdout``
        at write time.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream: TextIO | None = stream
        self._mode: OutputMode = OutputMode.MARKUP
        self._rich: Any = None
        self._rich_checked: bool = False

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def output_mode(self) -> OutputMode:
        return self._mode

    def set_output_as(self, mode: OutputMode) -> None:
        """Switch between markup rendering and raw pass-through."""
        self._mode = mode

    def out(self, message: str = "", newlines: int = 1, *, markup: bool = True) -> None:
        """Write *message* followed by *newlines* line breaks.

        With ``markup=False`` the message is written as literal text even
        in markup mode, so bracketed content such as file paths survives.
        """
        end = "\n" * newlines
        if self._mode is OutputMode.RAW:
            self.stream.write(message + end)
            return

        rich_console = self._rich_console()
        if rich_console is None:
            self.stream.write((strip_markup(message) if markup else message) + end)
            return
        rich_console.print(message, end=end, markup=markup)

    def _rich_console(self) -> Any:
        if not self._rich_checked:
            self._rich_checked = True
            try:
                self._rich = get_rich_console(self._stream)
            except EnvironmentError:
                self._rich = None
        return self._rich

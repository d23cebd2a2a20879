"""Shared pytest fixtures and configuration for the coltype test suite.

Guidelines
----------
* Core tests must be pure — no mocks, no side effects.
* CLI tests write into an in-memory :class:`ConsoleIo`.
* Tests must not depend on ``COLTYPE_*`` variables from the host shell.
"""

from __future__ import annotations

import io
import os

import pytest

from coltype.cli.console import ConsoleIo


@pytest.fixture(autouse=True)
def _clean_coltype_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.upper().startswith("COLTYPE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def console_io(buffer: io.StringIO) -> ConsoleIo:
    return ConsoleIo(buffer)

"""Base class and collaborator hooks for CLI commands.

A command owns its option parser (:meth:`Command.build_parser`) and its
behaviour (:meth:`Command.execute`).  Collaborators are injected by the
dispatcher through the ``*Aware`` protocols rather than looked up.
"""

from __future__ import annotations

import argparse
from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from coltype.cli.console import ConsoleIo
from coltype.core.type_map import TypeMap

PROGRAM: str = "coltype"


class Command:
    """Base class for ``coltype`` sub-commands."""

    name: str = ""
    description: str = ""

    def build_parser(self, parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
        """Add command-specific arguments to *parser* and return it."""
        return parser

    def get_option_parser(self, invoked_as: str | None = None) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog=f"{PROGRAM} {invoked_as or self.name}",
            description=self.description or None,
        )
        return self.build_parser(parser)

    def execute(self, args: argparse.Namespace, io: ConsoleIo) -> int:
        """Run the command and return an exit code."""
        raise NotImplementedError

    def run(self, argv: list[str], io: ConsoleIo, *, invoked_as: str | None = None) -> int:
        """Parse *argv* with this command's parser, then :meth:`execute`."""
        args = self.get_option_parser(invoked_as).parse_args(argv)
        return self.execute(args, io)


@runtime_checkable
class CommandCollectionAware(Protocol):
    """Commands that need the registry they were dispatched from."""

    def set_command_collection(self, commands: Mapping[str, object]) -> None:
        ...  # pragma: no cover


@runtime_checkable
class TypeMapAware(Protocol):
    """Commands that convert values through the configured type map."""

    def set_type_map(self, types: TypeMap) -> None:
        ...  # pragma: no cover

"""Built-in ``coltype`` commands.

* ``help``    — list registered commands as text or XML.
* ``version`` — print the package version.
* ``convert`` — run one converter operation on a value.
"""

from __future__ import annotations

import argparse
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

from coltype.cli import exit_codes
from coltype.cli.command import PROGRAM, Command
from coltype.cli.console import ConsoleIo, OutputMode
from coltype.core.command_lister import list_commands
from coltype.core.models import OutputFormat
from coltype.core.type_map import TypeMap, default_type_map
from coltype.version import __version__

PACKAGE_ROOT: Path = Path(__file__).resolve().parent.parent
CORE_PATH: Path = PACKAGE_ROOT / "core"


class HelpCommand(Command):
    """Print out the list of available commands."""

    name = "help"
    description = "Get the list of available commands for this application."

    def __init__(self) -> None:
        self._commands: Mapping[str, object] = {}

    def set_command_collection(self, commands: Mapping[str, object]) -> None:
        self._commands = commands

    def build_parser(self, parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
        parser.add_argument(
            "--xml",
            action="store_true",
            help="Get the listing as XML.",
        )
        return parser

    def execute(self, args: argparse.Namespace, io: ConsoleIo) -> int:
        if args.xml:
            io.set_output_as(OutputMode.RAW)
            io.out(list_commands(self._commands, OutputFormat.XML))
            return exit_codes.SUCCESS

        io.out("[bold cyan]Current Paths:[/bold cyan]", 2)
        # Paths are printed as literal text; directory names may contain brackets.
        io.out(f"* app:  {Path.cwd()}", markup=False)
        io.out(f"* root: {PACKAGE_ROOT}", markup=False)
        io.out(f"* core: {CORE_PATH}", markup=False)
        io.out("")

        io.out("[bold cyan]Available Commands:[/bold cyan]", 2)
        io.out(list_commands(self._commands, OutputFormat.TEXT, program=PROGRAM), 2)
        return exit_codes.SUCCESS


class VersionCommand(Command):
    """Print the installed version."""

    name = "version"
    description = "Show the coltype version."

    def execute(self, args: argparse.Namespace, io: ConsoleIo) -> int:
        io.out(f"{PROGRAM} {__version__}")
        return exit_codes.SUCCESS


class ConvertCommand(Command):
    """Run a single converter operation and print the result."""

    name = "convert"
    description = "Convert a value with one of the registered column types."

    OPERATIONS: tuple[str, ...] = ("to-storage", "from-storage", "marshal", "binding")

    def __init__(self) -> None:
        self._types: TypeMap = default_type_map()

    def set_type_map(self, types: TypeMap) -> None:
        self._types = types

    def build_parser(self, parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
        parser.add_argument("type", help="Column type name, e.g. integer or decimal.")
        parser.add_argument("operation", choices=self.OPERATIONS, help="Conversion to run.")
        parser.add_argument(
            "value",
            nargs="?",
            default=None,
            help="Value to convert.  Omit to convert null.",
        )
        return parser

    def execute(self, args: argparse.Namespace, io: ConsoleIo) -> int:
        converter = self._types.get(args.type)
        value: Any = args.value

        if args.operation == "to-storage":
            result: Any = converter.to_storage(value)
        elif args.operation == "from-storage":
            result = converter.from_storage(value)
        elif args.operation == "marshal":
            result = converter.marshal(value)
        else:
            result = converter.binding_hint(value)

        io.out(format_result(result))
        return exit_codes.SUCCESS


def format_result(result: object) -> str:
    """Render a conversion result for the terminal."""
    if result is None:
        return "null"
    if isinstance(result, Enum):
        return str(result.value)
    return f"{result!r} ({type(result).__name__})"

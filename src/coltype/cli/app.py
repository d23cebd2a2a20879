"""CLI application entry point and command routing for coltype.

This module is the **sole error boundary** for the entire application.
It catches :class:`~coltype.exceptions.ColtypeError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No conversion logic lives here; commands delegate to the core layer.
* Settings are loaded once per invocation and turned into explicit
  collaborators (type map, number parser) handed to the commands.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from coltype.cli import exit_codes
from coltype.cli.command import PROGRAM, CommandCollectionAware, TypeMapAware
from coltype.cli.console import ConsoleIo, console
from coltype.cli.registry import CommandCollection, default_commands
from coltype.config import Settings, load_settings
from coltype.core.type_map import TypeMap, default_type_map
from coltype.exceptions import ColtypeError
from coltype.infra.locale_parser import LocaleNumberParser
from coltype.version import __version__

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Everything after the command name is handed to that command's own
    parser:
    * ``coltype``                      — same as ``coltype help``
    * ``coltype help --xml``
    * ``coltype convert decimal to-storage 3.14``
    """
    parser = argparse.ArgumentParser(
        prog=PROGRAM,
        description="Column-type converters and command listing.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=None,
        help="Command to run (default: help).",
    )
    parser.add_argument(
        "args",
        nargs=argparse.REMAINDER,
        help="Arguments passed to the command.",
    )
    return parser


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------

def _configure_logging(settings: Settings, *, verbose: bool) -> None:
    level = logging.DEBUG if verbose else settings.logging_level
    logging.basicConfig(level=level, format=_LOG_FORMAT, stream=sys.stderr)


def build_type_map(settings: Settings) -> TypeMap:
    """Build the converters described by *settings*."""
    parser = LocaleNumberParser(settings.decimal_point, settings.thousands_separator)
    return default_type_map(parser, use_locale_parser=settings.use_locale_parser)


def _dispatch(
    commands: CommandCollection,
    name: str,
    argv: list[str],
    settings: Settings,
    io: ConsoleIo,
) -> int:
    command = commands.get_command(name)()
    if isinstance(command, CommandCollectionAware):
        command.set_command_collection(commands)
    if isinstance(command, TypeMapAware):
        command.set_type_map(build_type_map(settings))
    logger.debug("Dispatching %s with %r", name, argv)
    return command.run(argv, io, invoked_as=name)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, *, io: ConsoleIo | None = None) -> int:
    """Run the coltype CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    io:
        Output sink for command output.  Defaults to stdout.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = load_settings()
    _configure_logging(settings, verbose=args.verbose)

    name: str = args.command or "help"
    return _dispatch(default_commands(), name, list(args.args), settings, io or ConsoleIo())


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ColtypeError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)

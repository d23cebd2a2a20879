"""Command registry — maps invocation names to command classes.

Several names may point at the same class; ``help`` collapses such
aliases to the shortest name in its text listing.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from coltype.cli.command import PROGRAM, Command
from coltype.cli.commands import ConvertCommand, HelpCommand, VersionCommand
from coltype.exceptions import ConfigurationError, UnknownCommandError

logger = logging.getLogger(__name__)


class CommandCollection(Mapping[str, type[Command]]):
    """Read-mostly mapping of command names to :class:`Command` subclasses."""

    def __init__(self, commands: Mapping[str, type[Command]] | None = None) -> None:
        self._commands: dict[str, type[Command]] = {}
        for name, command in (commands or {}).items():
            self.add(name, command)

    def __getitem__(self, name: str) -> type[Command]:
        return self._commands[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def add(self, name: str, command: type[Command]) -> CommandCollection:
        """Register *command* under *name*.

        Raises
        ------
        ConfigurationError
            If *name* is blank or *command* is not a :class:`Command` subclass.
        """
        if not name.strip() or name != name.strip():
            raise ConfigurationError(f"Invalid command name: {name!r}")
        if not (isinstance(command, type) and issubclass(command, Command)):
            raise ConfigurationError(
                f"Cannot register {command!r} as `{name}`",
                hint="Commands must subclass coltype.cli.command.Command.",
            )
        self._commands[name] = command
        logger.debug("Registered command %s -> %s", name, command.__qualname__)
        return self

    def remove(self, name: str) -> CommandCollection:
        self._commands.pop(name, None)
        return self

    def get_command(self, name: str) -> type[Command]:
        """Return the command class registered under *name*.

        Raises
        ------
        UnknownCommandError
            If *name* is not registered.
        """
        try:
            return self._commands[name]
        except KeyError:
            raise UnknownCommandError(
                f"Unknown command `{name}`.",
                hint=f"Run `{PROGRAM} help` to list available commands.",
            ) from None


def default_commands() -> CommandCollection:
    """Return the registry of built-in commands, aliases included."""
    return CommandCollection(
        {
            HelpCommand.name: HelpCommand,
            VersionCommand.name: VersionCommand,
            ConvertCommand.name: ConvertCommand,
            "cast": ConvertCommand,
        }
    )

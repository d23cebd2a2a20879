"""Domain models for coltype.

Value objects are **frozen** dataclasses; the closed sets of choices
are enums.  Nothing here performs I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Command listing
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandEntry:
    """One registered command name and the implementation behind it."""

    name: str
    """Name the command is invoked as (unique within a registry)."""

    provider: str
    """Identifier of the implementation, e.g. ``coltype.cli.commands.HelpCommand``."""

    @property
    def help_invocation(self) -> str:
        return f"{self.name} -h"


class OutputFormat(Enum):
    """Rendering modes of the command listing."""

    TEXT = "text"
    XML = "xml"


# ---------------------------------------------------------------------------
# Type conversion
# ---------------------------------------------------------------------------

class ParamKind(Enum):
    """How a statement-binding API should bind a converted parameter."""

    INTEGER = "int"
    STRING = "str"

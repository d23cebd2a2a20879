"""Core layer — pure conversion and listing logic.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* Collaborators (number parsers) are injected, never looked up globally.
"""

from coltype.core.command_lister import list_commands
from coltype.core.models import CommandEntry, OutputFormat, ParamKind
from coltype.core.protocols import NumberParser, TypeConverter
from coltype.core.type_map import TypeMap, default_type_map
from coltype.core.types import DecimalType, IntegerType

__all__: list[str] = [
    "CommandEntry",
    "DecimalType",
    "IntegerType",
    "NumberParser",
    "OutputFormat",
    "ParamKind",
    "TypeConverter",
    "TypeMap",
    "default_type_map",
    "list_commands",
]

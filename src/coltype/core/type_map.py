"""Name → converter registry.

The CLI and library callers look converters up by column-type name
(``"integer"``, ``"decimal"``) instead of importing the classes.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from coltype.core.protocols import NumberParser, TypeConverter
from coltype.core.types import DecimalType, IntegerType
from coltype.exceptions import UnknownTypeError

logger = logging.getLogger(__name__)


class TypeMap:
    """Mutable mapping of type names to converter instances.

    Parameters
    ----------
    types:
        Initial name → converter pairs.
    """

    def __init__(self, types: Mapping[str, TypeConverter] | None = None) -> None:
        self._types: dict[str, TypeConverter] = dict(types or {})

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)

    def names(self) -> list[str]:
        """Return the registered type names, sorted."""
        return sorted(self._types)

    def set(self, name: str, converter: TypeConverter) -> None:
        """Register *converter* under *name*, replacing any previous one."""
        self._types[name] = converter

    def get(self, name: str) -> TypeConverter:
        """Return the converter registered under *name*.

        Raises
        ------
        UnknownTypeError
            If *name* is not registered.
        """
        try:
            return self._types[name]
        except KeyError:
            raise UnknownTypeError(
                f"Unknown type: {name}",
                hint=f"Known types: {', '.join(self.names()) or '(none)'}",
            ) from None


def default_type_map(
    number_parser: NumberParser | None = None,
    *,
    use_locale_parser: bool = False,
) -> TypeMap:
    """Build a :class:`TypeMap` holding the integer and decimal converters."""
    decimal = DecimalType(number_parser, use_locale_parser=use_locale_parser)
    integer = IntegerType()
    logger.debug("Built default type map (locale parsing: %s)", use_locale_parser)
    return TypeMap({integer.name: integer, decimal.name: decimal})

"""Integer and decimal column-type converters.

Each converter moves values across two boundaries:

* **storage** — :meth:`to_storage` prepares an application value for a
  bound statement parameter; :meth:`from_storage` and
  :meth:`many_from_storage` cast what the driver returns.
* **input** — :meth:`marshal` turns untrusted request data into an
  application value, silently yielding ``None`` for anything unusable.

Guarantees
----------
* ``to_storage`` is strict and raises :class:`InvalidInputError`.
* ``from_storage`` trusts the driver and never validates.
* ``marshal`` never raises for bad input.
* No I/O; the only per-instance state is the decimal locale toggle.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from coltype.core.models import ParamKind
from coltype.core.protocols import NumberParser
from coltype.exceptions import ConfigurationError, InvalidInputError, type_name
from coltype.utils.numbers import format_fixed, is_numeric, is_scalar, to_float, to_int

logger = logging.getLogger(__name__)


def _is_empty(value: object) -> bool:
    return value is None or (isinstance(value, str) and value == "")


# ---------------------------------------------------------------------------
# Integer
# ---------------------------------------------------------------------------

class IntegerType:
    """Converts integer data between Python and the database."""

    name: str = "integer"

    def to_storage(self, value: Any) -> int | None:
        """Convert *value* into the integer bound to a statement.

        Raises
        ------
        InvalidInputError
            If *value* is neither empty nor numeric.
        """
        if _is_empty(value):
            return None
        if not is_numeric(value):
            raise InvalidInputError(
                f"Cannot convert value of type `{type_name(value)}` to integer",
            )
        return to_int(value)

    def from_storage(self, value: Any) -> int | None:
        if value is None:
            return None
        return to_int(value)

    def many_from_storage(
        self,
        row: Mapping[str, Any],
        fields: Iterable[str],
    ) -> dict[str, Any]:
        """Return a copy of *row* with the named *fields* cast to ``int``.

        Fields that are missing or ``None`` are left alone.

        Raises
        ------
        InvalidInputError
            If a present field is not numeric.
        """
        values = dict(row)
        for field in fields:
            if values.get(field) is None:
                continue
            if not is_numeric(values[field]):
                raise InvalidInputError(
                    f"Cannot convert value of type `{type_name(values[field])}` to integer",
                    hint=f"Column `{field}` holds {values[field]!r}.",
                )
            values[field] = to_int(values[field])
        return values

    def binding_hint(self, value: Any) -> ParamKind:
        return ParamKind.INTEGER

    def marshal(self, value: Any) -> int | None:
        """Convert request data to ``int``; ``None`` when not numeric."""
        if _is_empty(value):
            return None
        if is_numeric(value):
            return to_int(value)
        return None


# ---------------------------------------------------------------------------
# Decimal
# ---------------------------------------------------------------------------

class DecimalType:
    """Converts decimal data between Python and the database.

    Decimals travel to the driver as strings so that no precision is
    lost in a float round trip, and come back as ``float``.

    Parameters
    ----------
    number_parser:
        Object satisfying :class:`NumberParser`, used by :meth:`marshal`
        for string input once locale parsing is enabled.
    use_locale_parser:
        Enable locale parsing immediately.  Same checks as
        :meth:`use_locale_parser`.
    """

    name: str = "decimal"

    def __init__(
        self,
        number_parser: NumberParser | None = None,
        *,
        use_locale_parser: bool = False,
    ) -> None:
        self._number_parser: NumberParser | None = number_parser
        self._use_locale_parser: bool = False
        if use_locale_parser:
            self.use_locale_parser(True)

    @property
    def locale_parsing(self) -> bool:
        """Whether :meth:`marshal` routes strings through the number parser."""
        return self._use_locale_parser

    def use_locale_parser(self, enable: bool = True) -> DecimalType:
        """Toggle locale-aware parsing of strings passed to :meth:`marshal`.

        Raises
        ------
        ConfigurationError
            When enabling without a parser that implements ``parse_float``.
        """
        if not enable:
            self._use_locale_parser = False
            logger.debug("Locale parsing disabled for %s", self.name)
            return self

        parser = self._number_parser
        if not isinstance(parser, NumberParser) or not callable(parser.parse_float):
            raise ConfigurationError(
                f"Cannot use locale parsing with the {type_name(parser)} class",
                hint="Pass a number parser that implements parse_float(text).",
            )
        self._use_locale_parser = True
        logger.debug(
            "Locale parsing enabled for %s using %s", self.name, type_name(parser),
        )
        return self

    def to_storage(self, value: Any) -> str | None:
        """Convert *value* into the decimal string bound to a statement.

        Numeric strings pass through untouched; other scalars are
        formatted as six-decimal fixed point.

        Raises
        ------
        InvalidInputError
            If *value* is not a scalar, or is a non-numeric string.
        """
        if _is_empty(value):
            return None
        if not is_scalar(value):
            raise InvalidInputError(
                f"Cannot convert value of type `{type_name(value)}` to a decimal",
            )
        if isinstance(value, str):
            if is_numeric(value):
                return value
            raise InvalidInputError(
                f"Cannot convert value of type `{type_name(value)}` to a decimal",
                hint=f"{value!r} is not a numeric string.",
            )
        return format_fixed(value)

    def from_storage(self, value: Any) -> float | None:
        if value is None:
            return None
        return to_float(value)

    def many_from_storage(
        self,
        row: Mapping[str, Any],
        fields: Iterable[str],
    ) -> dict[str, Any]:
        """Return a copy of *row* with the named *fields* cast to ``float``.

        Fields that are missing or ``None`` are left alone.  Unlike
        :meth:`IntegerType.many_from_storage`, values are not validated.
        """
        values = dict(row)
        for field in fields:
            if values.get(field) is None:
                continue
            values[field] = to_float(values[field])
        return values

    def binding_hint(self, value: Any) -> ParamKind:
        return ParamKind.STRING

    def marshal(self, value: Any) -> float | None:
        """Convert request data to ``float``; ``None`` when not numeric."""
        if _is_empty(value):
            return None
        parser = self._number_parser
        if isinstance(value, str) and self._use_locale_parser and parser is not None:
            return parser.parse_float(value)
        if is_numeric(value):
            return to_float(value)
        return None

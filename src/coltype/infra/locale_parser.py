"""Infrastructure: locale-aware parsing of user-entered numbers.

Implements :class:`~coltype.core.protocols.NumberParser` for strings
written with a locale's grouping and decimal separators, e.g.
``"1.234,5"`` in German or ``"1 234,5"`` in French.

Rules
-----
* Separators are fixed at construction; parsing is stateless.
* Unparsable input yields ``None``, which callers treat as absent.
* The process locale is only read by :meth:`from_current_locale`.
"""

from __future__ import annotations

import locale

from coltype.exceptions import ConfigurationError
from coltype.utils.numbers import is_numeric

# Spaces used as grouping separators by various locales.
_SPACE_SEPARATORS: tuple[str, ...] = (" ", "\xa0", "\u202f")


class LocaleNumberParser:
    """Parse numbers using explicit decimal and grouping separators.

    Parameters
    ----------
    decimal_point:
        Single character marking the fractional part.
    thousands_separator:
        Grouping character, or ``""`` when the locale does not group.
    """

    def __init__(self, decimal_point: str = ".", thousands_separator: str = ",") -> None:
        if len(decimal_point) != 1:
            raise ConfigurationError(
                f"Decimal point must be a single character, got {decimal_point!r}",
            )
        if decimal_point == thousands_separator:
            raise ConfigurationError(
                "Decimal point and thousands separator must differ.",
                hint=f"Both are set to {decimal_point!r}.",
            )
        self.decimal_point: str = decimal_point
        self.thousands_separator: str = thousands_separator

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(decimal_point={self.decimal_point!r}, "
            f"thousands_separator={self.thousands_separator!r})"
        )

    @classmethod
    def from_current_locale(cls) -> LocaleNumberParser:
        """Build a parser from the process ``LC_NUMERIC`` conventions."""
        conventions = locale.localeconv()
        decimal_point = str(conventions.get("decimal_point") or ".")
        thousands_separator = str(conventions.get("thousands_sep") or "")
        return cls(decimal_point, thousands_separator)

    def parse_float(self, text: str) -> float | None:
        """Return *text* as a ``float``, or ``None`` if it is not a number."""
        normalized = text.strip()
        separator = self.thousands_separator
        if separator in _SPACE_SEPARATORS:
            for space in _SPACE_SEPARATORS:
                normalized = normalized.replace(space, "")
        elif separator:
            normalized = normalized.replace(separator, "")
        if self.decimal_point != ".":
            normalized = normalized.replace(self.decimal_point, ".")
        if not normalized or not is_numeric(normalized):
            return None
        return float(normalized)

"""Numeric predicates and casts with database-driver semantics.

Drivers hand back numbers as strings (``"42"``, ``"3.50"``) and web
forms submit them the same way, so these helpers decide what counts as
a number and how loosely a value may be cast.

* :func:`is_numeric` — strict: an ``int``/``float``/``Decimal`` (never
  ``bool``) or a string holding a complete decimal or exponent literal
  written with ASCII digits, optionally padded with ASCII whitespace.
* :func:`to_int` / :func:`to_float` — lenient: a string is cast from its
  leading numeric prefix and yields ``0`` when there is none.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal

# ASCII whitespace only; str.isspace() would also accept unicode spaces.
_WS = " \t\n\r\v\f"

_NUMBER = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"

# re.ASCII keeps \d to 0-9; other Unicode digits are not numbers here.
_NUMERIC_RE = re.compile(rf"[{_WS}]*{_NUMBER}[{_WS}]*", re.ASCII)
_PREFIX_RE = re.compile(rf"[{_WS}]*({_NUMBER})", re.ASCII)
_INTEGER_LITERAL_RE = re.compile(r"[+-]?\d+", re.ASCII)

SCALAR_TYPES: tuple[type, ...] = (str, int, float, bool, Decimal)


def is_scalar(value: object) -> bool:
    """Return ``True`` for strings, numbers and booleans."""
    return isinstance(value, SCALAR_TYPES)


def is_numeric(value: object) -> bool:
    """Return ``True`` if *value* is a number or a numeric string."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float, Decimal)):
        return True
    if isinstance(value, str):
        return _NUMERIC_RE.fullmatch(value) is not None
    return False


def _numeric_prefix(text: str) -> str | None:
    match = _PREFIX_RE.match(text)
    return match.group(1) if match else None


def _float_to_int(number: float) -> int:
    # NaN and infinities have no integer value.
    if math.isnan(number) or math.isinf(number):
        return 0
    return int(number)


def to_int(value: object) -> int:
    """Cast *value* to ``int``, truncating toward zero.

    ``"12.7"`` gives ``12``, ``"1e3"`` gives ``1000``, ``"12abc"`` gives
    ``12`` and ``"abc"`` gives ``0``.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, (float, Decimal)):
        return _float_to_int(float(value))
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8", errors="replace")
    if isinstance(value, str):
        prefix = _numeric_prefix(value)
        if prefix is None:
            return 0
        if _INTEGER_LITERAL_RE.fullmatch(prefix):
            return int(prefix)
        return _float_to_int(float(prefix))
    return int(value)  # type: ignore[call-overload]


def to_float(value: object) -> float:
    """Cast *value* to ``float`` using the same prefix rule as :func:`to_int`."""
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return float(value)
        except OverflowError:
            # Beyond float range; keep the sign.
            return math.inf if value > 0 else -math.inf
    if isinstance(value, (bool, float, Decimal)):
        return float(value)
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8", errors="replace")
    if isinstance(value, str):
        prefix = _numeric_prefix(value)
        return float(prefix) if prefix is not None else 0.0
    return float(value)  # type: ignore[arg-type]


def format_fixed(value: object) -> str:
    """Format *value* as a fixed-point string with at least six decimals.

    Integers and ``Decimal`` values are formatted exactly; a ``Decimal``
    with more than six fractional digits keeps all of them.  Everything
    else goes through ``float`` and ``"%F"``.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return f"{value}.000000"
    if isinstance(value, Decimal):
        exponent = value.as_tuple().exponent
        if value.is_finite() and isinstance(exponent, int) and exponent < -6:
            return format(value, "f")
        return format(value, ".6f")
    return "%F" % to_float(value)

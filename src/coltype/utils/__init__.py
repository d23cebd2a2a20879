"""Shared utilities — numeric predicates and casts used across layers.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""

from coltype.utils.numbers import format_fixed, is_numeric, is_scalar, to_float, to_int

__all__: list[str] = ["format_fixed", "is_numeric", "is_scalar", "to_float", "to_int"]

"""Infrastructure layer — integration with the operating system.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from coltype.infra.locale_parser import LocaleNumberParser

__all__: list[str] = ["LocaleNumberParser"]

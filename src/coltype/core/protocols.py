"""Protocols (interfaces) consumed by the core layer.

These define the contracts that converters and injected collaborators
must satisfy.  Core code depends ONLY on these protocols — never on
concrete infrastructure classes.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable

from coltype.core.models import ParamKind


@runtime_checkable
class NumberParser(Protocol):
    """Contract for locale-aware number parsers.

    Any object with a callable :meth:`parse_float` satisfies this
    protocol structurally (no explicit inheritance required).
    """

    def parse_float(self, text: str) -> float | None:
        """Parse *text* written in the parser's locale.

        Returns ``None`` when *text* is not a number in that locale.
        """
        ...  # pragma: no cover


class TypeConverter(Protocol):
    """Contract for column-type converters.

    A converter moves values between the application representation
    (Python numbers) and the storage representation (what the driver
    binds and returns).
    """

    def to_storage(self, value: Any) -> Any:
        """Convert an application value for binding; ``None`` for empty input."""
        ...  # pragma: no cover

    def from_storage(self, value: Any) -> Any:
        """Convert a value read from the driver; trusts its input."""
        ...  # pragma: no cover

    def many_from_storage(
        self,
        row: Mapping[str, Any],
        fields: Iterable[str],
    ) -> dict[str, Any]:
        """Convert the named *fields* of a result *row*."""
        ...  # pragma: no cover

    def binding_hint(self, value: Any) -> ParamKind:
        """Return the bind kind for *value*."""
        ...  # pragma: no cover

    def marshal(self, value: Any) -> Any:
        """Permissively convert untrusted input (e.g. form data)."""
        ...  # pragma: no cover

"""Custom exception hierarchy for coltype.

All exceptions raised by the package inherit from :class:`ColtypeError`
so that the CLI error boundary can render them uniformly.

Hierarchy
---------
ColtypeError
├── InvalidInputError
├── ConfigurationError
├── UnknownCommandError
├── UnknownTypeError
└── EnvironmentError
"""

from __future__ import annotations


class ColtypeError(Exception):
    """Base exception for all coltype errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Value conversion ------------------------------------------------------

class InvalidInputError(ColtypeError):
    """Raised when a value cannot be converted by a strict conversion path."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(ColtypeError):
    """Raised when settings or an injected collaborator are unusable."""


# --- Lookup ----------------------------------------------------------------

class UnknownCommandError(ColtypeError):
    """Raised when a command name is not present in the registry."""


class UnknownTypeError(ColtypeError):
    """Raised when a type name is not present in the type map."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ColtypeError):
    """Raised when an optional runtime dependency is not available."""


def type_name(value: object) -> str:
    """Return a short, human-readable type name for error messages."""
    if value is None:
        return "None"
    return type(value).__name__

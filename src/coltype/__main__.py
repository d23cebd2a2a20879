"""Allow ``python -m coltype`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m coltype`` behaves identically to the ``coltype``
console script.
"""

from __future__ import annotations

from coltype.cli.app import cli

if __name__ == "__main__":
    cli()

"""Pure rendering of a command registry as text or XML.

Every function in this module is a **pure** transformation of a
name → implementation mapping.  Nothing is written anywhere; callers
decide how to emit the returned string.

Pipeline order (enforced by :func:`list_commands`):

1. **Sort** — entries ordered by name (case-sensitive).
2. **Collapse** — text mode only; aliases of one implementation
   collapse to the shortest name.
3. **Render** — ``- name`` lines plus usage hints, or a ``<shells>``
   XML document.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from lxml import etree

from coltype.core.models import CommandEntry, OutputFormat

logger = logging.getLogger(__name__)

DEFAULT_PROGRAM: str = "coltype"


def provider_name(implementation: object) -> str:
    """Return the identifier of *implementation*.

    Strings are taken as-is; classes and instances are identified by the
    dotted path of their class.
    """
    if isinstance(implementation, str):
        return implementation
    cls = implementation if isinstance(implementation, type) else type(implementation)
    return f"{cls.__module__}.{cls.__qualname__}"


# ---------------------------------------------------------------------------
# 1. Sort
# ---------------------------------------------------------------------------

def sort_commands(commands: Mapping[str, object]) -> list[CommandEntry]:
    """Return registry entries ordered by name."""
    return [
        CommandEntry(name=name, provider=provider_name(implementation))
        for name, implementation in sorted(commands.items(), key=lambda item: item[0])
    ]


# ---------------------------------------------------------------------------
# 2. Collapse aliases
# ---------------------------------------------------------------------------

def collapse_aliases(entries: Sequence[CommandEntry]) -> list[str]:
    """Keep one name per provider: the shortest of its aliases.

    Each surviving name takes the position of the provider's first
    entry.  Among equally short aliases the earliest entry wins.
    """
    aliases: dict[str, list[str]] = {}
    for entry in entries:
        aliases.setdefault(entry.provider, []).append(entry.name)

    emitted: set[str] = set()
    names: list[str] = []
    for entry in entries:
        if entry.provider in emitted:
            continue
        emitted.add(entry.provider)
        # min() returns the first of several equally short names.
        names.append(min(aliases[entry.provider], key=len))
    return names


# ---------------------------------------------------------------------------
# 3. Render
# ---------------------------------------------------------------------------

def usage_hints(program: str = DEFAULT_PROGRAM) -> list[str]:
    """Return the static lines printed after a text listing."""
    return [
        f"To run a command, type `{program} command_name <args|options>`",
        f"To get help on a specific command, type `{program} command_name --help`",
    ]


def render_text(
    entries: Sequence[CommandEntry],
    *,
    program: str = DEFAULT_PROGRAM,
) -> str:
    """Render the deduplicated ``- name`` listing followed by usage hints."""
    lines = [f"- {name}" for name in collapse_aliases(entries)]
    lines.append("")
    lines.extend(usage_hints(program))
    return "\n".join(lines)


def render_xml(entries: Sequence[CommandEntry]) -> str:
    """Render one ``<shell>`` element per entry inside a ``<shells>`` root."""
    root = etree.Element("shells")
    for entry in entries:
        shell = etree.SubElement(root, "shell")
        shell.set("name", entry.name)
        shell.set("call_as", entry.name)
        shell.set("provider", entry.provider)
        shell.set("help", entry.help_invocation)
    logger.debug("Rendered %d shell element(s) as XML", len(entries))
    return etree.tostring(root, xml_declaration=True, encoding="UTF-8").decode("utf-8")


# ---------------------------------------------------------------------------
# Composite
# ---------------------------------------------------------------------------

def list_commands(
    commands: Mapping[str, object],
    output_format: OutputFormat = OutputFormat.TEXT,
    *,
    program: str = DEFAULT_PROGRAM,
) -> str:
    """Sort *commands* and render them in *output_format*.

    An empty mapping yields only the usage hints (text) or an empty
    ``<shells/>`` document (XML).
    """
    entries = sort_commands(commands)
    if output_format is OutputFormat.XML:
        return render_xml(entries)
    return render_text(entries, program=program)

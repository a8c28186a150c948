"""Rendering of diff results. Presentation only."""

from __future__ import annotations

import json

from apidrift.symbols.models import DiffResult

NO_CHANGES = "No breaking changes detected."
HEADING = "The following symbols have been changed or removed:"


def format_lines(result: DiffResult) -> list[str]:
    """One ``<identity> -> <new state>`` line per reported symbol."""
    if result.is_empty:
        return [NO_CHANGES]
    lines = [f"{identity} -> {state}" for identity, state in result.changed.items()]
    lines.extend(f"{identity} -> {state}" for identity, state in result.removed.items())
    return lines


def format_text(result: DiffResult) -> str:
    if result.is_empty:
        return NO_CHANGES
    return "\n".join([HEADING, *(f"- {line}" for line in format_lines(result))])


def format_json(result: DiffResult) -> str:
    return json.dumps(result.to_dict(), indent=2)

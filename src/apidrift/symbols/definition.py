"""Declaration extraction from symbol documentation.

scip-go attaches documentation as markdown blocks; the first block is a
fenced declaration::

    ```go
    func (c *Client) Do(req *Request) (*Response, error)
    ```

The declaration is the second line of a block. A block only yields a
definition when that line starts with a declaration keyword and the declared
name is exported (upper-case first character).
"""

from __future__ import annotations

import re
from collections.abc import Iterable

_DECLARATION_RE = re.compile(
    r"^\s*(?:func|type|const|var)\s+"
    r"(?:\([^)]*\)\s*)?"  # method receiver
    r"(?P<name>[^\s(\[=,]+)"
)


def extract_definition(documentation: str) -> str | None:
    """Return the exported declaration line of a documentation block, or None."""
    lines = documentation.split("\n")
    if len(lines) < 2:
        return None

    declaration = lines[1]
    m = _DECLARATION_RE.match(declaration)
    if m is None:
        return None
    if not m.group("name")[0].isupper():
        return None
    return declaration


def extract_definitions(documentation: Iterable[str]) -> frozenset[str]:
    """All definitions found across a symbol's documentation blocks."""
    found = (extract_definition(block) for block in documentation)
    return frozenset(d for d in found if d)

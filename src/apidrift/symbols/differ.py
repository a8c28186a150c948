"""Definition diff between the old and new version of a dependency.

Classification per used identity ``k`` with old definitions ``D_old``:

- no entry in the new table shares ``k``'s stable key: removed, with the
  ``REMOVED`` marker
- ``D_old == D_new``: unchanged, nothing recorded
- a definition only present in the new version: changed, reported with the
  first such definition
- otherwise (definitions only disappeared): removed, reported with the first
  old definition that disappeared

"First" is the smallest string, so reports are reproducible. The full sets
are kept in ``DiffResult.details``.
"""

from __future__ import annotations

from apidrift.core.logging import get_logger
from apidrift.symbols.models import (
    REMOVED,
    DefinitionDelta,
    DiffResult,
    SymbolIdentity,
    SymbolTable,
    UsageRecord,
)

log = get_logger("symbols.differ")


def _new_definitions(identity: SymbolIdentity, new_table: SymbolTable) -> frozenset[str] | None:
    """Definitions of ``identity`` in the new table, or None if it is gone.

    Prefers entries in the same package; falls back to every entry sharing
    the stable key when the package path moved.
    """
    if not new_table.has_key(identity.stable_key):
        return None
    candidates = new_table.matching(identity.stable_key)
    same_namespace = [c for c in candidates if c.namespace == identity.namespace]
    chosen = same_namespace or candidates
    return frozenset().union(*(new_table[c] for c in chosen))


def diff(usage: UsageRecord, new_table: SymbolTable) -> DiffResult:
    """Compare used old definitions against the new version's table."""
    result = DiffResult()

    for identity in sorted(usage):
        old_definitions = usage[identity]
        new_definitions = _new_definitions(identity, new_table)

        if new_definitions is None:
            result.removed[identity] = REMOVED
            result.details[identity] = DefinitionDelta(
                only_old=tuple(sorted(old_definitions)),
                gone=True,
            )
            continue

        only_old = tuple(sorted(old_definitions - new_definitions))
        only_new = tuple(sorted(new_definitions - old_definitions))
        if not only_old and not only_new:
            continue

        if only_new:
            result.changed[identity] = only_new[0]
        else:
            result.removed[identity] = only_old[0]
        result.details[identity] = DefinitionDelta(only_old=only_old, only_new=only_new)

    log.debug(
        "definitions_diffed",
        used=len(usage),
        changed=len(result.changed),
        removed=len(result.removed),
    )
    return result

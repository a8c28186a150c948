"""Usage correlation: which dependency symbols does the consumer reference?

1. Every occurrence in the consumer index whose raw symbol mentions the
   dependency module path is parsed to a stable key, remembering the
   package paths it was referenced from.
2. The old dependency index is turned into an identity -> definitions table.
3. Every table entry whose stable key was used is copied into the usage
   record, keyed by its full old-index identity. When an entry with that key
   lives in a referenced package, only those entries are kept; otherwise
   every entry with the key is.

A used key with no table entry (unexported, not a declaration, or not
matchable) contributes nothing.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping

from apidrift.core.logging import get_logger
from apidrift.index.models import ScipIndex
from apidrift.symbols.descriptor import parse_symbol
from apidrift.symbols.models import StableKey, SymbolTable, UsageRecord
from apidrift.symbols.table import build_symbol_table

log = get_logger("symbols.correlate")


def collect_usage(consumer: ScipIndex, module_path: str) -> dict[StableKey, set[str]]:
    """Stable key -> package paths, for dependency symbols the consumer references."""
    used: dict[StableKey, set[str]] = {}
    for occ in consumer.iter_occurrences():
        if module_path not in occ.symbol:
            continue
        identity = parse_symbol(occ.symbol)
        if identity is not None:
            used.setdefault(identity.stable_key, set()).add(identity.namespace)
    return used


def collect_used_keys(consumer: ScipIndex, module_path: str) -> set[StableKey]:
    """Stable keys of dependency symbols referenced anywhere in the consumer."""
    return set(collect_usage(consumer, module_path))


def restrict_to_usage(
    table: SymbolTable,
    used: Mapping[StableKey, Collection[str]],
) -> UsageRecord:
    """Entries of ``table`` the consumer references.

    ``used`` maps each referenced stable key to the package paths it was
    referenced from. Entries in one of those packages win over same-named
    entries elsewhere in the module.
    """
    usage: UsageRecord = {}
    for key in sorted(used):
        candidates = table.matching(key)
        referenced = [c for c in candidates if c.namespace in used[key]]
        for identity in referenced or candidates:
            usage[identity] = table[identity]
    return usage


def correlate(consumer: ScipIndex, old_dependency: ScipIndex, module_path: str) -> UsageRecord:
    """Dependency symbols the consumer uses, with their old definitions."""
    used = collect_usage(consumer, module_path)
    old_table = build_symbol_table(old_dependency)
    usage = restrict_to_usage(old_table, used)

    log.debug(
        "usage_correlated",
        module=module_path,
        used_keys=len(used),
        old_exported=len(old_table),
        matched=len(usage),
    )
    return usage

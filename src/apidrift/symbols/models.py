"""Data models for usage-scoped API diffs.

All models are plain dataclasses with no I/O. Identity matching across the
two dependency versions is done on ``SymbolIdentity.stable_key`` only; the
volatile prefix (indexer header with the version, and the package path) is
kept for display and as a tie-break preference.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

REMOVED = "removed"


class SymbolKind(str, Enum):
    FUNCTION = "function"
    TYPE = "type"
    CONSTANT_OR_VARIABLE = "constant-or-variable"


# (kind, owning type or "", local name)
StableKey = tuple[SymbolKind, str, str]


@dataclass(frozen=True, slots=True, order=True)
class SymbolIdentity:
    """Canonical identity of a declared entity.

    ``prefix`` is the SCIP header (scheme, manager, package name, version)
    and ``namespace`` the package path the entity lives in. Members of a
    type carry the type name in ``owner``.
    """

    prefix: str
    namespace: str
    kind: SymbolKind
    owner: str
    name: str

    @property
    def stable_key(self) -> StableKey:
        return (self.kind, self.owner, self.name)

    @property
    def local_name(self) -> str:
        return f"{self.owner}.{self.name}" if self.owner else self.name

    @property
    def display(self) -> str:
        if self.namespace:
            return f"{self.namespace}.{self.local_name}"
        return self.local_name

    def __str__(self) -> str:
        return self.display


class SymbolTable(Mapping[SymbolIdentity, frozenset[str]]):
    """Identity -> set of declared definitions, for one index.

    Also indexed by stable key so cross-version lookups never touch the
    volatile prefix.
    """

    def __init__(self, entries: Mapping[SymbolIdentity, Iterable[str]] | None = None) -> None:
        self._entries: dict[SymbolIdentity, frozenset[str]] = {}
        self._by_key: dict[StableKey, list[SymbolIdentity]] = {}
        for identity, definitions in (entries or {}).items():
            self.add(identity, definitions)

    def add(self, identity: SymbolIdentity, definitions: Iterable[str]) -> None:
        """Add definitions for an identity, merging with any already present."""
        existing = self._entries.get(identity)
        if existing is None:
            self._by_key.setdefault(identity.stable_key, []).append(identity)
            existing = frozenset()
        self._entries[identity] = existing | frozenset(definitions)

    def matching(self, key: StableKey) -> list[SymbolIdentity]:
        """All identities sharing a stable key, in sorted order."""
        return sorted(self._by_key.get(key, ()))

    def has_key(self, key: StableKey) -> bool:
        return key in self._by_key

    def __getitem__(self, identity: SymbolIdentity) -> frozenset[str]:
        return self._entries[identity]

    def __iter__(self) -> Iterator[SymbolIdentity]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


# Used dependency identity -> non-empty set of old-version definitions
UsageRecord = dict[SymbolIdentity, frozenset[str]]


@dataclass(frozen=True, slots=True)
class DefinitionDelta:
    """Full definition-set difference for one identity, sorted."""

    only_old: tuple[str, ...] = ()
    only_new: tuple[str, ...] = ()
    gone: bool = False  # no entry with this stable key in the new index


@dataclass
class DiffResult:
    """Usage-scoped diff between two dependency versions.

    ``changed`` and ``removed`` map an identity to its new state: a new
    definition, or the ``REMOVED`` marker when the entity is gone entirely.
    An identity appears in at most one of them. ``details`` keeps the full
    difference sets for every reported identity.
    """

    changed: dict[SymbolIdentity, str] = field(default_factory=dict)
    removed: dict[SymbolIdentity, str] = field(default_factory=dict)
    details: dict[SymbolIdentity, DefinitionDelta] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.changed and not self.removed

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON reports."""
        return {
            "changed": [self._entry(k, v) for k, v in sorted(self.changed.items())],
            "removed": [self._entry(k, v) for k, v in sorted(self.removed.items())],
        }

    def _entry(self, identity: SymbolIdentity, state: str) -> dict[str, Any]:
        delta = self.details.get(identity, DefinitionDelta())
        return {
            "symbol": identity.display,
            "kind": identity.kind.value,
            "package": identity.namespace,
            "new": state,
            "old_definitions": list(delta.only_old),
            "new_definitions": list(delta.only_new),
        }

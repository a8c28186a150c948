"""In-memory form of a decoded SCIP index.

Plain frozen dataclasses; ordering of documents, occurrences and symbols is
the order in which the indexer emitted them.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class Role(str, Enum):
    """Role of an occurrence, from the SCIP symbol_roles bitmask."""

    DEFINITION = "definition"
    IMPORT = "import"
    REFERENCE = "reference"


@dataclass(frozen=True, slots=True)
class ScipOccurrence:
    """A reference to a symbol at a source location."""

    symbol: str  # raw SCIP symbol string
    line: int = 0
    column: int = 0
    end_line: int = 0
    end_column: int = 0
    role: Role = Role.REFERENCE


@dataclass(frozen=True, slots=True)
class ScipSymbol:
    """A symbol declared in a document, with its documentation blocks."""

    symbol: str  # raw SCIP symbol string
    documentation: tuple[str, ...] = ()
    display_name: str = ""


@dataclass(frozen=True, slots=True)
class ScipDocument:
    relative_path: str
    language: str = ""
    occurrences: tuple[ScipOccurrence, ...] = ()
    symbols: tuple[ScipSymbol, ...] = ()


@dataclass(frozen=True, slots=True)
class ScipMetadata:
    tool_name: str = ""
    tool_version: str = ""
    project_root: str = ""


@dataclass(frozen=True, slots=True)
class ScipIndex:
    """Complete decoded index."""

    documents: tuple[ScipDocument, ...] = ()
    metadata: ScipMetadata = field(default_factory=ScipMetadata)

    def iter_occurrences(self) -> Iterator[ScipOccurrence]:
        for doc in self.documents:
            yield from doc.occurrences

    def iter_symbols(self) -> Iterator[ScipSymbol]:
        for doc in self.documents:
            yield from doc.symbols

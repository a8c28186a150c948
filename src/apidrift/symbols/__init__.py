"""Symbol identities, definition tables, usage correlation and diffing."""

from apidrift.symbols.correlate import (
    collect_usage,
    collect_used_keys,
    correlate,
    restrict_to_usage,
)
from apidrift.symbols.definition import extract_definition, extract_definitions
from apidrift.symbols.descriptor import parse_symbol
from apidrift.symbols.differ import diff
from apidrift.symbols.models import (
    REMOVED,
    DefinitionDelta,
    DiffResult,
    StableKey,
    SymbolIdentity,
    SymbolKind,
    SymbolTable,
    UsageRecord,
)
from apidrift.symbols.table import build_symbol_table

__all__ = [
    "REMOVED",
    "DefinitionDelta",
    "DiffResult",
    "StableKey",
    "SymbolIdentity",
    "SymbolKind",
    "SymbolTable",
    "UsageRecord",
    "build_symbol_table",
    "collect_usage",
    "collect_used_keys",
    "correlate",
    "diff",
    "extract_definition",
    "extract_definitions",
    "parse_symbol",
    "restrict_to_usage",
]

"""Build identity -> definitions tables from decoded indexes."""

from __future__ import annotations

from apidrift.core.logging import get_logger
from apidrift.index.models import ScipIndex
from apidrift.symbols.definition import extract_definitions
from apidrift.symbols.descriptor import parse_symbol
from apidrift.symbols.models import SymbolTable

log = get_logger("symbols.table")


def build_symbol_table(index: ScipIndex) -> SymbolTable:
    """Table of every exported declaration in an index.

    Symbols whose descriptor does not parse, or whose documentation carries
    no exported declaration, are left out.
    """
    table = SymbolTable()
    declared = 0
    for sym in index.iter_symbols():
        declared += 1
        identity = parse_symbol(sym.symbol)
        if identity is None:
            continue
        definitions = extract_definitions(sym.documentation)
        if not definitions:
            continue
        table.add(identity, definitions)

    log.debug("symbol_table_built", declared=declared, exported=len(table))
    return table

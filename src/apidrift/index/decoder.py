"""SCIP (Source Code Index Protocol) index decoding.

Turns the protobuf bytes produced by an external indexer (scip-go) into the
frozen dataclasses of ``apidrift.index.models``. Decoding is all-or-nothing:
any malformed, truncated or empty buffer raises ``DecodeError`` and no
partial index is returned.

Usage::

    index = read_index(Path("index.scip"))
    for doc in index.documents:
        for sym in doc.symbols:
            print(sym.symbol, sym.documentation)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from google.protobuf.message import DecodeError as ProtobufDecodeError

from apidrift.core.errors import DecodeError
from apidrift.core.logging import get_logger
from apidrift.index import schema
from apidrift.index.models import (
    Role,
    ScipDocument,
    ScipIndex,
    ScipMetadata,
    ScipOccurrence,
    ScipSymbol,
)

log = get_logger("index.decoder")


def decode_index(data: bytes, *, source: str | None = None) -> ScipIndex:
    """Decode a serialized SCIP index.

    Args:
        data: Raw index bytes
        source: Label for error messages and logs (usually the file path)

    Raises:
        DecodeError: If the buffer is empty or not a well-formed index.
    """
    if not data:
        raise DecodeError.empty(source)

    proto_index = schema.Index()
    try:
        proto_index.ParseFromString(data)
    except ProtobufDecodeError as e:
        raise DecodeError.malformed(str(e) or "protobuf decode failed", source) from e

    index = ScipIndex(
        documents=tuple(_convert_document(d) for d in proto_index.documents),
        metadata=_convert_metadata(proto_index.metadata),
    )
    log.debug(
        "index_decoded",
        source=source,
        tool=index.metadata.tool_name,
        documents=len(index.documents),
    )
    return index


def read_index(path: Path) -> ScipIndex:
    """Read and decode an index file.

    Raises:
        DecodeError: If the file is missing, unreadable, or malformed.
    """
    try:
        data = path.read_bytes()
    except FileNotFoundError as e:
        raise DecodeError.not_found(str(path)) from e
    except OSError as e:
        raise DecodeError.unreadable(str(path), e.strerror or str(e)) from e
    return decode_index(data, source=str(path))


def _convert_metadata(proto_meta: Any) -> ScipMetadata:
    return ScipMetadata(
        tool_name=proto_meta.tool_info.name,
        tool_version=proto_meta.tool_info.version,
        project_root=proto_meta.project_root,
    )


def _convert_document(proto_doc: Any) -> ScipDocument:
    return ScipDocument(
        relative_path=proto_doc.relative_path,
        language=proto_doc.language,
        occurrences=tuple(
            _convert_occurrence(o) for o in proto_doc.occurrences if o.symbol
        ),
        symbols=tuple(_convert_symbol(s) for s in proto_doc.symbols if s.symbol),
    )


def _convert_symbol(proto_sym: Any) -> ScipSymbol:
    return ScipSymbol(
        symbol=proto_sym.symbol,
        documentation=tuple(proto_sym.documentation),
        display_name=proto_sym.display_name,
    )


def _convert_occurrence(proto_occ: Any) -> ScipOccurrence:
    # SCIP ranges are [line, col, end_col] (single line) or
    # [line, col, end_line, end_col]
    r = list(proto_occ.range)
    line = r[0] if len(r) > 0 else 0
    column = r[1] if len(r) > 1 else 0
    if len(r) == 3:
        end_line, end_column = line, r[2]
    elif len(r) >= 4:
        end_line, end_column = r[2], r[3]
    else:
        end_line, end_column = line, column

    return ScipOccurrence(
        symbol=proto_occ.symbol,
        line=line,
        column=column,
        end_line=end_line,
        end_column=end_column,
        role=_parse_role(proto_occ.symbol_roles),
    )


def _parse_role(symbol_roles: int) -> Role:
    """Parse role from SCIP symbol_roles bitmask."""
    if symbol_roles & schema.ROLE_DEFINITION:
        return Role.DEFINITION
    if symbol_roles & schema.ROLE_IMPORT:
        return Role.IMPORT
    return Role.REFERENCE

"""SCIP index decoding and external indexer invocation."""

from apidrift.index.decoder import decode_index, read_index
from apidrift.index.models import (
    Role,
    ScipDocument,
    ScipIndex,
    ScipMetadata,
    ScipOccurrence,
    ScipSymbol,
)

__all__ = [
    "Role",
    "ScipDocument",
    "ScipIndex",
    "ScipMetadata",
    "ScipOccurrence",
    "ScipSymbol",
    "decode_index",
    "read_index",
]

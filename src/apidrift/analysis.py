"""Core pipeline: three index artifacts in, usage-scoped diff out.

Pure and single-threaded. A decode failure in any artifact aborts the whole
analysis; no partial result is produced.
"""

from __future__ import annotations

from pathlib import Path

from apidrift.core.logging import get_logger
from apidrift.index.decoder import decode_index, read_index
from apidrift.index.models import ScipIndex
from apidrift.symbols.correlate import correlate
from apidrift.symbols.differ import diff
from apidrift.symbols.models import DiffResult
from apidrift.symbols.table import build_symbol_table

log = get_logger("analysis")


def analyze_indexes(
    consumer: ScipIndex,
    old_dependency: ScipIndex,
    new_dependency: ScipIndex,
    module_path: str,
) -> DiffResult:
    usage = correlate(consumer, old_dependency, module_path)
    new_table = build_symbol_table(new_dependency)
    result = diff(usage, new_table)
    log.info(
        "analysis_complete",
        module=module_path,
        used=len(usage),
        changed=len(result.changed),
        removed=len(result.removed),
    )
    return result


def analyze(
    consumer: bytes,
    old_dependency: bytes,
    new_dependency: bytes,
    module_path: str,
) -> DiffResult:
    """Diff the dependency symbols a consumer uses between two versions.

    Args:
        consumer: Serialized index of the consuming project
        old_dependency: Serialized index of the dependency at its current version
        new_dependency: Serialized index of the dependency at the candidate version
        module_path: Dependency module path, as it appears in symbol strings

    Raises:
        DecodeError: If any artifact is not a well-formed index.
    """
    return analyze_indexes(
        decode_index(consumer, source="consumer"),
        decode_index(old_dependency, source="old dependency"),
        decode_index(new_dependency, source="new dependency"),
        module_path,
    )


def analyze_files(
    consumer: Path,
    old_dependency: Path,
    new_dependency: Path,
    module_path: str,
) -> DiffResult:
    """Same as ``analyze`` for index files on disk."""
    return analyze_indexes(
        read_index(consumer),
        read_index(old_dependency),
        read_index(new_dependency),
        module_path,
    )

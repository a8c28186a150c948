"""External SCIP indexer invocation.

Runs ``scip-go`` over a source tree and reports where the index landed.
Failures come back as ``IndexerResult(success=False)``; the caller decides
whether that is fatal.

Usage::

    runner = ScipGoRunner(config.indexer)
    result = runner.run(project_root=Path("/src/app"), output_dir=Path("/tmp/app"))
    if result.success:
        index = read_index(result.scip_path)
"""

from __future__ import annotations

import shutil
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path

from apidrift.config.models import IndexerConfig
from apidrift.core.logging import get_logger

log = get_logger("index.runner")

INDEX_FILENAME = "index.scip"


@dataclass
class IndexerResult:
    """Result of running a SCIP indexer."""

    success: bool
    scip_path: Path | None = None
    error: str | None = None
    duration_ms: int = 0


class ScipGoRunner:
    """Runs scip-go to produce index files."""

    def __init__(self, config: IndexerConfig | None = None) -> None:
        self.config = config or IndexerConfig()

    def is_available(self) -> bool:
        return shutil.which(self.config.command) is not None

    def build_command(
        self,
        project_root: Path,
        output_path: Path,
        repository_remote: str | None = None,
    ) -> list[str]:
        cmd = [self.config.command]
        if self.config.verbose:
            cmd.append("--verbose")
        cmd.extend(["--output", str(output_path)])
        if not repository_remote:
            # Consumer project: index it in place
            cmd.append(str(project_root))
            return cmd
        cmd.extend(
            [
                "--repository-remote",
                repository_remote,
                "--project-root",
                str(project_root),
                "--repository-root",
                str(project_root),
                "./...",
            ]
        )
        return cmd

    def run(
        self,
        project_root: Path,
        output_dir: Path,
        repository_remote: str | None = None,
    ) -> IndexerResult:
        """Index ``project_root`` into ``output_dir/index.scip``."""
        start = time.monotonic()

        if not self.is_available():
            return IndexerResult(
                success=False,
                error=f"Indexer '{self.config.command}' not found on PATH",
            )

        output_dir.mkdir(parents=True, exist_ok=True)
        scip_path = output_dir / INDEX_FILENAME
        cmd = self.build_command(project_root, scip_path, repository_remote)
        log.info("indexer_start", cwd=str(project_root), cmd=cmd)

        try:
            result = subprocess.run(
                cmd,
                cwd=project_root,
                capture_output=True,
                text=True,
                timeout=self.config.timeout_sec,
            )
        except subprocess.TimeoutExpired:
            return IndexerResult(
                success=False,
                error=f"Indexer timed out after {self.config.timeout_sec}s",
                duration_ms=_elapsed_ms(start),
            )
        except OSError as e:
            return IndexerResult(success=False, error=str(e), duration_ms=_elapsed_ms(start))

        duration_ms = _elapsed_ms(start)
        if result.returncode != 0:
            log.debug("indexer_output", stdout=result.stdout, stderr=result.stderr)
            reason = result.stderr.strip() or f"exit code {result.returncode}"
            return IndexerResult(
                success=False,
                error=f"Indexer failed: {reason}",
                duration_ms=duration_ms,
            )

        if not scip_path.exists():
            return IndexerResult(
                success=False,
                error="Indexer did not produce output file",
                duration_ms=duration_ms,
            )

        log.info("indexer_done", scip_path=str(scip_path), duration_ms=duration_ms)
        return IndexerResult(success=True, scip_path=scip_path, duration_ms=duration_ms)


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)

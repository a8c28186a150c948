"""Upgrade check orchestration.

Produces the three index artifacts the analysis needs and hands them to
``apidrift.analysis``:

1. index the consumer project in place
2. clone the dependency at the old and new version and index each clone
   (the two are independent and run concurrently, up to
   ``indexer.max_workers``)
3. correlate and diff

Everything lives in one temporary work directory that is removed afterwards,
whatever the outcome.
"""

from __future__ import annotations

import tempfile
from concurrent.futures import ThreadPoolExecutor
from contextvars import copy_context
from pathlib import Path

from apidrift.analysis import analyze_files
from apidrift.config.models import ApiDriftConfig
from apidrift.core.errors import IndexerError
from apidrift.core.logging import clear_run_id, get_logger, set_run_id
from apidrift.core.progress import status, task
from apidrift.index.runner import ScipGoRunner
from apidrift.source.acquire import clone_at_version, repository_url
from apidrift.symbols.models import DiffResult

log = get_logger("workflow")


def _index_project(runner: ScipGoRunner, project_path: Path, work_dir: Path) -> Path:
    with task(f"Indexing project {project_path}"):
        result = runner.run(project_path, work_dir / "project-index")
        if not result.success or result.scip_path is None:
            raise IndexerError.failed(str(project_path), result.error or "unknown error")
    return result.scip_path


def _index_dependency(
    runner: ScipGoRunner,
    url: str,
    version: str,
    slot: Path,
) -> Path:
    status(f"Cloning {url} at {version}")
    source = clone_at_version(url, version, slot / "src")

    status(f"Indexing {url} at {version}")
    result = runner.run(source, slot, repository_remote=url)
    if not result.success or result.scip_path is None:
        raise IndexerError.failed(f"{url}@{version}", result.error or "unknown error")
    return result.scip_path


def check_upgrade(
    project_path: Path,
    module_path: str,
    old_version: str,
    new_version: str,
    config: ApiDriftConfig | None = None,
) -> DiffResult:
    """Report which dependency symbols used by a project change between versions.

    Raises:
        IndexerError: If the indexer is missing or fails on any tree.
        AcquisitionError: If the dependency cannot be cloned or a version is unknown.
        DecodeError: If an index the indexer produced cannot be decoded.
    """
    config = config or ApiDriftConfig()
    runner = ScipGoRunner(config.indexer)
    if not runner.is_available():
        raise IndexerError.unavailable(config.indexer.command)

    set_run_id()
    try:
        return _run_check(runner, config, project_path, module_path, old_version, new_version)
    finally:
        clear_run_id()


def _run_check(
    runner: ScipGoRunner,
    config: ApiDriftConfig,
    project_path: Path,
    module_path: str,
    old_version: str,
    new_version: str,
) -> DiffResult:
    url = repository_url(module_path, config.source.url_template)
    log.info(
        "check_start",
        project=str(project_path),
        module=module_path,
        old_version=old_version,
        new_version=new_version,
    )

    with tempfile.TemporaryDirectory(prefix="apidrift-") as tmp:
        work_dir = Path(tmp)
        project_index = _index_project(runner, project_path, work_dir)

        with ThreadPoolExecutor(max_workers=config.indexer.max_workers) as pool:
            # each job runs in its own copy of the current context (run id)
            old_future = pool.submit(
                copy_context().run,
                _index_dependency,
                runner,
                url,
                old_version,
                work_dir / "dep-old",
            )
            new_future = pool.submit(
                copy_context().run,
                _index_dependency,
                runner,
                url,
                new_version,
                work_dir / "dep-new",
            )
            old_index = old_future.result()
            new_index = new_future.result()

        return analyze_files(project_index, old_index, new_index, module_path)

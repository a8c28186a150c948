"""Dependency source acquisition with pygit2."""

from __future__ import annotations

from pathlib import Path

import pygit2

from apidrift.core.errors import AcquisitionError, RefNotFoundError
from apidrift.core.logging import get_logger

log = get_logger("source.acquire")


def repository_url(module_path: str, template: str = "https://{module}.git") -> str:
    """Clone URL for a module path, e.g. github.com/foo/bar -> https://github.com/foo/bar.git."""
    return template.format(module=module_path.strip("/"))


def _resolve_commit(repo: pygit2.Repository, version: str) -> pygit2.Commit:
    """Resolve a tag, branch (local or origin/) or commit id to a commit."""
    for candidate in (version, f"origin/{version}", f"refs/tags/{version}"):
        try:
            obj, _ = repo.resolve_refish(candidate)
        except (pygit2.GitError, KeyError, ValueError):
            continue
        if isinstance(obj, pygit2.Tag):
            obj = obj.peel(pygit2.Commit)
        if isinstance(obj, pygit2.Commit):
            return obj
    raise KeyError(version)


def checkout_version(repo: pygit2.Repository, url: str, version: str) -> pygit2.Commit:
    """Detached checkout of ``version`` in an existing clone."""
    try:
        commit = _resolve_commit(repo, version)
    except KeyError as e:
        raise RefNotFoundError.for_version(url, version) from e

    repo.checkout_tree(commit)
    repo.set_head(commit.id)
    return commit


def clone_at_version(url: str, version: str, dest: Path) -> Path:
    """Clone ``url`` into ``dest`` and check out ``version``.

    Raises:
        AcquisitionError: If the clone fails.
        RefNotFoundError: If ``version`` does not exist in the repository.
    """
    log.info("clone_start", url=url, version=version, dest=str(dest))
    try:
        repo = pygit2.clone_repository(url, str(dest))
    except (pygit2.GitError, ValueError) as e:
        raise AcquisitionError.clone_failed(url, str(e)) from e

    commit = checkout_version(repo, url, version)
    log.info("clone_done", url=url, version=version, commit=str(commit.id))
    return dest

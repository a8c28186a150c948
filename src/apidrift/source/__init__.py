"""Dependency source acquisition."""

from apidrift.source.acquire import checkout_version, clone_at_version, repository_url

__all__ = ["checkout_version", "clone_at_version", "repository_url"]

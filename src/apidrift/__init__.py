"""apidrift - usage-scoped API diffs between two versions of a dependency."""

__version__ = "0.1.0"

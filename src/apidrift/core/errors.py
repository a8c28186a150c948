"""apidrift error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Index decoding
- 4xxx: External indexer
- 5xxx: Source acquisition

Descriptor or documentation strings that do not match the expected grammar,
and used symbols with no counterpart in a dependency index, are not errors:
they surface as ``None`` results and absent table entries.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Index (3xxx)
    INDEX_NOT_FOUND = 3001
    INDEX_UNREADABLE = 3002
    INDEX_MALFORMED = 3003
    INDEX_EMPTY = 3004

    # Indexer (4xxx)
    INDEXER_UNAVAILABLE = 4001
    INDEXER_FAILED = 4002

    # Acquisition (5xxx)
    ACQUISITION_CLONE_FAILED = 5001
    ACQUISITION_REF_NOT_FOUND = 5002


@dataclass(eq=False)
class ApiDriftError(Exception):
    """Base error with structured context for logs and JSON reports.

    Not frozen: context managers and the interpreter assign
    ``__traceback__`` on exceptions they propagate.
    """

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'INDEX_MALFORMED')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(ApiDriftError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class DecodeError(ApiDriftError):
    """An index artifact is missing, unreadable, or not a well-formed index.

    Fatal to the run that needs the artifact. Never retried here: the
    artifact can only be reproduced by re-running the external indexer.
    """

    @classmethod
    def not_found(cls, path: str) -> "DecodeError":
        return cls(
            code=ErrorCode.INDEX_NOT_FOUND,
            message=f"Index file not found: {path}",
            details={"path": path},
        )

    @classmethod
    def unreadable(cls, path: str, reason: str) -> "DecodeError":
        return cls(
            code=ErrorCode.INDEX_UNREADABLE,
            message=f"Cannot read index file {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def malformed(cls, reason: str, source: str | None = None) -> "DecodeError":
        where = f" ({source})" if source else ""
        return cls(
            code=ErrorCode.INDEX_MALFORMED,
            message=f"Malformed index{where}: {reason}",
            details={"source": source, "reason": reason},
        )

    @classmethod
    def empty(cls, source: str | None = None) -> "DecodeError":
        where = f" ({source})" if source else ""
        return cls(
            code=ErrorCode.INDEX_EMPTY,
            message=f"Index artifact is empty{where}",
            details={"source": source},
        )


class IndexerError(ApiDriftError):
    """The external indexer could not produce an index."""

    @classmethod
    def unavailable(cls, command: str) -> "IndexerError":
        return cls(
            code=ErrorCode.INDEXER_UNAVAILABLE,
            message=f"Indexer '{command}' not found on PATH",
            details={"command": command},
        )

    @classmethod
    def failed(cls, target: str, reason: str) -> "IndexerError":
        return cls(
            code=ErrorCode.INDEXER_FAILED,
            message=f"Indexing {target} failed: {reason}",
            retryable=True,
            details={"target": target, "reason": reason},
        )


class AcquisitionError(ApiDriftError):
    """A dependency's source tree could not be obtained."""

    @classmethod
    def clone_failed(cls, url: str, reason: str) -> "AcquisitionError":
        return cls(
            code=ErrorCode.ACQUISITION_CLONE_FAILED,
            message=f"Failed to clone {url}: {reason}",
            retryable=True,
            details={"url": url, "reason": reason},
        )


class RefNotFoundError(AcquisitionError):
    """Version (tag, branch, commit) does not exist in the cloned repository."""

    @classmethod
    def for_version(cls, url: str, version: str) -> "RefNotFoundError":
        return cls(
            code=ErrorCode.ACQUISITION_REF_NOT_FOUND,
            message=f"Version '{version}' not found in {url}",
            details={"url": url, "version": version},
        )

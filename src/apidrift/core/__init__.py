"""Core module exports."""

from apidrift.core.errors import (
    AcquisitionError,
    ApiDriftError,
    ConfigError,
    DecodeError,
    ErrorCode,
    IndexerError,
    RefNotFoundError,
)
from apidrift.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)
from apidrift.core.progress import spinner, status, task

__all__ = [
    # Errors
    "AcquisitionError",
    "ApiDriftError",
    "ConfigError",
    "DecodeError",
    "ErrorCode",
    "IndexerError",
    "RefNotFoundError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
    # Progress
    "spinner",
    "status",
    "task",
]

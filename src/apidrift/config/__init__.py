"""Configuration models and loading."""

from apidrift.config.loader import load_config
from apidrift.config.models import (
    ApiDriftConfig,
    IndexerConfig,
    LoggingConfig,
    LogOutputConfig,
    ReportConfig,
    SourceConfig,
)

__all__ = [
    "ApiDriftConfig",
    "IndexerConfig",
    "LogOutputConfig",
    "LoggingConfig",
    "ReportConfig",
    "SourceConfig",
    "load_config",
]

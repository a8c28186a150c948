"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (APIDRIFT__SECTION__KEY)
3. Project YAML (<project>/.apidrift.yaml)
4. Global YAML (~/.config/apidrift/config.yaml)
5. Built-in defaults (this file)

Examples:
    APIDRIFT__LOGGING__LEVEL=DEBUG
    APIDRIFT__INDEXER__COMMAND=/opt/bin/scip-go
    APIDRIFT__INDEXER__TIMEOUT_SEC=900
    APIDRIFT__REPORT__FORMAT=json
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        APIDRIFT__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. Status lines are printed regardless.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class IndexerConfig(BaseModel):
    """External SCIP indexer configuration.

    Env vars:
        APIDRIFT__INDEXER__COMMAND: Indexer executable (default: scip-go)
        APIDRIFT__INDEXER__TIMEOUT_SEC: Per-run timeout
        APIDRIFT__INDEXER__VERBOSE: Pass --verbose to the indexer
        APIDRIFT__INDEXER__MAX_WORKERS: Concurrent dependency index builds
    """

    command: str = Field(
        default="scip-go",
        description="Indexer executable name or absolute path.",
    )
    timeout_sec: int = Field(
        default=600,
        description="Maximum time for a single indexer run. "
        "Large dependencies can take several minutes.",
    )
    verbose: bool = Field(
        default=False,
        description="Pass --verbose to the indexer.",
    )
    max_workers: int = Field(
        default=2,
        description="Dependency versions indexed concurrently. 1 runs them in sequence.",
    )

    @field_validator("timeout_sec", "max_workers")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"Must be >= 1, got {v}")
        return v


class SourceConfig(BaseModel):
    """Dependency source acquisition.

    Env vars:
        APIDRIFT__SOURCE__URL_TEMPLATE: Clone URL template with {module}
    """

    url_template: str = Field(
        default="https://{module}.git",
        description="Clone URL for a module path. {module} is replaced by the module path.",
    )

    @field_validator("url_template")
    @classmethod
    def validate_template(cls, v: str) -> str:
        if "{module}" not in v:
            raise ValueError(f"URL template must contain {{module}}: {v}")
        return v


class ReportConfig(BaseModel):
    """Report rendering.

    Env vars:
        APIDRIFT__REPORT__FORMAT: text or json
    """

    format: Literal["text", "json"] = "text"


class ApiDriftConfig(BaseModel):
    """Root configuration for apidrift."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    indexer: IndexerConfig = Field(default_factory=IndexerConfig)
    source: SourceConfig = Field(default_factory=SourceConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)

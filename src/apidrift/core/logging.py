"""Structured logging with multi-output support.

Supports:
- Separate console vs file log levels
- Console or JSON rendering per output
- Run correlation IDs so the three index builds of one check can be grouped
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from apidrift.config.models import LoggingConfig

_run_id: ContextVar[str | None] = ContextVar("run_id", default=None)


def get_run_id() -> str | None:
    return _run_id.get()


def set_run_id(run_id: str | None = None) -> str:
    """Set or generate a run correlation ID."""
    rid = run_id or uuid4().hex[:12]
    _run_id.set(rid)
    return rid


def clear_run_id() -> None:
    _run_id.set(None)


def _add_run_id(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if rid := get_run_id():
        event_dict["run_id"] = rid
    return event_dict


_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def configure_logging(
    *,
    config: LoggingConfig | None = None,
    json_format: bool = False,
    level: str = "WARNING",
) -> None:
    """Configure structlog. Pass config for multi-output, or use simple params.

    Args:
        config: Logging configuration with outputs
        json_format: Use JSON format for simple setup
        level: Default log level
    """
    from apidrift.config.models import LoggingConfig, LogOutputConfig

    if config is None:
        config = LoggingConfig(
            level=level,  # type: ignore[arg-type]
            outputs=[LogOutputConfig(format="json" if json_format else "console")],
        )

    default_level = _LEVEL_MAP.get(config.level.upper(), logging.WARNING)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
        _add_run_id,  # type: ignore[list-item]
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(default_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Don't cache - allows reconfiguration and respects level changes
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(default_level)

    for output in config.outputs:
        output_level = _LEVEL_MAP.get((output.level or config.level).upper(), default_level)
        is_console = output.destination in ("stderr", "stdout")

        if output.format == "json":
            formatter = structlog.stdlib.ProcessorFormatter(
                processor=structlog.processors.JSONRenderer(),
                foreign_pre_chain=shared_processors,
            )
        else:
            formatter = structlog.stdlib.ProcessorFormatter(
                processor=structlog.dev.ConsoleRenderer(
                    colors=is_console and sys.stderr.isatty(),
                    pad_event_to=0,
                    pad_level=False,
                ),
                foreign_pre_chain=shared_processors,
            )

        handler = _create_handler(output.destination)
        handler.setLevel(output_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)


def _create_handler(destination: str) -> logging.Handler:
    """Create handler for stderr, stdout, or file path.

    Console handlers go quiet while a spinner owns the terminal.
    """
    from apidrift.core.progress import ConsoleSuppressingFilter

    if destination in ("stderr", "stdout"):
        handler = logging.StreamHandler(sys.stderr if destination == "stderr" else sys.stdout)
        handler.addFilter(ConsoleSuppressingFilter())
        return handler
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a")


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Lazy logger; resolved against the configuration current at each call.

    Safe to create at import time, before ``configure_logging`` runs.
    """
    if name:
        return structlog.get_logger(name)  # type: ignore[no-any-return]
    return structlog.get_logger()  # type: ignore[no-any-return]

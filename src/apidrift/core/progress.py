"""User-facing progress feedback for CLI operations.

Status lines go to stderr so that stdout carries only the report.

Usage::

    from apidrift.core.progress import status, spinner, task

    status("Cloning github.com/foo/bar")
    with spinner("Indexing v1.2.0"):
        run_indexer()
    with task("Comparing definitions"):
        compare()
"""

from __future__ import annotations

import logging
import sys
import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from rich.console import Console

if TYPE_CHECKING:
    from structlog.stdlib import BoundLogger

_console = Console(stderr=True)

_STYLES = {
    "success": "[green]✓[/green] ",
    "error": "[red]✗[/red] ",
    "warning": "[yellow]![/yellow] ",
    "info": "  ",
    "none": "",
}

_suppress_console_logs = threading.local()


def is_console_suppressed() -> bool:
    """Check if console logging is currently suppressed."""
    return getattr(_suppress_console_logs, "active", False)


@contextmanager
def suppress_console_logs() -> Iterator[None]:
    """Suppress structlog console output while a live display is active.

    File handlers keep receiving logs.
    """
    _suppress_console_logs.active = True
    try:
        yield
    finally:
        _suppress_console_logs.active = False


class ConsoleSuppressingFilter(logging.Filter):
    """Blocks console handlers while a spinner owns the terminal."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: ARG002
        return not is_console_suppressed()


def _get_logger() -> BoundLogger:
    """Get logger lazily to respect runtime config."""
    from apidrift.core.logging import get_logger

    return get_logger("progress")


def _is_tty() -> bool:
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


def get_console() -> Console:
    """Get the shared Rich console instance."""
    return _console


def status(message: str, *, style: str = "info", indent: int = 0) -> None:
    """Print a styled status message to stderr."""
    prefix = _STYLES.get(style, "")
    padding = " " * indent
    _console.print(f"{padding}{prefix}{message}", highlight=False)
    _get_logger().debug("status", message=message, style=style)


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return "1 symbol" / "3 symbols" style text."""
    if plural is None:
        plural = singular + "s"
    word = singular if count == 1 else plural
    return f"{count} {word}"


@contextmanager
def spinner(message: str, *, indent: int = 0) -> Iterator[None]:
    """Show a spinner on a TTY, or a plain line otherwise."""
    padding = " " * indent
    if _is_tty():
        with (
            suppress_console_logs(),
            _console.status(f"{padding}[cyan]{message}[/cyan]", spinner="dots"),
        ):
            yield
    else:
        _console.print(f"{padding}{message}...", highlight=False)
        yield


@contextmanager
def task(name: str) -> Iterator[None]:
    """Context manager for a named task with timing.

    Prints ``✓ name (3.2s)`` on success and ``✗ name failed: ...`` on error.
    """
    log = _get_logger()
    log.debug("task_start", task=name)
    start = time.perf_counter()

    try:
        with spinner(name):
            yield
        elapsed = time.perf_counter() - start
        status(f"{name} ({elapsed:.1f}s)", style="success")
        log.debug("task_done", task=name, elapsed_s=elapsed)
    except Exception as e:
        elapsed = time.perf_counter() - start
        status(f"{name} failed: {e}", style="error")
        log.error("task_failed", task=name, elapsed_s=elapsed, error=str(e))
        raise

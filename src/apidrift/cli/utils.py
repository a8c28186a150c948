"""CLI utilities."""

from pathlib import Path

import click

from apidrift.config.loader import load_config
from apidrift.config.models import ApiDriftConfig
from apidrift.core.errors import ApiDriftError
from apidrift.core.logging import configure_logging
from apidrift.report.formatter import format_json, format_text
from apidrift.symbols.models import DiffResult

EXIT_CHANGES_FOUND = 2


def setup(ctx: click.Context, project_root: Path | None = None) -> ApiDriftConfig:
    """Load config for a command and apply its logging settings.

    ``-v`` on the root command forces DEBUG regardless of config.
    """
    try:
        config = load_config(project_root)
    except ApiDriftError as e:
        raise click.ClickException(str(e)) from e

    logging_config = config.logging
    if ctx.obj and ctx.obj.get("verbose"):
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(config=logging_config)
    return config


def emit_report(
    ctx: click.Context,
    result: DiffResult,
    *,
    as_json: bool,
    config: ApiDriftConfig,
    fail_on_changes: bool,
) -> None:
    """Print the report to stdout and pick the exit code."""
    if as_json or config.report.format == "json":
        click.echo(format_json(result))
    else:
        click.echo(format_text(result))

    if fail_on_changes and not result.is_empty:
        ctx.exit(EXIT_CHANGES_FOUND)

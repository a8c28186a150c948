"""apidrift check command - index everything and diff a dependency upgrade."""

from pathlib import Path

import click

from apidrift.cli.utils import emit_report, setup
from apidrift.core.errors import ApiDriftError
from apidrift.core.progress import pluralize, status
from apidrift.workflow import check_upgrade


@click.command()
@click.option(
    "--project-path",
    required=True,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Path to your Go project",
)
@click.option(
    "--module", "module_path", required=True, help="Module path of the dependency to check"
)
@click.option(
    "--old-version", required=True, help="Version currently in use (tag, branch or commit)"
)
@click.option("--new-version", required=True, help="Candidate version (tag, branch or commit)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option(
    "--fail-on-changes",
    is_flag=True,
    help="Exit with status 2 when changed or removed symbols are found",
)
@click.pass_context
def check_command(
    ctx: click.Context,
    project_path: Path,
    module_path: str,
    old_version: str,
    new_version: str,
    as_json: bool,
    fail_on_changes: bool,
) -> None:
    """Check which dependency symbols used by a project change in a new version.

    Clones the dependency at both versions, indexes all three trees with
    scip-go, and reports changed or removed symbols that the project uses.
    """
    project_path = project_path.resolve()
    config = setup(ctx, project_path)

    try:
        result = check_upgrade(project_path, module_path, old_version, new_version, config)
    except ApiDriftError as e:
        raise click.ClickException(e.message) from e

    affected = len(result.changed) + len(result.removed)
    status(f"Analysis complete: {pluralize(affected, 'affected symbol')}", style="success")
    emit_report(ctx, result, as_json=as_json, config=config, fail_on_changes=fail_on_changes)

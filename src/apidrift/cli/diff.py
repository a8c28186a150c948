"""apidrift diff command - diff pre-built SCIP indexes."""

from pathlib import Path

import click

from apidrift.analysis import analyze_files
from apidrift.cli.utils import emit_report, setup
from apidrift.core.errors import ApiDriftError

_INDEX_PATH = click.Path(exists=True, dir_okay=False, path_type=Path)


@click.command()
@click.argument("project_index", type=_INDEX_PATH)
@click.argument("old_index", type=_INDEX_PATH)
@click.argument("new_index", type=_INDEX_PATH)
@click.option("--module", "module_path", required=True, help="Module path of the dependency")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option(
    "--fail-on-changes",
    is_flag=True,
    help="Exit with status 2 when changed or removed symbols are found",
)
@click.pass_context
def diff_command(
    ctx: click.Context,
    project_index: Path,
    old_index: Path,
    new_index: Path,
    module_path: str,
    as_json: bool,
    fail_on_changes: bool,
) -> None:
    """Diff a dependency's old and new index, scoped to what a project uses.

    PROJECT_INDEX, OLD_INDEX and NEW_INDEX are .scip files produced by
    scip-go for the project and for the dependency at each version.
    """
    config = setup(ctx)

    try:
        result = analyze_files(project_index, old_index, new_index, module_path)
    except ApiDriftError as e:
        raise click.ClickException(e.message) from e

    emit_report(ctx, result, as_json=as_json, config=config, fail_on_changes=fail_on_changes)

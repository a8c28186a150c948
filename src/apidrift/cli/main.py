"""apidrift CLI - apidrift command."""

import click

from apidrift import __version__
from apidrift.cli.check import check_command
from apidrift.cli.diff import diff_command


@click.group()
@click.version_option(version=__version__, prog_name="apidrift")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """apidrift - find the dependency API changes that affect your code."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


cli.add_command(check_command, name="check")
cli.add_command(diff_command, name="diff")


if __name__ == "__main__":
    cli()

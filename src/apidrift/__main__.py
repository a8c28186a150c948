"""Allow running as python -m apidrift."""

from apidrift.cli.main import cli

if __name__ == "__main__":
    cli()

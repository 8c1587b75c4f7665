"""
workflowlint CLI
================

The main entry point for the workflowlint Python CLI.
"""

import typer

from workflowlint.cli.commands.config import config_app
from workflowlint.shared.domain.exceptions import ConfigurationError
from workflowlint.shared.infrastructure.logging import configure_logging

# Initialize Typer app
app = typer.Typer(
    name="workflowlint",
    help="Configuration tooling for the GitHub Actions workflow linter",
    add_completion=False,
    no_args_is_help=True,
)

app.add_typer(config_app, name="config")


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Lint configuration for GitHub Actions workflows."""
    try:
        configure_logging(level="DEBUG" if verbose else None)
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

"""
Config Commands for workflowlint CLI

Provides commands for the repository's actionlint.yaml:
- workflowlint config init [DEST]: Write the default configuration template
- workflowlint config check: Load the configuration and summarize it
- workflowlint config match PATH [MESSAGE...]: Explain suppression for a file
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from workflowlint.config import (
    Config,
    ConfigError,
    find_repo_config,
    read_config_file,
    write_default_config_file,
)
from workflowlint.shared.infrastructure.logging import get_logger

console = Console()
logger = get_logger(__name__)

config_app = typer.Typer(
    name="config",
    help="Create and inspect .github/actionlint.yaml",
    no_args_is_help=True,
)

DEFAULT_CONFIG_DEST = Path(".github") / "actionlint.yaml"


def _print_error(title: str, error: Exception) -> None:
    console.print(f"[red]{title}:[/red] {escape(str(error))}", soft_wrap=True)


def _load(config_file: Path | None, root: Path) -> tuple[Config | None, Path | None]:
    """
    Load an explicit config file, or discover the repository's one.

    Raises:
        typer.Exit: If loading fails
    """
    source = config_file if config_file is not None else find_repo_config(root)
    if source is None:
        return None, None

    try:
        return read_config_file(source), source
    except ConfigError as e:
        _print_error("Configuration Error", e)
        raise typer.Exit(code=1)


@config_app.command("init")
def init(
    dest: Path = typer.Argument(DEFAULT_CONFIG_DEST, help="Where to write the template"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
):
    """
    Write the default configuration template.

    Example:
        workflowlint config init .github/actionlint.yaml
    """
    if dest.exists() and not force:
        console.print(f"[yellow]Already exists:[/yellow] {escape(str(dest))} [dim](use --force to overwrite)[/dim]")
        raise typer.Exit(code=1)

    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        write_default_config_file(dest)
    except (OSError, ConfigError) as e:
        _print_error("Write Error", e)
        raise typer.Exit(code=1)

    console.print(f"[green]✓[/green] Wrote default configuration to {escape(str(dest))}")


@config_app.command("check")
def check(
    config_file: Optional[Path] = typer.Option(None, "--config-file", "-c", help="Config file to load"),
    root: Path = typer.Option(Path("."), "--root", "-r", help="Repository root used for discovery"),
):
    """
    Validate the configuration and print a summary.

    Without --config-file, .github/actionlint.yaml and then
    .github/actionlint.yml are looked up under --root.
    """
    config, source = _load(config_file, root)
    if config is None:
        console.print(f"[yellow]No configuration file found[/yellow] under {escape(str(root / '.github'))}")
        return

    table = Table(title="Configuration Summary", box=box.ROUNDED, show_header=False)
    table.add_column("Setting", style="cyan bold")
    table.add_column("Value", style="white")

    table.add_row("File", escape(str(source)))
    table.add_row("Runner labels", escape(", ".join(config.runner_labels)) or "[dim]none[/dim]")
    if config.config_variables is None:
        table.add_row("Config variables", "[dim]check disabled[/dim]")
    elif not config.config_variables:
        table.add_row("Config variables", "[yellow]none allowed[/yellow]")
    else:
        table.add_row("Config variables", escape(", ".join(config.config_variables)))

    for glob, path_config in config.paths.items():
        rules = ", ".join(rule.source for rule in path_config.ignore) or "-"
        table.add_row(f"paths: {escape(glob)}", f"ignore: {escape(rules)}")

    console.print(table)
    console.print(f"[green]✓[/green] Configuration is valid ({len(config.paths)} path entries)")


@config_app.command("match")
def match(
    path: str = typer.Argument(..., help="File path relative to the repository root"),
    messages: Optional[List[str]] = typer.Argument(None, help="Error messages to test"),
    config_file: Optional[Path] = typer.Option(None, "--config-file", "-c", help="Config file to load"),
    root: Path = typer.Option(Path("."), "--root", "-r", help="Repository root used for discovery"),
):
    """
    Show which "paths" entries match a file and which messages they ignore.
    """
    config, _ = _load(config_file, root)
    if config is None:
        console.print("[yellow]No configuration file found[/yellow]")
        return

    matching = config.path_configs_for(path)
    if not matching:
        console.print(f"[dim]No \"paths\" entry matches {escape(path)}[/dim]")
    for path_config in matching:
        console.print(f"[cyan]matched[/cyan] {escape(path_config.glob)}")

    for message in messages or []:
        if any(cfg.ignores(message) for cfg in matching):
            console.print(f"[green]ignored[/green]  {escape(message)}", soft_wrap=True)
        else:
            console.print(f"[red]reported[/red] {escape(message)}", soft_wrap=True)

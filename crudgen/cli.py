"""
Crudgen CLI - Command-line interface for resource generation

Usage:
    crudgen html User users name:string age:integer
    crudgen html Admin.User users name:string --no-model
    crudgen model Post posts title:string body:text
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from crudgen.config import GeneratorConfig
from crudgen.errors import DelegateFailure, GeneratorError
from crudgen.generator import EmissionStatus, GenerationResult
from crudgen.html import generate_resource
from crudgen.model import generate_model

app = typer.Typer(
    name="crudgen",
    help="Generate CRUD controllers, views, templates and models for a web resource",
    add_completion=False,
)
console = Console()

_STATUS_STYLE = {
    EmissionStatus.WRITTEN: "[green]created[/green]",
    EmissionStatus.SKIPPED: "[yellow]skipped[/yellow]",
    EmissionStatus.FAILED: "[red]failed[/red]",
}

ARGS_HELP = "Singular module name, plural name, then name:type attributes"


@app.command()
def html(
    args: Optional[List[str]] = typer.Argument(None, help=ARGS_HELP, metavar="SINGULAR PLURAL [ATTR]..."),
    model: Optional[bool] = typer.Option(
        None,
        "--model/--no-model",
        help="Also generate the model and migration (default from config, else on)",
    ),
    project: Optional[Path] = typer.Option(
        None, "--project", "-p", help="Project directory (defaults to cwd)", file_okay=False, resolve_path=True
    ),
    base: Optional[str] = typer.Option(None, "--base", help="Application module, e.g. MyApp"),
    force: bool = typer.Option(False, "--force", help="Overwrite existing files without asking"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show what would be generated without writing files"),
    config_file: Optional[Path] = typer.Option(None, "--config", help="Path to crudgen.yaml", dir_okay=False),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Generate controller, views, templates and controller test for a resource."""
    _configure_logging(verbose)
    try:
        config = GeneratorConfig.load(project, config_file, base=base, force=force or None, model=model)
        result = generate_resource(args or [], config, dry_run=dry_run, confirm=_confirm_overwrite)
    except DelegateFailure as e:
        if e.files is not None:
            _show_files(e.files)
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except GeneratorError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    _show_files(result.files)
    if result.model is None:
        rprint(Panel(result.instructions.strip(), title="Next"))
    else:
        _show_files(result.model)
        rprint(Panel(result.model.instructions.strip(), title="Next"))

    if not result.success:
        raise typer.Exit(1)


@app.command()
def model(
    args: Optional[List[str]] = typer.Argument(None, help=ARGS_HELP, metavar="SINGULAR PLURAL [ATTR]..."),
    project: Optional[Path] = typer.Option(
        None, "--project", "-p", help="Project directory (defaults to cwd)", file_okay=False, resolve_path=True
    ),
    base: Optional[str] = typer.Option(None, "--base", help="Application module, e.g. MyApp"),
    force: bool = typer.Option(False, "--force", help="Overwrite existing files without asking"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show what would be generated without writing files"),
    config_file: Optional[Path] = typer.Option(None, "--config", help="Path to crudgen.yaml", dir_okay=False),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Generate an Ecto model, migration and model test."""
    _configure_logging(verbose)
    try:
        config = GeneratorConfig.load(project, config_file, base=base, force=force or None)
        result = generate_model(args or [], config, dry_run=dry_run, confirm=_confirm_overwrite)
    except GeneratorError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    _show_files(result)
    rprint(Panel(result.instructions.strip(), title="Next"))

    if not result.success:
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version."""
    from crudgen import __version__
    rprint(f"crudgen {__version__}")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _confirm_overwrite(path: Path) -> bool:
    return typer.confirm(f"{path} already exists. Overwrite?")


def _show_files(result: GenerationResult) -> None:
    """Show what happened to each generated file."""
    table = Table()
    table.add_column("Status")
    table.add_column("File", style="cyan")
    table.add_column("Note")

    for outcome in result.files:
        table.add_row(_STATUS_STYLE[outcome.status], outcome.path, outcome.reason or "")

    rprint(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()

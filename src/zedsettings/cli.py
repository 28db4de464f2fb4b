"""Typer CLI: apply, biome, eslint-prettier, list, show, status commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from zedsettings import __version__
from zedsettings.templates import TEMPLATES_DIR_ENV

app = typer.Typer(
    name="zedsettings",
    help="Create or update Zed editor project settings from templates.",
    no_args_is_help=True,
)
console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"zedsettings v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version.", callback=_version_callback, is_eager=True
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
) -> None:
    """zedsettings - Zed project settings from templates."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _fail(message: str, available: list[str] | None = None) -> NoReturn:
    console.print(f"[red]{message}[/red]")
    if available is not None:
        console.print(f"Available templates: {', '.join(available) or '(none)'}")
    raise typer.Exit(1)


def _run_apply(
    names: list[str],
    template_file: Path | None,
    project_dir: Path,
    templates_dir: Path | None,
    dry_run: bool,
    builtin_only: bool = False,
) -> None:
    from zedsettings.errors import TemplateError, TemplateNotFoundError, ZedSettingsError
    from zedsettings.settings import apply_templates
    from zedsettings.templates import (
        available_template_names,
        load_builtin_template,
        load_template,
        load_template_file,
    )

    if not names and template_file is None:
        _fail(
            "Usage: zedsettings apply <template-name> [...] or --file <path>",
            available_template_names(templates_dir),
        )

    try:
        if builtin_only:
            templates = [load_builtin_template(name) for name in names]
        else:
            templates = [load_template(name, templates_dir) for name in names]
        if template_file is not None:
            templates.append(load_template_file(template_file))
    except TemplateNotFoundError as exc:
        _fail(str(exc), exc.available)
    except TemplateError as exc:
        _fail(str(exc), available_template_names(templates_dir))

    try:
        result = apply_templates(project_dir, templates, dry_run=dry_run)
    except ZedSettingsError as exc:
        _fail(str(exc))

    label = ", ".join(t.name for t in templates)
    if result.created_dir:
        console.print(f"Created directory: [cyan]{result.settings_path.parent}[/cyan]")
    if result.merged_existing:
        console.print(f"Found existing settings, merging with {label} configuration...")
    if result.recovered:
        console.print(
            "[yellow]Warning: Could not parse existing settings.json, creating new file...[/yellow]"
        )

    if dry_run:
        console.print_json(data=result.settings, indent=2)
        console.print(f"[yellow]Dry run:[/yellow] {result.settings_path} not written")
    else:
        console.print(
            f"[green]Created/updated {label} project settings at:[/green] {result.settings_path}"
        )


@app.command()
def apply(
    names: list[str] = typer.Argument(None, help="Template names, applied in order"),
    template_file: Path = typer.Option(None, "--file", "-f", help="Template file (JSON or YAML)"),
    project_dir: Path = typer.Option(Path.cwd(), "--dir", help="Project directory"),
    templates_dir: Path = typer.Option(
        None, "--templates-dir", envvar=TEMPLATES_DIR_ENV, help="Extra templates directory"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print merged settings without writing"),
) -> None:
    """Merge one or more templates into .zed/settings.json."""
    _run_apply(names or [], template_file, project_dir, templates_dir, dry_run)


@app.command()
def biome(
    project_dir: Path = typer.Option(Path.cwd(), "--dir", help="Project directory"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print merged settings without writing"),
) -> None:
    """Configure the project for Biome (built-in template)."""
    _run_apply(["biome"], None, project_dir, None, dry_run, builtin_only=True)


@app.command("eslint-prettier")
def eslint_prettier(
    project_dir: Path = typer.Option(Path.cwd(), "--dir", help="Project directory"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print merged settings without writing"),
) -> None:
    """Configure the project for ESLint + Prettier (built-in template)."""
    _run_apply(["eslint-prettier"], None, project_dir, None, dry_run, builtin_only=True)


@app.command("list")
def list_cmd(
    templates_dir: Path = typer.Option(
        None, "--templates-dir", envvar=TEMPLATES_DIR_ENV, help="Extra templates directory"
    ),
) -> None:
    """List available templates."""
    from zedsettings.templates import list_templates

    templates = list_templates(templates_dir)
    if not templates:
        console.print("[yellow]No templates found.[/yellow]")
        return

    table = Table(title="Templates")
    table.add_column("Name", style="bold")
    table.add_column("Source", width=8)
    table.add_column("Description")
    for t in templates:
        table.add_row(t.name, "built-in" if t.builtin else "user", t.description)
    console.print(table)


@app.command()
def show(
    name: str = typer.Argument(..., help="Template name"),
    templates_dir: Path = typer.Option(
        None, "--templates-dir", envvar=TEMPLATES_DIR_ENV, help="Extra templates directory"
    ),
) -> None:
    """Print a template's settings as JSON."""
    from zedsettings.errors import TemplateNotFoundError
    from zedsettings.templates import load_template

    try:
        template = load_template(name, templates_dir)
    except TemplateNotFoundError as exc:
        _fail(str(exc), exc.available)

    if template.description:
        console.print(f"[dim]{template.description}[/dim]")
    console.print_json(data=template.settings, indent=2)


@app.command()
def status(
    project_dir: Path = typer.Option(Path.cwd(), "--dir", help="Project directory"),
) -> None:
    """Show the current project settings."""
    from zedsettings.errors import SettingsParseError
    from zedsettings.settings import read_settings, settings_path

    console.print(Panel("[bold]Zed Project Settings[/bold]", style="blue"))

    path = settings_path(project_dir)
    if not path.exists():
        console.print(f"  Settings: [red]not found[/red] ({path})")
        console.print("  Run [bold]zedsettings apply <template>[/bold] to create it.")
        return

    try:
        settings = read_settings(project_dir)
    except SettingsParseError as exc:
        console.print(f"  Settings: [red]invalid[/red] ({exc})")
        raise typer.Exit(1)

    console.print(f"  Settings: [green]valid[/green] ({path})")
    keys = ", ".join(sorted(settings)) or "none"
    console.print(f"  Keys: [cyan]{keys}[/cyan]")

    languages = settings.get("languages")
    if isinstance(languages, dict) and languages:
        table = Table(title="Languages", show_lines=True)
        table.add_column("Language", style="bold")
        table.add_column("Language servers")
        table.add_column("Formatter")
        for lang, conf in sorted(languages.items()):
            if not isinstance(conf, dict):
                continue
            servers = conf.get("language_servers", [])
            formatter = conf.get("formatter", "")
            if isinstance(formatter, dict):
                server = formatter.get("language_server")
                formatter = server.get("name", "language server") if isinstance(server, dict) else "language server"
            table.add_row(
                lang,
                ", ".join(str(s) for s in servers) if isinstance(servers, list) else str(servers),
                str(formatter),
            )
        console.print(table)

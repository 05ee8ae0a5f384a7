"""Command-line interface for spectr-cli."""

import sys
from pathlib import Path

import click
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from spectr_cli.config import get_default_providers, load_project_config, set_default_providers
from spectr_cli.core.executor import InitExecutor
from spectr_cli.core.filesystem import Scope
from spectr_cli.errors import SpectrError
from spectr_cli.initializers.base import Phase
from spectr_cli.providers import build_default_registry
from spectr_cli.utils.console import (
    _rich_success, _rich_error, _rich_info, _rich_warning, _rich_echo,
    _rich_panel, _create_files_table, _get_console, STATUS_SYMBOLS
)
from spectr_cli.utils.logger import set_verbose
from spectr_cli.version import get_version


def print_version(ctx, param, value):
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return

    version_text = Text()
    version_text.append("Spectr CLI", style="bold cyan")
    version_text.append(f" version {get_version()}", style="white")
    _get_console().print(Panel(version_text, border_style="cyan", padding=(0, 1)))
    ctx.exit()


def _build_executor(path, home):
    config = load_project_config(path)
    return InitExecutor(config.project_root, home_root=home, config=config)


def _select_providers(executor, providers, all_providers):
    if all_providers:
        return executor.registry.ids()
    if providers:
        return list(providers)
    return get_default_providers()


def _print_plan(plan):
    table = Table(title=f"{STATUS_SYMBOLS['preview']} Initialization plan", show_header=True,
                  header_style="bold cyan")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Phase", style="white")
    table.add_column("Key", style="bold white")

    for index, initializer in enumerate(plan.initializers, start=1):
        table.add_row(str(index), Phase(initializer.phase).name.lower(), initializer.key)
    _get_console().print(table)

    if plan.has_duplicates():
        _rich_info(f"Dropped {plan.dropped_count()} duplicate initializer(s):")
        for info in plan.duplicates:
            _rich_echo(f"  - {info}", color="dim")


@click.group(help="Spectr: spec-driven development scaffolding for AI coding tools")
@click.option('--version', is_flag=True, callback=print_version,
              expose_value=False, is_eager=True, help="Show version and exit.")
@click.pass_context
def cli(ctx):
    """Main entry point for the spectr CLI."""
    ctx.ensure_object(dict)


@cli.command(help="Set up spectr and the selected AI tool integrations in a project")
@click.argument('path', required=False, default=".", type=click.Path(file_okay=False))
@click.option('--provider', '-p', 'providers', multiple=True, help="Provider id to configure (repeatable)")
@click.option('--all', 'all_providers', is_flag=True, help="Configure every registered provider")
@click.option('--home', type=click.Path(file_okay=False), help="Home directory for user-scoped files")
@click.option('--dry-run', is_flag=True, help="Show the initialization plan without writing anything")
@click.option('--verbose', '-v', is_flag=True, help="Show detailed progress")
@click.pass_context
def init(ctx, path, providers, all_providers, home, dry_run, verbose):
    """Initialize spectr in PATH (defaults to the current directory)."""
    set_verbose(verbose)
    try:
        Path(path).mkdir(parents=True, exist_ok=True)
        executor = _build_executor(path, home)
        provider_ids = _select_providers(executor, providers, all_providers)

        if not provider_ids:
            _rich_warning("No providers selected; only the spectr directory will be created.")
            _rich_echo("  Use --provider ID or --all (see 'spectr-cli providers').", color="dim")

        plan = executor.plan(provider_ids)

        if dry_run:
            _print_plan(plan)
            _rich_info("Dry run: no files were written.", symbol="info")
            return

        execution = executor.run_plan(plan)

        rows = [(f, "created") for f in execution.created_files]
        rows += [(f, "updated") for f in execution.updated_files]
        if rows:
            _get_console().print(_create_files_table(rows, title="Spectr files"))
        elif execution.succeeded:
            _rich_info("Everything is already up to date.", symbol="check")

        if not execution.succeeded:
            _rich_error(f"Initialization failed: {execution.error}", symbol="error")
            if execution.skipped:
                _rich_warning(f"{len(execution.skipped)} initializer(s) were not run.")
            sys.exit(1)

        _rich_success(f"Spectr initialized in {executor.project_fs.root}", symbol="success")
        if provider_ids:
            _rich_panel("\n".join(f"{STATUS_SYMBOLS['check']} {p}" for p in provider_ids),
                        title="Configured providers", style="green")

    except SpectrError as e:
        _rich_error(f"Error initializing project: {e}")
        sys.exit(1)


@cli.command(help="List the available providers")
def providers():
    """Show the provider registry."""
    registry = build_default_registry()

    table = Table(title=f"{STATUS_SYMBOLS['list']} Providers", show_header=True, header_style="bold cyan")
    table.add_column("ID", style="bold white")
    table.add_column("Name", style="white")
    table.add_column("Instruction file", style="white")
    table.add_column("Commands", style="white")

    for provider in registry.all():
        commands = provider.command_dir or (provider.skills_dir and f"{provider.skills_dir} (skills)") or "-"
        if provider.command_dir and provider.command_scope is Scope.HOME:
            commands = f"~/{commands}"
        table.add_row(provider.id, provider.name, provider.instruction_file or "-", commands)

    _get_console().print(table)


@cli.command(help="Show which providers are configured in a project")
@click.argument('path', required=False, default=".", type=click.Path(exists=True, file_okay=False))
@click.option('--home', type=click.Path(file_okay=False), help="Home directory for user-scoped files")
@click.option('--provider', '-p', 'providers', multiple=True, help="Only check this provider (repeatable)")
def status(path, home, providers):
    """Report configured/missing state per provider."""
    try:
        executor = _build_executor(path, home)
        report = executor.status(providers or None)
    except SpectrError as e:
        _rich_error(f"Error checking status: {e}")
        sys.exit(1)

    rows = [(provider_id, "configured" if ok else "not configured") for provider_id, ok in report.items()]
    table = _create_files_table(rows, title="Provider status")
    table.columns[0].header = "Provider"
    _get_console().print(table)


@cli.command(help="Configure spectr-cli user defaults")
@click.option('--show', is_flag=True, help="Show current configuration")
@click.option('--default-providers', 'default_providers',
              help="Comma-separated providers used by 'init' when none are given")
@click.pass_context
def config(ctx, show, default_providers):
    """Configure spectr-cli settings (stored in ~/.spectr/config.json)."""
    if default_providers is not None:
        registry = build_default_registry()
        provider_ids = [p.strip() for p in default_providers.split(",") if p.strip()]
        unknown = [p for p in provider_ids if p not in registry]
        if unknown:
            _rich_error(f"Unknown provider(s): {', '.join(unknown)}")
            sys.exit(1)
        set_default_providers(provider_ids)
        _rich_success(f"Default providers set to: {', '.join(provider_ids) or '(none)'}", symbol="check")

    if show:
        config_table = Table(title="⚙️  Current spectr-cli Configuration", show_header=True, header_style="bold cyan")
        config_table.add_column("Setting", style="bold yellow")
        config_table.add_column("Value", style="cyan")
        config_table.add_row("Default providers", ", ".join(get_default_providers()) or "-")
        config_table.add_row("Version", get_version())
        _get_console().print(config_table)
    elif default_providers is None:
        _rich_info("Use --show to display configuration")


def main():
    """Main entry point for the CLI."""
    try:
        cli(obj={})
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()

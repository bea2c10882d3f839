"""Click CLI interface for gh-polyrepos."""

import json
import sys

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gh_polyrepos import __version__, config as config_module
from gh_polyrepos.config import ConfigError
from gh_polyrepos.integrations.github import GitHubIntegrationError, validate_github_cli
from gh_polyrepos.integrations.prompts import collect_answers, prompt_root_dir, select_repositories
from gh_polyrepos.models import RepoStatus
from gh_polyrepos.utils.logger import enable_verbose_logging, get_logger
from gh_polyrepos.utils.shell import ShellError
from gh_polyrepos.workflows.flags import build_flags, format_flags
from gh_polyrepos.workflows.run import run_workflow
from gh_polyrepos.workflows.traverse import TraversalError, list_entries

logger = get_logger(__name__)
console = Console()


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show version and exit")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, version: bool, verbose: bool) -> None:
    """gh-polyrepos - run gh pull-request actions across many repositories.

    Prompts for a `gh pr` action and applies it to each repository
    checkout under a root directory.
    """
    if version:
        click.echo(f"gh-polyrepos version {__version__}")
        sys.exit(0)

    if verbose:
        enable_verbose_logging()

    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


@cli.command()
@click.option("--all", "all_repos", is_flag=True, help="Run in every repository without asking")
def run(all_repos: bool) -> None:
    """Select a gh pr action and run it in each repository."""
    try:
        validate_github_cli()

        root_dir = config_module.config_manager.resolve_root_dir(prompt_root_dir)
        entries = list_entries(root_dir)

        answers = collect_answers()
        logger.debug(f"Flags: {format_flags(build_flags(answers))}")

        if not all_repos:
            entries = select_repositories(entries)

        results = run_workflow(root_dir, answers, entries=entries)

    except (ConfigError, TraversalError, GitHubIntegrationError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)
    except ShellError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        if e.stderr:
            console.print(f"[dim]{escape(e.stderr.strip())}[/dim]")
        sys.exit(1)

    skipped = [result for result in results if result.status == RepoStatus.SKIPPED]
    console.print(
        f"[green]✓[/green] {len(results) - len(skipped)} executed, {len(skipped)} skipped"
    )


@cli.group()
def config() -> None:
    """Configuration management."""
    pass


@config.command("get")
@click.argument("key")
def config_get(key: str) -> None:
    """Get configuration value by key.

    KEY: Configuration key (e.g., 'rootDir')
    """
    try:
        value = config_module.config_manager.get_config_value(key)
        console.print(f"{key}: {value}")

    except ConfigError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)


@config.command("set")
@click.argument("key")
@click.argument("value")
def config_set(key: str, value: str) -> None:
    """Set configuration value.

    KEY: Configuration key (e.g., 'rootDir')
    VALUE: Value to set
    """
    try:
        config_module.config_manager.set_config_value(key, value)
        console.print(f"[green]✓[/green] Config updated: {key} = {value}")

    except ConfigError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)


@config.command("show")
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["table", "yaml", "json"]), default="table",
    help="Output format (default: table)",
)
def config_show(output_format: str) -> None:
    """Show current configuration values."""
    manager = config_module.config_manager
    try:
        config_dict = manager.get_config().model_dump(by_alias=True)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    if output_format == "yaml":
        click.echo(yaml.safe_dump(config_dict, default_flow_style=False, sort_keys=True), nl=False)
    elif output_format == "json":
        click.echo(json.dumps(config_dict, indent=2, sort_keys=True))
    else:
        table = Table(title="Current Configuration")
        table.add_column("Setting", style="cyan")
        table.add_column("Value")
        for key, value in config_dict.items():
            display_value = "[dim]None[/dim]" if value is None else str(value)
            table.add_row(key, display_value)
        console.print(table)

        path = manager.config_path
        if path.exists():
            console.print(f"  [green]✓[/green] config file: {path}")
        else:
            console.print(f"  [dim]✗ config file: {path} (not found)[/dim]")


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()

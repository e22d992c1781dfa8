"""CLI interface for Markbrowse.

Command-line tool for serving a folder of markdown documents.
"""

import logging
import sys
from pathlib import Path

import click

from markbrowse.config import Config, ConfigError
from markbrowse.core.ignore import IgnoreMatcher
from markbrowse.core.navigation import NavigationBuilder, NavItem


@click.group()
def cli() -> None:
    """Markbrowse - browse markdown documents over HTTP."""


@cli.command()
@click.argument(
    "directory",
    type=click.Path(path_type=Path),
    required=False,
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    default=None,
    help="Path to configuration file (default: auto-discover markbrowse.toml)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=click.IntRange(1, 65535),
    default=None,
    help="Port to bind to (overrides config, default: 8080)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (log skipped directories and ignore rules)",
)
def serve(
    directory: Path | None,
    config_path: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Serve DIRECTORY (default: from config, or the current directory)."""
    from markbrowse.server import run_server

    _configure_logging(verbose)
    config = _load_config(config_path, source_dir=directory, host=host, port=port)

    click.echo(f"Starting markbrowse server on {config.server.host}:{config.server.port}")
    click.echo(f"Source directory: {config.docs.source_dir}")
    click.echo(f"Ignore file: {config.docs.ignore_file}")

    run_server(config)


@cli.command()
@click.argument(
    "directory",
    type=click.Path(path_type=Path),
    required=False,
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    default=None,
    help="Path to configuration file (default: auto-discover markbrowse.toml)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (log skipped directories and ignore rules)",
)
def tree(directory: Path | None, config_path: Path | None, verbose: bool) -> None:
    """Print the navigation tree for DIRECTORY."""
    _configure_logging(verbose)
    config = _load_config(config_path, source_dir=directory)

    source_dir = config.docs.source_dir
    matcher = IgnoreMatcher.load(source_dir, config.docs.ignore_file)
    items = NavigationBuilder(source_dir, matcher).build()
    if not items:
        click.echo(click.style("No markdown documents found.", fg="yellow"))
        return
    _print_tree(items)


def _load_config(
    config_path: Path | None,
    *,
    source_dir: Path | None = None,
    host: str | None = None,
    port: int | None = None,
) -> Config:
    """Load config, apply CLI overrides and validate the source directory.

    Raises:
        SystemExit: If the config is invalid or the directory can't be served
    """
    try:
        config = Config.load(config_path).with_overrides(
            host=host,
            port=port,
            source_dir=source_dir,
        )
        config.validate_source_dir()
    except (ConfigError, FileNotFoundError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)
    return config


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if verbose:
        logging.getLogger("markbrowse").setLevel(logging.DEBUG)


def _print_tree(items: list[NavItem], depth: int = 0) -> None:
    indent = "  " * depth
    for item in items:
        if item.is_dir:
            click.echo(f"{indent}{click.style(item.name + '/', fg='blue', bold=True)}")
            _print_tree(item.children, depth + 1)
        else:
            click.echo(f"{indent}{item.name}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()

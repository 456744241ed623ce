"""CLI interface for Flatsite.

Command-line tool for serving a flat-file site and rendering single pages.
"""

import logging
import sys
from pathlib import Path

import click

from flatsite.config import Config
from flatsite.core.site import Site


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_config(config_path: Path | None) -> Config:
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from e


@click.group()
def cli() -> None:
    """Flatsite - pages from a flat file tree."""


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover flatsite.toml)",
)
@click.option(
    "--app-root",
    "-r",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Directory holding pages/, templates/, fragments/, config/ (overrides config)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (log every file load)",
)
@click.option(
    "--live-reload/--no-live-reload",
    default=None,
    help="Enable/disable live reload (overrides config, default: disabled)",
)
def serve(
    config_path: Path | None,
    app_root: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
    live_reload: bool | None,
) -> None:
    """Start the site server."""
    from flatsite.server import run_server

    _configure_logging(verbose)
    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        app_root=app_root,
        live_reload_enabled=live_reload,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"App root: {config.site.app_root}")
    if config.live_reload.enabled:
        click.echo("Live reload: enabled")
    else:
        click.echo("Live reload: disabled")

    run_server(config)


@cli.command()
@click.argument("request_path")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover flatsite.toml)",
)
@click.option(
    "--app-root",
    "-r",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Directory holding pages/, templates/, fragments/, config/ (overrides config)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the rendered page to a file instead of stdout",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (log every file load)",
)
def render(
    request_path: str,
    config_path: Path | None,
    app_root: Path | None,
    output: Path | None,
    verbose: bool,
) -> None:
    """Render REQUEST_PATH (e.g. "/blog/first-post") to stdout.

    Exits with status 1 when the site answers with 404 or 500.
    """
    _configure_logging(verbose)
    config = _load_config(config_path).with_overrides(app_root=app_root)

    site = Site(config.site.app_root, autoescape=config.site.autoescape)
    result = site.launch(request_path)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(result.body, encoding="utf-8")
        click.echo(f"Wrote {request_path} to {output}")
    else:
        click.echo(result.body, nl=False)

    if result.status is not None:
        click.echo(f"Status: {result.status_code} {result.status.phrase}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()

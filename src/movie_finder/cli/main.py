"""Main CLI entry point."""

import asyncio
import os
import subprocess
import sys
from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..config import ConfigManager
from ..infrastructure import Container, setup_logging
from ..utils import ConfigurationError

# Commands that run without the OMDb configuration
NO_CONFIG_COMMANDS = {"init", "ui"}


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(version=__version__, prog_name="movie-finder")
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], verbose: bool) -> None:
    """Movie Finder - search OMDb and keep a list of favorite movies."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config

    if ctx.invoked_subcommand in NO_CONFIG_COMMANDS:
        return

    try:
        config_manager = ConfigManager(config)
        app_config = config_manager.load_config()

        if verbose:
            app_config.logging.level = "DEBUG"
        setup_logging(app_config.logging)

        container = Container(config_manager)
        container.configure_default_services()

        ctx.obj["config"] = app_config
        ctx.obj["container"] = container

    except (ConfigurationError, FileNotFoundError, ValueError) as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.option("--host", help="Listening address (overrides HOST)")
@click.option("--port", "-p", type=int, help="Listening port (overrides PORT)")
@click.pass_context
def serve(ctx: click.Context, host: Optional[str], port: Optional[int]) -> None:
    """Run the movies HTTP API."""
    import uvicorn

    from ..api import create_app

    config = ctx.obj["config"]
    app = create_app(ctx.obj["container"])

    bind_host = host or config.server.host
    bind_port = port or config.server.port
    click.echo(f"Application is running on: http://localhost:{bind_port}")

    # log_config=None keeps the logging set up above
    uvicorn.run(app, host=bind_host, port=bind_port, log_config=None)


@cli.command()
@click.option("--port", "-p", type=int, default=8501, help="Streamlit server port")
@click.pass_context
def ui(ctx: click.Context, port: int) -> None:
    """Run the Streamlit frontend."""
    app_path = Path(__file__).resolve().parent.parent / "frontend" / "app.py"
    command = [
        sys.executable,
        "-m",
        "streamlit",
        "run",
        str(app_path),
        "--server.port",
        str(port),
    ]
    # The Streamlit process finds an explicit config file through the environment
    env = os.environ.copy()
    config_path = ctx.obj.get("config_path")
    if config_path:
        env["MOVIE_FINDER_CONFIG"] = str(config_path.resolve())

    sys.exit(subprocess.call(command, env=env))


@cli.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=Path.cwd() / "config" / "config.yaml",
    help="Output path for configuration file",
)
def init(output: Path) -> None:
    """Initialize configuration file."""
    try:
        if output.exists():
            if not click.confirm(f"Configuration file {output} already exists. Overwrite?"):
                return

        output.parent.mkdir(parents=True, exist_ok=True)

        ConfigManager.create_default_config(output)
        click.echo(f"Configuration file created at: {output}")
        click.echo("Set OMDB_API_KEY in your environment or .env file before serving.")

    except OSError as e:
        click.echo(f"Failed to create configuration: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show configuration and stored favorites."""
    from ..core.interfaces import IFavoritesStore

    config = ctx.obj["config"]
    container = ctx.obj["container"]

    click.echo("Movie Finder Status")
    click.echo("=" * 40)
    click.echo(f"OMDb URL: {config.omdb.base_url}")
    click.echo(f"OMDb API Key: {_mask_secret(config.omdb.api_key)}")
    click.echo(f"Listening On: {config.server.host}:{config.server.port}")
    click.echo(f"Allowed Origins: {', '.join(config.server.cors_origins)}")
    click.echo(f"Frontend API URL: {config.frontend.api_url}")
    click.echo(f"Favorites File: {config.favorites.path}")

    favorites_store = container.get(IFavoritesStore)
    favorites = asyncio.run(favorites_store.load())
    click.echo(f"Saved Favorites: {len(favorites)}")


def _mask_secret(value: str) -> str:
    """Show only the last four characters of a secret."""
    if len(value) <= 4:
        return "*" * len(value)
    return "*" * (len(value) - 4) + value[-4:]


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()

"""CLI entry point for ghdash."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ghdash import __version__

app = typer.Typer(add_completion=False, help="Show a GitHub user's own repositories.")
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ghdash {__version__}")
        raise typer.Exit()


@app.command()
def dashboard(
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", metavar="FILE", help="alternate configuration file"
    ),
    verbose: int = typer.Option(
        0, "--verbose", "-v", count=True, help="more log output (repeat for more)"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Print the non-fork repositories of the configured GitHub user."""
    from dotenv import load_dotenv

    load_dotenv()  # Lets GHDASH_USER / GHDASH_TOKEN come from a .env file

    from ghdash.config import load_config
    from ghdash.dashboard import Dashboard
    from ghdash.errors import GhDashError
    from ghdash.log import get_logging

    get_logging(verbose)
    try:
        cfg = load_config(path=config)
        dash = asyncio.run(Dashboard.create(cfg.user, cfg.token))
    except GhDashError as e:
        err_console.print(
            f"[bold red]Error:[/bold red] {escape(str(e))}",
            highlight=False,
            soft_wrap=True,
        )
        raise typer.Exit(code=1) from e

    typer.echo(dash.render(), nl=False)


def main() -> None:
    """Run the ghdash command line."""
    app()


if __name__ == "__main__":
    main()

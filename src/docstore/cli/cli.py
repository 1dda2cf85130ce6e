"""CLI entrypoint: Typer app definition and command registration"""

from typing import Annotated, Optional

import typer

from docstore.cli.commands import ids_cmd, search_cmd, show_cmd
from docstore.config import load_config
from docstore.logs import configure_logging


app = typer.Typer(name="docstore", no_args_is_help=True, help="Search documents held in an in-memory store")


@app.callback()
def main(
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL")] = None,
    ):
    """Configure logging before any command runs."""
    try:
        settings = load_config(overrides={"log_level": log_level})
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    configure_logging(settings.log_level)


app.command(name="search")(search_cmd)
app.command(name="show")(show_cmd)
app.command(name="ids")(ids_cmd)

"""Main CLI application for melee odds."""

import logging

import typer

from src.cli.commands import combat
from src.config import get_settings

# Create main app
app = typer.Typer(
    name="odds",
    help="Exact hit, wound and nerve test odds for tabletop melee",
    add_completion=True,
)

# Odds commands live at the top level: odds hits, odds wounds, ...
app.command()(combat.hits)
app.command()(combat.wounds)
app.command()(combat.nerve)
app.command()(combat.compare)


@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help="Log table construction details"),
) -> None:
    """Melee odds - exact probability tables for dice combat.

    Use 'odds hits --attack 10 --melee 4' to get started.
    """
    if debug or get_settings().debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


if __name__ == "__main__":
    app()

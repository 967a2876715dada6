import typer

from lsystems.generation import Family
from lsystems.generation.rules import ENGINES


def families_command() -> None:
    """List the available L-system families."""
    for family in Family:
        typer.echo(f"{family.value:<14} {ENGINES[family].axiom:<2} {family.display_name}")

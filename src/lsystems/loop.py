import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import typer

from lsystems.cli.commands.families import families_command
from lsystems.cli.commands.grow import grow_command
from lsystems.cli.commands.run import run_command

app = typer.Typer()

app.command(name="run")(run_command)
app.command(name="grow")(grow_command)
app.command(name="families")(families_command)


def main() -> None:
    app()


if __name__ == "__main__":
    main()

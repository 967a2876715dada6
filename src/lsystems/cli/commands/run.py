from typing import Annotated

import pygame
import typer

from lsystems.cli.commands.options import resolve_rng, resolve_settings
from lsystems.engine import LSystemEngine
from lsystems.rendering.canvas import Canvas
from lsystems.runtime.app import LSystemApp, resolve_canvas_size
from lsystems.utilities.env import Configuration


def run_command(
    family: Annotated[str | None, typer.Option("--family", help="Initial L-system family")] = None,
    size: Annotated[int | None, typer.Option("--size", help="Initial stroke size (1-10)")] = None,
    color: Annotated[str | None, typer.Option("--color", help="Initial colour as #rrggbb")] = None,
    seed: Annotated[int | None, typer.Option("--seed", help="Seed for reproducible figures")] = None,
) -> None:
    settings = resolve_settings(family, size, color)
    pygame.init()
    canvas = Canvas.create(resolve_canvas_size(), Configuration.background_color())
    engine = LSystemEngine(canvas, settings=settings, rng=resolve_rng(seed))
    LSystemApp(engine).run()

from typing import Annotated

import numpy as np
import pygame
import typer

from lsystems.cli.commands.options import resolve_rng, resolve_settings
from lsystems.engine import LSystemEngine
from lsystems.rendering.canvas import Canvas
from lsystems.rendering.stroke import ImmediateStrokeRenderer
from lsystems.utilities.env import Configuration

DEFAULT_OFFSCREEN_SIZE = 800


def grow_command(
    family: Annotated[str | None, typer.Option("--family")] = None,
    size: Annotated[int | None, typer.Option("--size")] = None,
    color: Annotated[str | None, typer.Option("--color")] = None,
    seed: Annotated[int | None, typer.Option("--seed")] = None,
    canvas_size: Annotated[int, typer.Option("--canvas-size", min=1)] = DEFAULT_OFFSCREEN_SIZE,
) -> None:
    """Grow one figure off-screen, without animating, and report what it drew."""
    settings = resolve_settings(family, size, color)
    pygame.init()
    try:
        canvas = Canvas.create(canvas_size, Configuration.background_color())
        engine = LSystemEngine(
            canvas,
            ImmediateStrokeRenderer(canvas),
            settings=settings,
            rng=resolve_rng(seed),
        )
        root = engine.on_press_at(canvas_size / 2, canvas_size / 2)
    finally:
        pygame.quit()

    nodes = list(root.walk())
    drawn = [node for node in nodes if node.drawn]
    typer.echo(f"family:   {settings.family.display_name}")
    typer.echo(f"nodes:    {len(nodes)}")
    typer.echo(f"segments: {len(drawn)}")
    if drawn:
        points = np.array([point for node in drawn for point in node.segment()])
        (left, top), (right, bottom) = points.min(axis=0), points.max(axis=0)
        typer.echo(f"extent:   ({left:.1f}, {top:.1f}) to ({right:.1f}, {bottom:.1f})")

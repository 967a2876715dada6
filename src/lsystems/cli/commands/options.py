from __future__ import annotations

import random

import typer

from lsystems.display.color import Color
from lsystems.engine import EngineSettings, validate_stroke_size
from lsystems.generation import Family, UnknownFamilyError
from lsystems.utilities.env import Configuration
from lsystems.utilities.logging import get_logger

logger = get_logger(__name__)


def resolve_settings(
    family: str | None,
    size: int | None,
    color: str | None,
) -> EngineSettings:
    """Overlay command line choices on the environment defaults."""
    defaults = EngineSettings.from_configuration()
    try:
        return EngineSettings(
            family=defaults.family if family is None else Family.parse(family),
            color=defaults.color if color is None else Color.parse(color),
            stroke_size=(
                defaults.stroke_size if size is None else validate_stroke_size(size)
            ),
        )
    except UnknownFamilyError as exc:
        logger.error("%s; choose one of %s", exc, ", ".join(Family))
        raise typer.Exit(code=1) from exc
    except ValueError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=1) from exc


def resolve_rng(seed: int | None) -> random.Random:
    return random.Random(seed if seed is not None else Configuration.random_seed())

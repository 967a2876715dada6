from __future__ import annotations

import random
import threading
from dataclasses import dataclass, replace

from lsystems.display.color import Color
from lsystems.generation import (DrawInterpreter, Family, GenerationAborted,
                                 Node, StrokeSink)
from lsystems.generation.rules import engine_for
from lsystems.history import EraseHistory
from lsystems.rendering.canvas import Canvas
from lsystems.rendering.stroke import AnimatedStrokeRenderer
from lsystems.utilities.env import (MAX_STROKE_SIZE, MIN_STROKE_SIZE,
                                    Configuration)
from lsystems.utilities.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class EngineSettings:
    family: Family
    color: Color
    stroke_size: int

    @classmethod
    def from_configuration(cls) -> "EngineSettings":
        return cls(
            family=Configuration.default_family(),
            color=Configuration.default_color(),
            stroke_size=Configuration.default_stroke_size(),
        )


def validate_stroke_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise ValueError(f"Stroke size must be an integer, got {size!r}")
    if not MIN_STROKE_SIZE <= size <= MAX_STROKE_SIZE:
        raise ValueError(
            f"Stroke size must be between {MIN_STROKE_SIZE} and {MAX_STROKE_SIZE}, got {size}"
        )
    return size


class LSystemEngine:
    """Entry point for the UI: presses grow figures, releases erase them.

    Settings changes only affect the next press; a run works from the
    snapshot taken when it started.
    """

    def __init__(
        self,
        canvas: Canvas,
        renderer: StrokeSink | None = None,
        *,
        settings: EngineSettings | None = None,
        rng: random.Random | None = None,
        max_nodes: int | None = None,
    ) -> None:
        self.canvas = canvas
        self.renderer = renderer or AnimatedStrokeRenderer(canvas)
        self.settings = settings or EngineSettings.from_configuration()
        self.rng = rng or random.Random(Configuration.random_seed())
        self.max_nodes = (
            max_nodes if max_nodes is not None else Configuration.max_nodes_per_run()
        )
        self.history = EraseHistory(self.renderer, canvas.background)
        self._settings_lock = threading.Lock()

    def set_family(self, tag: str | Family) -> None:
        family = Family.parse(tag)
        with self._settings_lock:
            self.settings = replace(self.settings, family=family)

    def set_color(self, value: str | Color | tuple[int, int, int]) -> None:
        color = Color.parse(value)
        with self._settings_lock:
            self.settings = replace(self.settings, color=color)

    def set_stroke_size(self, size: int) -> None:
        size = validate_stroke_size(size)
        with self._settings_lock:
            self.settings = replace(self.settings, stroke_size=size)

    def on_press_at(self, x: float, y: float) -> Node:
        """Grow a figure of the current family at ``(x, y)``.

        A run that outgrows its node budget stops where it is; what was
        drawn so far still goes onto the history so it can be erased.
        """
        with self._settings_lock:
            settings = self.settings

        engine = engine_for(settings.family)(
            interpreter=DrawInterpreter(self.renderer),
            origin=(float(x), float(y)),
            color=settings.color,
            original_size=settings.stroke_size,
            rng=self.rng,
            max_nodes=self.max_nodes,
        )
        logger.debug(
            "Starting %s at (%.1f, %.1f) with size %s",
            settings.family,
            x,
            y,
            settings.stroke_size,
        )

        root = engine.seed()
        try:
            processed = engine.expand()
        except GenerationAborted as exc:
            logger.warning("%s run stopped early: %s", settings.family.display_name, exc)
        else:
            logger.debug("Finished %s with %s nodes", settings.family, processed)
        self.history.push(root)
        return root

    def on_release(self) -> Node | None:
        return self.history.pop_and_erase()

    def clear(self) -> None:
        self.canvas.clear()

    def shutdown(self) -> None:
        shutdown = getattr(self.renderer, "shutdown", None)
        if shutdown is not None:
            shutdown()

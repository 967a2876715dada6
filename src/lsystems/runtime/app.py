from __future__ import annotations

import pygame

from lsystems.engine import LSystemEngine
from lsystems.rendering.canvas import Canvas
from lsystems.runtime.pygame_event_handler import PygameEventHandler
from lsystems.utilities.env import Configuration
from lsystems.utilities.logging import get_logger

logger = get_logger(__name__)

WINDOW_TITLE = "Playing With L-Systems"


def resolve_canvas_size() -> int:
    """Configured size, else the smaller side of the current display."""
    configured = Configuration.canvas_size()
    if configured is not None:
        return configured
    info = pygame.display.Info()
    return min(info.current_w, info.current_h)


class LSystemApp:
    def __init__(self, engine: LSystemEngine, fps: int | None = None) -> None:
        self.engine = engine
        self.canvas: Canvas = engine.canvas
        self.fps = fps if fps is not None else Configuration.fps()
        self.event_handler = PygameEventHandler(engine)

    def run(self) -> None:
        screen = pygame.display.set_mode(self.canvas.size)
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        logger.info(
            "Window %sx%s, drawing %s",
            *self.canvas.size,
            self.engine.settings.family.display_name,
        )

        try:
            while self.event_handler.handle_events():
                self.canvas.blit_to(screen)
                pygame.display.flip()
                clock.tick(self.fps)
        finally:
            self.engine.shutdown()
            pygame.quit()

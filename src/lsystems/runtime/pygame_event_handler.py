from __future__ import annotations

import pygame

from lsystems.engine import LSystemEngine
from lsystems.generation import Family
from lsystems.utilities.env import MAX_STROKE_SIZE, MIN_STROKE_SIZE
from lsystems.utilities.logging import get_logger

logger = get_logger(__name__)

FAMILY_KEYS: dict[int, Family] = {
    pygame.K_1: Family.ORIGINAL,
    pygame.K_2: Family.BARNSLEY,
    pygame.K_3: Family.FRACTAL_PLANT,
    pygame.K_4: Family.LICHTENBERG,
    pygame.K_5: Family.CRACKED_EARTH,
    pygame.K_6: Family.PORPITA,
}
GROW_KEYS = {pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS}
SHRINK_KEYS = {pygame.K_MINUS, pygame.K_KP_MINUS}
QUIT_KEYS = {pygame.K_ESCAPE, pygame.K_q}
PRIMARY_BUTTON = 1


class PygameEventHandler:
    def __init__(self, engine: LSystemEngine) -> None:
        self.engine = engine

    def handle_events(self) -> bool:
        running = True
        for event in pygame.event.get():
            if not self.handle_event(event):
                running = False
        return running

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == PRIMARY_BUTTON:
            self.engine.on_press_at(*event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == PRIMARY_BUTTON:
            self.engine.on_release()
        elif event.type == pygame.KEYDOWN:
            return self._handle_key(event.key)
        return True

    def _handle_key(self, key: int) -> bool:
        if key in QUIT_KEYS:
            return False
        if key in FAMILY_KEYS:
            family = FAMILY_KEYS[key]
            logger.info("Selected %s", family.display_name)
            self.engine.set_family(family)
        elif key in GROW_KEYS or key in SHRINK_KEYS:
            delta = 1 if key in GROW_KEYS else -1
            size = self.engine.settings.stroke_size + delta
            size = min(MAX_STROKE_SIZE, max(MIN_STROKE_SIZE, size))
            logger.info("Stroke size %s", size)
            self.engine.set_stroke_size(size)
        elif key == pygame.K_c:
            self.engine.clear()
        return True

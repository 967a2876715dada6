from __future__ import annotations

import threading
from typing import Sequence

import pygame

from lsystems.display.color import Color


def stroke_pixels(width: float) -> int:
    return max(1, int(round(width)))


class Canvas:
    """The shared drawing surface.

    Every paint goes through ``lock`` so a stroke's colour and width are
    applied together even while many animations paint concurrently.
    """

    def __init__(self, surface: pygame.Surface, background: Color) -> None:
        self.surface = surface
        self.background = background
        self.lock = threading.Lock()

    @classmethod
    def create(cls, size: int, background: Color) -> "Canvas":
        canvas = cls(pygame.Surface((size, size)), background)
        canvas.clear()
        return canvas

    @property
    def size(self) -> tuple[int, int]:
        return self.surface.get_size()

    def paint_line(
        self,
        start: Sequence[float],
        end: Sequence[float],
        color: Color,
        width: float,
    ) -> None:
        with self.lock:
            pygame.draw.line(
                self.surface,
                color.tuple(),
                (float(start[0]), float(start[1])),
                (float(end[0]), float(end[1])),
                stroke_pixels(width),
            )

    def clear(self) -> None:
        with self.lock:
            self.surface.fill(self.background.tuple())

    def blit_to(self, target: pygame.Surface) -> None:
        with self.lock:
            target.blit(self.surface, (0, 0))

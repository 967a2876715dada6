from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Sequence

from lsystems.display.color import Color
from lsystems.generation import StrokeRequest
from lsystems.rendering.canvas import Canvas


class RecordingSink:
    """Stroke sink that keeps every request instead of painting it."""

    def __init__(self) -> None:
        self.requests: list[StrokeRequest] = []

    def submit(self, request: StrokeRequest) -> None:
        self.requests.append(request)

    def segments(self) -> list[tuple[tuple[float, float], tuple[float, float]]]:
        return [(request.start, request.end) for request in self.requests]


@dataclass(frozen=True)
class PaintedLine:
    start: tuple[float, float]
    end: tuple[float, float]
    color: Color
    width: float


class RecordingCanvas(Canvas):
    """Canvas that also remembers each painted line."""

    def __init__(self, surface, background: Color) -> None:
        super().__init__(surface, background)
        self.lines: list[PaintedLine] = []
        self.clears = 0
        self._record_lock = threading.Lock()

    def paint_line(
        self,
        start: Sequence[float],
        end: Sequence[float],
        color: Color,
        width: float,
    ) -> None:
        super().paint_line(start, end, color, width)
        with self._record_lock:
            self.lines.append(
                PaintedLine(
                    start=(float(start[0]), float(start[1])),
                    end=(float(end[0]), float(end[1])),
                    color=color,
                    width=width,
                )
            )

    def clear(self) -> None:
        super().clear()
        self.clears += 1

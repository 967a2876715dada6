from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

from lsystems.display.color import Color
from lsystems.generation.node import Node, Point


@dataclass(frozen=True)
class StrokeRequest:
    start: Point
    end: Point
    color: Color
    width: float


class StrokeSink(Protocol):
    def submit(self, request: StrokeRequest) -> None: ...


def project(start: Point, length: float, angle: float) -> Point:
    return (
        start[0] + length * math.cos(angle),
        start[1] + length * math.sin(angle),
    )


class DrawInterpreter:
    """Resolve a node into a concrete segment and hand it to the stroke sink.

    This is the only place a node's ``end`` changes after construction.
    """

    def __init__(self, sink: StrokeSink) -> None:
        self.sink = sink

    def draw(self, node: Node, length: float, angle: float, color: Color) -> Point:
        end = project(node.start, length, angle)
        node.end = end
        node.drawn = True
        self.sink.submit(
            StrokeRequest(
                start=node.start,
                end=end,
                color=color,
                width=node.branch_size,
            )
        )
        return end

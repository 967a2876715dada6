from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Mapping

from lsystems.generation.families import Family
from lsystems.generation.node import Node
from lsystems.generation.rules.base import RuleEngine, SymbolRule

REPEAT_THRESHOLD = 0.5
EXTRA_THRESHOLD = 0.8


@dataclass(frozen=True)
class Discharge:
    """Turn and growth of one Lichtenberg symbol.

    The turn is ``sign * max(u * scale, floor)`` for a fresh uniform ``u``.
    Each expansion always yields ``primary``, repeats itself when the step's
    draw is above 0.5 and adds ``extra`` (if any) when it is below 0.8.
    """

    sign: int
    scale: float
    floor: float
    extra_length: Callable[[float], float]
    primary: str
    extra: str | None = None


DISCHARGES = {
    "L": Discharge(
        sign=1,
        scale=1.0,
        floor=0.4,
        extra_length=lambda size: math.exp(2 + 0.4 * size),
        primary="R",
        extra="K",
    ),
    "R": Discharge(
        sign=-1,
        scale=1.57080,
        floor=0.4,
        extra_length=lambda size: 2 + 0.4 * size**2,
        primary="L",
        extra="J",
    ),
    "J": Discharge(
        sign=1,
        scale=0.78540,
        floor=0.2,
        extra_length=lambda size: 1 + 0.1 * size**2,
        primary="K",
    ),
    "K": Discharge(
        sign=-1,
        scale=0.78540,
        floor=0.2,
        extra_length=lambda size: 1.5 + 0.2 * size**2,
        primary="J",
    ),
}


class LichtenbergEngine(RuleEngine):
    family = Family.LICHTENBERG
    axiom = "L"

    def rules(self) -> Mapping[str, SymbolRule]:
        return {
            symbol: SymbolRule(draw=self._draw, produce=self._branch)
            for symbol in DISCHARGES
        }

    def size_step(self) -> float:
        return self.original_size / (8 - 0.05 * self.original_size)

    def _draw(self, node: Node) -> float:
        discharge = DISCHARGES[node.symbol]
        size = node.branch_size
        turn = max(self.rng.random() * discharge.scale, discharge.floor)
        angle = node.auxiliary + discharge.sign * turn
        length = math.exp(1 + 0.08 * size) + discharge.extra_length(size)
        return self.paint(node, length, angle)

    def _branch(self, node: Node, size: float, angle: float) -> None:
        discharge = DISCHARGES[node.symbol]
        p = self.rng.random()
        self.attach(node, discharge.primary, size, angle)
        if p > REPEAT_THRESHOLD:
            self.attach(node, node.symbol, size, angle)
        if discharge.extra is not None and p < EXTRA_THRESHOLD:
            self.attach(node, discharge.extra, size, angle)

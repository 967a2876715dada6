from __future__ import annotations

import math
from typing import Mapping

from lsystems.generation.families import Family
from lsystems.generation.node import Node
from lsystems.generation.rules.base import RuleEngine, SymbolRule

AXIOM_FAN = (0.0, 2.09440, 4.18879)
TURN_JITTER = 0.3
FAN_HALF_ANGLE = 1.04720
FORK_HALF_ANGLE = 0.52360
MAX_BEND = 1.57080
SPLIT_JITTER = 0.3


def size_decay(original_size: float) -> float:
    return math.exp(-0.07 * original_size + 2.7)


class CrackedEarthEngine(RuleEngine):
    """Cracks radiating out of a point.

    'O' fans into three cracks, 'T' re-splits a crack into two, 'R' is a
    running crack and 'S' a straight spur. Children carry their absolute
    heading in ``auxiliary``.
    """

    family = Family.CRACKED_EARTH
    axiom = "O"

    def rules(self) -> Mapping[str, SymbolRule]:
        return {
            "O": SymbolRule(draw=self.skip_draw, produce=self._fan),
            "T": SymbolRule(draw=self.skip_draw, produce=self._split),
            "R": SymbolRule(draw=self._draw_run, produce=self._run),
            "S": SymbolRule(draw=self._draw_spur, produce=self._spur),
        }

    def size_step(self) -> float:
        return self.original_size / size_decay(self.original_size)

    def _base_length(self, node: Node) -> float:
        return math.exp(2 + 0.4 * node.branch_size)

    def _draw_run(self, node: Node) -> float:
        length = self._base_length(node) * 2 * max(0.5, self.rng.random())
        return self.paint(node, length, node.auxiliary)

    def _draw_spur(self, node: Node) -> float:
        sign = -1 if self.rng.random() > 0.5 else 1
        return self.paint(node, self._base_length(node), node.auxiliary + sign * SPLIT_JITTER)

    def _fan(self, node: Node, size: float, angle: float) -> None:
        for offset in AXIOM_FAN:
            self.attach(node, "R", size, node.auxiliary + offset)

    def _split(self, node: Node, size: float, angle: float) -> None:
        heading = node.auxiliary
        heading += -TURN_JITTER if self.rng.random() > 0.5 else TURN_JITTER
        self.attach(node, "R", size, heading - FAN_HALF_ANGLE)
        self.attach(node, "R", size, heading + FAN_HALF_ANGLE)

    def _run(self, node: Node, size: float, angle: float) -> None:
        heading = node.auxiliary
        bend = self.rng.random()
        p = self.rng.random()
        if 0.5 < p < 0.8:
            self.attach(node, "R", size, heading - FORK_HALF_ANGLE)
            self.attach(node, "S", size, heading + FORK_HALF_ANGLE)
        elif p >= 0.8:
            offset = bend * MAX_BEND
            if bend > 0.5:
                offset = -offset
            self.attach(node, "R", size, heading + offset)
        else:
            self.attach(node, "T", size, heading)

    def _spur(self, node: Node, size: float, angle: float) -> None:
        self.attach(node, "S", size, node.auxiliary)

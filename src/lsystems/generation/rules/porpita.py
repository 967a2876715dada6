from __future__ import annotations

import math
from typing import Mapping

from lsystems.generation.families import Family
from lsystems.generation.node import Node
from lsystems.generation.rules.base import RuleEngine, SymbolRule

SECTORS = 10
ARC = 2 * math.pi / SECTORS
ARM_WOBBLE = 0.4


def size_decay(original_size: float) -> float:
    return math.exp(-0.1 * original_size + 2.7)


class PorpitaEngine(RuleEngine):
    """Blue-button jellyfish: a float of ten spokes ringed by hydroid colonies.

    'C' fans into ten 'L' spokes whose ``auxiliary`` is a sector index. 'H'
    colonies sit on a ring around the press point; 'E' arms keep growing,
    carrying the angle they were drawn at instead of a sector.
    """

    family = Family.PORPITA
    axiom = "C"

    def rules(self) -> Mapping[str, SymbolRule]:
        return {
            "C": SymbolRule(draw=self.skip_draw, produce=self._float),
            "L": SymbolRule(draw=self._draw_spoke, produce=self._grow_spoke),
            "H": SymbolRule(draw=self._draw_colony, produce=self._grow_colony),
            "E": SymbolRule(draw=self._draw_arm, produce=self._grow_arm),
            "J": SymbolRule(draw=self._draw_tentacle_left, produce=self._stop),
            "K": SymbolRule(draw=self._draw_tentacle_right, produce=self._stop),
        }

    def size_step(self) -> float:
        return self.original_size / size_decay(self.original_size)

    @property
    def radius(self) -> float:
        return math.exp(0.1 * self.original_size + 3)

    def _sector_angle(self, node: Node) -> float:
        x, y = self.origin
        skew = y / x if x else 0.0
        return (node.auxiliary + 1) * ARC + skew

    def _draw_spoke(self, node: Node) -> float:
        return self.paint(node, self.radius, self._sector_angle(node))

    def _draw_colony(self, node: Node) -> float:
        angle = self._sector_angle(node) + self.rng.random() * ARC
        x, y = self.origin
        anchor = (x + self.radius * math.cos(angle), y + self.radius * math.sin(angle))
        node.start = anchor
        node.end = anchor
        return self.paint(node, math.exp(1 + 0.2 * node.branch_size), angle)

    def _draw_arm(self, node: Node) -> float:
        wobble = self.rng.random()
        if node.auxiliary < math.pi:
            wobble = -wobble
        angle = node.auxiliary + wobble * ARM_WOBBLE
        return self.paint(node, math.exp(3 - 0.05 * node.branch_size), angle)

    def _tentacle_length(self, node: Node) -> float:
        return math.exp(1.5 + 0.05 * node.branch_size)

    def _draw_tentacle_left(self, node: Node) -> float:
        angle = self._sector_angle(node) + ARC
        return self.paint(node, self._tentacle_length(node), angle)

    def _draw_tentacle_right(self, node: Node) -> float:
        angle = self._sector_angle(node) - ARC
        return self.paint(node, self._tentacle_length(node), angle)

    def _float(self, node: Node, size: float, angle: float) -> None:
        for sector in range(SECTORS):
            self.attach(node, "L", size, float(sector))

    def _grow_spoke(self, node: Node, size: float, angle: float) -> None:
        self.attach(node, "H", size, node.auxiliary)

    def _grow_colony(self, node: Node, size: float, angle: float) -> None:
        self.attach(node, "HJK", size, node.auxiliary)
        self.attach(node, "E", size, angle)

    def _grow_arm(self, node: Node, size: float, angle: float) -> None:
        self.attach(node, "JK", size, node.auxiliary)
        self.attach(node, "E", size, angle)

    def _stop(self, node: Node, size: float, angle: float) -> None:
        return None

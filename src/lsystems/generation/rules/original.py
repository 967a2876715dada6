from __future__ import annotations

import math
from typing import Mapping

from lsystems.generation.families import Family
from lsystems.generation.node import Node
from lsystems.generation.rules.base import RuleEngine, SymbolRule

ANGLE_SPREAD = 0.74163
SECONDARY_ANGLE_MULTIPLIER = 2.39996
PRIMARY_LENGTH_EXPONENT = 1.618
SECONDARY_LENGTH_EXPONENT = 3.236


def size_decay(original_size: float) -> float:
    return math.exp(-0.1 * original_size + 2.7)


class OriginalEngine(RuleEngine):
    """Lindenmayer's algae system: A -> AB, B -> A."""

    family = Family.ORIGINAL
    axiom = "A"

    def rules(self) -> Mapping[str, SymbolRule]:
        return {
            "A": SymbolRule(draw=self._draw_primary, produce=self._grow_primary),
            "B": SymbolRule(draw=self._draw_secondary, produce=self._grow_secondary),
        }

    def size_step(self) -> float:
        return self.original_size / size_decay(self.original_size)

    def initial_auxiliary(self) -> float:
        return 0.0

    def _base_stroke(self, node: Node) -> tuple[float, float]:
        length = size_decay(node.branch_size)
        angle = self.rng.random() * math.pi * ANGLE_SPREAD
        return length, angle

    def _draw_primary(self, node: Node) -> float:
        length, angle = self._base_stroke(node)
        length += node.branch_size**PRIMARY_LENGTH_EXPONENT
        return self.paint(node, length, angle)

    def _draw_secondary(self, node: Node) -> float:
        length, angle = self._base_stroke(node)
        length += node.branch_size**SECONDARY_LENGTH_EXPONENT
        return self.paint(node, length, SECONDARY_ANGLE_MULTIPLIER * angle)

    def _grow_primary(self, node: Node, size: float, angle: float) -> None:
        self.attach(node, "AB", size, 0.0)

    def _grow_secondary(self, node: Node, size: float, angle: float) -> None:
        self.attach(node, "A", size, 0.0)

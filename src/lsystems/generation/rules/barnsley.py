from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping

from lsystems.generation.families import Family
from lsystems.generation.node import Node
from lsystems.generation.rules.base import RuleEngine, SymbolRule

LEAF_TURN = 0.78540
STEM_CURL = 0.03272

PRODUCTIONS = {
    "1": "123",
    "2": "451",
    "5": "451",
    "3": "231",
    "4": "231",
}


@dataclass(frozen=True)
class Leaf:
    backstep: float
    turn: float
    randomized: bool


# Leaves start part way back down the parent segment before turning.
LEAVES = {
    "2": Leaf(backstep=1.0, turn=LEAF_TURN, randomized=False),
    "3": Leaf(backstep=0.75, turn=-LEAF_TURN, randomized=True),
    "4": Leaf(backstep=1.0, turn=-LEAF_TURN, randomized=True),
    "5": Leaf(backstep=0.75, turn=LEAF_TURN, randomized=False),
}


def stroke_length(size: float) -> float:
    return 2 * max(math.exp(1 - 0.03 * size), size**2.2)


class BarnsleyEngine(RuleEngine):
    """Fern-like growth: a curling stem ('1') throwing left and right leaves."""

    family = Family.BARNSLEY
    axiom = "1"

    def rules(self) -> Mapping[str, SymbolRule]:
        table = {"1": SymbolRule(draw=self._draw_stem, produce=self._grow)}
        for symbol in LEAVES:
            table[symbol] = SymbolRule(draw=self._draw_leaf, produce=self._grow)
        return table

    def size_step(self) -> float:
        return self.original_size / (6 - 0.05 * self.original_size)

    def _draw_stem(self, node: Node) -> float:
        angle = node.auxiliary
        angle += STEM_CURL + STEM_CURL * angle
        return self.paint(node, stroke_length(node.branch_size), angle)

    def _draw_leaf(self, node: Node) -> float:
        factor = 2 * self.rng.random()
        leaf = LEAVES[node.symbol]
        length = stroke_length(node.branch_size)
        angle = node.auxiliary

        x, y = node.start
        node.start = (
            x - leaf.backstep * length * math.cos(angle),
            y - leaf.backstep * length * math.sin(angle),
        )
        angle += leaf.turn * factor if leaf.randomized else leaf.turn
        return self.paint(node, length, angle)

    def _grow(self, node: Node, size: float, angle: float) -> None:
        self.attach(node, PRODUCTIONS[node.symbol], size, angle)

from __future__ import annotations

import math
import random
from dataclasses import dataclass, replace
from typing import Any, Mapping

from lsystems.generation.errors import UnbalancedBracketError
from lsystems.generation.families import Family
from lsystems.generation.node import Node, Point
from lsystems.generation.rules.base import RuleEngine, SymbolRule
from lsystems.generation.rules.barnsley import stroke_length

TURN = 0.43633

# X -> F+[[X]-X]-F[-FX]+X, with the drawing 'F's split out from the control
# runs around them so consecutive strokes do not streak across the figure.
X_TEMPLATE = ("F", "+[[X]-X]-", "F", "[-", "F", "X]+X")


@dataclass(frozen=True)
class TurtleState:
    x: float
    y: float
    angle: float

    @property
    def position(self) -> Point:
        return (self.x, self.y)


class FractalPlantEngine(RuleEngine):
    """Bracketed plant grammar driven by one shared turtle and a save stack.

    Only 'F' paints. Turning, saving and restoring happen as each control
    symbol is popped, so a wave reads like a turtle walking its string.
    """

    family = Family.FRACTAL_PLANT
    axiom = "X"

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        x, y = self.origin
        self.turn = TURN * turning_factor(self.rng)
        self.state = TurtleState(x=x, y=y, angle=self.rng.random() * math.tau)
        self.saved: list[TurtleState] = []

    def rules(self) -> Mapping[str, SymbolRule]:
        return {
            "X": SymbolRule(draw=self.skip_draw, produce=self._grow_x),
            "F": SymbolRule(draw=self._draw_forward, produce=self._grow_f),
            "+": SymbolRule(draw=self._turn_left, produce=self._copy),
            "-": SymbolRule(draw=self._turn_right, produce=self._copy),
            "[": SymbolRule(draw=self._save, produce=self._copy),
            "]": SymbolRule(draw=self._restore, produce=self._copy),
        }

    def size_step(self) -> float:
        return self.original_size / (-0.15 * self.original_size + 5) + 0.1

    def follow(self, symbols: str, size: float | None = None) -> list[Node]:
        """Walk ``symbols`` with the shared turtle without expanding them."""
        size = self.original_size if size is None else size
        nodes = []
        for symbol in symbols:
            node = Node(symbol=symbol, start=self.state.position, branch_size=size)
            self._rules[symbol].draw(node)
            nodes.append(node)
        return nodes

    def _draw_forward(self, node: Node) -> float:
        node.start = self.state.position
        self.paint(node, stroke_length(node.branch_size), self.state.angle)
        self.state = replace(self.state, x=node.end[0], y=node.end[1])
        return self.state.angle

    def _turn_left(self, node: Node) -> float:
        self.state = replace(self.state, angle=self.state.angle + self.turn)
        return self.state.angle

    def _turn_right(self, node: Node) -> float:
        self.state = replace(self.state, angle=self.state.angle - self.turn)
        return self.state.angle

    def _save(self, node: Node) -> float:
        self.saved.append(self.state)
        return self.state.angle

    def _restore(self, node: Node) -> float:
        if not self.saved:
            raise UnbalancedBracketError("']' expanded with an empty save stack")
        self.state = self.saved.pop()
        return self.state.angle

    def _grow_x(self, node: Node, size: float, angle: float) -> None:
        for symbols in X_TEMPLATE:
            self.attach(node, symbols, size, self.state.angle, start=self.state.position)

    def _grow_f(self, node: Node, size: float, angle: float) -> None:
        self.attach(node, "FF", size, node.auxiliary)

    def _copy(self, node: Node, size: float, angle: float) -> None:
        self.attach(node, node.symbol, size, 0.0, start=self.state.position)


def turning_factor(rng: random.Random) -> float:
    return max(min(2 * rng.random(), 1.0), 0.3)

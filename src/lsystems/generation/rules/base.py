from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from typing import Callable, ClassVar, Mapping

from lsystems.display.color import Color
from lsystems.generation.errors import GenerationAborted
from lsystems.generation.families import Family
from lsystems.generation.geometry import DrawInterpreter
from lsystems.generation.node import Node, Point, WorkQueue


@dataclass(frozen=True)
class SymbolRule:
    """How one symbol is drawn and what it rewrites into.

    ``draw`` returns the angle handed on to the children; ``produce`` gets
    the popped node, the next generation's size and that angle.
    """

    draw: Callable[[Node], float]
    produce: Callable[[Node, float, float], None]


class RuleEngine(ABC):
    """Expands one figure from its axiom, wave by wave, off a FIFO queue.

    An engine instance is scoped to a single press: it owns the work queue,
    the random source and whatever shared state its family needs.
    """

    family: ClassVar[Family]
    axiom: ClassVar[str]

    def __init__(
        self,
        *,
        interpreter: DrawInterpreter,
        origin: Point,
        color: Color,
        original_size: int,
        rng: random.Random | None = None,
        max_nodes: int | None = None,
    ) -> None:
        if original_size <= 0:
            raise ValueError("original_size must be positive")
        self.interpreter = interpreter
        self.origin = origin
        self.color = color
        self.original_size = original_size
        self.rng = rng or random.Random()
        self.max_nodes = max_nodes
        self.queue: WorkQueue = deque()
        self.processed = 0
        self._rules = self.rules()

    @abstractmethod
    def rules(self) -> Mapping[str, SymbolRule]:
        """Return the symbol table for this family."""

    @abstractmethod
    def size_step(self) -> float:
        """Amount each generation's branch size shrinks by."""

    def initial_auxiliary(self) -> float:
        return self.rng.random() * math.tau

    def seed(self) -> Node:
        root = Node(
            symbol=self.axiom,
            start=self.origin,
            branch_size=self.original_size,
            auxiliary=self.initial_auxiliary(),
        )
        self.queue.append(root)
        return root

    def expand(self) -> int:
        """Drain the queue, returning how many live nodes were processed."""
        step = self.size_step()
        while self.queue:
            node = self.queue.popleft()
            if node.branch_size <= 0:
                continue

            self.processed += 1
            if self.max_nodes is not None and self.processed > self.max_nodes:
                raise GenerationAborted(self.processed, self.max_nodes)

            rule = self._rules[node.symbol]
            angle = rule.draw(node)
            rule.produce(node, node.branch_size - step, angle)
        return self.processed

    def run(self) -> Node:
        root = self.seed()
        self.expand()
        return root

    def paint(self, node: Node, length: float, angle: float) -> float:
        self.interpreter.draw(node, length, angle, self.color)
        return angle

    def attach(
        self,
        node: Node,
        symbols: str,
        size: float,
        auxiliary: float,
        start: Point | None = None,
    ) -> None:
        node.attach_children(
            symbols,
            node.end if start is None else start,
            size,
            auxiliary,
            self.queue,
        )

    @staticmethod
    def skip_draw(node: Node) -> float:
        return node.auxiliary

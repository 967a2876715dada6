from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterator

Point = tuple[float, float]

# FIFO of nodes waiting to be drawn and expanded during a single run.
WorkQueue = deque["Node"]


@dataclass(eq=False)
class Node:
    """One symbol instance in an expansion tree.

    ``end`` starts out equal to ``start`` and is only replaced by the draw
    step, so children of a node that never draws grow from its start point.
    ``auxiliary`` carries the family-specific value handed down from the
    parent: a drawing angle for most families, a sector index for Porpita.
    """

    symbol: str
    start: Point
    branch_size: float
    end: Point = field(default=None)  # type: ignore[assignment]
    auxiliary: float = 0.0
    children: list[Node] = field(default_factory=list)
    drawn: bool = False

    def __post_init__(self) -> None:
        if self.end is None:
            self.end = self.start

    def attach_children(
        self,
        symbols: str,
        start: Point,
        size: float,
        auxiliary: float,
        queue: WorkQueue,
    ) -> list[Node]:
        """Append one child per symbol, in order, and enqueue each of them."""
        if not symbols:
            raise ValueError("attach_children requires at least one symbol")

        created = []
        for symbol in symbols:
            child = Node(symbol=symbol, start=start, branch_size=size, auxiliary=auxiliary)
            self.children.append(child)
            queue.append(child)
            created.append(child)
        return created

    def walk(self) -> Iterator[Node]:
        """Yield this node and every descendant, depth first."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def segment(self) -> tuple[Point, Point]:
        return self.start, self.end

    def __repr__(self) -> str:
        return (
            f"Node(symbol={self.symbol!r}, start={self.start}, end={self.end}, "
            f"branch_size={self.branch_size:.3f}, auxiliary={self.auxiliary:.3f}, "
            f"children={len(self.children)})"
        )

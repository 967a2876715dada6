from __future__ import annotations

import threading
from collections import deque

from lsystems.display.color import Color
from lsystems.generation.geometry import StrokeRequest, StrokeSink
from lsystems.generation.node import Node
from lsystems.utilities.logging import get_logger

logger = get_logger(__name__)


class EraseHistory:
    """Completed figures, most recent first."""

    def __init__(self, sink: StrokeSink, background: Color) -> None:
        self.sink = sink
        self.background = background
        self._roots: deque[Node] = deque()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._roots)

    def push(self, root: Node) -> None:
        with self._lock:
            self._roots.appendleft(root)

    def pop_and_erase(self) -> Node | None:
        """Repaint the newest figure in the background colour.

        Only segments that were actually drawn are repainted. Returns the
        erased root, or ``None`` when there is nothing to erase.
        """
        with self._lock:
            if not self._roots:
                logger.debug("Release with no completed figure; nothing to erase")
                return None
            root = self._roots.popleft()

        erased = 0
        for node in root.walk():
            if not node.drawn:
                continue
            self.sink.submit(
                StrokeRequest(
                    start=node.start,
                    end=node.end,
                    color=self.background,
                    width=node.branch_size,
                )
            )
            erased += 1
        logger.debug("Erasing %s segments of %r", erased, root.symbol)
        return root

from __future__ import annotations

import threading

import numpy as np
from reactivex.abc import DisposableBase

from lsystems.generation.geometry import StrokeRequest
from lsystems.rendering.canvas import Canvas
from lsystems.rendering.scheduler import (AnimationScheduler,
                                          ThreadPoolAnimationScheduler)
from lsystems.utilities.env import Configuration


def increments_for(width: float) -> int:
    return max(int(round(width * 3)), 1)


class StrokeAnimation:
    """One segment painted piecewise, one increment per tick.

    ``expire`` is the deadline: whatever is still unpainted then goes down
    as a single final stroke, counted in ``flushed``, and the ticker is
    disposed.
    """

    def __init__(self, canvas: Canvas, request: StrokeRequest, increments: int) -> None:
        self.canvas = canvas
        self.request = request
        self.increments = increments
        self.points = np.linspace(request.start, request.end, increments + 1)
        self.painted = 0
        self.flushed = 0
        self._lock = threading.Lock()
        self._handles: list[DisposableBase] = []
        self._finished = False

    @property
    def done(self) -> bool:
        return self.painted >= self.increments

    def attach(self, *handles: DisposableBase) -> None:
        with self._lock:
            self._handles.extend(handles)
            finished = self._finished
        if finished:
            self._dispose_handles()

    def step(self) -> None:
        with self._lock:
            if self.done:
                return
            self._paint(self.painted, self.painted + 1)
            self.painted += 1
            if not self.done:
                return
            self._finished = True
        self._dispose_handles()

    def expire(self) -> None:
        with self._lock:
            if not self.done:
                self._paint(self.painted, self.increments)
                self.flushed = self.increments - self.painted
                self.painted = self.increments
            self._finished = True
        self._dispose_handles()

    def _paint(self, begin: int, end: int) -> None:
        self.canvas.paint_line(
            self.points[begin],
            self.points[end],
            self.request.color,
            self.request.width,
        )

    def _dispose_handles(self) -> None:
        with self._lock:
            handles, self._handles = self._handles, []
        for handle in handles:
            handle.dispose()


class AnimatedStrokeRenderer:
    """Paints each submitted segment gradually on a shared scheduler.

    A stroke of width ``w`` is split into ``n = max(round(3w), 1)`` pieces,
    ticks every ``n`` time units and is forced to completion after ``n**2``.
    """

    def __init__(
        self,
        canvas: Canvas,
        scheduler: AnimationScheduler | None = None,
        time_unit_ms: float | None = None,
    ) -> None:
        self.canvas = canvas
        self.scheduler = scheduler or ThreadPoolAnimationScheduler()
        self.time_unit_ms = (
            time_unit_ms
            if time_unit_ms is not None
            else Configuration.animation_time_unit_ms()
        )

    def submit(self, request: StrokeRequest) -> StrokeAnimation:
        increments = increments_for(request.width)
        animation = StrokeAnimation(self.canvas, request, increments)
        unit = self.time_unit_ms / 1000.0
        ticker = self.scheduler.schedule_periodic(increments * unit, animation.step)
        deadline = self.scheduler.schedule_once(increments**2 * unit, animation.expire)
        animation.attach(ticker, deadline)
        return animation

    def shutdown(self) -> None:
        shutdown = getattr(self.scheduler, "shutdown", None)
        if shutdown is not None:
            shutdown()


class ImmediateStrokeRenderer:
    """Paints each segment in one stroke on the calling thread."""

    def __init__(self, canvas: Canvas) -> None:
        self.canvas = canvas

    def submit(self, request: StrokeRequest) -> None:
        self.canvas.paint_line(request.start, request.end, request.color, request.width)

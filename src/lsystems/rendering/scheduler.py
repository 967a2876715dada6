from __future__ import annotations

import threading
from typing import Any, Callable, Protocol

from reactivex.abc import DisposableBase
from reactivex.disposable import CompositeDisposable
from reactivex.scheduler import EventLoopScheduler, ThreadPoolScheduler

from lsystems.utilities.env import Configuration
from lsystems.utilities.logging import get_logger

logger = get_logger(__name__)

TIMER_THREAD_NAME = "lsystems-stroke-timer"


class AnimationScheduler(Protocol):
    """Runs stroke animations. Delays and periods are in seconds."""

    def schedule_periodic(
        self, period: float, action: Callable[[], None]
    ) -> DisposableBase: ...

    def schedule_once(self, delay: float, action: Callable[[], None]) -> DisposableBase: ...


def _timer_thread(target: Callable[[], None]) -> threading.Thread:
    return threading.Thread(target=target, name=TIMER_THREAD_NAME, daemon=True)


class ThreadPoolAnimationScheduler:
    """Stroke timing on one event-loop thread, painting on a shared pool.

    The timer thread only hands each firing to the pool, so a worker is
    busy for a single paint and is never parked between ticks. A periodic
    task fires immediately, then once per period, until it is disposed. A
    task that raises is logged and stops; the pool survives.
    """

    def __init__(self, max_workers: int | None = None) -> None:
        self._max_workers = max_workers
        self._pool: ThreadPoolScheduler | None = None
        self._timer: EventLoopScheduler | None = None
        self._lock = threading.Lock()

    def _schedulers(self) -> tuple[ThreadPoolScheduler, EventLoopScheduler]:
        if self._pool is None:
            with self._lock:
                if self._pool is None:
                    max_workers = (
                        self._max_workers
                        if self._max_workers is not None
                        else Configuration.animation_max_workers()
                    )
                    logger.debug("Building stroke pool with %s workers", max_workers)
                    self._timer = EventLoopScheduler(thread_factory=_timer_thread)
                    self._pool = ThreadPoolScheduler(max_workers=max_workers)
        assert self._pool is not None and self._timer is not None
        return self._pool, self._timer

    def schedule_periodic(
        self, period: float, action: Callable[[], None]
    ) -> CompositeDisposable:
        pool, timer = self._schedulers()
        subscription = CompositeDisposable()

        def run(scheduler: Any = None, state: Any = None) -> None:
            if subscription.is_disposed:
                return
            try:
                action()
            except Exception:
                logger.exception("Stroke animation task failed")
                subscription.dispose()

        def fire(state: Any = None) -> Any:
            pool.schedule(run)
            return state

        pool.schedule(run)
        subscription.add(timer.schedule_periodic(period, fire))
        return subscription

    def schedule_once(self, delay: float, action: Callable[[], None]) -> DisposableBase:
        pool, timer = self._schedulers()

        def run(scheduler: Any = None, state: Any = None) -> None:
            try:
                action()
            except Exception:
                logger.exception("Scheduled stroke action failed")

        def fire(scheduler: Any = None, state: Any = None) -> None:
            pool.schedule(run)

        return timer.schedule_relative(delay, fire)

    def shutdown(self) -> None:
        with self._lock:
            pool, timer = self._pool, self._timer
            self._pool = self._timer = None
        if timer is not None:
            timer.dispose()
        if pool is not None:
            pool.executor.shutdown(wait=False, cancel_futures=True)

"""Timer sources for the playback loop.

``CanvasScheduler`` rides on the figure canvas' GUI event loop timers.
``SteppedScheduler`` is a virtual clock that only moves when ``advance`` is
called, for headless rendering and tests.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Any, Callable

from .base import Scheduler, TimerHandle


class _CanvasTimer(TimerHandle):
    def __init__(self, owner: "CanvasScheduler", timer) -> None:
        self._owner = owner
        self._timer = timer
        self.active = True

    def stop(self) -> None:
        if not self.active:
            return
        self.active = False
        self._timer.stop()
        self._owner._live.discard(self)


class CanvasScheduler(Scheduler):
    """Schedule callbacks with ``canvas.new_timer``.

    Live timers are referenced here so they are not garbage collected while
    pending.
    """

    def __init__(self, canvas) -> None:
        self.canvas = canvas
        self._live: set[_CanvasTimer] = set()

    def _start(self, interval_ms: float, tick: Callable[[_CanvasTimer], Any], single_shot: bool) -> _CanvasTimer:
        timer = self.canvas.new_timer(interval=max(1, int(round(interval_ms))))
        timer.single_shot = single_shot
        handle = _CanvasTimer(self, timer)
        timer.add_callback(tick, handle)
        self._live.add(handle)
        timer.start()
        return handle

    def call_every(self, interval_ms: float, callback: Callable[[], Any]) -> TimerHandle:
        def tick(handle: _CanvasTimer) -> None:
            if handle.active and callback() is False:
                handle.stop()

        return self._start(interval_ms, tick, single_shot=False)

    def call_later(self, delay_ms: float, callback: Callable[[], Any]) -> TimerHandle:
        def fire(handle: _CanvasTimer) -> None:
            if handle.active:
                handle.stop()
                callback()

        return self._start(delay_ms, fire, single_shot=True)


class _SteppedTimer(TimerHandle):
    def __init__(self, interval_ms: float, callback: Callable[[], Any], repeat: bool) -> None:
        self.interval_ms = interval_ms
        self.callback = callback
        self.repeat = repeat
        self.active = True

    def stop(self) -> None:
        self.active = False


class SteppedScheduler(Scheduler):
    """Deterministic virtual clock.

    Callbacks run inside ``advance`` in due-time order; ties run in the order
    they were scheduled. Callbacks may schedule further callbacks, which run
    within the same ``advance`` when they fall due before its end.
    """

    def __init__(self) -> None:
        self.now: float = 0.0
        self._queue: list[tuple[float, int, _SteppedTimer]] = []
        self._seq = itertools.count()

    def _push(self, due: float, timer: _SteppedTimer) -> None:
        heapq.heappush(self._queue, (due, next(self._seq), timer))

    def call_every(self, interval_ms: float, callback: Callable[[], Any]) -> TimerHandle:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        timer = _SteppedTimer(interval_ms, callback, repeat=True)
        self._push(self.now + interval_ms, timer)
        return timer

    def call_later(self, delay_ms: float, callback: Callable[[], Any]) -> TimerHandle:
        timer = _SteppedTimer(max(0.0, delay_ms), callback, repeat=False)
        self._push(self.now + timer.interval_ms, timer)
        return timer

    @property
    def pending(self) -> int:
        return sum(1 for _, _, t in self._queue if t.active)

    def advance(self, ms: float) -> None:
        """Move the clock forward by ``ms``, running every callback that falls due."""
        target = self.now + ms
        while self._queue and self._queue[0][0] <= target:
            due, _, timer = heapq.heappop(self._queue)
            if not timer.active:
                continue
            self.now = due
            if not timer.repeat:
                timer.active = False
            result = timer.callback()
            if timer.repeat and timer.active:
                if result is False:
                    timer.active = False
                else:
                    self._push(due + timer.interval_ms, timer)
        self.now = target

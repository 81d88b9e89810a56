"""Countdown state and its transitions.

TimerState is immutable; every transition returns a new value. Nothing
here touches the terminal or the clock unless ``now`` is omitted.
"""

import time
from dataclasses import dataclass, replace
from typing import Optional

from . import timecalc

DEFAULT_DURATION_SECONDS = 1500
DEFAULT_PADDING = 3
DEFAULT_MAX_WIDTH = 80

# Columns reserved beside the bar on top of the left/right padding.
BAR_MARGIN = 4


@dataclass(frozen=True)
class TimerState:
    duration_seconds: int = DEFAULT_DURATION_SECONDS
    seconds_elapsed: int = 0
    running: bool = False
    start_time: Optional[float] = None
    end_time: Optional[float] = None
    remaining_seconds: Optional[int] = DEFAULT_DURATION_SECONDS
    percent: float = 0.0
    render_width: int = 0
    # Bumped on every start so ticks scheduled for an earlier run can be told apart.
    run: int = 0

    @classmethod
    def initial(cls, duration_seconds: int = DEFAULT_DURATION_SECONDS) -> "TimerState":
        return cls(duration_seconds=duration_seconds, remaining_seconds=duration_seconds)

    @property
    def complete(self) -> bool:
        return self.percent >= 1.0

    def start(self, duration_seconds: Optional[int] = None, now: Optional[float] = None) -> "TimerState":
        if duration_seconds is None:
            duration_seconds = self.duration_seconds
        if now is None:
            now = time.time()
        return replace(
            self,
            duration_seconds=duration_seconds,
            seconds_elapsed=0,
            running=True,
            start_time=now,
            end_time=now + duration_seconds,
            remaining_seconds=duration_seconds,
            percent=0.0,
            run=self.run + 1,
        )

    def advance_one_tick(self, now: Optional[float] = None) -> "TimerState":
        """Count one tick.

        Completion follows the tick counter while the readout follows the
        wall clock, so the two can drift apart under scheduling jitter.
        """
        if not self.running:
            return self
        if now is None:
            now = time.time()
        elapsed = self.seconds_elapsed + 1
        percent = elapsed / self.duration_seconds
        running = True
        if percent >= 1.0:
            percent = 1.0
            running = False
        return replace(
            self,
            seconds_elapsed=elapsed,
            percent=percent,
            running=running,
            remaining_seconds=timecalc.remaining_seconds(self.end_time, now),
        )

    def resize(
        self,
        viewport_width: int,
        padding: int = DEFAULT_PADDING,
        max_width: int = DEFAULT_MAX_WIDTH,
    ) -> "TimerState":
        width = viewport_width - padding * 2 - BAR_MARGIN
        if width > max_width:
            # Capped: the precise readout is omitted until the next tick.
            return replace(self, render_width=max_width, remaining_seconds=None)
        return replace(self, render_width=max(0, width))

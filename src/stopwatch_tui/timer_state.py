from __future__ import annotations

import time
import logging
from datetime import timedelta

from .shared import Clock, Lap, Status, ZERO, nanosToDuration

log = logging.getLogger(__name__)

DEFAULT_WINDOW_HEIGHT = 10

class TimerState:
    '''
    Elapsed-time accounting, pause/resume, and the lap ledger.
    Elapsed time is always derived from clock samples, never
    accumulated per tick.
    '''
    def __init__(
        self,
        clock: Clock = time.monotonic_ns,
        window_height: int = DEFAULT_WINDOW_HEIGHT,
    ) -> None:
        self.clock = clock
        self.status = Status.Running
        self.start_instant: int = clock()
        self.accumulated: timedelta = ZERO
        self.laps: list[Lap] = []
        self.scroll_offset = 0
        self.window_height = max(1, window_height)

    def elapsed(self) -> timedelta:
        if self.status is Status.Paused:
            return self.accumulated
        return self.accumulated + nanosToDuration(
            self.clock() - self.start_instant,
        )

    def toggle_pause(self) -> None:
        now = self.clock()
        match self.status:
            case Status.Running:
                self.accumulated += nanosToDuration(now - self.start_instant)
                self.status = Status.Paused
            case Status.Paused:
                self.start_instant = now
                self.status = Status.Running
        log.debug('%s at %s', self.status.value, self.accumulated)

    def record_lap(self) -> Lap:
        lap = Lap(
            index=len(self.laps) + 1,
            cumulative_at_lap=self.elapsed(),
        )
        self.laps.append(lap)
        # newest lap stays in view, manual scroll position is dropped
        self.scroll_offset = self.max_scroll_offset
        log.debug('lap %d at %s', lap.index, lap.cumulative_at_lap)
        return lap

    def reset(self) -> None:
        self.status = Status.Running
        self.accumulated = ZERO
        self.start_instant = self.clock()
        self.laps = []
        self.scroll_offset = 0
        log.debug('reset')

    def scroll(self, delta: int) -> None:
        self.scroll_offset = self.clampOffset(self.scroll_offset + delta)

    def set_window_height(self, height: int) -> None:
        self.window_height = max(1, height)
        self.scroll_offset = self.clampOffset(self.scroll_offset)

    @property
    def max_scroll_offset(self) -> int:
        return max(0, len(self.laps) - self.window_height)

    def clampOffset(self, offset: int) -> int:
        return min(max(offset, 0), self.max_scroll_offset)

    def lap_time(self, lap: Lap) -> timedelta:
        if lap.index == 1:
            return lap.cumulative_at_lap
        previous = self.laps[lap.index - 2]
        return lap.cumulative_at_lap - previous.cumulative_at_lap

    def visible_laps(self) -> list[Lap]:
        return self.laps[
            self.scroll_offset : self.scroll_offset + self.window_height
        ]

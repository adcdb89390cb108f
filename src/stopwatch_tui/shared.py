from __future__ import annotations

import typing as tp
from datetime import timedelta
from enum import Enum

from pydantic import BaseModel, ConfigDict
from textual.widget import Widget

Clock = tp.Callable[[], int]    # monotonic nanoseconds

ZERO = timedelta()

class Status(Enum):
    Running = 'running'
    Paused = 'paused'

class ColorBucket(Enum):
    A = 'green'
    B = 'yellow'
    C = 'cyan'
    D = 'magenta'

    @property
    def color(self) -> str:
        return self.value

# (exclusive upper bound, bucket), checked in order
BUCKET_THRESHOLDS: tuple[tuple[timedelta, ColorBucket], ...] = (
    (timedelta(seconds=10), ColorBucket.A),
    (timedelta(seconds=60), ColorBucket.B),
    (timedelta(seconds=300), ColorBucket.C),
)

class Lap(BaseModel):
    index: int  # 1-based
    cumulative_at_lap: timedelta

    model_config = ConfigDict(
        frozen=True,
    )

def nanosToDuration(ns: int) -> timedelta:
    return timedelta(microseconds=ns // 1000)

def colorBucket(elapsed: timedelta) -> ColorBucket:
    for upper, bucket in BUCKET_THRESHOLDS:
        if elapsed < upper:
            return bucket
    return ColorBucket.D

def formatClock(elapsed: timedelta) -> str:
    '''
    `MM:SS.mmm`, truncated to the millisecond.
    Minutes keep counting past the hour, e.g. `75:00.000`.
    '''
    ms = max(elapsed, ZERO) // timedelta(milliseconds=1)
    minutes, ms = divmod(ms, 60_000)
    seconds, ms = divmod(ms, 1000)
    return f'{minutes:02d}:{seconds:02d}.{ms:03d}'

def formatSeconds(d: timedelta) -> str:
    return f'{d.total_seconds():.2f}s'

def titled(
    w: Widget, /, title: str, style = ('round', '#999'), padding = (0, 1),
):
    w.styles.border = style
    w.border_title = title
    w.styles.padding = padding
    return w

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict

from .shared import (
    ColorBucket, Lap, Status, colorBucket, formatClock, formatSeconds,
)
from .timer_state import TimerState

log = logging.getLogger(__name__)

TICK_SECONDS = 0.05

class Command(Enum):
    Lap = 'lap'
    TogglePause = 'toggle_pause'
    Reset = 'reset'
    ScrollUp = 'scroll_up'
    ScrollDown = 'scroll_down'
    Quit = 'quit'

# Textual key names
KEYMAP: dict[str, Command] = {
    'space': Command.Lap,
    'p': Command.TogglePause,
    'P': Command.TogglePause,
    'r': Command.Reset,
    'R': Command.Reset,
    'up': Command.ScrollUp,
    'down': Command.ScrollDown,
    'q': Command.Quit,
    'Q': Command.Quit,
    'escape': Command.Quit,
}

STATUS_INDICATOR = {
    Status.Running: '▶',
    Status.Paused: '⏸',
}

CONTROLS = {
    Status.Running: 'SPACE: Lap  •  P: Pause  •  R: Reset  •  ↑↓: Scroll  •  Q: Quit',
    Status.Paused: 'SPACE: Lap  •  P: Resume  •  R: Reset  •  ↑↓: Scroll  •  Q: Quit',
}

EMPTY_HINT = 'Press SPACE to record your first lap!'

class RenderModel(BaseModel):
    elapsed_text: str
    color_bucket: ColorBucket
    status: Status
    status_indicator: str
    status_label: str
    controls: str
    lap_lines: list[str]
    highlight_row: int | None
    lap_count: int
    scroll_offset: int
    laps_title: str
    empty_hint: str

    model_config = ConfigDict(
        frozen=True,
    )

class InteractionLoop:
    '''
    Maps key presses to `TimerState` transitions and derives the
    render model. Once a quit command has been seen the loop is
    terminated and ignores everything after.
    '''
    def __init__(self, state: TimerState) -> None:
        self.state = state
        self.terminated = False

    def handle_key(self, key: str) -> bool:
        command = KEYMAP.get(key)
        if command is None:
            return not self.terminated
        return self.dispatch(command)

    def dispatch(self, command: Command) -> bool:
        if self.terminated:
            return False
        state = self.state
        match command:
            case Command.Lap:
                state.record_lap()
            case Command.TogglePause:
                state.toggle_pause()
            case Command.Reset:
                state.reset()
            case Command.ScrollUp:
                state.scroll(-1)
            case Command.ScrollDown:
                state.scroll(+1)
            case Command.Quit:
                self.terminated = True
                log.info('quit at %s', formatClock(state.elapsed()))
        return not self.terminated

    def render(self) -> RenderModel:
        state = self.state
        elapsed = state.elapsed()
        n_laps = len(state.laps)
        visible = state.visible_laps()
        return RenderModel(
            elapsed_text=formatClock(elapsed),
            color_bucket=colorBucket(elapsed),
            status=state.status,
            status_indicator=STATUS_INDICATOR[state.status],
            status_label=state.status.name.upper(),
            controls=CONTROLS[state.status],
            lap_lines=[formatLapLine(state, lap) for lap in visible],
            highlight_row=highlightRow(state, visible),
            lap_count=n_laps,
            scroll_offset=state.scroll_offset,
            laps_title=(
                f'Laps ({n_laps}) - Use ↑↓ to scroll' if n_laps else
                'Laps'
            ),
            empty_hint=EMPTY_HINT,
        )

def formatLapLine(state: TimerState, lap: Lap) -> str:
    return (
        f'Lap {lap.index}: {formatSeconds(state.lap_time(lap))} '
        f'(Total: {formatSeconds(lap.cumulative_at_lap)})'
    )

def highlightRow(state: TimerState, visible: list[Lap]) -> int | None:
    '''
    Newest lap while the window sits at the bottom, otherwise the
    top row, which is the one scrolling moves.
    '''
    if not visible:
        return None
    if state.scroll_offset == state.max_scroll_offset:
        return len(visible) - 1
    return 0

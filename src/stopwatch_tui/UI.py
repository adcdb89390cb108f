import time
import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Static

from .shared import Clock, titled
from .timer_state import TimerState
from .interaction import InteractionLoop, RenderModel, KEYMAP, TICK_SECONDS
from .lap_window import LapWindow
from .timer_display import TimerDisplay

log = logging.getLogger(__name__)

class UI(App):
    CSS = '''
    #title {
        text-style: bold;
        color: cyan;
        content-align: center middle;
        height: 3;
    }
    #timer {
        content-align: center middle;
        height: 3;
    }
    #controls {
        color: $text-muted;
        content-align: center middle;
        height: 3;
    }
    #laps {
        height: 1fr;
    }
    '''
    BINDINGS = [
        Binding(key, f"dispatch_key('{key}')", command.value, show=False, priority=True)
        for key, command in KEYMAP.items()
    ]

    def __init__(
        self,
        clock: Clock = time.monotonic_ns,
        tick_seconds: float = TICK_SECONDS,
    ) -> None:
        super().__init__()

        self.tick_seconds = tick_seconds
        self.state = TimerState(clock)
        self.loop = InteractionLoop(self.state)
        self.render_model: RenderModel = self.loop.render()

        self.title = "Stopwatch"

    def compose(self) -> ComposeResult:
        with Vertical():
            yield titled(Static("⏱  STOPWATCH", id="title"), '')
            yield titled(TimerDisplay(id="timer"), 'Elapsed Time')
            yield titled(Static("", id="controls"), 'Controls')
            yield titled(LapWindow(
                self.state.set_window_height, id="laps",
            ), 'Laps')

    def on_mount(self) -> None:
        self.myUpdate()
        self.set_interval(self.tick_seconds, self.myUpdate)

    def action_dispatch_key(self, key: str) -> None:
        if not self.loop.handle_key(key):
            self.exit(return_code=0)
            return
        self.myUpdate()

    def myUpdate(self) -> None:
        if self.loop.terminated:
            return
        model = self.loop.render()
        self.render_model = model
        timer = self.query_one('#timer', TimerDisplay)
        timer.indicator = model.status_indicator
        timer.elapsed_text = model.elapsed_text
        timer.color = model.color_bucket.color
        timer.border_subtitle = model.status_label
        self.query_one('#controls', Static).update(model.controls)
        laps = self.query_one('#laps', LapWindow)
        laps.border_title = model.laps_title
        laps.empty_hint = model.empty_hint
        laps.lines = tuple(model.lap_lines)
        laps.highlight_row = model.highlight_row

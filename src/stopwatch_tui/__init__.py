from .UI import UI as StopwatchUI
from .timer_state import TimerState
from .interaction import InteractionLoop, RenderModel, Command

__all__ = [
    "StopwatchUI", "TimerState", "InteractionLoop", "RenderModel", "Command",
]

from textual.reactive import reactive
from textual.app import RenderResult
from textual.widget import Widget

class TimerDisplay(Widget):
    indicator: reactive[str] = reactive('')
    elapsed_text: reactive[str] = reactive('')
    color: reactive[str] = reactive('white')

    def render(self) -> RenderResult:
        return (
            f'{self.indicator}  '
            f'[bold {self.color}]{self.elapsed_text}[/]'
        )

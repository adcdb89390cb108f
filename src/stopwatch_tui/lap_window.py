import typing as tp

from textual import events
from textual.reactive import reactive
from textual.app import RenderResult
from textual.widget import Widget

class LapWindow(Widget):
    lines: reactive[tp.Sequence[str]] = reactive(tuple)
    empty_hint: reactive[str] = reactive('')
    highlight_row: reactive[int | None] = reactive(None)

    def __init__(
        self, onHeightChanged: tp.Callable[[int], None], *args, **kw,
    ) -> None:
        '''
        `onHeightChanged` receives the number of lap rows that fit,
        so scrolling can be clamped to what is actually visible.
        '''
        super().__init__(*args, **kw)

        self.onHeightChanged = onHeightChanged

    def render(self) -> RenderResult:
        if not self.lines:
            return f'[grey50]{self.empty_hint}[/]'
        buf = []
        for row, line in enumerate(self.lines):
            if row == self.highlight_row:
                buf.append(f'[bold white on blue]{line}[/]')
                continue
            head, sep, rest = line.partition(': ')
            buf.append(f'[yellow]{head}{sep}[/]{rest}')
        return '\n'.join(buf)

    def on_resize(self, event: events.Resize) -> None:
        self.onHeightChanged(self.content_size.height)

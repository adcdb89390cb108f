import asyncio
import contextlib

from stopwatch_tui.UI import UI
from stopwatch_tui.lap_window import LapWindow
from stopwatch_tui.timer_display import TimerDisplay
from stopwatch_tui.shared import Status

def runApp(app: UI, scenario) -> None:
    async def main() -> None:
        async with app.run_test(size=(80, 24)) as pilot:
            await scenario(pilot)
    asyncio.run(main())

def test_keys_drive_timer_state(clock):
    app = UI(clock=clock)

    async def scenario(pilot) -> None:
        clock.advance(12.34)
        await pilot.press('space')
        clock.advance(15.67)
        await pilot.press('space')
        await pilot.press('p')
        await pilot.pause()
        assert app.state.status is Status.Paused
        assert app.render_model.lap_lines == [
            'Lap 1: 12.34s (Total: 12.34s)',
            'Lap 2: 15.67s (Total: 28.01s)',
        ]
        assert app.render_model.elapsed_text == '00:28.010'
        await pilot.press('r')
        await pilot.pause()
        assert app.state.laps == []
        assert app.state.status is Status.Running

    runApp(app, scenario)

def test_lap_window_reports_height(clock):
    app = UI(clock=clock)

    async def scenario(pilot) -> None:
        await pilot.pause()
        laps = app.query_one('#laps', LapWindow)
        assert app.state.window_height == max(1, laps.content_size.height)
        for _ in range(app.state.window_height + 3):
            await pilot.press('space')
        await pilot.pause()
        assert app.state.scroll_offset == 3
        assert len(laps.lines) == app.state.window_height
        await pilot.press('up')
        assert app.state.scroll_offset == 2

    runApp(app, scenario)

def test_quit_exits_cleanly(clock):
    app = UI(clock=clock)

    async def scenario(pilot) -> None:
        await pilot.press('q')

    runApp(app, scenario)
    assert app.loop.terminated
    assert app.return_code == 0

def test_tick_refreshes_display_without_input(clock):
    app = UI(clock=clock)

    async def scenario(pilot) -> None:
        await pilot.pause()
        assert app.render_model.elapsed_text == '00:00.000'
        clock.advance(65)
        await pilot.pause(0.2)
        assert app.render_model.elapsed_text == '01:05.000'
        timer = app.query_one('#timer', TimerDisplay)
        assert timer.color == 'cyan'
        assert timer.render() == '▶  [bold cyan]01:05.000[/]'
        await pilot.press('p')
        clock.advance(10)
        await pilot.pause(0.2)
        assert timer.render() == '⏸  [bold cyan]01:05.000[/]'

    runApp(app, scenario)

def test_newest_lap_is_highlighted(clock):
    app = UI(clock=clock)

    async def scenario(pilot) -> None:
        clock.advance(1)
        await pilot.press('space')
        clock.advance(2)
        await pilot.press('space')
        await pilot.pause()
        laps = app.query_one('#laps', LapWindow)
        assert laps.highlight_row == 1
        assert laps.render().splitlines() == [
            '[yellow]Lap 1: [/]1.00s (Total: 1.00s)',
            '[bold white on blue]Lap 2: 2.00s (Total: 3.00s)[/]',
        ]

    runApp(app, scenario)

def test_render_error_exits_non_zero(clock):
    app = UI(clock=clock)

    async def scenario(pilot) -> None:
        def broken():
            raise RuntimeError('draw failed')
        app.loop.render = broken
        await pilot.press('space')

    with contextlib.suppress(RuntimeError):
        runApp(app, scenario)
    assert app.return_code == 1

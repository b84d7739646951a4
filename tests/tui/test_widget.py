"""Pilot tests for the TruncatedText widget."""

from __future__ import annotations

import asyncio

import pytest
from tests.helpers.oracles import FailingOracle
from tests.helpers.wait import wait_until
from textual.app import App, ComposeResult
from textual.containers import Vertical

from linefit.core.errors import InvalidArgumentError
from linefit.tui.reflow import ReflowSignal
from linefit.tui.widget import TruncatedText

pytestmark = pytest.mark.tui

PANGRAM = "The quick brown fox jumps over the lazy dog"
DEBOUNCE = 0.05


class ClampTestApp(App):
    """Hosts one TruncatedText in a fixed-width box."""

    CSS = """
    #box {
        width: 20;
        height: auto;
    }
    """

    def __init__(self, clamp: TruncatedText, *, with_signal: bool = True) -> None:
        super().__init__()
        self.clamp = clamp
        if with_signal:
            self.reflow_signal = ReflowSignal(self)
        self.reflowed: list[TruncatedText.Reflowed] = []

    def compose(self) -> ComposeResult:
        with Vertical(id="box"):
            yield self.clamp

    def on_truncated_text_reflowed(self, event: TruncatedText.Reflowed) -> None:
        self.reflowed.append(event)


def _clamp(text: str = PANGRAM, line_limit: int = 1, **kwargs) -> TruncatedText:
    kwargs.setdefault("debounce_seconds", DEBOUNCE)
    return TruncatedText(text, line_limit, **kwargs)


async def _settle(widget: TruncatedText) -> None:
    await wait_until(lambda: widget.layout_passes > 0, description="first layout pass")
    await asyncio.sleep(DEBOUNCE * 2)
    await wait_until(lambda: not widget.reflow_pending, description="debounce to settle")


class TestInitialLayout:
    async def test_truncates_to_box_width(self):
        widget = _clamp()
        app = ClampTestApp(widget)
        async with app.run_test(size=(60, 10)) as pilot:
            await _settle(widget)
            await pilot.pause()

            assert widget.truncated is True
            assert widget.truncated_text == "The quick brown ..."

    async def test_fitting_text_unchanged(self):
        widget = _clamp("short text", 1)
        app = ClampTestApp(widget)
        async with app.run_test(size=(60, 10)) as pilot:
            await _settle(widget)
            await pilot.pause()

            assert widget.truncated is False
            assert widget.truncated_text == "short text"

    async def test_posts_reflowed_message(self):
        widget = _clamp()
        app = ClampTestApp(widget)
        async with app.run_test(size=(60, 10)) as pilot:
            await _settle(widget)
            await wait_until(lambda: bool(app.reflowed), description="Reflowed message")
            await pilot.pause()

            event = app.reflowed[-1]
            assert event.widget is widget
            assert event.truncated is True
            assert event.text == widget.truncated_text


class TestRecompute:
    async def test_text_change_recomputes_immediately(self):
        widget = _clamp()
        app = ClampTestApp(widget)
        async with app.run_test(size=(60, 10)) as pilot:
            await _settle(widget)

            widget.text = "tiny"
            await pilot.pause()

            assert widget.truncated_text == "tiny"
            assert widget.truncated is False

    async def test_line_limit_change_recomputes(self):
        widget = _clamp()
        app = ClampTestApp(widget)
        async with app.run_test(size=(60, 10)) as pilot:
            await _settle(widget)

            widget.line_limit = 3
            await pilot.pause()

            assert widget.truncated is False
            assert widget.truncated_text == PANGRAM

    async def test_invalid_line_limit_rejected(self):
        widget = _clamp()
        app = ClampTestApp(widget)
        async with app.run_test(size=(60, 10)):
            await _settle(widget)
            with pytest.raises(InvalidArgumentError):
                widget.line_limit = 0
            assert widget.line_limit == 1

    async def test_box_resize_reflows_after_debounce(self):
        widget = _clamp()
        app = ClampTestApp(widget)
        async with app.run_test(size=(60, 10)) as pilot:
            await _settle(widget)

            app.query_one("#box").styles.width = 10
            await wait_until(
                lambda: widget.truncated_text == "The qu...", description="reflow at width 10"
            )
            await pilot.pause()
            assert widget.truncated is True

    async def test_reflow_signal_bursts_coalesce(self):
        widget = _clamp()
        app = ClampTestApp(widget)
        async with app.run_test(size=(60, 10)) as pilot:
            await _settle(widget)
            passes = widget.layout_passes

            for _ in range(3):
                app.reflow_signal.notify()
            await pilot.pause()
            await asyncio.sleep(DEBOUNCE * 4)
            await pilot.pause()

            assert widget.layout_passes == passes + 1

    async def test_measurement_failure_keeps_previous_text(self):
        widget = _clamp()
        app = ClampTestApp(widget)
        async with app.run_test(size=(60, 10)) as pilot:
            await _settle(widget)
            previous = widget.truncated_text

            widget.oracle = FailingOracle()
            widget.text = "something else entirely"
            await pilot.pause()

            assert widget.truncated_text == previous

    async def test_works_without_app_signal(self):
        widget = _clamp()
        app = ClampTestApp(widget, with_signal=False)
        async with app.run_test(size=(60, 10)) as pilot:
            await _settle(widget)
            await pilot.pause()
            assert widget.truncated_text == "The quick brown ..."


class TestLifecycle:
    async def test_removed_widget_stops_reflowing(self):
        widget = _clamp()
        app = ClampTestApp(widget)
        async with app.run_test(size=(60, 10)) as pilot:
            await _settle(widget)
            passes = widget.layout_passes

            await widget.remove()
            app.reflow_signal.notify()
            await pilot.pause()
            await asyncio.sleep(DEBOUNCE * 4)

            assert widget.layout_passes == passes
            assert not widget.reflow_pending


class TestConstruction:
    def test_rejects_zero_line_limit(self):
        with pytest.raises(InvalidArgumentError):
            TruncatedText("text", 0)

    def test_rejects_non_string_text(self):
        with pytest.raises(InvalidArgumentError):
            TruncatedText(None)  # type: ignore[arg-type]

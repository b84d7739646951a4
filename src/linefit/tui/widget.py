"""TruncatedText widget: text clamped to a number of lines of its own width."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Static

from linefit.core.constants import DEFAULT_DEBOUNCE_SECONDS, DEFAULT_ELLIPSIS, DEFAULT_LINE_LIMIT
from linefit.core.debug_log import log
from linefit.core.errors import InvalidArgumentError, MeasurementUnavailableError
from linefit.core.oracle import CellWidthOracle
from linefit.core.truncation import truncate_lines
from linefit.tui.debounce import Debouncer

if TYPE_CHECKING:
    from textual import events

    from linefit.core.oracle import WidthOracle
    from linefit.tui.reflow import ReflowSignal


class TruncatedText(Static):
    """Show ``text`` cut to at most ``line_limit`` lines, ending in an ellipsis.

    The output is recomputed immediately when ``text`` or ``line_limit``
    change, and after a quiet period when the widget is resized or the app's
    reflow signal fires. A pass is skipped while the widget has no width yet.
    """

    DEFAULT_CSS = """
    TruncatedText {
        height: auto;
    }
    """

    text: reactive[str] = reactive("")
    line_limit: reactive[int] = reactive(DEFAULT_LINE_LIMIT)

    @dataclass
    class Reflowed(Message):
        """Posted when the displayed text changes."""

        widget: TruncatedText
        text: str
        truncated: bool

    def __init__(
        self,
        text: str = "",
        line_limit: int = DEFAULT_LINE_LIMIT,
        *,
        ellipsis: str = DEFAULT_ELLIPSIS,
        oracle: WidthOracle | None = None,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        **kwargs,
    ) -> None:
        super().__init__("", markup=False, **kwargs)
        self.ellipsis = ellipsis
        self.oracle: WidthOracle = oracle if oracle is not None else CellWidthOracle()
        self.truncated_text = ""
        self.truncated = False
        self.layout_passes = 0
        self._debouncer = Debouncer(debounce_seconds, self.update_truncated_text)
        self._reflow_signal: ReflowSignal | None = None
        self.set_reactive(TruncatedText.text, self.validate_text(text))
        self.set_reactive(TruncatedText.line_limit, self.validate_line_limit(line_limit))

    def validate_text(self, text: object) -> str:
        if not isinstance(text, str):
            raise InvalidArgumentError("text", text, "must be a string")
        return text

    def validate_line_limit(self, line_limit: object) -> int:
        if isinstance(line_limit, bool) or not isinstance(line_limit, int) or line_limit < 1:
            raise InvalidArgumentError("line_limit", line_limit, "must be an integer >= 1")
        return line_limit

    def on_mount(self) -> None:
        signal = getattr(self.app, "reflow_signal", None)
        if signal is not None:
            signal.subscribe(self, self._on_reflow)
            self._reflow_signal = signal
        self.call_after_refresh(self.update_truncated_text)

    def on_unmount(self) -> None:
        self._debouncer.cancel()
        if self._reflow_signal is not None:
            self._reflow_signal.unsubscribe(self)
            self._reflow_signal = None

    def on_resize(self, event: events.Resize) -> None:
        del event
        self._debouncer()

    def _on_reflow(self, _payload: None) -> None:
        self._debouncer()

    def watch_text(self, text: str) -> None:
        del text
        if self.is_mounted:
            self.update_truncated_text()

    def watch_line_limit(self, line_limit: int) -> None:
        del line_limit
        if self.is_mounted:
            self.update_truncated_text()

    @property
    def reflow_pending(self) -> bool:
        return self._debouncer.pending

    def update_truncated_text(self) -> None:
        """Run one layout pass against the current content width."""
        max_width = self.content_size.width
        if max_width <= 0:
            log.debug("Skipping truncation pass; widget has no width yet", id=self.id)
            return

        self.layout_passes += 1
        try:
            result = truncate_lines(
                self.text,
                self.line_limit,
                max_width,
                oracle=self.oracle,
                ellipsis=self.ellipsis,
            )
        except MeasurementUnavailableError as exc:
            log.warning("Keeping previous text; measurement unavailable", error=str(exc))
            return

        if result.text == self.truncated_text and result.truncated == self.truncated:
            return
        self.truncated_text = result.text
        self.truncated = result.truncated
        self.update(result.text)
        self.post_message(self.Reflowed(self, result.text, result.truncated))

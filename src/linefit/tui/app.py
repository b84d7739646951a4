"""Interactive viewer for line-clamped text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.app import App
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static

from linefit.core.config import LinefitConfig
from linefit.core.debug_log import export_logs_to_file, log, setup_debug_logging
from linefit.core.paths import get_debug_log_path
from linefit.tui.keybindings import APP_BINDINGS
from linefit.tui.reflow import ReflowSignal
from linefit.tui.widget import TruncatedText

if TYPE_CHECKING:
    from textual import events
    from textual.app import ComposeResult

WIDTH_STEP = 4
MIN_FRAME_WIDTH = 8
DEFAULT_FRAME_WIDTH = 60


class LinefitApp(App):
    """Show a text clamped to N lines inside a resizable frame."""

    TITLE = "linefit"

    CSS = """
    #frame {
        border: round $accent;
        height: auto;
        width: 60;
    }
    #status {
        color: $text-muted;
        padding: 0 1;
    }
    """

    BINDINGS = APP_BINDINGS

    def __init__(
        self,
        text: str,
        line_limit: int | None = None,
        *,
        config: LinefitConfig | None = None,
        frame_width: int | None = None,
    ) -> None:
        super().__init__()
        self.config = config if config is not None else LinefitConfig()
        self.source_text = text
        self.initial_line_limit = (
            line_limit if line_limit is not None else self.config.truncation.default_lines
        )
        self.frame_width = frame_width if frame_width is not None else DEFAULT_FRAME_WIDTH
        self.reflow_signal = ReflowSignal(self)
        self.status_text = ""

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="frame"):
            yield TruncatedText(
                self.source_text,
                self.initial_line_limit,
                ellipsis=self.config.truncation.ellipsis,
                oracle=self.config.make_oracle(),
                debounce_seconds=self.config.reflow.debounce_seconds,
                id="clamped",
            )
        yield Static("", id="status")
        yield Footer()

    def on_mount(self) -> None:
        setup_debug_logging()
        self.query_one("#frame").styles.width = self.frame_width
        self._update_status()

    @property
    def clamped(self) -> TruncatedText:
        return self.query_one("#clamped", TruncatedText)

    def on_resize(self, event: events.Resize) -> None:
        del event
        self.reflow_signal.notify()

    def on_truncated_text_reflowed(self, event: TruncatedText.Reflowed) -> None:
        del event
        self._update_status()

    def _update_status(self) -> None:
        clamped = self.clamped
        state = "truncated" if clamped.truncated else "fits"
        self.status_text = f"lines={clamped.line_limit} width={self.frame_width} {state}"
        self.query_one("#status", Static).update(self.status_text)

    def action_more_lines(self) -> None:
        self.clamped.line_limit += 1
        self._update_status()

    def action_fewer_lines(self) -> None:
        if self.clamped.line_limit > 1:
            self.clamped.line_limit -= 1
        self._update_status()

    def _resize_frame(self, delta: int) -> None:
        self.frame_width = max(MIN_FRAME_WIDTH, self.frame_width + delta)
        self.query_one("#frame").styles.width = self.frame_width
        self.reflow_signal.notify()
        self._update_status()

    def action_wider(self) -> None:
        self._resize_frame(WIDTH_STEP)

    def action_narrower(self) -> None:
        self._resize_frame(-WIDTH_STEP)

    def action_export_debug_log(self) -> None:
        path = get_debug_log_path()
        count = export_logs_to_file(path)
        log.info("Exported debug log", path=str(path), entries=count)
        self.notify(f"Exported {count} log entries to {path}")

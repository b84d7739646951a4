"""Keybindings for the linefit viewer."""

from __future__ import annotations

from textual.binding import Binding, BindingType

APP_BINDINGS: list[BindingType] = [
    Binding("q", "quit", "Quit"),
    Binding("plus", "more_lines", "More lines", key_display="+"),
    Binding("minus", "fewer_lines", "Fewer lines", key_display="-"),
    Binding("right_square_bracket", "wider", "Wider", key_display="]"),
    Binding("left_square_bracket", "narrower", "Narrower", key_display="["),
    Binding("f12", "export_debug_log", "Export log", show=False),
]

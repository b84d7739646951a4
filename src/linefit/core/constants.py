"""Defaults shared across the core, TUI and CLI."""

from __future__ import annotations

DEFAULT_ELLIPSIS = "..."
DEFAULT_LINE_LIMIT = 2
DEFAULT_DEBOUNCE_SECONDS = 0.5
DEFAULT_FONT_SIZE = 16


MAX_LOG_MESSAGE_LENGTH = 4096
MAX_LOG_LINES = 2000


APP_NAME = "linefit"
CONFIG_FILENAME = "config.toml"
DEBUG_LOG_FILENAME = "debug.log"

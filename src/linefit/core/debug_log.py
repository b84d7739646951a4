"""Debug logging into an in-memory ring buffer.

Layout passes happen on every resize, so most of what linefit has to say is
DEBUG chatter nobody wants on a terminal. Records are kept in a bounded
buffer instead and written out on demand (F12 in the viewer).

Two feeds end up in the same buffer:

- ``log``: direct calls from the TUI layer, also forwarded to Textual devtools.
- ``DebugLogHandler``: records from the ``linefit.*`` stdlib loggers used by
  the core.
"""

from __future__ import annotations

import logging
import time
from collections import Counter, deque
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any

from linefit.core.constants import MAX_LOG_LINES, MAX_LOG_MESSAGE_LENGTH

TRUNCATED_SUFFIX = "... [truncated]"


class LogSource(Enum):
    """Which feed produced the entry."""

    TEXTUAL = "TX"
    LOGGING = "PY"


@dataclass(slots=True)
class LogEntry:
    """A captured log entry."""

    level: str
    message: str
    timestamp: float
    source: LogSource
    origin: str = "linefit"

    def format(self) -> str:
        ts = datetime.fromtimestamp(self.timestamp).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        return f"{ts} [{self.source.value}] [{self.level}] {self.origin}: {self.message}"


def _clip(message: str) -> str:
    if len(message) > MAX_LOG_MESSAGE_LENGTH:
        return message[:MAX_LOG_MESSAGE_LENGTH] + TRUNCATED_SUFFIX
    return message


class LogBuffer:
    """Bounded buffer of log entries; the oldest entries fall off first."""

    def __init__(self, maxlen: int = MAX_LOG_LINES) -> None:
        self._entries: deque[LogEntry] = deque(maxlen=maxlen)
        self.generation = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> LogEntry:
        return self._entries[index]

    def append(self, entry: LogEntry) -> None:
        self._entries.append(entry)

    def clear(self) -> None:
        """Drop every entry and bump ``generation`` so readers can notice."""
        self._entries.clear()
        self.generation += 1

    def entries(self, source: LogSource | None = None) -> list[LogEntry]:
        return [e for e in self._entries if source is None or e.source is source]

    def level_counts(self) -> Counter[str]:
        return Counter(entry.level for entry in self._entries)

    def export(self, file_path: str | Path) -> int:
        """Write every entry to ``file_path``, oldest first.

        Returns:
            Number of entries written
        """
        output_path = Path(file_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        counts = ", ".join(f"{level}={n}" for level, n in sorted(self.level_counts().items()))

        with output_path.open("w", encoding="utf-8") as f:
            f.write("# linefit debug log\n")
            f.write(f"# Entries: {len(self)} ({counts or 'none'})\n")
            f.write(f"# Buffer generation: {self.generation}\n\n")
            for entry in self._entries:
                f.write(entry.format() + "\n")

        return len(self)


log_buffer = LogBuffer()


class LinefitLogger:
    """Logger for the TUI layer: buffers the entry and forwards to Textual."""

    def __init__(self, buffer: LogBuffer | None = None, origin: str = "linefit") -> None:
        self.buffer = buffer if buffer is not None else log_buffer
        self.origin = origin

    def __call__(self, *args: object, **kwargs: Any) -> None:
        self.info(*args, **kwargs)

    def _log(self, level: str, /, *args: object, **kwargs: Any) -> None:
        output = " ".join(str(arg) for arg in args)
        if kwargs:
            key_values = " ".join(f"{key}={value!r}" for key, value in kwargs.items())
            output = f"{output} {key_values}" if output else key_values
        output = _clip(output)

        self.buffer.append(LogEntry(level, output, time.time(), LogSource.TEXTUAL, self.origin))

        from textual import log as textual_log

        textual_log(output)

    def debug(self, *args: object, **kwargs: Any) -> None:
        self._log("DEBUG", *args, **kwargs)

    def info(self, *args: object, **kwargs: Any) -> None:
        self._log("INFO", *args, **kwargs)

    def warning(self, *args: object, **kwargs: Any) -> None:
        self._log("WARNING", *args, **kwargs)

    def error(self, *args: object, **kwargs: Any) -> None:
        self._log("ERROR", *args, **kwargs)


class DebugLogHandler(logging.Handler):
    """Logging handler that copies ``linefit.*`` records into a buffer."""

    def __init__(self, buffer: LogBuffer | None = None, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.buffer = buffer if buffer is not None else log_buffer

    def emit(self, record: logging.LogRecord) -> None:
        try:
            entry = LogEntry(
                level=record.levelname,
                message=_clip(self.format(record)),
                timestamp=record.created,
                source=LogSource.LOGGING,
                origin=record.name,
            )
            self.buffer.append(entry)
        except Exception:
            self.handleError(record)


def setup_debug_logging(level: int = logging.DEBUG) -> DebugLogHandler:
    """Attach a buffer handler to the ``linefit`` package logger.

    Idempotent: later calls return the handler installed by the first one.
    """
    package_logger = logging.getLogger("linefit")
    for handler in package_logger.handlers:
        if isinstance(handler, DebugLogHandler):
            return handler

    handler = DebugLogHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)

    log.info("Debug logging initialized", log_level=logging.getLevelName(level))
    return handler


def clear_log_buffer() -> None:
    log_buffer.clear()


def export_logs_to_file(file_path: str | Path) -> int:
    """Export the shared buffer; see :meth:`LogBuffer.export`."""
    return log_buffer.export(file_path)


log = LinefitLogger()

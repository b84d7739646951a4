"""Width oracles with fixed or failing behavior for tests."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from linefit.core.errors import MeasurementUnavailableError
from linefit.core.oracle import CellWidthOracle

if TYPE_CHECKING:
    from collections.abc import Mapping


class TableOracle:
    """Return widths from a table; trailing space is assumed already included."""

    def __init__(self, widths: Mapping[str, int]) -> None:
        self.widths = dict(widths)

    def measure(self, text: str, include_trailing_space: bool = False) -> int:
        return self.widths[text]


class CountingOracle:
    """Cell oracle that records every query."""

    def __init__(self) -> None:
        self._inner = CellWidthOracle()
        self.calls: Counter[tuple[str, bool]] = Counter()

    def measure(self, text: str, include_trailing_space: bool = False) -> int:
        self.calls[(text, include_trailing_space)] += 1
        return self._inner.measure(text, include_trailing_space)


class FailingOracle:
    """Oracle whose rendering surface is never ready."""

    def measure(self, text: str, include_trailing_space: bool = False) -> int:
        raise MeasurementUnavailableError("surface not ready", text=text)

"""Width oracles: report the rendered width of a token.

Two implementations are provided:

- ``CellWidthOracle`` measures terminal cells via Rich, which is what the
  Textual widget lays out against.
- ``FontWidthOracle`` measures pixels for a TrueType font via Pillow, for hosts
  that render to images or need pixel-accurate layout.

Both return integer widths; fractional pixel widths are rounded up.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from rich.cells import cell_len

from linefit.core.errors import MeasurementUnavailableError

if TYPE_CHECKING:
    from PIL.ImageFont import FreeTypeFont


@runtime_checkable
class WidthOracle(Protocol):
    """Anything that can measure a token's rendered width."""

    def measure(self, text: str, include_trailing_space: bool = False) -> int: ...


class CellWidthOracle:
    """Measure text in terminal cells (wide characters count as two)."""

    def measure(self, text: str, include_trailing_space: bool = False) -> int:
        return cell_len(text + (" " if include_trailing_space else ""))


class FontWidthOracle:
    """Measure text in pixels using a TrueType/OpenType font.

    The font is loaded lazily on first measurement so constructing the oracle
    never touches the filesystem.
    """

    def __init__(self, font_path: str | Path, size: int = 16) -> None:
        self.font_path = Path(font_path)
        self.size = size
        self._font: FreeTypeFont | None = None

    def _load_font(self) -> FreeTypeFont:
        if self._font is None:
            from PIL import ImageFont

            try:
                self._font = ImageFont.truetype(str(self.font_path), self.size)
            except OSError as exc:
                raise MeasurementUnavailableError(
                    f"Cannot load font {self.font_path} at size {self.size}: {exc}"
                ) from exc
        return self._font

    def measure(self, text: str, include_trailing_space: bool = False) -> int:
        font = self._load_font()
        return math.ceil(font.getlength(text + (" " if include_trailing_space else "")))


class MemoizedOracle:
    """Per-pass cache so each (text, trailing-space) pair is measured once.

    Create a fresh instance for every recomputation; the cache is never shared
    across passes.
    """

    def __init__(self, oracle: WidthOracle) -> None:
        self._oracle = oracle
        self._cache: dict[tuple[str, bool], int] = {}

    def measure(self, text: str, include_trailing_space: bool = False) -> int:
        key = (text, include_trailing_space)
        width = self._cache.get(key)
        if width is None:
            width = self._oracle.measure(text, include_trailing_space)
            self._cache[key] = width
        return width

    @property
    def lookups(self) -> int:
        """Number of distinct pairs measured so far."""
        return len(self._cache)


__all__ = ["CellWidthOracle", "FontWidthOracle", "MemoizedOracle", "WidthOracle"]

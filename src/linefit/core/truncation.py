"""Collapse a layout into at most N lines, ending with an ellipsis when cut.

The public entry point is :func:`compute_truncated_text`. It validates its
arguments before any measurement, tokenizes, measures, lays out and truncates
in one synchronous pass. Identical inputs with a deterministic oracle always
produce identical output.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import TYPE_CHECKING

from linefit.core.constants import DEFAULT_ELLIPSIS
from linefit.core.errors import InvalidArgumentError
from linefit.core.oracle import CellWidthOracle, MemoizedOracle
from linefit.core.segmenter import build_layout
from linefit.core.tokens import measure, tokenize

if TYPE_CHECKING:
    from linefit.core.oracle import WidthOracle
    from linefit.core.segmenter import Layout

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TruncationResult:
    """Output of one pass plus the numbers behind it."""

    text: str
    truncated: bool
    lines: tuple[str, ...]
    total_lines: int


def _validate_line_limit(line_limit: object) -> int:
    if isinstance(line_limit, bool) or not isinstance(line_limit, int):
        raise InvalidArgumentError("line_limit", line_limit, "must be an integer")
    if line_limit < 1:
        raise InvalidArgumentError("line_limit", line_limit, "must be at least 1")
    return line_limit


def _validate_arguments(text: object, line_limit: object, max_width: object) -> None:
    if not isinstance(text, str):
        raise InvalidArgumentError("text", text, "must be a string")
    _validate_line_limit(line_limit)
    if isinstance(max_width, bool) or not isinstance(max_width, Real):
        raise InvalidArgumentError("max_width", max_width, "must be a number")
    if math.isnan(max_width):
        raise InvalidArgumentError("max_width", max_width, "must not be NaN")


def _shorten(line: str, ellipsis: str) -> str:
    # Character count only; the result is not re-measured.
    keep = max(0, len(line) - len(ellipsis))
    return line[:keep] + ellipsis


def truncate_layout(
    layout: Layout, line_limit: int, ellipsis: str = DEFAULT_ELLIPSIS
) -> TruncationResult:
    """Keep at most ``line_limit`` lines of ``layout``.

    Raises:
        InvalidArgumentError: If ``line_limit`` is not an integer >= 1.
    """
    _validate_line_limit(line_limit)
    taken = [line.text for line in layout.lines[:line_limit]]
    total = len(layout)

    fits_whole = len(taken) == 1 and len(layout.lines[0]) == layout.token_count
    if fits_whole or total <= line_limit:
        return TruncationResult(" ".join(taken), False, tuple(taken), total)

    taken[-1] = _shorten(taken[-1], ellipsis)
    return TruncationResult(" ".join(taken), True, tuple(taken), total)


def truncate(layout: Layout, line_limit: int, ellipsis: str = DEFAULT_ELLIPSIS) -> str:
    """Return the truncated string for ``layout``."""
    return truncate_layout(layout, line_limit, ellipsis).text


def truncate_lines(
    text: str,
    line_limit: int,
    max_width: float,
    *,
    oracle: WidthOracle | None = None,
    ellipsis: str = DEFAULT_ELLIPSIS,
) -> TruncationResult:
    """Run a full pass and return the result with line diagnostics.

    Raises:
        InvalidArgumentError: On bad arguments, before the oracle is queried.
        MeasurementUnavailableError: Propagated unchanged from the oracle.
    """
    _validate_arguments(text, line_limit, max_width)
    if not isinstance(ellipsis, str):
        raise InvalidArgumentError("ellipsis", ellipsis, "must be a string")

    memo = MemoizedOracle(oracle if oracle is not None else CellWidthOracle())
    tokens = measure(tokenize(text), memo)
    layout = build_layout(tokens, max_width)
    result = truncate_layout(layout, line_limit, ellipsis)
    logger.debug(
        "Truncation pass: %d tokens, %d measurements, %d/%d lines, truncated=%s",
        len(tokens),
        memo.lookups,
        len(result.lines),
        result.total_lines,
        result.truncated,
    )
    return result


def compute_truncated_text(
    text: str,
    line_limit: int,
    max_width: float,
    *,
    oracle: WidthOracle | None = None,
    ellipsis: str = DEFAULT_ELLIPSIS,
) -> str:
    """Truncate ``text`` to fit ``line_limit`` lines of ``max_width``.

    Args:
        text: Text to fit.
        line_limit: Maximum number of display lines (>= 1).
        max_width: Line width in the oracle's unit.
        oracle: Width oracle; defaults to terminal cells.
        ellipsis: Marker appended to a cut last line.

    Returns:
        The original tokens joined by single spaces when everything fits,
        otherwise the first ``line_limit`` lines with the last one ending in
        ``ellipsis``.
    """
    return truncate_lines(text, line_limit, max_width, oracle=oracle, ellipsis=ellipsis).text


__all__ = [
    "TruncationResult",
    "compute_truncated_text",
    "truncate",
    "truncate_layout",
    "truncate_lines",
]

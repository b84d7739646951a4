"""Greedy line segmentation of measured tokens.

First-fit packing: each line takes tokens left to right until the next one
would overflow. The first token of a line is always taken, so a single token
wider than the container still makes progress.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from linefit.core.tokens import Token

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Line:
    """Tokens destined for one display row."""

    tokens: tuple[Token, ...] = ()

    @property
    def text(self) -> str:
        return " ".join(token.text for token in self.tokens)

    @property
    def width(self) -> int:
        return sum(token.width for token in self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)


@dataclass(frozen=True, slots=True)
class SegmentResult:
    """One line's worth of tokens plus the remainder for the next line."""

    included: Line
    excluded: tuple[Token, ...]


@dataclass(frozen=True, slots=True)
class Layout:
    """Ordered lines covering every token exactly once."""

    lines: tuple[Line, ...] = ()
    token_count: int = field(default=0)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __getitem__(self, index: int) -> Line:
        return self.lines[index]


def segment(tokens: Sequence[Token], max_width: float) -> SegmentResult:
    """Take the longest prefix of ``tokens`` that fits within ``max_width``.

    Once a token overflows, it and everything after it are excluded without
    further checks.
    """
    if not tokens:
        return SegmentResult(Line(), ())

    first = tokens[0]
    included = [first]
    running = first.width
    for index in range(1, len(tokens)):
        token = tokens[index]
        if running + token.width > max_width:
            return SegmentResult(Line(tuple(included)), tuple(tokens[index:]))
        included.append(token)
        running += token.width
    return SegmentResult(Line(tuple(included)), ())


def build_layout(tokens: Sequence[Token], max_width: float) -> Layout:
    """Segment ``tokens`` into lines until none remain."""
    lines: list[Line] = []
    remaining: tuple[Token, ...] = tuple(tokens)
    placed = 0
    for _ in range(len(tokens)):
        if not remaining:
            break
        result = segment(remaining, max_width)
        assert len(result.included) > 0, "segmentation made no progress"
        lines.append(result.included)
        placed += len(result.included)
        remaining = result.excluded

    assert placed == len(tokens), f"layout placed {placed} of {len(tokens)} tokens"
    logger.debug("Built layout: %d tokens in %d lines at width %s", placed, len(lines), max_width)
    return Layout(tuple(lines), placed)


__all__ = ["Layout", "Line", "SegmentResult", "build_layout", "segment"]

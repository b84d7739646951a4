"""Split text into space-delimited tokens and measure them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from linefit.core.oracle import MemoizedOracle

if TYPE_CHECKING:
    from collections.abc import Iterable

    from linefit.core.oracle import WidthOracle


@dataclass(frozen=True, slots=True)
class RawToken:
    """A token before measurement."""

    text: str
    include_trailing_space: bool


@dataclass(frozen=True, slots=True)
class Token:
    """A token paired with its rendered width.

    ``width`` includes one trailing space unless the token ends the text.
    """

    text: str
    width: int


def tokenize(text: str) -> tuple[RawToken, ...]:
    """Split text on spaces into ordered raw tokens.

    Runs of spaces collapse, and empty or whitespace-only input (tabs and
    newlines included) yields no tokens. Punctuation is left attached to its word.
    """
    if not text.strip():
        return ()
    words = [word for word in text.split(" ") if word]
    last = len(words) - 1
    return tuple(RawToken(word, i != last) for i, word in enumerate(words))


def measure(raw_tokens: Iterable[RawToken], oracle: WidthOracle) -> tuple[Token, ...]:
    """Measure raw tokens, querying the oracle once per distinct pair."""
    memo = oracle if isinstance(oracle, MemoizedOracle) else MemoizedOracle(oracle)
    return tuple(
        Token(raw.text, memo.measure(raw.text, raw.include_trailing_space)) for raw in raw_tokens
    )


__all__ = ["RawToken", "Token", "measure", "tokenize"]

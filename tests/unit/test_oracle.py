"""Unit tests for width oracles."""

from __future__ import annotations

import math

import pytest
from PIL import ImageFont

from linefit.core.errors import MeasurementUnavailableError
from linefit.core.oracle import CellWidthOracle, FontWidthOracle, MemoizedOracle, WidthOracle

pytestmark = pytest.mark.unit


class TestCellWidthOracle:
    def test_ascii(self):
        oracle = CellWidthOracle()
        assert oracle.measure("abc") == 3
        assert oracle.measure("abc", include_trailing_space=True) == 4

    def test_wide_characters_take_two_cells(self):
        assert CellWidthOracle().measure("日本") == 4

    def test_satisfies_protocol(self):
        assert isinstance(CellWidthOracle(), WidthOracle)


class TestFontWidthOracle:
    def test_missing_font_is_measurement_unavailable(self, tmp_path):
        oracle = FontWidthOracle(tmp_path / "missing.ttf", 12)
        with pytest.raises(MeasurementUnavailableError) as exc_info:
            oracle.measure("hello")
        assert exc_info.value.code == "MEASUREMENT_UNAVAILABLE"

    def test_construction_does_not_load(self, tmp_path):
        FontWidthOracle(tmp_path / "missing.ttf")

    def test_measures_with_loaded_font(self, monkeypatch, tmp_path):
        default = ImageFont.load_default(size=16)
        if not isinstance(default, ImageFont.FreeTypeFont):
            pytest.skip("Pillow built without FreeType")
        monkeypatch.setattr(ImageFont, "truetype", lambda path, size: default)

        oracle = FontWidthOracle(tmp_path / "any.ttf", 16)
        bare = oracle.measure("Hello")
        spaced = oracle.measure("Hello", include_trailing_space=True)

        assert bare == math.ceil(default.getlength("Hello"))
        assert spaced == math.ceil(default.getlength("Hello "))
        assert spaced > bare


class TestMemoizedOracle:
    def test_caches_per_pair(self):
        calls: list[tuple[str, bool]] = []

        class Recording:
            def measure(self, text: str, include_trailing_space: bool = False) -> int:
                calls.append((text, include_trailing_space))
                return len(text)

        memo = MemoizedOracle(Recording())
        memo.measure("a", True)
        memo.measure("a", True)
        memo.measure("a", False)

        assert calls == [("a", True), ("a", False)]
        assert memo.lookups == 2

    def test_errors_are_not_cached(self):
        attempts = 0

        class Flaky:
            def measure(self, text: str, include_trailing_space: bool = False) -> int:
                nonlocal attempts
                attempts += 1
                raise MeasurementUnavailableError("not ready", text=text)

        memo = MemoizedOracle(Flaky())
        for _ in range(2):
            with pytest.raises(MeasurementUnavailableError):
                memo.measure("x")
        assert attempts == 2

"""Configuration loader for linefit."""

from __future__ import annotations

import os
import tempfile
import tomllib
from pathlib import Path

import tomlkit
from pydantic import BaseModel, Field, field_validator

from linefit.core.constants import (
    DEFAULT_DEBOUNCE_SECONDS,
    DEFAULT_ELLIPSIS,
    DEFAULT_FONT_SIZE,
    DEFAULT_LINE_LIMIT,
)
from linefit.core.oracle import CellWidthOracle, FontWidthOracle, WidthOracle
from linefit.core.paths import get_config_path


def atomic_write(path: Path, content: str) -> None:
    """Write file atomically to avoid partial/corrupt writes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=".tmp_")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
        Path(tmp_path).replace(path)
    except Exception:
        Path(tmp_path).unlink(missing_ok=True)
        raise


class TruncationConfig(BaseModel):
    """How text is cut."""

    ellipsis: str = Field(default=DEFAULT_ELLIPSIS, description="Marker appended to cut text")
    default_lines: int = Field(
        default=DEFAULT_LINE_LIMIT, ge=1, description="Line limit when none is given"
    )

    @field_validator("ellipsis")
    @classmethod
    def validate_ellipsis(cls, value: str) -> str:
        if not value:
            raise ValueError("ellipsis must not be empty")
        return value


class ReflowConfig(BaseModel):
    """Resize handling."""

    debounce_seconds: float = Field(
        default=DEFAULT_DEBOUNCE_SECONDS,
        ge=0,
        description="Quiet period before recomputing after a resize",
    )


class FontConfig(BaseModel):
    """Font used for pixel measurement (cells are used when no path is set)."""

    path: str | None = Field(default=None, description="TrueType/OpenType font file")
    size: int = Field(default=DEFAULT_FONT_SIZE, gt=0, description="Font size in pixels")


class LinefitConfig(BaseModel):
    """Root configuration model."""

    truncation: TruncationConfig = Field(default_factory=TruncationConfig)
    reflow: ReflowConfig = Field(default_factory=ReflowConfig)
    font: FontConfig = Field(default_factory=FontConfig)

    @classmethod
    def load(cls, config_path: Path | None = None) -> LinefitConfig:
        """Load configuration from TOML file or use defaults."""
        if config_path is None:
            config_path = get_config_path()

        if config_path.exists():
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
            return cls.model_validate(data)

        return cls()

    def make_oracle(self) -> WidthOracle:
        """Build the width oracle described by the font section."""
        if self.font.path:
            return FontWidthOracle(self.font.path, self.font.size)
        return CellWidthOracle()

    def to_toml(self) -> str:
        doc = tomlkit.document()
        for section, model in (
            ("truncation", self.truncation),
            ("reflow", self.reflow),
            ("font", self.font),
        ):
            table = tomlkit.table()
            for key, value in model.model_dump().items():
                if value is not None:
                    table[key] = value
            doc[section] = table
        return tomlkit.dumps(doc)

    def save(self, path: Path) -> None:
        """Serialize current config to TOML file.

        Args:
            path: Path to write config file (created if missing)
        """
        atomic_write(path, self.to_toml())

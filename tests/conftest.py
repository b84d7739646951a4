"""Pytest fixtures for linefit tests."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

_TEST_BASE_DIR = Path(tempfile.mkdtemp(prefix="linefit-tests-"))
os.environ["LINEFIT_CONFIG_DIR"] = str(_TEST_BASE_DIR / "config")
os.environ["LINEFIT_DATA_DIR"] = str(_TEST_BASE_DIR / "data")


settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=20,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Path for a throwaway config file (not created)."""
    return tmp_path / "config.toml"

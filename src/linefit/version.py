"""Shared package version helpers."""

from __future__ import annotations

from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version


@lru_cache(maxsize=1)
def get_linefit_version() -> str:
    """Return installed linefit version, or 'dev' when package metadata is unavailable."""
    try:
        return version("linefit")
    except PackageNotFoundError:
        return "dev"


__all__ = ["get_linefit_version"]

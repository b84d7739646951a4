"""linefit: clamp text to a number of display lines of a given width."""

from linefit.core.errors import InvalidArgumentError, LinefitError, MeasurementUnavailableError
from linefit.core.oracle import CellWidthOracle, FontWidthOracle, WidthOracle
from linefit.core.truncation import compute_truncated_text, truncate_lines
from linefit.version import get_linefit_version

__version__ = get_linefit_version()

__all__ = [
    "CellWidthOracle",
    "FontWidthOracle",
    "InvalidArgumentError",
    "LinefitError",
    "MeasurementUnavailableError",
    "WidthOracle",
    "compute_truncated_text",
    "truncate_lines",
]

"""Error types raised by the truncation core."""

from __future__ import annotations


class LinefitError(ValueError):
    """Base for linefit errors with a machine-readable code."""

    def __init__(self, message: str, *, code: str) -> None:
        super().__init__(message)
        self.code = code


class InvalidArgumentError(LinefitError):
    """Raised when a caller passes an unusable argument.

    Detected before any width measurement is issued.
    """

    def __init__(self, argument: str, value: object, reason: str) -> None:
        super().__init__(f"Invalid {argument}={value!r}: {reason}", code="INVALID_ARGUMENT")
        self.argument = argument
        self.value = value


class MeasurementUnavailableError(LinefitError):
    """Raised when a width oracle cannot produce a width."""

    def __init__(self, message: str, *, text: str | None = None) -> None:
        super().__init__(message, code="MEASUREMENT_UNAVAILABLE")
        self.text = text


__all__ = ["InvalidArgumentError", "LinefitError", "MeasurementUnavailableError"]

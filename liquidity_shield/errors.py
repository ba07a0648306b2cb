"""Typed failures raised by the analytics core."""


class ShieldError(ValueError):
    """Base class for caller-correctable input errors."""


class InvalidPriceArray(ShieldError):
    """The price series is empty or too short for the requested operation."""


class InvalidTickSpacing(ShieldError):
    """A tick bound pair has non-positive width, or a spacing is not positive."""


class InvalidTimeWindow(ShieldError):
    """The observation window is zero."""

"""Errors raised by the validating constructors and hex parsing."""


class ColorError(ValueError):
    """Base class for colorconv errors."""

    message = "Invalid color value!"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class PercentageOverflow(ColorError):
    """A percentage field (HSL saturation/lightness, any CMYK field) is above 100."""

    message = "Percentage overflow: value is larger than 100!"


class DegreeOverflow(ColorError):
    """The HSL hue is above 360."""

    message = "Degree overflow: value is larger than 360!"


class InvalidHexString(ColorError):
    """A string could not be parsed as a `#rrggbb` hex color."""

    message = "Invalid hex string: expected '#rrggbb'!"

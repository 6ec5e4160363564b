from .cmyk import Cmyk
from .color import Color
from .errors import ColorError, DegreeOverflow, InvalidHexString, PercentageOverflow
from .hsl import Hsl
from .rgb import Rgb

__all__ = [
    "Color",
    "Rgb",
    "Hsl",
    "Cmyk",
    "ColorError",
    "PercentageOverflow",
    "DegreeOverflow",
    "InvalidHexString",
]

__version__ = "2026.10.0"

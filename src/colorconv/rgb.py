# System
import re
import typing as ty

# Internal
from .color import Color
from .errors import InvalidHexString
from .types import Byte
from .utils import EPSILON, round_half_away

if ty.TYPE_CHECKING:
    from .cmyk import Cmyk
    from .hsl import Hsl

HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


class Rgb(Color):
    """A color in the RGB (red, green, blue) format.

    RGB is the hub representation: HSL and CMYK convert to and from it
    directly, and the hex string is a formatting of it.
    """

    red: Byte
    green: Byte
    blue: Byte

    @classmethod
    def new(cls, red: int, green: int, blue: int) -> "Rgb":
        """Create an RGB color.

        Every byte value is a valid channel, so there is no domain error for
        RGB. Values outside [0, 255] are rejected by pydantic.
        """
        return cls(red=red, green=green, blue=blue)

    @classmethod
    def new_unchecked(cls, red: int, green: int, blue: int) -> "Rgb":
        """Create an RGB color without validating the channels."""
        return cls.model_construct(red=red, green=green, blue=blue)

    @classmethod
    def from_hex_string(cls, text: str) -> "Rgb":
        """Parse a ``#rrggbb`` string. The ``#`` is optional, case is ignored."""
        match = HEX_PATTERN.fullmatch(text.strip())
        if match is None:
            raise InvalidHexString(f"Invalid hex string: {text!r}")
        red, green, blue = (int(group, 16) for group in match.groups())
        return cls.new_unchecked(red, green, blue)

    def __str__(self) -> str:
        return f"rgb({self.red}, {self.green}, {self.blue})"

    def to_rgb(self) -> "Rgb":
        return self

    def to_hex_string(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def to_cmyk(self) -> "Cmyk":
        from .cmyk import Cmyk

        r_prime = self.red / 255.0
        g_prime = self.green / 255.0
        b_prime = self.blue / 255.0

        key = 1.0 - max(r_prime, g_prime, b_prime)

        if 1.0 - key < EPSILON:
            # Pure black: 0/0 is defined as 0
            return Cmyk.new_unchecked(0, 0, 0, 100)

        def apply(v: float) -> int:
            return round_half_away(((1.0 - v - key) / (1.0 - key)) * 100.0)

        return Cmyk.new_unchecked(
            apply(r_prime),
            apply(g_prime),
            apply(b_prime),
            round_half_away(key * 100.0),
        )

    def to_hsl(self) -> "Hsl":
        from .hsl import Hsl

        r_prime = self.red / 255.0
        g_prime = self.green / 255.0
        b_prime = self.blue / 255.0

        c_max = max(r_prime, g_prime, b_prime)
        c_min = min(r_prime, g_prime, b_prime)
        delta = c_max - c_min

        achromatic = abs(delta) < EPSILON

        if achromatic:
            hue = 0
        else:
            # c_max is one of the three channels, so one arm always matches
            if c_max == r_prime:
                degrees = 60.0 * (((g_prime - b_prime) / delta) % 6.0)
            elif c_max == g_prime:
                degrees = 60.0 * (((b_prime - r_prime) / delta) + 2.0)
            else:
                degrees = 60.0 * (((r_prime - g_prime) / delta) + 4.0)
            hue = round_half_away(degrees) % 360

        lightness = (c_max + c_min) / 2.0

        if achromatic:
            saturation = 0
        else:
            saturation = round_half_away(
                delta / (1.0 - abs(2.0 * lightness - 1.0)) * 100.0
            )

        return Hsl.new_unchecked(hue, saturation, round_half_away(lightness * 100.0))

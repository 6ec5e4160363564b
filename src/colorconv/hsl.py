# Internal
from .color import Color
from .errors import DegreeOverflow, PercentageOverflow
from .rgb import Rgb
from .types import Degree, Percentage
from .utils import round_half_away


class Hsl(Color):
    """A color in the HSL (hue, saturation, lightness) format."""

    hue: Degree
    saturation: Percentage
    lightness: Percentage

    @classmethod
    def new(cls, hue: int, saturation: int, lightness: int) -> "Hsl":
        """Create an HSL color, checking that the values are in range.

        Args:
            hue: Hue in degrees, at most 360.
            saturation: Saturation percentage, at most 100.
            lightness: Lightness percentage, at most 100.

        Raises:
            PercentageOverflow: saturation or lightness is larger than 100.
                Checked before the hue.
            DegreeOverflow: hue is larger than 360.
        """
        if not (saturation <= 100 and lightness <= 100):
            raise PercentageOverflow()

        if hue > 360:
            raise DegreeOverflow()

        return cls(hue=hue, saturation=saturation, lightness=lightness)

    @classmethod
    def new_unchecked(cls, hue: int, saturation: int, lightness: int) -> "Hsl":
        """Create an HSL color without checking the ranges.

        For callers that already know the values are valid, e.g. results of
        a conversion formula.
        """
        return cls.model_construct(hue=hue, saturation=saturation, lightness=lightness)

    def __str__(self) -> str:
        return f"hsl({self.hue}°, {self.saturation}%, {self.lightness}%)"

    def to_hsl(self) -> "Hsl":
        return self

    def to_rgb(self) -> Rgb:
        if self.hue > 360:
            raise RuntimeError(f"Unexpected hue: {self.hue}, larger than 360!")

        # 360 and 0 are the same hue; the sectors below are half-open
        hue = self.hue % 360
        saturation = self.saturation / 100.0
        lightness = self.lightness / 100.0

        c = (1.0 - abs(2.0 * lightness - 1.0)) * saturation
        x = c * (1.0 - abs(((hue / 60.0) % 2.0) - 1.0))
        m = lightness - c / 2.0

        sectors = (
            (c, x, 0.0),  # [0, 60)
            (x, c, 0.0),  # [60, 120)
            (0.0, c, x),  # [120, 180)
            (0.0, x, c),  # [180, 240)
            (x, 0.0, c),  # [240, 300)
            (c, 0.0, x),  # [300, 360)
        )
        r_prime, g_prime, b_prime = sectors[hue // 60]

        def apply(v: float) -> int:
            return round_half_away((v + m) * 255.0)

        return Rgb.new_unchecked(apply(r_prime), apply(g_prime), apply(b_prime))

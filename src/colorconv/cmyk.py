# Internal
from .color import Color
from .errors import PercentageOverflow
from .rgb import Rgb
from .types import Percentage
from .utils import round_half_away


class Cmyk(Color):
    """A color in the CMYK (cyan, magenta, yellow, key) format.

    All four fields are percentages.
    """

    cyan: Percentage
    magenta: Percentage
    yellow: Percentage
    key: Percentage

    @classmethod
    def new(cls, cyan: int, magenta: int, yellow: int, key: int) -> "Cmyk":
        """Create a CMYK color.

        Raises:
            PercentageOverflow: any of the values is larger than 100.
        """
        if not all(v <= 100 for v in (cyan, magenta, yellow, key)):
            raise PercentageOverflow()

        return cls(cyan=cyan, magenta=magenta, yellow=yellow, key=key)

    @classmethod
    def new_unchecked(cls, cyan: int, magenta: int, yellow: int, key: int) -> "Cmyk":
        """See `Cmyk.new`. Does not check that the values are at most 100."""
        return cls.model_construct(cyan=cyan, magenta=magenta, yellow=yellow, key=key)

    def __str__(self) -> str:
        return f"cmyk({self.cyan}%, {self.magenta}%, {self.yellow}%, {self.key}%)"

    def to_cmyk(self) -> "Cmyk":
        return self

    def to_rgb(self) -> Rgb:
        def apply(v: int) -> int:
            return round_half_away(255.0 * (1.0 - v / 100.0) * (1.0 - self.key / 100.0))

        return Rgb.new_unchecked(apply(self.cyan), apply(self.magenta), apply(self.yellow))

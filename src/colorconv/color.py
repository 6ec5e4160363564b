# System
import abc
import typing as ty

# Third Party
import pydantic as pc

if ty.TYPE_CHECKING:
    from .cmyk import Cmyk
    from .hsl import Hsl
    from .rgb import Rgb


class Color(pc.BaseModel, abc.ABC):
    """Shared capability of the RGB, HSL and CMYK value types.

    Values are frozen and compared by type and field values. Every
    conversion is pure and cannot fail once the value has been built; all
    validation happens at construction time.

    Subclasses implement ``to_rgb`` and override the conversions they can
    perform directly. The remaining ones go through RGB.
    """

    model_config = pc.ConfigDict(frozen=True)

    @abc.abstractmethod
    def to_rgb(self) -> "Rgb":
        """Convert to RGB."""

    def to_cmyk(self) -> "Cmyk":
        """Convert to CMYK."""
        return self.to_rgb().to_cmyk()

    def to_hsl(self) -> "Hsl":
        """Convert to HSL."""
        return self.to_rgb().to_hsl()

    def to_hex_string(self) -> str:
        """Convert to a lowercase ``#rrggbb`` string."""
        return self.to_rgb().to_hex_string()

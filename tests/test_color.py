"""Test the shared Color capability and conversion round trips."""

# System
import itertools
import re

# Third Party
import pytest

# Internal
from colorconv import Cmyk, Color, Hsl, Rgb
from colorconv.errors import ColorError, DegreeOverflow, PercentageOverflow

HEX = re.compile(r"#[0-9a-f]{6}")


def hue_distance(a, b):
    d = abs(a - b) % 360
    return min(d, 360 - d)


def test_color_is_abstract():
    with pytest.raises(TypeError):
        Color()


@pytest.mark.parametrize(
    "color",
    [Rgb.new(30, 50, 60), Hsl.new(30, 50, 60), Cmyk.new(30, 50, 60, 40)],
)
def test_conversions_are_colors(color):
    assert isinstance(color, Color)
    for converted in (color.to_rgb(), color.to_hsl(), color.to_cmyk()):
        assert isinstance(converted, Color)
    assert HEX.fullmatch(color.to_hex_string())


def test_identity_conversions():
    rgb = Rgb.new(1, 2, 3)
    hsl = Hsl.new(4, 5, 6)
    cmyk = Cmyk.new(7, 8, 9, 10)

    assert rgb.to_rgb() == rgb
    assert hsl.to_hsl() == hsl
    assert cmyk.to_cmyk() == cmyk


def test_delegations_go_through_rgb():
    hsl = Hsl.new(200, 50, 32)
    assert hsl.to_cmyk() == hsl.to_rgb().to_cmyk()
    assert hsl.to_hex_string() == hsl.to_rgb().to_hex_string()

    cmyk = Cmyk.new(30, 50, 60, 40)
    assert cmyk.to_hsl() == cmyk.to_rgb().to_hsl()
    assert cmyk.to_hex_string() == cmyk.to_rgb().to_hex_string()


def test_equality_is_structural():
    assert Rgb.new(0, 0, 0) == Rgb.new_unchecked(0, 0, 0)
    assert Hsl.new(0, 0, 0) != Rgb.new(0, 0, 0)
    assert Cmyk.new(0, 0, 0, 0) != Cmyk.new(0, 0, 0, 1)


def test_hex_format_and_round_trip():
    for red, green, blue in itertools.product(range(0, 256, 17), repeat=3):
        rgb = Rgb.new_unchecked(red, green, blue)
        hex_string = rgb.to_hex_string()
        assert HEX.fullmatch(hex_string), hex_string
        assert Rgb.from_hex_string(hex_string) == rgb


def test_hsl_round_trip():
    """Saturated, mid-lightness colors survive HSL -> RGB -> HSL within 1."""
    for hue, saturation, lightness in itertools.product(
        range(0, 361, 5), (60, 80, 100), (40, 50, 60)
    ):
        hsl = Hsl.new(hue, saturation, lightness)
        result = hsl.to_rgb().to_hsl()
        assert hue_distance(result.hue, hue) <= 1, hsl
        assert abs(result.saturation - saturation) <= 1, hsl
        assert abs(result.lightness - lightness) <= 1, hsl


def test_hsl_round_trip_achromatic():
    """Grays lose their hue: it comes back as 0."""
    for hue, lightness in itertools.product(range(0, 361, 45), range(0, 101, 10)):
        result = Hsl.new(hue, 0, lightness).to_rgb().to_hsl()
        assert result.hue == 0
        assert result.saturation == 0
        assert abs(result.lightness - lightness) <= 1


def test_cmyk_round_trip():
    """CMYK values with one of cyan/magenta/yellow at 0 survive within 1."""
    for first, second, position, key in itertools.product(
        range(0, 101, 10), range(0, 101, 10), range(3), (0, 20, 40, 50)
    ):
        inks = [first, second]
        inks.insert(position, 0)
        cmyk = Cmyk.new(*inks, key)
        result = cmyk.to_rgb().to_cmyk()
        assert abs(result.cyan - cmyk.cyan) <= 1, cmyk
        assert abs(result.magenta - cmyk.magenta) <= 1, cmyk
        assert abs(result.yellow - cmyk.yellow) <= 1, cmyk
        assert abs(result.key - cmyk.key) <= 1, cmyk


def test_cmyk_round_trip_pure_black():
    for cyan, magenta, yellow in itertools.product((0, 35, 100), repeat=3):
        result = Cmyk.new(cyan, magenta, yellow, 100).to_rgb().to_cmyk()
        assert result == Cmyk.new(0, 0, 0, 100)


def test_errors():
    assert issubclass(PercentageOverflow, ColorError)
    assert issubclass(DegreeOverflow, ColorError)
    assert issubclass(ColorError, ValueError)
    assert str(PercentageOverflow()) == "Percentage overflow: value is larger than 100!"
    assert str(DegreeOverflow()) == "Degree overflow: value is larger than 360!"

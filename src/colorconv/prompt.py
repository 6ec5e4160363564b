"""Interactive truecolor prompt.

Reads ``hue,saturation,lightness`` triples, converts them to RGB and prints a
message in that color using a 24-bit ANSI escape sequence.

Example:
    $ COLORTERM=truecolor colorconv-prompt
    conv> 200,50,32
"""

# System
import argparse
import collections.abc as abc
import logging
import os
import sys
import typing as ty

# Third Party
import pydantic as pc
import pydantic_settings as ps

# Internal
from . import __version__
from .hsl import Hsl
from .rgb import Rgb

TRUECOLOR_TERMS = ("truecolor", "24bit")

WELCOME = (
    "Welcome! Enter a sequence of HSL values like so: `200,50,32` "
    "to get started, and `exit` to exit!"
)


class PromptSettings(ps.BaseSettings):
    """Settings for the truecolor HSL prompt."""

    model_config = ps.SettingsConfigDict(
        env_prefix="COLORCONV_",
        cli_parse_args=False,
        cli_use_class_docstring=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        cli_source = getattr(cls, "_cli_source", None)
        config_file = getattr(cls, "_config_file", None) or os.environ.get(
            "COLORCONV_CONFIG", "colorconv.toml"
        )

        sources = [init_settings]

        if cli_source is not None:
            sources.append(cli_source)

        sources.append(env_settings)
        sources.append(ps.TomlConfigSettingsSource(settings_cls, toml_file=config_file))
        sources.append(file_secret_settings)
        return tuple(sources)

    prompt: str = pc.Field(default="conv> ", description="Input prompt")
    message: str = pc.Field(
        default="Hello, world!", description="Text printed in the converted color"
    )
    require_truecolor: bool = pc.Field(
        default=True, description="Refuse to start unless $COLORTERM is truecolor"
    )
    log_level: ty.Literal["DEBUG", "INFO", "WARNING", "ERROR"] = pc.Field(
        default="WARNING", description="Logging level"
    )


def supports_truecolor(environ: abc.Mapping[str, str] = os.environ) -> bool:
    """Check whether $COLORTERM announces 24-bit color support."""
    return environ.get("COLORTERM") in TRUECOLOR_TERMS


def parse_hsl(line: str) -> Hsl:
    """Parse a ``hue,saturation,lightness`` line into a validated HSL color.

    Raises:
        ValueError: the line is not three comma-separated integers, or the
            values are out of range (`PercentageOverflow`, `DegreeOverflow`).
    """
    parts = line.split(",")
    if len(parts) != 3:
        raise ValueError(f"Expected three comma-separated integers, got {line!r}")
    hue, saturation, lightness = (int(part.strip()) for part in parts)
    return Hsl.new(hue, saturation, lightness)


def truecolor(rgb: Rgb, text: str) -> str:
    """Wrap text in a 24-bit foreground color escape sequence."""
    return f"\x1b[38;2;{rgb.red};{rgb.green};{rgb.blue}m{text}\x1b[0m"


def read_lines(prompt: str) -> abc.Iterator[str]:
    """Yield lines typed at the prompt until end of input or Ctrl-C."""
    while True:
        try:
            yield input(prompt)
        except EOFError:
            logging.info("CTRL-D")
            return
        except KeyboardInterrupt:
            logging.info("CTRL-C")
            return


def run(
    settings: PromptSettings,
    lines: abc.Iterable[str] | None = None,
    stream: ty.TextIO | None = None,
) -> int:
    """Run the prompt loop and return the number of colors printed."""
    if lines is None:
        lines = read_lines(settings.prompt)
    if stream is None:
        stream = sys.stdout

    printed = 0
    for line in lines:
        line = line.strip()
        if line == "exit":
            break
        if not line:
            continue

        try:
            hsl = parse_hsl(line)
        except ValueError as e:
            logging.warning(f"Rejected input {line!r}: {e}")
            continue

        print(truecolor(hsl.to_rgb(), settings.message), file=stream)
        printed += 1

    return printed


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="colorconv-prompt",
        description="Print a message in the color of HSL values typed at a prompt.",
    )
    parser.add_argument(
        "--config", help="TOML configuration file.", dest="cfg_file", required=False
    )
    parser.add_argument(
        "--version", action="version", version=f"colorconv {__version__}"
    )

    args, _unknown = parser.parse_known_args(argv)
    cli_settings = ps.CliSettingsSource(PromptSettings, root_parser=parser)

    PromptSettings._cli_source = cli_settings(args=argv if argv is not None else True)
    PromptSettings._config_file = args.cfg_file

    try:
        settings = PromptSettings()
    finally:
        if hasattr(PromptSettings, "_cli_source"):
            delattr(PromptSettings, "_cli_source")
        if hasattr(PromptSettings, "_config_file"):
            delattr(PromptSettings, "_config_file")

    logging.basicConfig(level=settings.log_level)

    if settings.require_truecolor and not supports_truecolor():
        print("Your terminal does not support 24-bit true color!", file=sys.stderr)
        sys.exit(1)

    print(WELCOME)
    printed = run(settings)
    logging.info(f"Printed {printed} color(s).")

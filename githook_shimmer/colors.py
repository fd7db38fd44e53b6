"""
Color values and color-mode handling for the shimmer renderer.

A shimmer endpoint is either a palette index (``IndexedColor``) or an explicit
RGB triple (``RgbColor``). Parsing happens once, when configuration is built,
so rendering never has to look at strings.
"""

import logging
import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Tuple, Union

from rich.color import Color, ColorType

from githook_shimmer.errors import InvalidConfiguration, UnsupportedColorMode

logger = logging.getLogger(__name__)

PALETTE_MAX = 255

# 256-color palette entries 232-255 are a 24 step grayscale ramp
GRAYSCALE_FIRST = 232
GRAYSCALE_LAST = 255

MID_GRAY: Tuple[int, int, int] = (128, 128, 128)
WHITE: Tuple[int, int, int] = (255, 255, 255)

NAMED_COLORS = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")

_TRUECOLOR_TERMS = ("xterm-256color", "screen-256color", "tmux-256color")

_INDEX_RE = re.compile(r"^\d+$")
_RGB_RE = re.compile(r"^\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*$")


class ColorMode(Enum):
    """How shimmer colors are written to the terminal."""

    INDEXED_256 = "256"
    TRUECOLOR = "truecolor"


@dataclass(frozen=True)
class IndexedColor:
    """A 256-color palette entry."""

    index: int

    def __post_init__(self):
        if not 0 <= self.index <= PALETTE_MAX:
            raise InvalidConfiguration(
                f"Palette index must be between 0 and {PALETTE_MAX}, got: {self.index}"
            )

    def __str__(self) -> str:
        return str(self.index)


@dataclass(frozen=True)
class RgbColor:
    """A 24-bit color."""

    red: int
    green: int
    blue: int

    def __post_init__(self):
        for name, value in (("red", self.red), ("green", self.green), ("blue", self.blue)):
            if not 0 <= value <= 255:
                raise InvalidConfiguration(
                    f"RGB {name} channel must be between 0 and 255, got: {value}"
                )

    @property
    def triplet(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def __str__(self) -> str:
        return f"{self.red},{self.green},{self.blue}"


ColorValue = Union[IndexedColor, RgbColor]


def parse_color_value(value: Union[str, int, ColorValue]) -> ColorValue:
    """Parse ``"R,G,B"`` or a palette number into a color value.

    Raises:
        InvalidConfiguration: if the value is neither form or out of range.
    """
    if isinstance(value, (IndexedColor, RgbColor)):
        return value
    if isinstance(value, bool):
        raise InvalidConfiguration(f"Unparseable color value: {value!r}")
    if isinstance(value, int):
        return IndexedColor(value)

    text = str(value).strip()
    match = _RGB_RE.match(text)
    if match:
        red, green, blue = (int(part) for part in match.groups())
        return RgbColor(red, green, blue)
    if _INDEX_RE.match(text):
        return IndexedColor(int(text))
    raise InvalidConfiguration(
        f"Unparseable color value {value!r}: expected 0-255 or 'R,G,B'"
    )


def parse_color_mode(
    value: Union[str, ColorMode], environ: Optional[Mapping[str, str]] = None
) -> ColorMode:
    """Resolve a color mode name. ``"auto"`` probes the terminal environment."""
    if isinstance(value, ColorMode):
        return value
    name = str(value).strip().lower()
    if name == "auto":
        if detect_truecolor_support(environ):
            return ColorMode.TRUECOLOR
        return ColorMode.INDEXED_256
    for mode in ColorMode:
        if mode.value == name:
            return mode
    raise UnsupportedColorMode(
        f"Unsupported color mode {value!r}. "
        f"Valid modes: {', '.join(mode.value for mode in ColorMode)}, auto"
    )


def detect_truecolor_support(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Guess whether the terminal understands 24-bit color escapes."""
    env = os.environ if environ is None else environ
    if env.get("COLORTERM", "") in ("truecolor", "24bit"):
        return True
    term = env.get("TERM", "")
    # Many modern terminals support truecolor while still reporting a 256color TERM
    return term.endswith(("-truecolor", "-24bit")) or term in _TRUECOLOR_TERMS


def to_rgb(
    color: ColorValue, fallback: Tuple[int, int, int] = MID_GRAY
) -> Tuple[int, int, int]:
    """Decompose a color value into RGB channels.

    Palette indices only convert on the grayscale ramp; any other index
    becomes ``fallback``. This is an approximation, not a palette table.
    """
    if isinstance(color, RgbColor):
        return color.triplet
    if GRAYSCALE_FIRST <= color.index <= GRAYSCALE_LAST:
        gray = (color.index - GRAYSCALE_FIRST) * 10 + 8
        return (gray, gray, gray)
    return fallback


def indexed(index: int) -> Color:
    """A rich ``Color`` that always renders as a ``38;5;n`` palette escape."""
    return Color(f"color({index})", ColorType.EIGHT_BIT, number=index)


def parse_spinner_color(value: str) -> Color:
    """Parse the spinner glyph color: a name, palette index or ``"R,G,B"``.

    Unrecognized values fall back to white.
    """
    text = str(value).strip().lower()
    if text in NAMED_COLORS:
        return Color.parse(text)
    try:
        parsed = parse_color_value(text)
    except InvalidConfiguration:
        logger.warning(f"Unknown spinner color {value!r}, using white")
        return Color.parse("white")
    if isinstance(parsed, RgbColor):
        return Color.from_rgb(*parsed.triplet)
    return indexed(parsed.index)


def to_rich_color(color: ColorValue) -> Color:
    """Convert a color value to the rich ``Color`` it renders as."""
    if isinstance(color, RgbColor):
        return Color.from_rgb(*color.triplet)
    return indexed(color.index)


def ansi_escape(color: Color) -> str:
    """Foreground SGR escape for ``color``."""
    return f"\x1b[{';'.join(color.get_ansi_codes(foreground=True))}m"

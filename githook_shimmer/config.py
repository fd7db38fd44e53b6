"""
Shimmer configuration.

Settings are read once at startup: built-in defaults, then the optional
``[shimmer]`` section of the config file, then ``LLM_GITHOOK_*`` environment
variables. The result is an immutable ``ShimmerSettings`` that is passed
explicitly to the spinner; nothing below reads the environment again.
"""

import configparser
import dataclasses
import logging
import math
import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Union

from rich.color import Color

from githook_shimmer.colors import (
    ColorMode,
    ColorValue,
    IndexedColor,
    RgbColor,
    parse_color_mode,
    parse_color_value,
    parse_spinner_color,
)
from githook_shimmer.errors import InvalidConfiguration

logger = logging.getLogger(__name__)

CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".llm_githook")
CONFIG_FILE = os.path.join(CONFIG_DIR, "shimmer.cfg")
DEFAULT_SECTION = "shimmer"
ENV_PREFIX = "LLM_GITHOOK_"
CONFIG_FILE_ENV = ENV_PREFIX + "CONFIG"

DEFAULT_FPS = 30
DEFAULT_STATUS_TEXT = "Generating commit message..."
DEFAULT_SPINNER_STYLE = "dots"

# Keys shared by the config file and the environment (LLM_GITHOOK_<KEY>)
DEFAULTS: Dict[str, Optional[str]] = {
    "shimmer_base_color": "120",
    "shimmer_highlight_color": "103",
    "spinner_color": None,  # follows shimmer_base_color
    "shimmer_sweep_seconds": "2.0",
    "shimmer_padding": "10",
    "shimmer_band_width": "5.0",
    "fps": str(DEFAULT_FPS),
    "status_text": DEFAULT_STATUS_TEXT,
    "spinner_style": DEFAULT_SPINNER_STYLE,
    "color_mode": ColorMode.INDEXED_256.value,
}


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class ShimmerConfig:
    """
    Parameters of one shimmer sweep.

    Attributes:
        base_color: Color of text outside the glow band
        highlight_color: Color at the center of the glow band
        sweep_seconds: Duration of one full sweep across the padded track
        padding: Virtual characters before and after the text so the band
            can enter and leave smoothly
        band_width: Half-width of the band, in characters
        color_mode: Palette (256) or 24-bit output
    """

    base_color: ColorValue = IndexedColor(120)
    highlight_color: ColorValue = IndexedColor(103)
    sweep_seconds: float = 2.0
    padding: int = 10
    band_width: float = 5.0
    color_mode: ColorMode = ColorMode.INDEXED_256

    def __post_init__(self):
        """Validate and normalize fields after initialization."""
        # Frozen dataclass, so normalized values go through object.__setattr__
        object.__setattr__(self, "base_color", parse_color_value(self.base_color))
        object.__setattr__(
            self, "highlight_color", parse_color_value(self.highlight_color)
        )
        object.__setattr__(self, "color_mode", parse_color_mode(self.color_mode))

        if not _is_number(self.sweep_seconds) or not math.isfinite(self.sweep_seconds):
            raise InvalidConfiguration(
                f"Sweep seconds must be a finite number, got: {self.sweep_seconds!r}"
            )
        if self.sweep_seconds <= 0:
            raise InvalidConfiguration(
                f"Sweep seconds must be > 0, got: {self.sweep_seconds}"
            )

        if not _is_number(self.band_width) or not math.isfinite(self.band_width):
            raise InvalidConfiguration(
                f"Band width must be a finite number, got: {self.band_width!r}"
            )
        if self.band_width <= 0:
            raise InvalidConfiguration(f"Band width must be > 0, got: {self.band_width}")

        if not isinstance(self.padding, int) or isinstance(self.padding, bool):
            raise InvalidConfiguration(
                f"Padding must be an integer, got: {self.padding!r}"
            )
        if self.padding < 0:
            raise InvalidConfiguration(f"Padding must be >= 0, got: {self.padding}")

        if self.color_mode is ColorMode.INDEXED_256:
            for name in ("base_color", "highlight_color"):
                if isinstance(getattr(self, name), RgbColor):
                    raise InvalidConfiguration(
                        f"{name} is an RGB value but color mode is 256; "
                        "use a palette index or color mode 'truecolor'"
                    )

    def replace(self, **changes) -> "ShimmerConfig":
        """Return a copy with some fields overridden (validated again)."""
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class ShimmerSettings:
    """Everything the console spinner needs to draw a status line."""

    shimmer: ShimmerConfig = field(default_factory=ShimmerConfig)
    spinner_color: Color = field(default_factory=lambda: parse_spinner_color("120"))
    spinner_style: str = DEFAULT_SPINNER_STYLE
    fps: int = DEFAULT_FPS
    status_text: str = DEFAULT_STATUS_TEXT

    def __post_init__(self):
        if not isinstance(self.fps, int) or isinstance(self.fps, bool) or self.fps <= 0:
            raise InvalidConfiguration(f"FPS must be a positive integer, got: {self.fps!r}")

    @property
    def frame_interval(self) -> float:
        return 1.0 / self.fps


def _parse_float(key: str, text: str) -> float:
    try:
        return float(text)
    except (TypeError, ValueError):
        raise InvalidConfiguration(f"{key} must be a number, got: {text!r}") from None


def _parse_int(key: str, text: str) -> int:
    try:
        return int(str(text).strip())
    except (TypeError, ValueError):
        raise InvalidConfiguration(f"{key} must be an integer, got: {text!r}") from None


def get_config_file(environ: Optional[Mapping[str, str]] = None) -> str:
    env = os.environ if environ is None else environ
    return env.get(CONFIG_FILE_ENV) or CONFIG_FILE


def read_config_file(path: str) -> Dict[str, str]:
    """Read the ``[shimmer]`` section of ``path``. A missing file yields ``{}``."""
    if not os.path.exists(path):
        return {}
    config = configparser.ConfigParser(interpolation=None)
    try:
        config.read(path)
    except configparser.Error as e:
        raise InvalidConfiguration(f"Could not parse config file {path}: {e}") from e
    if DEFAULT_SECTION not in config:
        logger.debug(f"No [{DEFAULT_SECTION}] section in {path}")
        return {}
    return {key: value for key, value in config[DEFAULT_SECTION].items() if key in DEFAULTS}


def collect_values(
    environ: Optional[Mapping[str, str]] = None, config_file: Optional[str] = None
) -> Dict[str, Optional[str]]:
    """Merge defaults, config file values and environment overrides."""
    env = os.environ if environ is None else environ
    values = dict(DEFAULTS)
    values.update(read_config_file(config_file or get_config_file(env)))
    for key in DEFAULTS:
        env_value = env.get(ENV_PREFIX + key.upper())
        if env_value is not None and env_value != "":
            values[key] = env_value
    return values


def build_settings(
    values: Mapping[str, Optional[str]], environ: Optional[Mapping[str, str]] = None
) -> ShimmerSettings:
    """Build validated settings from raw string values.

    Raises:
        InvalidConfiguration: for bad numbers or colors
        UnsupportedColorMode: for an unknown color mode
    """
    merged = dict(DEFAULTS)
    merged.update(values)

    shimmer = ShimmerConfig(
        base_color=parse_color_value(merged["shimmer_base_color"]),
        highlight_color=parse_color_value(merged["shimmer_highlight_color"]),
        sweep_seconds=_parse_float("shimmer_sweep_seconds", merged["shimmer_sweep_seconds"]),
        padding=_parse_int("shimmer_padding", merged["shimmer_padding"]),
        band_width=_parse_float("shimmer_band_width", merged["shimmer_band_width"]),
        color_mode=parse_color_mode(merged["color_mode"], environ),
    )

    fps = _parse_int("fps", merged["fps"])
    if fps <= 0:
        logger.warning(f"FPS must be positive, got {fps}; using {DEFAULT_FPS}")
        fps = DEFAULT_FPS

    spinner_color = merged["spinner_color"] or merged["shimmer_base_color"]

    return ShimmerSettings(
        shimmer=shimmer,
        spinner_color=parse_spinner_color(spinner_color),
        spinner_style=merged["spinner_style"] or DEFAULT_SPINNER_STYLE,
        fps=fps,
        status_text=merged["status_text"] if merged["status_text"] is not None else "",
    )


def load_settings(
    environ: Optional[Mapping[str, str]] = None, config_file: Optional[str] = None
) -> ShimmerSettings:
    """Load settings once at startup from the config file and environment."""
    values = collect_values(environ, config_file)
    settings = build_settings(values, environ)
    logger.debug(f"Loaded shimmer settings: {settings}")
    return settings


def describe_settings(settings: ShimmerSettings) -> Dict[str, Union[str, int, float]]:
    """Human readable summary used by the demo banner."""
    shimmer = settings.shimmer
    return {
        "Color Mode": shimmer.color_mode.value,
        "Base Color": str(shimmer.base_color),
        "Highlight Color": str(shimmer.highlight_color),
        "Spinner Color": settings.spinner_color.name,
        "Spinner Style": settings.spinner_style,
        "FPS": settings.fps,
        "Sweep Seconds": shimmer.sweep_seconds,
    }

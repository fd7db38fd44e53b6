"""Shimmer / glow animation for a status line.

A glow band sweeps left-to-right across a padded virtual track laid over
the text, then wraps around. Brightness falls off from the band center
with a raised cosine, reaching exactly zero at ``band_width``:

    base → highlight → base
        ───band_width───

Every frame is a pure function of ``(text, now, sweep_start, config)``; the
caller samples the clock.

Usage:
    renderer = ShimmerRenderer(ShimmerConfig())
    line = renderer.render("Generating commit message...", now, start)
"""

import math
from typing import List, Tuple

from rich.color import Color
from rich.style import Style
from rich.text import Text

from githook_shimmer.colors import (
    MID_GRAY,
    PALETTE_MAX,
    WHITE,
    ColorMode,
    ansi_escape,
    indexed,
    to_rgb,
)
from githook_shimmer.config import ShimmerConfig

RESET = "\x1b[0m"


def shimmer_intensity(dist: float, band_width: float) -> float:
    """Raised-cosine falloff: 1.0 at the band center, 0.0 from ``band_width`` out."""
    dist = abs(dist)
    if dist >= band_width:
        return 0.0
    return 0.5 * (1.0 + math.cos(math.pi * dist / band_width))


def sweep_phase(now: float, sweep_start: float, sweep_seconds: float) -> float:
    """Position within the current sweep, in [0, 1)."""
    # Python's float % is floored, so negative elapsed times still land in range
    phase = ((now - sweep_start) % sweep_seconds) / sweep_seconds
    # tiny negative remainders can round up to exactly sweep_seconds
    if phase >= 1.0:
        return 0.0
    return phase


def sweep_center(length: int, now: float, sweep_start: float, config: ShimmerConfig) -> float:
    """Track position of the band center for text of ``length`` characters."""
    period = length + 2 * config.padding
    return sweep_phase(now, sweep_start, config.sweep_seconds) * period


def interpolate_channel(
    base: int, highlight: int, intensity: float, maximum: int = 255
) -> int:
    """Blend one channel, round half up and clamp to ``[0, maximum]``."""
    value = base + intensity * (highlight - base)
    return max(0, min(maximum, int(math.floor(value + 0.5))))


class ShimmerRenderer:
    """Render shimmer frames for a fixed configuration."""

    def __init__(self, config: ShimmerConfig):
        self.config = config
        if config.color_mode is ColorMode.TRUECOLOR:
            self._base_rgb = to_rgb(config.base_color, MID_GRAY)
            self._highlight_rgb = to_rgb(config.highlight_color, WHITE)

    def intensities(self, text: str, now: float, sweep_start: float) -> List[float]:
        """Glow intensity of each character of ``text`` at ``now``."""
        config = self.config
        center = sweep_center(len(text), now, sweep_start, config)
        return [
            shimmer_intensity(i + config.padding - center, config.band_width)
            for i in range(len(text))
        ]

    def color_at(self, intensity: float) -> Color:
        """The color drawn for a given glow intensity."""
        if self.config.color_mode is ColorMode.INDEXED_256:
            return indexed(
                interpolate_channel(
                    self.config.base_color.index,
                    self.config.highlight_color.index,
                    intensity,
                    PALETTE_MAX,
                )
            )
        return Color.from_rgb(*self.rgb_at(intensity))

    def rgb_at(self, intensity: float) -> Tuple[int, int, int]:
        """Truecolor channels for a given glow intensity."""
        return tuple(
            interpolate_channel(base, highlight, intensity)
            for base, highlight in zip(self._base_rgb, self._highlight_rgb)
        )

    def colors(self, text: str, now: float, sweep_start: float) -> List[Color]:
        return [self.color_at(i) for i in self.intensities(text, now, sweep_start)]

    def render(self, text: str, now: float, sweep_start: float) -> str:
        """One frame as ANSI text, ending in a single reset sequence."""
        parts = [
            f"{ansi_escape(color)}{char}"
            for char, color in zip(text, self.colors(text, now, sweep_start))
        ]
        parts.append(RESET)
        return "".join(parts)

    def render_text(self, text: str, now: float, sweep_start: float) -> Text:
        """One frame as a Rich ``Text`` for use inside ``Live`` displays."""
        result = Text()
        for char, color in zip(text, self.colors(text, now, sweep_start)):
            result.append(char, style=Style(color=color))
        return result


def render(text: str, now: float, sweep_start: float, config: ShimmerConfig) -> str:
    """Render ``text`` with the glow band positioned for time ``now``."""
    return ShimmerRenderer(config).render(text, now, sweep_start)


def shimmer_text(
    text: str, now: float, sweep_start: float, config: ShimmerConfig
) -> Text:
    """Return a Rich ``Text`` with the glow band positioned for time ``now``."""
    return ShimmerRenderer(config).render_text(text, now, sweep_start)

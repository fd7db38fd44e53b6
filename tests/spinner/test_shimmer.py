"""Tests for githook_shimmer.spinner.shimmer."""

import re

import pytest

from githook_shimmer.colors import ColorMode, IndexedColor, RgbColor
from githook_shimmer.config import ShimmerConfig
from githook_shimmer.spinner.shimmer import (
    RESET,
    ShimmerRenderer,
    interpolate_channel,
    render,
    shimmer_intensity,
    shimmer_text,
    sweep_center,
    sweep_phase,
)

ESCAPE_RE = re.compile(r"\x1b\[([0-9;]*)m")


def _codes(output):
    """SGR parameter strings in order, reset included."""
    return ESCAPE_RE.findall(output)


@pytest.fixture
def small_config():
    return ShimmerConfig(
        base_color=IndexedColor(240),
        highlight_color=IndexedColor(255),
        sweep_seconds=2.0,
        padding=1,
        band_width=1.0,
    )


@pytest.fixture
def truecolor_config():
    return ShimmerConfig(
        base_color=RgbColor(100, 100, 100),
        highlight_color=RgbColor(250, 0, 50),
        sweep_seconds=2.0,
        padding=1,
        band_width=1.0,
        color_mode=ColorMode.TRUECOLOR,
    )


class TestShimmerIntensity:
    def test_peak_at_center(self):
        assert shimmer_intensity(0.0, 5.0) == 1.0

    def test_zero_at_band_edge(self):
        assert shimmer_intensity(5.0, 5.0) == 0.0

    def test_zero_outside_band(self):
        assert shimmer_intensity(7.5, 5.0) == 0.0

    def test_half_way(self):
        assert shimmer_intensity(2.5, 5.0) == pytest.approx(0.5)

    def test_symmetric(self):
        assert shimmer_intensity(-1.25, 5.0) == shimmer_intensity(1.25, 5.0)

    def test_below_one_off_center(self):
        assert 0.0 < shimmer_intensity(0.01, 5.0) < 1.0


class TestInterpolateChannel:
    @pytest.mark.parametrize("base, highlight", [(0, 255), (255, 0), (120, 103), (8, 8)])
    def test_within_endpoints(self, base, highlight):
        for step in range(21):
            value = interpolate_channel(base, highlight, step / 20)
            assert min(base, highlight) <= value <= max(base, highlight)

    def test_endpoints_exact(self):
        assert interpolate_channel(120, 103, 0.0) == 120
        assert interpolate_channel(120, 103, 1.0) == 103

    def test_rounds_half_up(self):
        assert interpolate_channel(0, 1, 0.5) == 1
        assert interpolate_channel(0, 3, 0.5) == 2

    def test_clamped(self):
        assert interpolate_channel(250, 255, 2.0) == 255
        assert interpolate_channel(5, 0, 2.0) == 0


class TestSweep:
    def test_phase_wraps(self):
        assert sweep_phase(2.5, 0.0, 2.0) == pytest.approx(0.25)

    def test_negative_elapsed_is_floored(self):
        assert sweep_phase(-0.5, 0.0, 2.0) == pytest.approx(0.75)

    def test_phase_never_reaches_one(self):
        assert sweep_phase(-1e-20, 0.0, 2.0) == 0.0

    def test_center_uses_padded_period(self, small_config):
        # "AB" with padding 1 travels over 4 track positions
        assert sweep_center(2, 0.5, 0.0, small_config) == pytest.approx(1.0)


class TestRender:
    def test_empty_text_is_only_reset(self, small_config):
        assert render("", 12.3, 0.0, small_config) == RESET

    def test_band_entering_renders_base(self, small_config):
        output = render("AB", 10.0, 10.0, small_config)
        assert output == "\x1b[38;5;240mA\x1b[38;5;240mB\x1b[0m"

    def test_band_on_first_character(self, small_config):
        output = render("AB", 10.5, 10.0, small_config)
        assert output == "\x1b[38;5;255mA\x1b[38;5;240mB\x1b[0m"

    def test_single_trailing_reset(self, small_config):
        output = render("hello", 0.7, 0.0, small_config)
        assert output.endswith(RESET)
        assert output.count(RESET) == 1

    def test_one_escape_per_character(self, small_config):
        text = "héllo ✨"
        output = render(text, 0.3, 0.0, small_config)
        assert len(_codes(output)) == len(text) + 1
        assert ESCAPE_RE.sub("", output) == text

    @pytest.mark.parametrize("now", [0.25, 0.75, 1.5])
    @pytest.mark.parametrize("k", [1, 2, 7, -3])
    def test_periodic(self, small_config, now, k):
        text = "Generating commit message..."
        expected = render(text, now, 0.0, small_config)
        assert render(text, now + k * 2.0, 0.0, small_config) == expected

    def test_time_before_start(self, small_config):
        assert render("abc", -0.5, 0.0, small_config) == render("abc", 1.5, 0.0, small_config)

    def test_truecolor_examples(self, truecolor_config):
        assert render("AB", 0.0, 0.0, truecolor_config) == (
            "\x1b[38;2;100;100;100mA\x1b[38;2;100;100;100mB\x1b[0m"
        )
        assert render("AB", 0.5, 0.0, truecolor_config) == (
            "\x1b[38;2;250;0;50mA\x1b[38;2;100;100;100mB\x1b[0m"
        )

    def test_truecolor_palette_fallback(self):
        config = ShimmerConfig(
            base_color=IndexedColor(120),
            highlight_color=IndexedColor(33),
            padding=0,
            band_width=1.0,
            color_mode="truecolor",
        )
        # base falls back to mid-gray, highlight to white
        assert render("A", 0.0, 0.0, config) == "\x1b[38;2;255;255;255mA\x1b[0m"
        assert render("AB", 1.0, 0.0, config).startswith("\x1b[38;2;128;128;128mA")

    def test_indexed_and_truecolor_agree(self):
        indexed_config = ShimmerConfig(
            base_color=IndexedColor(232),
            highlight_color=IndexedColor(255),
            padding=3,
            band_width=2.5,
        )
        truecolor_config = indexed_config.replace(color_mode=ColorMode.TRUECOLOR)
        indexed_renderer = ShimmerRenderer(indexed_config)
        truecolor_renderer = ShimmerRenderer(truecolor_config)
        text = "shimmering"
        for step in range(40):
            now = step * 0.05
            palette = [int(c.split(";")[2]) for c in _codes(indexed_renderer.render(text, now, 0.0))[:-1]]
            grays = [int(c.split(";")[2]) for c in _codes(truecolor_renderer.render(text, now, 0.0))[:-1]]
            for index, gray in zip(palette, grays):
                # map the 8..238 gray ramp back onto palette steps
                assert abs(index - (232 + (gray - 8) / 10)) <= 1


class TestShimmerText:
    def test_plain_text_preserved(self, small_config):
        result = shimmer_text("AB", 0.5, 0.0, small_config)
        assert result.plain == "AB"

    def test_span_colors(self, small_config):
        result = shimmer_text("AB", 0.5, 0.0, small_config)
        colors = [span.style.color.number for span in result.spans]
        assert colors == [255, 240]

    def test_empty(self, small_config):
        assert shimmer_text("", 0.0, 0.0, small_config).plain == ""


def test_renderer_intensities(small_config):
    renderer = ShimmerRenderer(small_config)
    assert renderer.intensities("AB", 0.5, 0.0) == [1.0, 0.0]

"""
Colors component unit tests.

Tests for hex/RGB/HSL conversion and derived color adjustments.
"""

from __future__ import annotations

import itertools

import pytest

from chromatoken.components.colors import (
    HSL,
    RGB,
    adjust_hue,
    complementary,
    darken,
    desaturate,
    generate_palette,
    grayscale,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    invert,
    is_dark,
    is_hex_color,
    is_light,
    lighten,
    mix,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsl,
    round_half_up,
    saturate,
)
from chromatoken.domain.errors import InvalidColorFormat

# --- Hex Parsing ---


class TestHexToRgb:
    """Test hex parsing."""

    def test_parses_hex_with_hash(self) -> None:
        assert hex_to_rgb("#3b82f6") == RGB(59, 130, 246)

    def test_parses_hex_without_hash(self) -> None:
        assert hex_to_rgb("3b82f6") == RGB(59, 130, 246)

    def test_parses_uppercase(self) -> None:
        assert hex_to_rgb("#FFFFFF") == RGB(255, 255, 255)

    @pytest.mark.parametrize(
        "value", ["#fff", "#gggggg", "#12345", "", "rgb(0,0,0)", "#1234567"]
    )
    def test_rejects_malformed_hex(self, value: str) -> None:
        """Anything but six hex digits raises InvalidColorFormat."""
        with pytest.raises(InvalidColorFormat) as err:
            hex_to_rgb(value)
        assert err.value.value == value

    def test_rejects_non_string(self) -> None:
        with pytest.raises(InvalidColorFormat):
            hex_to_rgb(123)  # type: ignore[arg-type]

    def test_invalid_color_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            hex_to_rgb("nope")

    def test_is_hex_color(self) -> None:
        assert is_hex_color("#abcdef")
        assert is_hex_color("abcdef")
        assert not is_hex_color("transparent")
        assert not is_hex_color(None)


class TestRgbToHex:
    """Test hex encoding."""

    def test_encodes_lowercase(self) -> None:
        assert rgb_to_hex(59, 130, 246) == "#3b82f6"

    def test_clamps_and_rounds_half_up(self) -> None:
        assert rgb_to_hex(300, -5, 127.5) == "#ff0080"

    def test_round_trip_is_exact(self) -> None:
        """hex -> RGB -> hex returns the input for every channel combination sampled."""
        for r, g, b in itertools.product(range(0, 256, 17), repeat=3):
            color = f"#{r:02x}{g:02x}{b:02x}"
            assert rgb_to_hex(*hex_to_rgb(color)) == color

    def test_normalize_hex(self) -> None:
        assert normalize_hex("3B82F6") == "#3b82f6"


class TestRounding:
    """Half-up rounding, unlike Python's round()."""

    def test_half_rounds_up(self) -> None:
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(127.5) == 128

    def test_below_half_rounds_down(self) -> None:
        assert round_half_up(2.49) == 2


# --- HSL ---


class TestHsl:
    """Test RGB <-> HSL conversion."""

    @pytest.mark.parametrize(
        ("rgb", "hsl"),
        [
            ((255, 0, 0), HSL(0, 100, 50)),
            ((0, 255, 0), HSL(120, 100, 50)),
            ((0, 0, 255), HSL(240, 100, 50)),
            ((255, 255, 255), HSL(0, 0, 100)),
            ((0, 0, 0), HSL(0, 0, 0)),
            ((153, 153, 153), HSL(0, 0, 60)),
        ],
    )
    def test_rgb_to_hsl(self, rgb: tuple[int, int, int], hsl: HSL) -> None:
        assert rgb_to_hsl(*rgb) == pytest.approx(hsl)

    @pytest.mark.parametrize(
        ("hsl", "rgb"),
        [
            ((0, 100, 50), RGB(255, 0, 0)),
            ((120, 100, 50), RGB(0, 255, 0)),
            ((240, 100, 50), RGB(0, 0, 255)),
            ((0, 0, 60), RGB(153, 153, 153)),
        ],
    )
    def test_hsl_to_rgb(self, hsl: tuple[int, int, int], rgb: RGB) -> None:
        assert hsl_to_rgb(*hsl) == rgb

    def test_hue_360_equals_zero(self) -> None:
        assert hsl_to_rgb(360, 100, 50) == hsl_to_rgb(0, 100, 50)

    def test_hue_stays_below_360(self) -> None:
        assert 359 < rgb_to_hsl(255, 0, 1).h < 360

    def test_components_keep_precision(self) -> None:
        hsl = rgb_to_hsl(0, 25, 31)

        assert hsl.h == pytest.approx(191.6129, abs=1e-4)
        assert hsl.l == pytest.approx(6.0784, abs=1e-4)

    def test_channels_clamped(self) -> None:
        rgb = hsl_to_rgb(0, 150, 120)
        assert all(0 <= channel <= 255 for channel in rgb)

    @pytest.mark.parametrize(
        "color", ["#00191e", "#00191f", "#00181f", "#0078d8", "#3b82f6", "#fca5a5", "#999999"]
    )
    def test_hsl_round_trip_returns_input(self, color: str) -> None:
        assert hsl_to_hex(*hex_to_hsl(color)) == color


# --- Adjustments ---


class TestAdjustments:
    """Test lightness, saturation and hue adjustments."""

    def test_lighten_black(self) -> None:
        assert lighten("#000000", 50) == "#808080"

    def test_lighten_clamps_at_white(self) -> None:
        assert lighten("#ffffff", 20) == "#ffffff"

    def test_darken_to_black(self) -> None:
        assert darken("#ffffff", 100) == "#000000"

    def test_saturate_gray(self) -> None:
        assert saturate("#666666", 50) == "#993333"

    def test_desaturate_fully(self) -> None:
        assert desaturate("#ff0000", 100) == "#808080"

    def test_grayscale(self) -> None:
        assert grayscale("#ff0000") == "#808080"

    def test_adjust_hue_wraps(self) -> None:
        assert adjust_hue("#ff0000", 120) == "#00ff00"
        assert adjust_hue("#ff0000", -120) == "#0000ff"

    def test_complementary(self) -> None:
        assert complementary("#ff0000") == "#00ffff"

    def test_invert(self) -> None:
        assert invert("#000000") == "#ffffff"
        assert invert("#3b82f6") == "#c47d09"

    def test_light_and_dark(self) -> None:
        assert is_light("#ffffff")
        assert is_dark("#000000")
        # #808080 sits just above 50% lightness, #7f7f7f just below
        assert is_light("#808080")
        assert is_dark("#7f7f7f")


class TestMix:
    """Test per-channel interpolation."""

    def test_even_mix(self) -> None:
        assert mix("#ffffff", "#000000") == "#808080"

    def test_full_weight_returns_first(self) -> None:
        assert mix("#3b82f6", "#000000", 100) == "#3b82f6"

    def test_zero_weight_returns_second(self) -> None:
        assert mix("#3b82f6", "#000000", 0) == "#000000"


class TestGeneratePalette:
    """Test shade ramp generation."""

    def test_palette_length_and_shades(self) -> None:
        palette = generate_palette("#3b82f6")
        assert len(palette) == 10
        assert palette[0].shade == 91
        shades = [p.shade for p in palette]
        assert shades == sorted(shades)

    def test_palette_descends_in_lightness(self) -> None:
        palette = generate_palette("#3b82f6", steps=5)
        lightness = [hex_to_hsl(p.color).l for p in palette]
        assert lightness[0] >= 93
        assert lightness[-1] <= 7
        assert lightness == sorted(lightness, reverse=True)

    def test_palette_needs_two_steps(self) -> None:
        with pytest.raises(ValueError):
            generate_palette("#3b82f6", steps=1)

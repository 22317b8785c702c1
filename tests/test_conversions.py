"""
Tests for colour representation and conversion.

Covers hex parsing and formatting, the sRGB transfer functions,
OKLab/OKLCH round trips and the HSL helpers used by contrast correction.
"""

import itertools

import numpy as np
import pytest

from chromalab.core import conversions as conv
from chromalab.core.errors import ColourError, DomainError, InvalidHexError
from chromalab.core.types import RGB8


# ============================================================================
# Hex parsing & formatting
# ============================================================================

class TestHexParsing:
    """Strict six-digit hex parsing."""

    @pytest.mark.parametrize("text", ["#FF8800", "ff8800", "#ff8800", "Ff8800"])
    def test_accepts_optional_hash_and_any_case(self, text):
        assert conv.parse_hex(text) == RGB8(255, 136, 0)

    @pytest.mark.parametrize(
        "text",
        ["", "#", "fff", "#fff", "ff880", "#ff88001", "gg0000", " #ff8800", "##ff8800", "ff 880"],
    )
    def test_rejects_malformed_text(self, text):
        with pytest.raises(InvalidHexError):
            conv.parse_hex(text)

    def test_rejects_non_string(self):
        with pytest.raises(InvalidHexError):
            conv.parse_hex(0xFF8800)

    def test_invalid_hex_is_a_value_error(self):
        with pytest.raises(ValueError):
            conv.parse_hex("nope")
        assert issubclass(InvalidHexError, ColourError)

    def test_format_is_lowercase_and_zero_padded(self):
        assert conv.format_hex(RGB8(1, 2, 171)) == "#0102ab"
        assert RGB8(255, 136, 0).hex == "#ff8800"

    def test_format_accepts_hex_text(self):
        assert conv.format_hex("#ABCDEF") == "#abcdef"


class TestAsRgb8:
    """Coercion of loosely typed colour inputs."""

    def test_passes_rgb8_through(self):
        rgb = RGB8(1, 2, 3)
        assert conv.as_rgb8(rgb) is rgb

    def test_rounds_float_channels_half_up(self):
        assert conv.as_rgb8((127.5, 0.49, 254.5)) == RGB8(128, 0, 255)

    def test_accepts_numpy_scalars(self):
        assert conv.as_rgb8(np.array([10, 20, 30], dtype=np.uint8)) == RGB8(10, 20, 30)

    @pytest.mark.parametrize("value", [(256, 0, 0), (-1, 0, 0), (1, 2), ("a", 0, 0), None])
    def test_rejects_bad_triples(self, value):
        with pytest.raises(DomainError):
            conv.as_rgb8(value)


# ============================================================================
# sRGB transfer
# ============================================================================

class TestLinearRoundTrip:
    """to_srgb8(to_linear(x)) is the identity on every 8-bit colour."""

    def test_every_channel_value_round_trips(self):
        # Both transfer functions act channel by channel, so checking each of
        # the 256 values in every channel position covers all 256^3 colours.
        for v in range(256):
            for rgb in (RGB8(v, 0, 0), RGB8(0, v, 0), RGB8(0, 0, v), RGB8(v, v, v)):
                assert conv.to_srgb8(conv.to_linear(rgb)) == rgb

    def test_channels_are_independent(self):
        values = range(0, 256, 51)
        for r, g, b in itertools.product(values, repeat=3):
            lin = conv.to_linear(RGB8(r, g, b))
            assert lin.r == conv.to_linear(RGB8(r, 0, 0)).r
            assert lin.g == conv.to_linear(RGB8(0, g, 0)).g
            assert lin.b == conv.to_linear(RGB8(0, 0, b)).b
            assert conv.to_srgb8(lin) == RGB8(r, g, b)

    def test_threshold_segment(self):
        # 10/255 falls below 0.04045 and uses the linear slope
        assert conv.to_linear(RGB8(10, 0, 0)).r == pytest.approx(10 / 255 / 12.92)

    def test_out_of_range_linear_values_clamp(self):
        assert conv.to_srgb8((-0.5, 1.5, 0.5)) == RGB8(0, 255, 188)


# ============================================================================
# OKLab / OKLCH
# ============================================================================

class TestOklab:
    """OKLab conversions and round trips."""

    def test_white_and_black(self):
        white = conv.to_oklab("#ffffff")
        assert white.L == pytest.approx(1.0, abs=1e-4)
        assert white.a == pytest.approx(0.0, abs=1e-4)
        assert white.b == pytest.approx(0.0, abs=1e-4)
        assert conv.to_oklab("#000000") == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)

    def test_known_red(self):
        lch = conv.to_oklch("#ff0000")
        assert lch.L == pytest.approx(0.6280, abs=1e-3)
        assert lch.C == pytest.approx(0.2577, abs=1e-3)
        assert lch.H == pytest.approx(29.23, abs=0.05)

    def test_lattice_round_trip_within_one(self):
        values = range(0, 256, 15)
        for rgb in itertools.product(values, repeat=3):
            back = conv.oklab_to_rgb8(conv.to_oklab(rgb))
            assert max(abs(x - y) for x, y in zip(back, rgb)) <= 1, rgb

    def test_oklch_round_trip(self):
        for hex_code in ("#3b82f6", "#10b981", "#f59e0b", "#ec4899"):
            rgb = conv.parse_hex(hex_code)
            back = conv.oklch_to_rgb8(conv.to_oklch(rgb))
            assert max(abs(x - y) for x, y in zip(back, rgb)) <= 1

    def test_hue_is_normalised(self):
        for hex_code in ("#0000ff", "#ff00ff", "#00ffff"):
            assert 0.0 <= conv.to_oklch(hex_code).H < 360.0

    def test_out_of_gamut_clamps_only_at_the_end(self):
        rgb = conv.oklch_to_rgb8((0.7, 0.4, 145.0))
        assert all(0 <= ch <= 255 for ch in rgb)

    def test_polar_round_trip(self):
        lab = (0.5, 0.1, -0.05)
        assert conv.oklch_to_oklab(conv.oklab_to_oklch(lab)) == pytest.approx(lab)


# ============================================================================
# HSL
# ============================================================================

class TestHsl:
    """HSL helpers used by the contrast corrector."""

    def test_primary_red(self):
        assert conv.rgb_to_hsl("#ff0000") == pytest.approx((0.0, 1.0, 0.5))
        assert conv.hsl_to_rgb8(0.0, 1.0, 0.5) == RGB8(255, 0, 0)

    def test_grey_has_no_saturation(self):
        h, s, L = conv.rgb_to_hsl("#808080")
        assert s == 0.0
        assert L == pytest.approx(128 / 255)

    def test_lattice_round_trip(self):
        values = range(0, 256, 17)
        for rgb in itertools.product(values, repeat=3):
            assert conv.hsl_to_rgb8(*conv.rgb_to_hsl(rgb)) == rgb

    def test_lightness_extremes(self):
        assert conv.hsl_to_rgb8(210.0, 0.6, 0.0) == RGB8(0, 0, 0)
        assert conv.hsl_to_rgb8(210.0, 0.6, 1.0) == RGB8(255, 255, 255)

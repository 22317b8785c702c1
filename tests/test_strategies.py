"""Tests for the palette strategy registry and palette editing."""

import random

import pytest

from chromalab.core import config as c
from chromalab.core import strategies
from chromalab.core.conversions import oklch_to_rgb8, parse_hex, to_oklch
from chromalab.core.errors import DomainError, UnknownSelectorError
from chromalab.core.harmony import generate_shades, scheme_hues
from chromalab.core.types import RGB8


# ============================================================================
# Registry
# ============================================================================

class TestRegistry:
    """Strategy catalogue and lookup."""

    def test_catalogue_size(self):
        assert len(strategies.STRATEGIES) == 29

    def test_categories_in_display_order(self):
        grouped = strategies.strategies_by_category()
        assert list(grouped) == list(c.CATEGORY_TITLES)
        assert all(grouped[category] for category in grouped)
        assert sum(len(infos) for infos in grouped.values()) == 29

    def test_lookup_is_case_insensitive(self):
        assert strategies.get_strategy("  Japanese ").info.key == "japanese"

    def test_unknown_strategy(self):
        with pytest.raises(UnknownSelectorError):
            strategies.get_strategy("vaporwave")
        with pytest.raises(ValueError):
            strategies.generate_palette("vaporwave", 5, random.Random(0))

    def test_every_recipe_backs_a_catalogue_entry(self):
        for key in strategies.RECIPES:
            assert key in strategies.STRATEGIES


# ============================================================================
# Generation
# ============================================================================

class TestGeneratePalette:
    """Palette generation across all strategies."""

    @pytest.mark.parametrize("key", sorted(strategies.STRATEGIES))
    def test_every_strategy_fills_every_size(self, key):
        rng = random.Random(7)
        for count in range(c.MIN_PALETTE_SIZE, c.MAX_PALETTE_SIZE + 1):
            palette = strategies.generate_palette(key, count, rng)
            assert len(palette) == count
            for colour in palette:
                assert isinstance(colour, RGB8)
                assert all(0 <= ch <= 255 for ch in colour)

    @pytest.mark.parametrize("key", ["random-cohesive", "80s", "japanese", "triadic"])
    def test_same_seed_same_palette(self, key):
        first = strategies.generate_palette(key, 6, random.Random(99))
        second = strategies.generate_palette(key, 6, random.Random(99))
        assert first == second

    def test_true_random_extremes(self, stub_random):
        low = strategies.generate_palette("true-random", 3, stub_random(0.0))
        assert [colour.hex for colour in low] == ["#000000"] * 3
        high = strategies.generate_palette("true-random", 3, stub_random(0.999999))
        assert high == [RGB8(255, 255, 255)] * 3

    @pytest.mark.parametrize("count", [0, 1, 12, 50])
    def test_count_out_of_range(self, count, rng):
        with pytest.raises(DomainError):
            strategies.generate_palette("analogous", count, rng)

    def test_shade_ramp_with_seed(self, rng):
        seed = parse_hex("#3b82f6")
        full = strategies.generate_palette("shade-ramp", 11, rng, seed=seed)
        assert full == [shade.rgb for shade in generate_shades(seed)]
        ends = strategies.generate_palette("shade-ramp", 2, rng, seed=seed)
        assert ends == [full[0], full[-1]]

    def test_monochromatic_seed_sets_hue(self, rng):
        seed = to_oklch("#3b82f6")
        palette = strategies.generate_palette("monochromatic", 5, rng, seed="#3b82f6")
        lightness = (0.85, 0.7125, 0.575, 0.4375, 0.3)
        chroma = (seed.C * 0.7, seed.C, seed.C, seed.C, seed.C * 0.7)
        expected = [
            oklch_to_rgb8(strategies.clamp_oklch(L, C, seed.H))
            for L, C in zip(lightness, chroma)
        ]
        assert len(palette) == 5
        for got, want in zip(palette, expected):
            assert max(abs(a - b) for a, b in zip(got, want)) <= 1

    def test_wrapped_hue_range_takes_short_arc(self, stub_random):
        assert strategies._hue_in(stub_random(0.5), (350.0, 20.0)) == pytest.approx(5.0)
        assert strategies._hue_in(stub_random(0.0), (350.0, 20.0)) == pytest.approx(350.0)

    def test_clamp_oklch(self):
        clamped = strategies.clamp_oklch(1.4, -0.2, 380.0)
        assert clamped.L == c.OKLCH_L_MAX
        assert clamped.C == c.OKLCH_C_MIN
        assert clamped.H == pytest.approx(20.0)


# ============================================================================
# Exact output with a centred random source
# ============================================================================

class TestExactOutput:
    """Stub random sources pin every draw; at 0.5 each symmetric jitter is zero."""

    seed = parse_hex("#3b82f6")

    def _at(self, hue):
        base = to_oklch(self.seed)
        return oklch_to_rgb8(strategies.clamp_oklch(base.L, base.C, hue))

    def test_complementary(self, stub_random):
        H = to_oklch(self.seed).H
        palette = strategies.generate_palette("complementary", 5, stub_random(0.5), seed=self.seed)
        base, opposite = self._at(H), self._at((H + 180.0) % 360.0)
        assert palette == [base, base, base, opposite, opposite]

    def test_triadic_cycles_the_harmony_hues(self, stub_random):
        hues = scheme_hues(to_oklch(self.seed).H, "triadic")
        palette = strategies.generate_palette("triadic", 5, stub_random(0.5), seed=self.seed)
        assert palette == [self._at(hues[i % 3]) for i in range(5)]

    def test_tetradic_cycles_the_harmony_hues(self, stub_random):
        hues = scheme_hues(to_oklch(self.seed).H, "tetradic")
        palette = strategies.generate_palette("tetradic", 6, stub_random(0.5), seed=self.seed)
        assert palette == [self._at(hues[i % 4]) for i in range(6)]

    def test_analogous_spreads_forty_degrees(self, stub_random):
        H = to_oklch(self.seed).H
        palette = strategies.generate_palette("analogous", 5, stub_random(0.5), seed=self.seed)
        assert palette == [self._at(H - 20.0 + 10.0 * i) for i in range(5)]

    def test_recipe_follows_the_weighted_ranges(self, stub_random):
        # Each colour draws (range pick, hue, lightness, chroma). A pick of 0.1
        # lands in the first mexican range (330-350), 0.5 in the third (175-195).
        rng = stub_random(0.1, 0.5, 0.0, 0.5, 0.5, 0.25, 0.5, 0.0)
        palette = strategies.generate_palette("mexican", 4, rng)
        pink = oklch_to_rgb8(strategies.clamp_oklch(0.55, 0.18 + (0.28 - 0.18) * 0.5, 340.0))
        teal = oklch_to_rgb8(strategies.clamp_oklch(0.55 + (0.72 - 0.55) * 0.5, 0.18, 180.0))
        assert palette == [pink, teal, pink, teal]

    def test_recipe_fixed_tone_gate(self, stub_random):
        # Bauhaus rolls below 0.2 give a near-black tone before any hue range.
        rng = stub_random(0.1, 0.5, 0.0, 0.0)
        palette = strategies.generate_palette("bauhaus", 2, rng)
        black = oklch_to_rgb8(strategies.clamp_oklch(0.08, 0.0, 180.0))
        assert palette == [black, black]


# ============================================================================
# Editing
# ============================================================================

class TestRegenerate:
    """Regeneration with locked slots."""

    def test_locked_slots_survive(self, rng):
        palette = strategies.generate_palette("true-random", 5, rng)
        fresh = strategies.regenerate(palette, {0, 3}, "true-random", rng)
        assert len(fresh) == 5
        assert fresh[0] == palette[0]
        assert fresh[3] == palette[3]
        assert fresh != palette

    def test_everything_locked_is_unchanged(self, rng):
        palette = ["#112233", "#445566"]
        assert strategies.regenerate(palette, [0, 1], "meadow", rng) == [
            parse_hex("#112233"), parse_hex("#445566"),
        ]

    def test_lock_index_out_of_range(self, rng):
        with pytest.raises(DomainError):
            strategies.regenerate(["#112233", "#445566"], [2], "meadow", rng)


class TestExtend:
    """Appending a continuation colour."""

    def test_adds_one_colour(self, rng):
        palette = strategies.generate_palette("analogous", 4, rng)
        extended = strategies.extend_palette(palette, rng)
        assert len(extended) == 5
        assert extended[:4] == palette

    def test_single_colour_can_be_extended(self, rng):
        assert len(strategies.extend_palette(["#3b82f6"], rng)) == 2

    def test_empty_palette(self, rng):
        with pytest.raises(DomainError):
            strategies.extend_palette([], rng)

    def test_full_palette(self, rng):
        full = strategies.generate_palette("true-random", c.MAX_PALETTE_SIZE, rng)
        with pytest.raises(DomainError):
            strategies.extend_palette(full, rng)

"""Tests for WCAG luminance, contrast checks and contrast correction."""

import itertools

import pytest

from chromalab.core import contrast
from chromalab.core.conversions import parse_hex, rgb_to_hsl
from chromalab.core.errors import DomainError, UnknownSelectorError
from chromalab.core.types import FixPolicy, RGB8

BLACK = contrast.BLACK
WHITE = contrast.WHITE


class TestRatio:
    """Luminance and ratio arithmetic."""

    def test_luminance_extremes(self):
        assert contrast.relative_luminance(WHITE) == pytest.approx(1.0)
        assert contrast.relative_luminance(BLACK) == 0.0

    def test_black_on_white(self):
        assert contrast.contrast_ratio(BLACK, WHITE) == pytest.approx(21.0)

    def test_ratio_is_symmetric_and_bounded(self):
        values = range(0, 256, 51)
        lattice = [RGB8(*rgb) for rgb in itertools.product(values, repeat=3)]
        for a, b in itertools.product(lattice, repeat=2):
            ratio = contrast.contrast_ratio(a, b)
            assert ratio == contrast.contrast_ratio(b, a), (a, b)
            assert 1.0 <= ratio <= 21.0 + 1e-9
        for a in lattice:
            assert contrast.contrast_ratio(a, a) == pytest.approx(1.0)

    def test_identical_colours(self):
        assert contrast.contrast_ratio("#777777", "#777777") == pytest.approx(1.0)

    def test_classify_thresholds(self):
        result = contrast.classify(4.5)
        assert result.aa_normal and result.aa_large and result.aaa_large
        assert not result.aaa_normal
        assert not contrast.classify(2.9).aa_large

    def test_check_contrast(self):
        result = contrast.check_contrast("#000000", "#ffffff")
        assert result.ratio == pytest.approx(21.0)
        assert result.aaa_normal


class TestFixContrast:
    """HSL lightness search toward a target ratio."""

    @pytest.mark.parametrize("policy", list(FixPolicy))
    def test_dark_background(self, policy):
        fixed = contrast.fix_contrast("#EAEAEA", "#1A1A2E", 4.5, policy)
        assert contrast.contrast_ratio(fixed, "#1A1A2E") >= 4.5

    def test_grey_on_white_reaches_aaa(self):
        fixed = contrast.fix_contrast("#777777", WHITE, 7.0)
        assert contrast.contrast_ratio(fixed, WHITE) >= 7.0
        assert fixed[0] < 0x77

    def test_hue_and_saturation_are_kept(self):
        original = parse_hex("#3b82f6")
        fixed = contrast.fix_contrast(original, WHITE, 7.0)
        h0, s0, _ = rgb_to_hsl(original)
        h1, s1, _ = rgb_to_hsl(fixed)
        assert h1 == pytest.approx(h0, abs=3)
        assert s1 == pytest.approx(s0, abs=0.1)

    def test_unreachable_target_returns_best_candidate(self):
        fixed = contrast.fix_contrast("#808080", "#808080", 21.0)
        assert fixed == BLACK

    @pytest.mark.parametrize("target", [0.5, 22.0])
    def test_target_out_of_range(self, target):
        with pytest.raises(DomainError):
            contrast.fix_contrast("#808080", WHITE, target)

    def test_policies_differ(self):
        fg, ref = parse_hex("#777777"), parse_hex("#808080")
        extreme = contrast.fix_contrast(fg, ref, 2.0, FixPolicy.FROM_EXTREME)
        closest = contrast.fix_contrast(fg, ref, 2.0, FixPolicy.CLOSEST)
        assert extreme == WHITE
        assert closest != WHITE
        assert closest[0] < fg[0]
        assert contrast.contrast_ratio(extreme, ref) >= 2.0
        assert contrast.contrast_ratio(closest, ref) >= 2.0

    def test_closest_leaves_passing_colour_alone(self):
        fg = parse_hex("#1e3a8a")
        assert contrast.fix_contrast(fg, WHITE, 4.5) == fg

    def test_policy_by_name(self):
        assert contrast.fix_contrast("#777777", "#808080", 2.0, "extreme") == WHITE
        with pytest.raises(UnknownSelectorError):
            contrast.fix_contrast("#777777", "#808080", 2.0, "nearest-ish")


class TestReadableText:
    """Label colour selection."""

    def test_light_background_gets_black(self):
        assert contrast.readable_text_colour("#fefce8") == BLACK

    def test_dark_background_gets_white(self):
        assert contrast.readable_text_colour("#1a1a2e") == WHITE
        assert contrast.readable_text_colour(RGB8(59, 130, 246)) == WHITE

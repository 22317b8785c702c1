"""Tests for harmony schemes and the 50-950 shade ramp."""

import pytest

from chromalab.core import config as c
from chromalab.core.conversions import oklch_to_rgb8, parse_hex, to_oklch
from chromalab.core.errors import UnknownSelectorError
from chromalab.core.harmony import generate_harmony, generate_shades, scheme_hues
from chromalab.core.types import HarmonyScheme

BLUE = parse_hex("#3b82f6")
# Low-chroma base keeps every derived colour inside the sRGB gamut
SLATE = parse_hex("#7a7f8a")


class TestSchemeParsing:
    """Loose spelling of scheme names."""

    @pytest.mark.parametrize(
        "name",
        ["split-complementary", "split_complementary", "Split Complementary", "  SPLIT-complementary "],
    )
    def test_separators_and_case(self, name):
        assert HarmonyScheme.parse(name) is HarmonyScheme.SPLIT_COMPLEMENTARY

    def test_enum_member_passes_through(self):
        assert HarmonyScheme.parse(HarmonyScheme.GOLDEN) is HarmonyScheme.GOLDEN

    def test_unknown_scheme(self):
        with pytest.raises(UnknownSelectorError):
            HarmonyScheme.parse("quintic")

    def test_catalogue_has_twelve_schemes(self):
        assert len(HarmonyScheme) == 12
        assert set(s.value for s in HarmonyScheme) == set(c.HARMONY_ANGLES)


class TestGenerateHarmony:
    """Hue rotation in OKLCH."""

    def test_complementary_starts_with_the_base(self):
        result = generate_harmony(BLUE, "complementary")
        assert len(result) == 2
        assert result[0] == BLUE
        assert result[1] != BLUE

    def test_deterministic(self):
        assert generate_harmony("#3b82f6", "triadic") == generate_harmony(BLUE, HarmonyScheme.TRIADIC)

    @pytest.mark.parametrize("scheme", [s for s in HarmonyScheme if s is not HarmonyScheme.MONOCHROMATIC])
    def test_length_and_base_position_follow_the_angle_table(self, scheme):
        angles = c.HARMONY_ANGLES[scheme.value]
        result = generate_harmony(SLATE, scheme)
        assert len(result) == len(angles)
        assert result[angles.index(0.0)] == SLATE

    def test_rotation_keeps_lightness_and_moves_hue(self):
        base = to_oklch(SLATE)
        rotated = to_oklch(generate_harmony(SLATE, "complementary")[1])
        assert rotated.L == pytest.approx(base.L, abs=0.01)
        hue_shift = (rotated.H - base.H) % 360
        assert hue_shift == pytest.approx(180, abs=15)

    def test_analogous_puts_the_base_in_the_middle(self):
        result = generate_harmony(SLATE, "analogous")
        assert result[1] == SLATE

    def test_monochromatic_lightness_ladder(self):
        result = generate_harmony(SLATE, "monochromatic")
        assert len(result) == 5
        assert max(abs(a - b) for a, b in zip(result[2], SLATE)) <= 1
        lightness = [to_oklch(rgb).L for rgb in result]
        base_l = to_oklch(SLATE).L
        for got, target in zip(lightness, (0.85, 0.70, base_l, 0.40, 0.25)):
            assert got == pytest.approx(target, abs=0.01)
        assert lightness[0] > lightness[1] > lightness[3] > lightness[4]

    def test_monochromatic_light_base_halves_middle_chroma(self):
        base = to_oklch("#fde68a")
        assert base.L > 0.7
        middle = generate_harmony("#fde68a", "monochromatic")[2]
        assert middle == oklch_to_rgb8((base.L, base.C * 0.5, base.H))
        assert middle != parse_hex("#fde68a")

    def test_monochromatic_halves_chroma_for_pale_tints(self):
        base_c = to_oklch(BLUE).C
        palest = to_oklch(generate_harmony(BLUE, "monochromatic")[0])
        assert palest.C < base_c * 0.6

    def test_scheme_hues_wrap(self):
        assert scheme_hues(350.0, "complementary") == pytest.approx([350.0, 170.0])
        assert scheme_hues(10.0, "analogous") == pytest.approx([340.0, 10.0, 40.0])


class TestShades:
    """Design-token shade ramp."""

    def test_levels_and_anchors(self):
        shades = generate_shades(BLUE)
        assert [s.level for s in shades] == list(c.SHADE_LEVELS)
        assert shades[0].level == 50
        assert shades[0].lightness == 0.97
        assert shades[-1].lightness == 0.20

    def test_chroma_scaling(self):
        base = to_oklch(BLUE)
        by_level = {s.level: s for s in generate_shades(BLUE)}
        assert by_level[50].chroma == pytest.approx(base.C * 0.3)
        assert by_level[100].chroma == pytest.approx(base.C * 0.3)
        assert by_level[500].chroma == pytest.approx(base.C)
        assert by_level[900].chroma == pytest.approx(base.C * 0.6)
        assert by_level[950].chroma == pytest.approx(base.C * 0.6)
        assert all(s.hue == pytest.approx(base.H) for s in by_level.values())

    def test_ramp_darkens_monotonically(self):
        lightness = [to_oklch(s.rgb).L for s in generate_shades(SLATE)]
        assert lightness == sorted(lightness, reverse=True)

    def test_in_gamut_shades_hit_their_anchor(self):
        for shade in generate_shades(SLATE):
            assert to_oklch(shade.rgb).L == pytest.approx(shade.lightness, abs=0.01)

    def test_shade_exposes_hex(self):
        shade = generate_shades("#000000")[0]
        assert shade.hex == shade.rgb.hex

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/contrast.py

from typing import List, Tuple

from . import config as c
from .conversions import as_rgb8, hsl_to_rgb8, rgb_to_hsl
from .errors import DomainError
from .types import ContrastResult, FixPolicy, RGB8

BLACK = RGB8(0, 0, 0)
WHITE = RGB8(255, 255, 255)


def _wcag_linear(channel: int) -> float:
    v = channel / c.RGB_MAX
    if v <= c.WCAG_LINEAR_TH:
        return v / c.SRGB_SLOPE
    return ((v + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def relative_luminance(rgb) -> float:
    """
    Relative luminance of an sRGB colour.

    Source: https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
    Uses the legacy 0.03928 threshold quoted by WCAG 2.x.
    """
    r, g, b = as_rgb8(rgb)
    return (
        c.LUMA_R * _wcag_linear(r) +
        c.LUMA_G * _wcag_linear(g) +
        c.LUMA_B * _wcag_linear(b)
    )


def contrast_ratio(c1, c2) -> float:
    """
    WCAG contrast ratio between two colours, in [1, 21].

    Formula: (L1 + 0.05) / (L2 + 0.05), where L1 is the lighter luminance.
    """
    y1 = relative_luminance(c1)
    y2 = relative_luminance(c2)
    l1, l2 = (y1, y2) if y1 > y2 else (y2, y1)
    return (l1 + c.WCAG_LUMINANCE_OFFSET) / (l2 + c.WCAG_LUMINANCE_OFFSET)


def classify(ratio: float) -> ContrastResult:
    return ContrastResult(
        ratio=ratio,
        aa_normal=ratio >= c.WCAG_AA_NORMAL,
        aa_large=ratio >= c.WCAG_AA_LARGE,
        aaa_normal=ratio >= c.WCAG_AAA_NORMAL,
        aaa_large=ratio >= c.WCAG_AAA_LARGE,
    )


def check_contrast(fg, bg) -> ContrastResult:
    return classify(contrast_ratio(fg, bg))


def _candidates(h: float, s: float, reference: RGB8) -> List[Tuple[int, RGB8, float]]:
    result = []
    for lightness in range(c.FIX_LIGHTNESS_MIN, c.FIX_LIGHTNESS_MAX + 1):
        rgb = hsl_to_rgb8(h, s, lightness / c.PERCENT)
        result.append((lightness, rgb, contrast_ratio(rgb, reference)))
    return result


def fix_contrast(to_fix, reference, target_ratio: float, policy=FixPolicy.CLOSEST) -> RGB8:
    """
    Adjust the HSL lightness of `to_fix` until it reaches `target_ratio` against `reference`.

    Hue and saturation are kept; lightness is searched over the integers
    0..100. A colour darker than the reference prefers moving toward 100,
    otherwise toward 0.

    CLOSEST returns the satisfying lightness nearest the original one
    (ties go the preferred way) and leaves an already passing colour
    untouched. FROM_EXTREME returns the first satisfying lightness when
    scanning from the preferred end. When no lightness satisfies the
    target the candidate with the highest ratio is returned, so callers
    should re-check the ratio.
    """
    if not (c.WCAG_MIN_RATIO <= target_ratio <= c.WCAG_MAX_RATIO):
        raise DomainError(f"target ratio must lie in [1, 21]: {target_ratio}")
    policy = FixPolicy.parse(policy)
    fg = as_rgb8(to_fix)
    ref = as_rgb8(reference)

    needs_lighter = relative_luminance(fg) < relative_luminance(ref)
    h, s, l_val = rgb_to_hsl(fg)
    original = l_val * c.PERCENT
    candidates = _candidates(h, s, ref)
    passing = [cand for cand in candidates if cand[2] >= target_ratio]

    if not passing:
        return max(candidates, key=lambda cand: cand[2])[1]

    if policy is FixPolicy.FROM_EXTREME:
        ordered = reversed(passing) if needs_lighter else passing
        return next(iter(ordered))[1]

    if contrast_ratio(fg, ref) >= target_ratio:
        return fg

    def displacement(cand):
        lightness = cand[0]
        preferred = lightness >= original if needs_lighter else lightness <= original
        return (abs(lightness - original), 0 if preferred else 1)

    return min(passing, key=displacement)[1]


def readable_text_colour(bg) -> RGB8:
    """Black or white label colour for text drawn on `bg`."""
    if relative_luminance(bg) > c.READABLE_TEXT_LUMINANCE:
        return BLACK
    return WHITE

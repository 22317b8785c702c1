#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/harmony.py

from typing import List

from . import config as c
from .conversions import as_rgb8, oklch_to_rgb8, to_oklch
from .types import HarmonyScheme, OKLCH, RGB8, Shade


def scheme_hues(base_hue: float, scheme) -> List[float]:
    """Hues of `scheme` around `base_hue`, in table order, each in [0, 360)."""
    scheme = HarmonyScheme.parse(scheme)
    return [(base_hue + angle) % c.HUE_MAX for angle in c.HARMONY_ANGLES[scheme.value]]


def _monochromatic(lch: OKLCH) -> List[RGB8]:
    result = []
    for target in c.MONO_LIGHTNESS:
        if target is None:
            target = lch.L
        chroma = lch.C * c.MONO_PASTEL_CHROMA if target > c.MONO_PASTEL_TH else lch.C
        result.append(oklch_to_rgb8((target, chroma, lch.H)))
    return result


def generate_harmony(base, scheme) -> List[RGB8]:
    """
    Derive the colours of a harmony scheme from `base`.

    Hues are rotated in OKLCH keeping lightness and chroma. A zero
    rotation returns the base colour itself so that the palette always
    contains the exact input. Monochromatic varies lightness instead, the
    middle slot keeping the base lightness under the same chroma rule.
    """
    base = as_rgb8(base)
    scheme = HarmonyScheme.parse(scheme)
    lch = to_oklch(base)

    if scheme is HarmonyScheme.MONOCHROMATIC:
        return _monochromatic(lch)

    result = []
    for angle in c.HARMONY_ANGLES[scheme.value]:
        if angle == 0:
            result.append(base)
        else:
            result.append(oklch_to_rgb8((lch.L, lch.C, (lch.H + angle) % c.HUE_MAX)))
    return result


def shade_chroma_scale(level: int) -> float:
    if level <= c.SHADE_LIGHT_MAX_LEVEL:
        return c.SHADE_LIGHT_CHROMA
    if level >= c.SHADE_DARK_MIN_LEVEL:
        return c.SHADE_DARK_CHROMA
    return c.UNIT


def generate_shades(base) -> List[Shade]:
    """Eleven-step ramp (50..950) at fixed OKLCH lightness anchors, base hue kept."""
    lch = to_oklch(as_rgb8(base))
    shades = []
    for level, lightness in c.SHADE_ANCHORS.items():
        chroma = lch.C * shade_chroma_scale(level)
        rgb = oklch_to_rgb8((lightness, chroma, lch.H))
        shades.append(Shade(level, rgb, lightness, chroma, lch.H))
    return shades

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/conversions.py

import math
import numbers
import re
from typing import Tuple

from . import config as c
from .errors import DomainError, InvalidHexError
from .types import LinearRGB, OKLab, OKLCH, RGB8

_HEX_RE = re.compile(r"#?([0-9a-fA-F]{6})")


def round_half_up(v: float) -> int:
    """Round to nearest integer, ties away from zero for non-negative values."""
    return int(math.floor(v + 0.5))


def _clamp01(v: float) -> float:
    return max(0.0, min(c.UNIT, v))


def clamp_channel(v: float) -> int:
    """Round and clamp a float channel into [0, 255]."""
    return max(0, min(c.CHANNEL_MAX, round_half_up(v)))


def parse_hex(text: str) -> RGB8:
    """Parse '#RRGGBB' or 'RRGGBB' (any case) into an RGB8 triple."""
    if not isinstance(text, str):
        raise InvalidHexError(text)
    m = _HEX_RE.fullmatch(text)
    if m is None:
        raise InvalidHexError(text)
    h = m.group(1)
    return RGB8(int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))


def format_hex(rgb) -> str:
    """Format a colour as lowercase '#rrggbb'."""
    r, g, b = as_rgb8(rgb)
    return f"{c.HEX_PREFIX}{r:02x}{g:02x}{b:02x}"


def as_rgb8(value) -> RGB8:
    """Coerce hex text, an RGB8 or a 3-sequence of numbers into an RGB8."""
    if isinstance(value, RGB8):
        return value
    if isinstance(value, str):
        return parse_hex(value)
    try:
        r, g, b = value
    except (TypeError, ValueError):
        raise DomainError(f"expected a hex string or an (r, g, b) triple, got {value!r}") from None
    channels = []
    for ch in (r, g, b):
        if isinstance(ch, bool) or not isinstance(ch, numbers.Real):
            raise DomainError(f"channel value must be numeric, got {ch!r}")
        ch = round_half_up(ch)
        if ch < 0 or ch > c.CHANNEL_MAX:
            raise DomainError(f"channel value out of range [0, 255]: {ch}")
        channels.append(ch)
    return RGB8(*channels)


# ==========================================
# sRGB transfer
# ==========================================

def _srgb_to_linear(channel: int) -> float:
    """Linearize one 8-bit sRGB channel."""
    v = channel / c.RGB_MAX
    if v <= c.SRGB_TO_LINEAR_TH:
        return v / c.SRGB_SLOPE
    return ((v + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def _linear_to_srgb(l_val: float) -> float:
    """Apply sRGB gamma to a linear component; result nominally in [0, 1]."""
    if l_val <= c.LINEAR_TO_SRGB_TH:
        return c.SRGB_SLOPE * l_val
    return c.SRGB_DIVISOR * (l_val ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET


def to_linear(rgb) -> LinearRGB:
    r, g, b = as_rgb8(rgb)
    return LinearRGB(_srgb_to_linear(r), _srgb_to_linear(g), _srgb_to_linear(b))


def to_srgb8(linear) -> RGB8:
    """Encode linear-light RGB back to 8-bit sRGB, rounding then clamping."""
    r, g, b = linear
    return RGB8(
        clamp_channel(_linear_to_srgb(r) * c.RGB_MAX),
        clamp_channel(_linear_to_srgb(g) * c.RGB_MAX),
        clamp_channel(_linear_to_srgb(b) * c.RGB_MAX),
    )


# ==========================================
# OKLab / OKLCH
# ==========================================

def _cbrt(v: float) -> float:
    return v ** c.OKLAB_CUBE_ROOT_EXP if v >= 0 else -((-v) ** c.OKLAB_CUBE_ROOT_EXP)


def _mat3(m, x: float, y: float, z: float) -> Tuple[float, float, float]:
    return (
        m[0][0] * x + m[0][1] * y + m[0][2] * z,
        m[1][0] * x + m[1][1] * y + m[1][2] * z,
        m[2][0] * x + m[2][1] * y + m[2][2] * z,
    )


def linear_to_oklab(linear) -> OKLab:
    r_lin, g_lin, b_lin = linear
    l_val, m, s = _mat3(c.M1_OKLAB, r_lin, g_lin, b_lin)
    return OKLab(*_mat3(c.M2_OKLAB, _cbrt(l_val), _cbrt(m), _cbrt(s)))


def oklab_to_linear(lab) -> LinearRGB:
    """Invert OKLab to linear RGB without clamping."""
    L, a, b = lab
    l_, m_, s_ = _mat3(c.M2_OKLAB_INV, L, a, b)
    return LinearRGB(*_mat3(c.M1_OKLAB_INV, l_ ** 3, m_ ** 3, s_ ** 3))


def to_oklab(rgb) -> OKLab:
    return linear_to_oklab(to_linear(rgb))


def oklab_to_rgb8(lab) -> RGB8:
    return to_srgb8(oklab_to_linear(lab))


def oklab_to_oklch(lab) -> OKLCH:
    L, a, b = lab
    chroma = math.hypot(a, b)
    hue = math.degrees(math.atan2(b, a)) % c.HUE_MAX
    return OKLCH(L, chroma, hue)


def oklch_to_oklab(lch) -> OKLab:
    L, chroma, hue = lch
    a = chroma * math.cos(math.radians(hue))
    b = chroma * math.sin(math.radians(hue))
    return OKLab(L, a, b)


def to_oklch(rgb) -> OKLCH:
    return oklab_to_oklch(to_oklab(rgb))


def oklch_to_rgb8(lch) -> RGB8:
    return oklab_to_rgb8(oklch_to_oklab(lch))


# ==========================================
# HSL
# ==========================================

def rgb_to_hsl(rgb) -> Tuple[float, float, float]:
    """Return (hue degrees, saturation 0..1, lightness 0..1)."""
    r, g, b = as_rgb8(rgb)
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    L = (cmax + cmin) / c.DIV_2
    if delta == 0:
        return (0.0, 0.0, L)
    denom = c.UNIT - abs(c.DIV_2 * L - c.UNIT)
    s = 0.0 if abs(denom) < c.EPS else delta / denom
    if cmax == r_f:
        h = c.HUE_SECTOR * (((g_f - b_f) / delta) % c.HSL_HUE_MOD)
    elif cmax == g_f:
        h = c.HUE_SECTOR * ((b_f - r_f) / delta + 2.0)
    else:
        h = c.HUE_SECTOR * ((r_f - g_f) / delta + 4.0)
    return ((h + c.HUE_MAX) % c.HUE_MAX, s, L)


def hsl_to_rgb8(h: float, s: float, L: float) -> RGB8:
    h = h % c.HUE_MAX
    s = _clamp01(s)
    L = _clamp01(L)
    chroma = (c.UNIT - abs(c.DIV_2 * L - c.UNIT)) * s
    x = chroma * (c.UNIT - abs(((h / c.HUE_SECTOR) % c.DIV_2) - c.UNIT))
    m = L - chroma / c.DIV_2
    sector = int(h // c.HUE_SECTOR)
    r_p, g_p, b_p = (
        (chroma, x, 0.0),
        (x, chroma, 0.0),
        (0.0, chroma, x),
        (0.0, x, chroma),
        (x, 0.0, chroma),
        (chroma, 0.0, x),
    )[min(sector, 5)]
    return RGB8(
        clamp_channel((r_p + m) * c.RGB_MAX),
        clamp_channel((g_p + m) * c.RGB_MAX),
        clamp_channel((b_p + m) * c.RGB_MAX),
    )

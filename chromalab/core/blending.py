#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/blending.py

import math
from typing import List, Sequence, Tuple

import numpy as np

from . import config as c
from .conversions import as_rgb8, clamp_channel, oklab_to_rgb8, round_half_up, to_oklab
from .errors import DomainError
from .types import ColourStop, MeshPoint, RGB8


def _check_fraction(t: float) -> None:
    if not math.isfinite(t):
        raise DomainError(f"interpolation fraction must be finite: {t}")


def lerp_rgb(c1, c2, t: float) -> RGB8:
    """Per-channel interpolation of 8-bit values; t outside [0, 1] extrapolates."""
    _check_fraction(t)
    r1, g1, b1 = as_rgb8(c1)
    r2, g2, b2 = as_rgb8(c2)
    return RGB8(
        clamp_channel(r1 + (r2 - r1) * t),
        clamp_channel(g1 + (g2 - g1) * t),
        clamp_channel(b1 + (b2 - b1) * t),
    )


def lerp_oklab(c1, c2, t: float) -> RGB8:
    """Interpolate in OKLab; clamping happens only on the final RGB8."""
    _check_fraction(t)
    l1, a1, b1 = to_oklab(c1)
    l2, a2, b2 = to_oklab(c2)
    return oklab_to_rgb8((
        l1 + (l2 - l1) * t,
        a1 + (a2 - a1) * t,
        b1 + (b2 - b1) * t,
    ))


def _check_unit_square(x: float, y: float) -> None:
    if not (0.0 <= x <= c.UNIT and 0.0 <= y <= c.UNIT):
        raise DomainError(f"mesh coordinates must lie in [0, 1]: ({x}, {y})")


def _mesh_arrays(points: Sequence[MeshPoint]) -> Tuple[np.ndarray, np.ndarray]:
    if not points:
        raise DomainError("weighted blend needs at least one point")
    coords = []
    colours = []
    for p in points:
        _check_unit_square(p.x, p.y)
        coords.append((p.x, p.y))
        colours.append(as_rgb8(p.colour))
    return np.asarray(coords, dtype=np.float64), np.asarray(colours, dtype=np.float64)


def weighted_blend(points: Sequence[MeshPoint], position: Tuple[float, float]) -> RGB8:
    """
    Inverse-distance blend of mesh anchors at `position`.

    Each anchor weighs 1 / (d^2 + 0.01) where d is its distance to the
    sample; weights are normalised and applied to plain RGB.
    """
    x, y = position
    _check_unit_square(x, y)
    coords, colours = _mesh_arrays(points)
    d2 = (coords[:, 0] - x) ** 2 + (coords[:, 1] - y) ** 2
    w = 1.0 / (d2 + c.MESH_EPSILON)
    mixed = (colours * w[:, None]).sum(axis=0) / w.sum()
    return RGB8(*(clamp_channel(v) for v in mixed))


def _sorted_stops(stops) -> List[ColourStop]:
    result = []
    for stop in stops:
        colour, position = stop
        if not (c.STOP_POSITION_MIN <= position <= c.STOP_POSITION_MAX):
            raise DomainError(f"stop position must lie in [0, 100]: {position}")
        result.append(ColourStop(as_rgb8(colour), float(position)))
    return sorted(result, key=lambda s: s.position)


def gradient(stops, steps: int, space: str = "rgb") -> List[RGB8]:
    """
    Sample a multi-stop gradient at `steps` evenly spaced positions.

    `stops` may be plain colours (spread evenly) or ColourStop pairs.
    Between neighbouring stops the colour is interpolated in `space`,
    either "rgb" or "oklab".
    """
    if space not in ("rgb", "oklab"):
        raise DomainError(f"unsupported interpolation space: {space!r}")
    if steps < 1:
        raise DomainError(f"steps must be at least 1: {steps}")
    stops = list(stops)
    if not stops:
        raise DomainError("gradient needs at least one stop")

    if all(isinstance(s, ColourStop) for s in stops):
        ordered = _sorted_stops(stops)
    else:
        n = len(stops)
        ordered = [
            ColourStop(as_rgb8(s), c.STOP_POSITION_MAX * i / (n - 1) if n > 1 else 0.0)
            for i, s in enumerate(stops)
        ]

    if len(ordered) == 1 or steps == 1:
        return [ordered[0].colour] * steps

    lerp = lerp_oklab if space == "oklab" else lerp_rgb
    start, end = ordered[0].position, ordered[-1].position
    result: List[RGB8] = []
    for i in range(steps):
        pos = start + (end - start) * i / (steps - 1)
        idx = 0
        while idx < len(ordered) - 2 and pos > ordered[idx + 1].position:
            idx += 1
        left, right = ordered[idx], ordered[idx + 1]
        span = right.position - left.position
        t = 0.0 if span <= 0 else (pos - left.position) / span
        result.append(lerp(left.colour, right.colour, max(0.0, min(c.UNIT, t))))
    return result


def pigment_blend(stops, steps_per_gap: int = c.PIGMENT_STEPS_PER_GAP) -> List[ColourStop]:
    """Insert OKLab intermediates between each pair of position-sorted stops."""
    if steps_per_gap < 0:
        raise DomainError(f"steps_per_gap must be non-negative: {steps_per_gap}")
    ordered = _sorted_stops(stops)
    if len(ordered) < 2:
        return ordered

    result: List[ColourStop] = []
    for current, nxt in zip(ordered, ordered[1:]):
        result.append(current)
        for step in range(1, steps_per_gap + 1):
            t = step / (steps_per_gap + 1)
            position = current.position + (nxt.position - current.position) * t
            result.append(ColourStop(
                lerp_oklab(current.colour, nxt.colour, t),
                float(round_half_up(position)),
            ))
    result.append(ordered[-1])
    return result


def corner_blend(corners, u: float, v: float) -> RGB8:
    """Bilinear blend of (top_left, top_right, bottom_left, bottom_right)."""
    tl, tr, bl, br = corners
    top = lerp_rgb(tl, tr, u)
    bottom = lerp_rgb(bl, br, u)
    return lerp_rgb(top, bottom, v)


def initial_mesh_points(grid_size: int) -> List[MeshPoint]:
    """Default anchor grid (2x2 or 3x3), row-major, evenly spaced over the unit square."""
    if grid_size not in c.MESH_GRID_SIZES:
        raise DomainError(f"mesh grid size must be one of {c.MESH_GRID_SIZES}: {grid_size}")
    colours = c.MESH_DEFAULT_COLOURS[grid_size]
    points = []
    idx = 0
    for y in range(grid_size):
        for x in range(grid_size):
            points.append(MeshPoint(
                x / (grid_size - 1),
                y / (grid_size - 1),
                as_rgb8(colours[idx % len(colours)]),
            ))
            idx += 1
    return points


def _pixel_axes(width: int, height: int) -> Tuple[np.ndarray, np.ndarray]:
    if width < 1 or height < 1:
        raise DomainError(f"raster size must be positive: {width}x{height}")
    u = np.arange(width, dtype=np.float64) / (width - 1) if width > 1 else np.zeros(1)
    v = np.arange(height, dtype=np.float64) / (height - 1) if height > 1 else np.zeros(1)
    return np.meshgrid(u, v)


def _round_clamp(arr: np.ndarray) -> np.ndarray:
    return np.clip(np.floor(arr + 0.5), 0, c.CHANNEL_MAX)


def sample_mesh(points: Sequence[MeshPoint], width: int, height: int) -> np.ndarray:
    """Evaluate the inverse-distance field into a (height, width, 3) uint8 raster."""
    coords, colours = _mesh_arrays(points)
    uu, vv = _pixel_axes(width, height)
    dx = uu[..., None] - coords[:, 0]
    dy = vv[..., None] - coords[:, 1]
    w = 1.0 / (dx ** 2 + dy ** 2 + c.MESH_EPSILON)
    mixed = (colours * w[..., None]).sum(axis=-2) / w.sum(axis=-1)[..., None]
    return _round_clamp(mixed).astype(np.uint8)


def sample_corners(corners, width: int, height: int) -> np.ndarray:
    """Evaluate the bilinear corner field into a (height, width, 3) uint8 raster."""
    tl, tr, bl, br = (np.asarray(as_rgb8(x), dtype=np.float64) for x in corners)
    uu, vv = _pixel_axes(width, height)
    u = uu[..., None]
    v = vv[..., None]
    top = _round_clamp(tl + (tr - tl) * u)
    bottom = _round_clamp(bl + (br - bl) * u)
    return _round_clamp(top + (bottom - top) * v).astype(np.uint8)

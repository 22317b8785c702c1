#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/vision.py

from types import MappingProxyType
from typing import NamedTuple

import numpy as np

from . import config as c
from .conversions import as_rgb8, clamp_channel
from .errors import DomainError
from .types import Deficiency, RGB8


class DeficiencyInfo(NamedTuple):
    name: str
    description: str
    severity: str


DEFICIENCY_INFO = MappingProxyType({
    Deficiency(key): DeficiencyInfo(*info) for key, info in c.CB_INFO.items()
})


def _check_severity(severity: float) -> None:
    if not (0.0 <= severity <= c.UNIT):
        raise DomainError(f"severity must lie in [0, 1]: {severity}")


def simulate(colour, deficiency, severity: float = 1.0) -> RGB8:
    """
    Approximate how `colour` appears under a colour vision deficiency.

    The matrix is applied to the plain 8-bit channels; `severity` mixes
    the simulated result with the original before rounding.
    """
    _check_severity(severity)
    deficiency = Deficiency.parse(deficiency)
    r, g, b = as_rgb8(colour)
    m = c.CB_MATRICES[deficiency.value]
    out = []
    for row, orig in zip(m, (r, g, b)):
        sim = row[0] * r + row[1] * g + row[2] * b
        out.append(clamp_channel(orig + (sim - orig) * severity))
    return RGB8(*out)


def simulate_pixels(pixels, deficiency, severity: float = 1.0) -> np.ndarray:
    """
    Vectorised `simulate` over an (..., 3) or (..., 4) uint8 array.

    Alpha, when present, is copied through unchanged.
    """
    _check_severity(severity)
    deficiency = Deficiency.parse(deficiency)
    arr = np.asarray(pixels)
    if arr.ndim < 1 or arr.shape[-1] not in (3, 4):
        raise DomainError(f"pixel array must end in 3 or 4 channels, got shape {arr.shape}")

    rgb = arr[..., :3].astype(np.float64)
    m = c.CB_MATRICES[deficiency.value]
    channels = []
    for i, row in enumerate(m):
        sim = row[0] * rgb[..., 0] + row[1] * rgb[..., 1] + row[2] * rgb[..., 2]
        orig = rgb[..., i]
        channels.append(orig + (sim - orig) * severity)
    mixed = np.clip(np.floor(np.stack(channels, axis=-1) + 0.5), 0, c.CHANNEL_MAX)

    out = np.empty(arr.shape, dtype=np.uint8)
    out[..., :3] = mixed.astype(np.uint8)
    if arr.shape[-1] == 4:
        out[..., 3] = arr[..., 3]
    return out

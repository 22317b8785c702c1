#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/types.py

from enum import Enum
from typing import NamedTuple

from .errors import UnknownSelectorError


class RGB8(NamedTuple):
    """8-bit sRGB triple, every channel in [0, 255]."""
    r: int
    g: int
    b: int

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


class LinearRGB(NamedTuple):
    r: float
    g: float
    b: float


class OKLab(NamedTuple):
    L: float
    a: float
    b: float


class OKLCH(NamedTuple):
    L: float
    C: float
    H: float


class Shade(NamedTuple):
    """One step of a design-token ramp; `lightness` is the anchor before chroma scaling."""
    level: int
    rgb: RGB8
    lightness: float
    chroma: float
    hue: float

    @property
    def hex(self) -> str:
        return self.rgb.hex


class ContrastResult(NamedTuple):
    ratio: float
    aa_normal: bool
    aa_large: bool
    aaa_normal: bool
    aaa_large: bool


class MeshPoint(NamedTuple):
    x: float
    y: float
    colour: RGB8


class ColourStop(NamedTuple):
    colour: RGB8
    position: float


class StrategyInfo(NamedTuple):
    key: str
    name: str
    description: str
    category: str


class _Selector(str, Enum):
    """Closed catalogue whose members can be looked up by loosely spelled names."""

    @classmethod
    def parse(cls, name):
        if isinstance(name, cls):
            return name
        key = "-".join(str(name).strip().lower().replace("_", " ").replace("-", " ").split())
        try:
            return cls(key)
        except ValueError:
            raise UnknownSelectorError(cls._kind(), name) from None

    @classmethod
    def _kind(cls) -> str:
        return cls.__name__.lower()

    def __str__(self) -> str:
        return self.value


class HarmonyScheme(_Selector):
    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    SPLIT_COMPLEMENTARY = "split-complementary"
    TETRADIC = "tetradic"
    MONOCHROMATIC = "monochromatic"
    DOUBLE_COMPLEMENTARY = "double-complementary"
    COMPOUND = "compound"
    PENTADIC = "pentadic"
    ANALOGOUS_ACCENT = "analogous-accent"
    GOLDEN = "golden"
    NEAR_COMPLEMENTARY = "near-complementary"

    @classmethod
    def _kind(cls) -> str:
        return "harmony scheme"


class Deficiency(_Selector):
    NORMAL = "normal"
    PROTANOPIA = "protanopia"
    DEUTERANOPIA = "deuteranopia"
    TRITANOPIA = "tritanopia"
    PROTANOMALY = "protanomaly"
    DEUTERANOMALY = "deuteranomaly"
    TRITANOMALY = "tritanomaly"
    ACHROMATOPSIA = "achromatopsia"
    ACHROMATOMALY = "achromatomaly"

    @classmethod
    def _kind(cls) -> str:
        return "vision deficiency"


class FixPolicy(_Selector):
    CLOSEST = "closest"
    FROM_EXTREME = "extreme"

    @classmethod
    def _kind(cls) -> str:
        return "fix policy"

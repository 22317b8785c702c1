#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/strategies.py

"""
Palette strategy registry.

Every strategy is a function ``(count, rng, seed) -> [RGB8]``. ``rng`` is
any object with a ``random()`` method returning a float in [0, 1), such as
``random.Random(42)``; nothing here touches the global random module.
Mood, era, nature and cultural palettes are data-driven recipes: a list of
probability-gated fixed tones tried first, then weighted hue ranges.
"""

from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, NamedTuple, Optional, Sequence, Tuple

from . import config as c
from .conversions import as_rgb8, oklch_to_rgb8, round_half_up, to_oklch
from .errors import DomainError, UnknownSelectorError
from .harmony import generate_shades, scheme_hues
from .types import HarmonyScheme, OKLCH, RGB8, StrategyInfo

Range = Tuple[float, float]


class FixedTone(NamedTuple):
    until: float                   # cumulative roll threshold
    L: Range
    C: Range
    H: Range = (0.0, 360.0)


class HueRange(NamedTuple):
    h: Range
    weight: float
    L: Optional[Range] = None
    C: Optional[Range] = None


class Recipe(NamedTuple):
    ranges: Tuple[HueRange, ...]
    L: Range
    C: Range
    tones: Tuple[FixedTone, ...] = ()


class Strategy(NamedTuple):
    info: StrategyInfo
    generate: Callable[[int, object, Optional[RGB8]], List[RGB8]]


# ==========================================
# Sampling helpers
# ==========================================

def _uniform(rng, lo: float, hi: float) -> float:
    return lo + (hi - lo) * rng.random()


def _hue_in(rng, h_range: Range) -> float:
    """Sample a hue range; ranges with lo > hi wrap through 0 along the short arc."""
    lo, hi = h_range
    if lo > hi:
        return (lo + (hi + c.HUE_MAX - lo) * rng.random()) % c.HUE_MAX
    return _uniform(rng, lo, hi)


def _choice_index(rng, n: int) -> int:
    return min(int(rng.random() * n), n - 1)


def clamp_oklch(L: float, C: float, H: float) -> OKLCH:
    return OKLCH(
        max(c.OKLCH_L_MIN, min(c.OKLCH_L_MAX, L)),
        max(c.OKLCH_C_MIN, min(c.OKLCH_C_MAX, C)),
        H % c.HUE_MAX,
    )


def _lch(L: float, C: float, H: float) -> RGB8:
    return oklch_to_rgb8(clamp_oklch(L, C, H))


def _base(rng, seed: Optional[RGB8]) -> OKLCH:
    if seed is not None:
        return to_oklch(seed)
    L = _uniform(rng, *c.BASE_L_RANGE)
    C = _uniform(rng, *c.BASE_C_RANGE)
    H = _uniform(rng, *c.BASE_H_RANGE)
    return OKLCH(L, C, H)


def _pick_range(rng, ranges: Sequence[HueRange]) -> HueRange:
    total = sum(r.weight for r in ranges)
    roll = rng.random() * total
    for r in ranges:
        roll -= r.weight
        if roll <= 0:
            return r
    return ranges[-1]


def _from_recipe(recipe: Recipe, rng) -> RGB8:
    if recipe.tones:
        roll = rng.random()
        for tone in recipe.tones:
            if roll < tone.until:
                H = _hue_in(rng, tone.H)
                return _lch(_uniform(rng, *tone.L), _uniform(rng, *tone.C), H)
    chosen = _pick_range(rng, recipe.ranges)
    H = _hue_in(rng, chosen.h)
    L = _uniform(rng, *(chosen.L or recipe.L))
    C = _uniform(rng, *(chosen.C or recipe.C))
    return _lch(L, C, H)


def _recipe_strategy(recipe: Recipe):
    def generate(count: int, rng, seed: Optional[RGB8] = None) -> List[RGB8]:
        return [_from_recipe(recipe, rng) for _ in range(count)]
    return generate


def _single(h: Range, L: Range, C: Range) -> Recipe:
    return Recipe(ranges=(HueRange(h, 1),), L=L, C=C)


# ==========================================
# Random & colour theory
# ==========================================

def _true_random(count: int, rng, seed=None) -> List[RGB8]:
    return [
        RGB8(*(min(int(rng.random() * 256), c.CHANNEL_MAX) for _ in range(3)))
        for _ in range(count)
    ]


def _jittered(rng, base: OKLCH, hue: float, h_jitter: float, l_jitter: float) -> RGB8:
    h = hue + _uniform(rng, -h_jitter, h_jitter) if h_jitter else hue
    L = base.L + _uniform(rng, -l_jitter, l_jitter)
    C = base.C + _uniform(rng, -c.C_JITTER, c.C_JITTER)
    return _lch(L, C, h)


def _analogous(count: int, rng, seed=None) -> List[RGB8]:
    base = _base(rng, seed)
    step = c.ANALOGOUS_SPREAD / (count - 1)
    start = base.H - c.ANALOGOUS_SPREAD / 2
    return [
        _jittered(rng, base, start + step * i, 0.0, c.NARROW_L_JITTER)
        for i in range(count)
    ]


def _complementary(count: int, rng, seed=None) -> List[RGB8]:
    base = _base(rng, seed)
    hue, complement = scheme_hues(base.H, HarmonyScheme.COMPLEMENTARY)
    half = (count + 1) // 2
    return [
        _jittered(rng, base, hue if i < half else complement,
                  c.COMPLEMENT_HUE_JITTER, c.WIDE_L_JITTER)
        for i in range(count)
    ]


def _cycling(scheme: HarmonyScheme):
    def generate(count: int, rng, seed=None) -> List[RGB8]:
        base = _base(rng, seed)
        hues = scheme_hues(base.H, scheme)
        return [
            _jittered(rng, base, hues[i % len(hues)], c.HARMONY_HUE_JITTER, c.WIDE_L_JITTER)
            for i in range(count)
        ]
    return generate


def _monochromatic(count: int, rng, seed=None) -> List[RGB8]:
    if seed is not None:
        lch = to_oklch(seed)
        h, chroma = lch.H, lch.C
    else:
        h = _uniform(rng, 0.0, c.HUE_MAX)
        chroma = _uniform(rng, *c.MONO_STRATEGY_C_RANGE)
    l_min, l_max = c.MONO_STRATEGY_L_RANGE
    step = (l_max - l_min) / (count - 1)
    result = []
    for i in range(count):
        L = l_max - step * i
        edge = L < c.MONO_STRATEGY_EDGE_LOW or L > c.MONO_STRATEGY_EDGE_HIGH
        result.append(_lch(L, chroma * (c.MONO_STRATEGY_EDGE_CHROMA if edge else c.UNIT), h))
    return result


_COHESIVE = (
    _analogous,
    _complementary,
    _cycling(HarmonyScheme.TRIADIC),
    _cycling(HarmonyScheme.SPLIT_COMPLEMENTARY),
    _cycling(HarmonyScheme.TETRADIC),
    _monochromatic,
)


def _random_cohesive(count: int, rng, seed=None) -> List[RGB8]:
    return _COHESIVE[_choice_index(rng, len(_COHESIVE))](count, rng, seed)


def _shade_ramp(count: int, rng, seed=None) -> List[RGB8]:
    base = seed if seed is not None else _lch(*_base(rng, None))
    shades = generate_shades(base)
    last = len(shades) - 1
    return [shades[round_half_up(i * last / (count - 1))].rgb for i in range(count)]


# ==========================================
# Recipes
# ==========================================

RECIPES = MappingProxyType({
    # Moods
    "thermos": _single((15, 55), (0.45, 0.75), (0.08, 0.18)),
    "specimen": _single((170, 220), (0.6, 0.9), (0.03, 0.12)),
    "souvenir": _single((0, 360), (0.75, 0.92), (0.04, 0.10)),
    "curfew": _single((0, 360), (0.15, 0.35), (0.05, 0.15)),
    "telegraph": _single((30, 60), (0.4, 0.7), (0.02, 0.08)),

    # Eras
    "70s": Recipe(
        ranges=(
            HueRange((25, 45), 3),         # burnt orange
            HueRange((75, 100), 2),        # harvest gold, avocado
            HueRange((15, 30), 2),         # rust brown
            HueRange((45, 65), 1),         # mustard
        ),
        L=(0.35, 0.65), C=(0.08, 0.18),
    ),
    "80s": Recipe(
        tones=(FixedTone(0.2, (0.12, 0.22), (0.02, 0.08)),),
        ranges=(
            HueRange((320, 350), 3),
            HueRange((220, 270), 2),
            HueRange((280, 320), 2),
            HueRange((170, 200), 1),
        ),
        L=(0.55, 0.75), C=(0.18, 0.30),
    ),
    "90s": Recipe(
        ranges=(
            HueRange((140, 170), 2),
            HueRange((350, 20), 2),        # burgundy, wraps through red
            HueRange((220, 250), 2),
            HueRange((30, 50), 1),
        ),
        L=(0.30, 0.55), C=(0.05, 0.14),
    ),
    "y2k": Recipe(
        tones=(FixedTone(0.3, (0.7, 0.88), (0.01, 0.04), (200, 280)),),
        ranges=(
            HueRange((180, 200), 2),
            HueRange((310, 340), 2),
            HueRange((260, 290), 1),
            HueRange((50, 70), 1),
        ),
        L=(0.55, 0.75), C=(0.15, 0.28),
    ),

    # Nature
    "ocean-sunset": Recipe(
        ranges=(
            HueRange((15, 40), 2, L=(0.6, 0.75)),
            HueRange((340, 360), 2, L=(0.55, 0.7)),
            HueRange((200, 230), 2, L=(0.35, 0.55)),
            HueRange((260, 290), 1, L=(0.25, 0.45)),
        ),
        L=(0.45, 0.7), C=(0.1, 0.2),
    ),
    "forest-morning": Recipe(
        tones=(FixedTone(0.25, (0.8, 0.92), (0.02, 0.06), (90, 150)),),
        ranges=(
            HueRange((100, 140), 3),
            HueRange((75, 100), 2),
            HueRange((45, 60), 1),
            HueRange((25, 40), 1),
        ),
        L=(0.4, 0.7), C=(0.08, 0.18),
    ),
    "desert-dusk": Recipe(
        ranges=(
            HueRange((15, 35), 3, L=(0.45, 0.65)),
            HueRange((40, 55), 2, L=(0.7, 0.85)),
            HueRange((350, 15), 2, L=(0.55, 0.7)),
            HueRange((280, 310), 1, L=(0.25, 0.4)),
        ),
        L=(0.45, 0.7), C=(0.06, 0.16),
    ),
    "arctic": Recipe(
        tones=(FixedTone(0.3, (0.92, 0.98), (0.005, 0.02), (200, 220)),),
        ranges=(
            HueRange((200, 220), 3),
            HueRange((180, 200), 2),
            HueRange((220, 250), 1),
        ),
        L=(0.7, 0.9), C=(0.02, 0.08),
    ),
    "volcanic": Recipe(
        tones=(
            FixedTone(0.25, (0.12, 0.22), (0.01, 0.03)),
            FixedTone(0.4, (0.5, 0.65), (0.01, 0.03), (20, 40)),
        ),
        ranges=(
            HueRange((0, 20), 2),
            HueRange((20, 45), 2),
            HueRange((45, 60), 1),
        ),
        L=(0.4, 0.65), C=(0.15, 0.25),
    ),
    "meadow": Recipe(
        ranges=(
            HueRange((100, 135), 3),
            HueRange((280, 320), 2),
            HueRange((55, 75), 2),
            HueRange((200, 220), 1),
        ),
        L=(0.55, 0.75), C=(0.12, 0.22),
    ),

    # Art & culture
    "bauhaus": Recipe(
        tones=(
            FixedTone(0.2, (0.08, 0.18), (0.0, 0.02)),
            FixedTone(0.3, (0.92, 0.97), (0.01, 0.025), (80, 100)),
        ),
        ranges=(
            HueRange((15, 35), 3, L=(0.5, 0.62), C=(0.18, 0.26)),
            HueRange((85, 105), 3, L=(0.8, 0.88), C=(0.14, 0.2)),
            HueRange((240, 265), 3, L=(0.4, 0.52), C=(0.12, 0.18)),
            HueRange((35, 55), 1, L=(0.65, 0.75), C=(0.15, 0.2)),
            HueRange((140, 160), 1, L=(0.45, 0.55), C=(0.1, 0.15)),
            HueRange((0, 15), 1, L=(0.45, 0.55), C=(0.2, 0.26)),
        ),
        L=(0.5, 0.7), C=(0.15, 0.22),
    ),
    "art-deco": Recipe(
        tones=(
            FixedTone(0.25, (0.7, 0.8), (0.12, 0.18), (85, 100)),
            FixedTone(0.4, (0.12, 0.2), (0.01, 0.03)),
            FixedTone(0.55, (0.9, 0.96), (0.015, 0.03), (80, 100)),
        ),
        ranges=(
            HueRange((155, 175), 2),
            HueRange((180, 200), 1),
            HueRange((0, 15), 1),
        ),
        L=(0.35, 0.55), C=(0.1, 0.18),
    ),
    "japanese": Recipe(
        tones=(
            FixedTone(0.15, (0.88, 0.95), (0.01, 0.03), (70, 100)),
            FixedTone(0.25, (0.4, 0.55), (0.05, 0.1), (35, 60)),
        ),
        ranges=(
            HueRange((245, 270), 3, L=(0.25, 0.45), C=(0.06, 0.14)),
            HueRange((18, 35), 2, L=(0.45, 0.58), C=(0.14, 0.22)),
            HueRange((0, 18), 1, L=(0.35, 0.48), C=(0.12, 0.18)),
            HueRange((75, 95), 2, L=(0.7, 0.82), C=(0.1, 0.16)),
            HueRange((120, 145), 2, L=(0.35, 0.5), C=(0.06, 0.12)),
            HueRange((290, 320), 1, L=(0.5, 0.7), C=(0.08, 0.14)),
            HueRange((340, 360), 1, L=(0.75, 0.88), C=(0.06, 0.12)),
            HueRange((35, 50), 1, L=(0.55, 0.68), C=(0.12, 0.18)),
        ),
        L=(0.4, 0.6), C=(0.08, 0.15),
    ),
    "scandinavian": Recipe(
        tones=(
            FixedTone(0.35, (0.93, 0.98), (0.005, 0.015), (80, 110)),
            FixedTone(0.55, (0.8, 0.9), (0.005, 0.015), (200, 260)),
            FixedTone(0.75, (0.8, 0.9), (0.02, 0.05)),
            FixedTone(1.0, (0.55, 0.7), (0.04, 0.08), (50, 80)),
        ),
        ranges=(HueRange((50, 80), 1),),
        L=(0.55, 0.7), C=(0.04, 0.08),
    ),
    "mexican": Recipe(
        ranges=(
            HueRange((330, 350), 2),
            HueRange((20, 40), 2),
            HueRange((175, 195), 2),
            HueRange((55, 70), 2),
            HueRange((280, 310), 1),
        ),
        L=(0.55, 0.72), C=(0.18, 0.28),
    ),
})


# ==========================================
# Registry
# ==========================================

_CATALOGUE = (
    ("true-random", "Chaos", "Completely random, no rules", "random", _true_random),
    ("random-cohesive", "Random", "Random cohesive palette", "random", _random_cohesive),
    ("analogous", "Analogous", "Adjacent hues on the colour wheel", "color-theory", _analogous),
    ("complementary", "Complementary", "Opposite hues for high contrast", "color-theory", _complementary),
    ("triadic", "Triadic", "Three evenly spaced hues", "color-theory",
     _cycling(HarmonyScheme.TRIADIC)),
    ("split-complementary", "Split-Comp", "Base + two adjacent to complement", "color-theory",
     _cycling(HarmonyScheme.SPLIT_COMPLEMENTARY)),
    ("tetradic", "Tetradic", "Four evenly spaced hues", "color-theory",
     _cycling(HarmonyScheme.TETRADIC)),
    ("monochromatic", "Mono", "Single hue, varied lightness", "color-theory", _monochromatic),
    ("shade-ramp", "Shade Ramp", "Evenly spaced steps of a 50-950 ramp", "shade", _shade_ramp),
    ("thermos", "Thermos", "Warm, cozy, retro tones", "mood", None),
    ("specimen", "Specimen", "Cool, clinical, preserved", "mood", None),
    ("souvenir", "Souvenir", "Soft, faded pastels", "mood", None),
    ("curfew", "Curfew", "Dark, moody depths", "mood", None),
    ("telegraph", "Telegraph", "Muted vintage sepia", "mood", None),
    ("70s", "1970s", "Earth tones, burnt orange, avocado", "era", None),
    ("80s", "1980s", "Neon pink, electric blue, hot purple", "era", None),
    ("90s", "1990s", "Grunge, forest green, burgundy", "era", None),
    ("y2k", "Y2K", "Chrome, cyan, magenta", "era", None),
    ("ocean-sunset", "Ocean Sunset", "Coral, rose, ocean blue, dusk", "nature", None),
    ("forest-morning", "Forest Morning", "Fresh greens, mist, golden light", "nature", None),
    ("desert-dusk", "Desert Dusk", "Terracotta, sand, dusty rose", "nature", None),
    ("arctic", "Arctic", "Ice blue, white, pale cyan", "nature", None),
    ("volcanic", "Volcanic", "Black, deep red, orange, ash", "nature", None),
    ("meadow", "Meadow", "Grass green, wildflowers, sky blue", "nature", None),
    ("bauhaus", "Bauhaus", "Primary colors, geometric, bold", "cultural", None),
    ("art-deco", "Art Deco", "Gold, black, cream, emerald", "cultural", None),
    ("japanese", "Japanese", "Indigo, vermillion, gold, cream", "cultural", None),
    ("scandinavian", "Scandinavian", "White, pale grey, muted pastels", "cultural", None),
    ("mexican", "Mexican", "Hot pink, orange, turquoise, yellow", "cultural", None),
)

STRATEGIES: Mapping[str, Strategy] = MappingProxyType({
    key: Strategy(
        StrategyInfo(key, name, description, category),
        fn if fn is not None else _recipe_strategy(RECIPES[key]),
    )
    for key, name, description, category, fn in _CATALOGUE
})


def get_strategy(key: str) -> Strategy:
    try:
        return STRATEGIES[str(key).strip().lower()]
    except KeyError:
        raise UnknownSelectorError("palette strategy", key) from None


def strategies_by_category() -> Dict[str, List[StrategyInfo]]:
    """Strategy infos grouped by category, categories and members in catalogue order."""
    result: Dict[str, List[StrategyInfo]] = {category: [] for category in c.CATEGORY_TITLES}
    for strategy in STRATEGIES.values():
        result[strategy.info.category].append(strategy.info)
    return result


def _check_count(count: int) -> None:
    if not (c.MIN_PALETTE_SIZE <= count <= c.MAX_PALETTE_SIZE):
        raise DomainError(
            f"palette size must lie in [{c.MIN_PALETTE_SIZE}, {c.MAX_PALETTE_SIZE}]: {count}"
        )


def generate_palette(strategy: str, count: int, rng, seed=None) -> List[RGB8]:
    """Generate `count` colours with the named strategy, drawing randomness from `rng`."""
    entry = get_strategy(strategy)
    _check_count(count)
    if seed is not None:
        seed = as_rgb8(seed)
    return entry.generate(count, rng, seed)


def regenerate(palette, locked, strategy: str, rng, seed=None) -> List[RGB8]:
    """Replace every unlocked slot of `palette` with a freshly generated colour."""
    current = [as_rgb8(colour) for colour in palette]
    locked = set(locked)
    for idx in locked:
        if not (0 <= idx < len(current)):
            raise DomainError(f"locked index out of range: {idx}")
    fresh = generate_palette(strategy, len(current), rng, seed)
    return [current[i] if i in locked else fresh[i] for i in range(len(current))]


def extend_palette(palette, rng) -> List[RGB8]:
    """Append one colour continuing from the last: hue advances 20-40 degrees, lightness drifts."""
    current = [as_rgb8(colour) for colour in palette]
    if not current:
        raise DomainError("cannot extend an empty palette")
    if len(current) >= c.MAX_PALETTE_SIZE:
        raise DomainError(f"palette already holds the maximum of {c.MAX_PALETTE_SIZE} colours")
    last = to_oklch(current[-1])
    H = last.H + _uniform(rng, *c.EXTEND_HUE_STEP)
    L = last.L + _uniform(rng, -c.EXTEND_L_JITTER, c.EXTEND_L_JITTER)
    return current + [_lch(L, last.C, H)]

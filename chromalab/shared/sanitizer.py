#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/shared/sanitizer.py

import argparse
import re

from chromalab.core import config as c
from chromalab.core.conversions import parse_hex
from chromalab.core.errors import ColourError
from chromalab.core.strategies import get_strategy
from chromalab.core.types import Deficiency, FixPolicy, HarmonyScheme


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _extract_signed_int(value: str) -> int:
    """
    Extracts an integer from a string while preserving a leading minus sign.
    Ignores alphabetical characters mixed in the string.
    """
    if value is None:
        return None
    s = str(value)
    is_negative = s.strip().startswith("-")

    # Regex [0-9] extracts only the numeric digits
    digits_only = "".join(re.findall(r"[0-9]", s))
    if not digits_only:
        return None

    val = int(digits_only)
    return -val if is_negative else val


def _extract_signed_float(value: str) -> float:
    """
    Extracts a floating-point number from a string, preserving the sign and
    keeping only the first decimal point encountered.
    """
    if value is None:
        return None
    s = str(value)
    is_negative = s.strip().startswith("-")

    # Regex [0-9\.] extracts only numeric digits and literal dot (.) characters
    raw_chars = re.findall(r"[0-9\.]", s)
    if not raw_chars:
        return None

    clean_str = ""
    dot_seen = False
    for char in raw_chars:
        if char == '.':
            if not dot_seen:
                clean_str += char
                dot_seen = True
        else:
            clean_str += char

    if not clean_str or clean_str == '.':
        return None

    val = float(clean_str)
    return -val if is_negative else val


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> str:
    """Validator for hex colour arguments; returns lowercase '#rrggbb'."""
    try:
        return parse_hex(str(v).strip()).hex
    except ColourError:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid hex value: '{raw}'") from None


def handle_rgb_triple(v: str) -> str:
    """Validator for 'r,g,b' strings with channels in 0..255."""
    parts = [p for p in re.split(r"[\s,;]+", str(v).strip().strip("()")) if p]
    raw = _sanitize_for_log(v)
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        raise argparse.ArgumentTypeError(f"invalid rgb value: '{raw}'")
    channels = [int(p) for p in parts]
    if any(ch > c.CHANNEL_MAX for ch in channels):
        raise argparse.ArgumentTypeError(f"rgb channels must be 0 to 255: '{raw}'")
    return ",".join(str(ch) for ch in channels)


def handle_selector(parse, kind: str):
    """
    Factory function returning a validator that resolves a catalogue name
    through `parse` and hands back its canonical key.
    """
    def validator(v: str) -> str:
        try:
            return str(parse(v))
        except ColourError:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"unknown {kind}: '{raw}'") from None
    return validator


def handle_string_clean(v: str) -> str:
    """Validator for format names: lowercase letters only."""
    cleaned = "".join(re.findall(r"[a-z]", str(v).replace(" ", "").lower()))
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid string value: '{raw}'")
    return cleaned


def handle_int_range(min_v: int, max_v: int):
    """
    Factory function returning a validator that ensures an integer
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> int:
        val = _extract_signed_int(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


def handle_float_range(min_v: float, max_v: float):
    """
    Factory function returning a validator that ensures a float
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> float:
        val = _extract_signed_float(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid float value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


def _strategy_key(v: str) -> str:
    return get_strategy(v).info.key


# ==========================================
# Central Mapping for Argparse types
# ==========================================

# This dictionary maps custom CLI argument types to their respective parsing functions.
INPUT_HANDLERS = {
    "hex": handle_hex,
    "rgb": handle_rgb_triple,
    "format": handle_string_clean,
    "colorspace": handle_string_clean,
    "scheme": handle_selector(HarmonyScheme.parse, "harmony scheme"),
    "deficiency": handle_selector(Deficiency.parse, "vision deficiency"),
    "policy": handle_selector(FixPolicy.parse, "fix policy"),
    "strategy": handle_selector(_strategy_key, "palette strategy"),

    "ratio": handle_float_range(c.WCAG_MIN_RATIO, c.WCAG_MAX_RATIO),
    "count": handle_int_range(c.MIN_PALETTE_SIZE, c.MAX_PALETTE_SIZE),
    "seed": handle_int_range(0, c.MAX_SEED),
    "steps": handle_int_range(1, c.MAX_STEPS),
    "intensity": handle_int_range(0, 100),
}

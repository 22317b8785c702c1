#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/resolver.py

import argparse
import random
import sys
from contextlib import contextmanager
from typing import Iterator, Tuple

from chromalab.core import config as c
from chromalab.core.errors import ColourError
from chromalab.core.types import RGB8
from chromalab.core.conversions import parse_hex
from chromalab.shared.logger import log


def make_rng(seed=None) -> random.Random:
    """Private random source so a seed reproduces the same output."""
    return random.Random(seed)


def resolve_base(args: argparse.Namespace) -> Tuple[RGB8, str]:
    """Resolve the base colour from -H or -r/-s, returning it with a display title."""
    if getattr(args, "random", False):
        rng = make_rng(getattr(args, "seed", None))
        value = min(int(rng.random() * (c.MAX_DEC + 1)), c.MAX_DEC)
        return parse_hex(f"{value:06x}"), "random"
    if getattr(args, "hex", None):
        return parse_hex(args.hex), "base color"
    fail("a base colour is required: use -H HEX or -r")


def fail(message: str, hint: str = None) -> None:
    log("error", message)
    if hint:
        log("info", hint)
    sys.exit(2)


@contextmanager
def engine_errors() -> Iterator[None]:
    """Turn engine failures into a logged error and exit status 2."""
    try:
        yield
    except ColourError as exc:
        fail(str(exc))

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/command_registry.py

from . import (
    contrast,
    convert,
    gradient,
    palette,
    scheme,
    shades,
    vision,
)

SUBCOMMANDS = {
    'convert': convert,
    'gradient': gradient,
    'scheme': scheme,
    'shades': shades,
    'palette': palette,
    'vision': vision,
    'contrast': contrast,
}

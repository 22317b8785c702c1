#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/shared/preview.py

import re

from chromalab.core import config as c
from chromalab.core.conversions import as_rgb8

_ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')
TITLE_WIDTH = 18


def get_visible_len(s: str) -> int:
    return len(_ANSI_ESCAPE.sub('', s))


def swatch(colour) -> str:
    r, g, b = as_rgb8(colour)
    return f"\033[48;2;{r};{g};{b}m                {c.RESET}"


def print_color_block(colour, title: str = "color", end: str = "\n", note: str = "") -> None:
    rgb = as_rgb8(colour)
    padding = " " * max(0, TITLE_WIDTH - get_visible_len(title))
    suffix = f"  {note}" if note else ""
    print(
        f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   {swatch(rgb)}  "
        f"{c.BOLD_WHITE}{rgb.hex}{c.RESET}{suffix}",
        end=end,
    )


def print_info_line(label: str, value: str) -> None:
    padding = " " * max(0, TITLE_WIDTH - len(label))
    print(f"{c.MSG_BOLD_COLORS['info']}{label}{c.RESET}{padding}{c.BOLD_WHITE}: {value}{c.RESET}")

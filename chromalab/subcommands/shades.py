#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/shades.py

import argparse
import sys

from chromalab.core import config as c
from chromalab.core.harmony import generate_shades
from chromalab.logic.resolver import engine_errors, resolve_base
from chromalab.shared.logger import ChromalabArgumentParser
from chromalab.shared.preview import print_color_block
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor


def handle_shades_command(args: argparse.Namespace) -> None:
    with engine_errors():
        base, title = resolve_base(args)
        shades = generate_shades(base)

    print()
    print_color_block(base, f"{c.BOLD_WHITE}{title}{c.RESET}")
    print()
    for shade in shades:
        label = f"{c.MSG_BOLD_COLORS['info']}{shade.level:>4}{c.RESET}"
        note = f"oklch({shade.lightness:.2f} {shade.chroma:.4f} {shade.hue:.2f}deg)"
        print_color_block(shade.rgb, label, note=note)
    print()


def get_shades_parser() -> argparse.ArgumentParser:
    parser = ChromalabArgumentParser(
        prog="chromalab shades",
        description="chromalab shades: build a 50-950 tint and shade ramp",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        "-H", "--hex",
        type=INPUT_HANDLERS["hex"],
        help="base hex code"
    )
    input_group.add_argument(
        "-r", "--random",
        action="store_true",
        help="use a random base"
    )
    parser.add_argument(
        "-s", "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random"
    )
    return parser


def main() -> None:
    parser = get_shades_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    handle_shades_command(args)


if __name__ == "__main__":
    main()

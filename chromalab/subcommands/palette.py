#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/palette.py

import argparse
import sys

from chromalab.core import config as c
from chromalab.core.contrast import BLACK, readable_text_colour
from chromalab.core.strategies import generate_palette, strategies_by_category
from chromalab.logic.resolver import engine_errors, make_rng
from chromalab.shared.logger import ChromalabArgumentParser
from chromalab.shared.preview import print_color_block
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor


def list_strategies() -> None:
    for category, infos in strategies_by_category().items():
        print(f"{c.MSG_BOLD_COLORS['info']}{c.CATEGORY_TITLES[category]}{c.RESET}")
        for info in infos:
            print(f"  {c.BOLD_WHITE}{info.key:<22}{c.RESET}{info.name}: {info.description}")
        print()


def handle_palette_command(args: argparse.Namespace) -> None:
    if args.list:
        list_strategies()
        return

    with engine_errors():
        colours = generate_palette(args.strategy, args.count, make_rng(args.seed), args.hex)

    print()
    for i, rgb in enumerate(colours):
        text = "dark text" if readable_text_colour(rgb) == BLACK else "light text"
        label = f"{c.MSG_BOLD_COLORS['info']}color{f'{i + 1}':>10}{c.RESET}"
        print_color_block(rgb, label, note=f"{c.MSG_BOLD_COLORS['dim']}{text}{c.RESET}")
    print()


def get_palette_parser() -> argparse.ArgumentParser:
    parser = ChromalabArgumentParser(
        prog="chromalab palette",
        description="chromalab palette: generate palettes from themed strategies",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-st", "--strategy",
        type=INPUT_HANDLERS["strategy"],
        default="random-cohesive",
        help="palette strategy (default: random-cohesive), see --list"
    )
    parser.add_argument(
        "-c", "--count",
        type=INPUT_HANDLERS["count"],
        default=c.DEFAULT_PALETTE_SIZE,
        help=f"number of colours: {c.MIN_PALETTE_SIZE} to {c.MAX_PALETTE_SIZE} "
             f"(default: {c.DEFAULT_PALETTE_SIZE})"
    )
    parser.add_argument(
        "-H", "--hex",
        type=INPUT_HANDLERS["hex"],
        default=None,
        help="seed colour for colour-theory and shade strategies"
    )
    parser.add_argument(
        "-s", "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="list strategies by category and exit"
    )
    return parser


def main() -> None:
    parser = get_palette_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    handle_palette_command(args)


if __name__ == "__main__":
    main()

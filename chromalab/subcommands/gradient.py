#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/gradient.py

import argparse
import sys
from typing import List

from chromalab.core import config as c
from chromalab.core.blending import gradient
from chromalab.core.conversions import parse_hex
from chromalab.logic.resolver import engine_errors, fail, make_rng
from chromalab.shared.logger import ChromalabArgumentParser
from chromalab.shared.preview import print_color_block
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor


def render_gradient(gradient_colors) -> None:
    """Print the generated gradient steps to the terminal."""
    print()
    for i, rgb in enumerate(gradient_colors):
        label = f"{c.MSG_BOLD_COLORS['info']}step{f'{i + 1}':>11}{c.RESET}"
        print_color_block(rgb, label)
    print()


def handle_gradient_command(args: argparse.Namespace) -> None:
    """Resolve the input colours and render the sampled gradient."""
    colors: List = []
    if args.random:
        rng = make_rng(args.seed)
        colors = [
            parse_hex(f"{min(int(rng.random() * (c.MAX_DEC + 1)), c.MAX_DEC):06x}")
            for _ in range(args.count)
        ]
    elif args.hex:
        colors = [parse_hex(h) for h in args.hex]

    if len(colors) < 2:
        fail(
            "at least two hex codes are required for a gradient",
            "use -H HEX multiple times or -r",
        )

    with engine_errors():
        render_gradient(gradient(colors, args.steps, args.colorspace))


def get_gradient_parser() -> argparse.ArgumentParser:
    """Create argument parser for gradient command."""
    parser = ChromalabArgumentParser(
        prog="chromalab gradient",
        description="chromalab gradient: generate color gradients between multiple hex codes",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-H",
        "--hex",
        action="append",
        type=INPUT_HANDLERS["hex"],
        help="use -H HEX multiple times for inputs"
    )
    parser.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="generate gradient from random colors"
    )
    parser.add_argument(
        "-c",
        "--count",
        type=INPUT_HANDLERS["count"],
        default=2,
        help=f"number of random colors for input (default: 2, max: {c.MAX_PALETTE_SIZE})"
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random"
    )
    parser.add_argument(
        "-S",
        "--steps",
        type=INPUT_HANDLERS["steps"],
        default=c.DEFAULT_STEPS,
        help=f"total steps in gradient (default: {c.DEFAULT_STEPS}, max: {c.MAX_STEPS})",
    )
    parser.add_argument(
        "-cs",
        "--colorspace",
        default="oklab",
        type=INPUT_HANDLERS["colorspace"],
        choices=["rgb", "oklab"],
        help="colorspace interpolation (default: oklab)"
    )
    return parser


def main() -> None:
    """Main entry point for gradient command."""
    parser = get_gradient_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    handle_gradient_command(args)


if __name__ == "__main__":
    main()

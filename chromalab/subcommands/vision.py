#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/vision.py

import argparse
import sys

from chromalab.core import config as c
from chromalab.core.types import Deficiency
from chromalab.core.vision import DEFICIENCY_INFO, simulate
from chromalab.logic.resolver import engine_errors, resolve_base
from chromalab.shared.logger import ChromalabArgumentParser
from chromalab.shared.preview import print_color_block
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor


def handle_vision_command(args: argparse.Namespace) -> None:
    if args.all_simulates or not args.deficiency:
        deficiencies = [d for d in Deficiency if d is not Deficiency.NORMAL]
    else:
        deficiencies = [Deficiency.parse(name) for name in args.deficiency]

    factor = max(0, min(100, args.intensity)) / 100.0
    perc_str = f"{args.intensity}%"

    with engine_errors():
        base, title = resolve_base(args)
        simulated = [(d, simulate(base, d, factor)) for d in deficiencies]

    print()
    print_color_block(base, f"{c.BOLD_WHITE}{title}{c.RESET}")
    print()
    for deficiency, rgb in simulated:
        info = DEFICIENCY_INFO[deficiency]
        label = f"{c.MSG_BOLD_COLORS['info']}{deficiency.value[:9]:<9}{perc_str:>6}{c.RESET}"
        print_color_block(rgb, label, note=f"{c.MSG_BOLD_COLORS['dim']}{info.description}{c.RESET}")
    print()


def get_vision_parser() -> argparse.ArgumentParser:
    parser = ChromalabArgumentParser(
        prog="chromalab vision",
        description="chromalab vision: simulate color blindness",
        formatter_class=argparse.RawTextHelpFormatter
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
    parser.add_argument(
        "-i", "--intensity",
        type=INPUT_HANDLERS["intensity"],
        default=100,
        help="simulation intensity: 0 to 100 (default: 100)"
    )
    simulate_group = parser.add_mutually_exclusive_group()
    simulate_group.add_argument(
        '-all', '--all-simulates',
        action="store_true",
        help="show all simulation types (default)"
    )
    simulate_group.add_argument(
        '-d', '--deficiency',
        action="append",
        type=INPUT_HANDLERS["deficiency"],
        help="deficiency to simulate, repeatable: " + ", ".join(d.value for d in Deficiency)
    )
    return parser


def main() -> None:
    parser = get_vision_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    handle_vision_command(args)


if __name__ == "__main__":
    main()

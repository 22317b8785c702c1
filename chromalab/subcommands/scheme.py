#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/scheme.py

import argparse
import sys

from chromalab.core import config as c
from chromalab.core.harmony import generate_harmony
from chromalab.core.types import HarmonyScheme
from chromalab.logic.resolver import engine_errors, fail, resolve_base
from chromalab.shared.logger import ChromalabArgumentParser
from chromalab.shared.preview import print_color_block
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor


def render_scheme(scheme: HarmonyScheme, colours) -> None:
    print(f"{c.MSG_BOLD_COLORS['info']}{scheme.value}{c.RESET}  "
          f"{c.MSG_BOLD_COLORS['dim']}{c.HARMONY_DESCRIPTIONS[scheme.value]}{c.RESET}")
    for i, rgb in enumerate(colours):
        print_color_block(rgb, f"  {i + 1}")
    print()


def handle_scheme_command(args: argparse.Namespace) -> None:
    if args.all_schemes:
        schemes = list(HarmonyScheme)
    elif args.scheme:
        schemes = [HarmonyScheme.parse(name) for name in args.scheme]
    else:
        fail("choose a harmony with -sc SCHEME or -all")

    with engine_errors():
        base, title = resolve_base(args)
        print()
        print_color_block(base, f"{c.BOLD_WHITE}{title}{c.RESET}")
        print()
        for scheme in schemes:
            render_scheme(scheme, generate_harmony(base, scheme))


def get_scheme_parser() -> argparse.ArgumentParser:
    parser = ChromalabArgumentParser(
        prog="chromalab scheme",
        description="chromalab scheme: derive harmony schemes from a base colour",
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
    scheme_group = parser.add_mutually_exclusive_group()
    scheme_group.add_argument(
        "-sc", "--scheme",
        action="append",
        type=INPUT_HANDLERS["scheme"],
        help="harmony scheme, repeatable: " + ", ".join(s.value for s in HarmonyScheme)
    )
    scheme_group.add_argument(
        "-all", "--all-schemes",
        action="store_true",
        help="show every harmony scheme"
    )
    return parser


def main() -> None:
    parser = get_scheme_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    handle_scheme_command(args)


if __name__ == "__main__":
    main()

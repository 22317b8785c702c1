#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/contrast.py

import argparse
import sys

from chromalab.core import config as c
from chromalab.core.contrast import check_contrast, fix_contrast
from chromalab.core.conversions import parse_hex
from chromalab.core.types import ContrastResult
from chromalab.logic.resolver import engine_errors
from chromalab.shared.formatting import format_ratio, pass_fail
from chromalab.shared.logger import ChromalabArgumentParser, log
from chromalab.shared.preview import print_color_block, print_info_line
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor


def render_result(result: ContrastResult) -> None:
    print_info_line("ratio", format_ratio(result.ratio))
    print_info_line("AA", pass_fail(result.aa_normal))
    print_info_line("AA-Large", pass_fail(result.aa_large))
    print_info_line("AAA", pass_fail(result.aaa_normal))
    print_info_line("AAA-Large", pass_fail(result.aaa_large))


def handle_contrast_command(args: argparse.Namespace) -> None:
    fg = parse_hex(args.foreground)
    bg = parse_hex(args.background)

    print()
    print_color_block(fg, f"{c.BOLD_WHITE}foreground{c.RESET}")
    print_color_block(bg, f"{c.BOLD_WHITE}background{c.RESET}")
    print()
    render_result(check_contrast(fg, bg))

    if args.fix is None:
        print()
        return

    with engine_errors():
        fixed = fix_contrast(fg, bg, args.fix, args.policy)
    result = check_contrast(fixed, bg)

    print()
    print_color_block(fixed, f"{c.MSG_BOLD_COLORS['success']}fixed{c.RESET}")
    print()
    render_result(result)
    print()
    if result.ratio < args.fix:
        log(
            "warning",
            f"target {format_ratio(args.fix)} is unreachable by lightness alone, "
            f"best is {format_ratio(result.ratio)}",
        )


def get_contrast_parser() -> argparse.ArgumentParser:
    parser = ChromalabArgumentParser(
        prog="chromalab contrast",
        description="chromalab contrast: check and fix WCAG contrast between two colours",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-fg", "--foreground",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="foreground (text) hex code"
    )
    parser.add_argument(
        "-bg", "--background",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="background hex code"
    )
    parser.add_argument(
        "--fix",
        type=INPUT_HANDLERS["ratio"],
        default=None,
        help=f"adjust the foreground lightness to reach this ratio, e.g. {c.WCAG_AA_NORMAL}"
    )
    parser.add_argument(
        "--policy",
        type=INPUT_HANDLERS["policy"],
        default="closest",
        help="closest: smallest lightness change (default)\n"
             "extreme: first match scanning from black or white"
    )
    return parser


def main() -> None:
    parser = get_contrast_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    handle_contrast_command(args)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/main.py

import argparse
import sys

from chromalab import __version__
from chromalab.core import config as c
from chromalab.core import conversions as conv
from chromalab.core.contrast import BLACK, WHITE, check_contrast, relative_luminance
from chromalab.logic.resolver import engine_errors, resolve_base
from chromalab.subcommands.command_registry import SUBCOMMANDS
from chromalab.shared.formatting import format_colorspace, format_ratio, pass_fail
from chromalab.shared.logger import log, ChromalabArgumentParser
from chromalab.shared.preview import print_color_block, print_info_line
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor


def get_color_parser() -> argparse.ArgumentParser:
    """Create argument parser for the main color (inspector) command."""
    parser = ChromalabArgumentParser(
        prog="chromalab",
        description="chromalab: a perceptual colour engine for the terminal",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"chromalab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )

    # Color Input Group
    color_input_group = parser.add_mutually_exclusive_group()
    color_input_group.add_argument(
        "-H",
        "--hex",
        dest="hex",
        type=INPUT_HANDLERS["hex"],
        help="6-digit hex color code, '#' optional",
    )
    color_input_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="generate a random hex color",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random",
    )

    # Technical Information Flags
    info_group = parser.add_argument_group("technical information flags")
    info_group.add_argument(
        "-all",
        "--all-tech-infos",
        action="store_true",
        help="show all technical information",
    )
    info_group.add_argument(
        "-rgb",
        "--red-green-blue",
        action="store_true",
        dest="rgb",
        help="show RGB values",
    )
    info_group.add_argument(
        "--linear",
        action="store_true",
        dest="linear",
        help="show linear-light sRGB values",
    )
    info_group.add_argument(
        "-hsl",
        "--hsl",
        "--hue-saturation-lightness",
        action="store_true",
        dest="hsl",
        help="show HSL values",
    )
    info_group.add_argument(
        "--oklab",
        action="store_true",
        dest="oklab",
        help="show OKLAB values",
    )
    info_group.add_argument(
        "--oklch",
        action="store_true",
        dest="oklch",
        help="show OKLCH values",
    )
    info_group.add_argument(
        "-l",
        "--luminance",
        action="store_true",
        help="show relative luminance",
    )
    info_group.add_argument(
        "-wcag",
        "--contrast",
        action="store_true",
        help="show WCAG contrast against white and black",
    )

    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def print_color_and_info(rgb, title: str, args: argparse.Namespace) -> None:
    """Print the colour swatch followed by every requested technical line."""
    print()
    print_color_block(rgb, f"{c.BOLD_WHITE}{title}{c.RESET}")

    lines = []
    if args.rgb:
        lines.append(("rgb", format_colorspace("rgb", *rgb)))
    if args.linear:
        lines.append(("linear", format_colorspace("linear", *conv.to_linear(rgb))))
    if args.hsl:
        lines.append(("hsl", format_colorspace("hsl", *conv.rgb_to_hsl(rgb))))
    if args.oklab:
        lines.append(("oklab", format_colorspace("oklab", *conv.to_oklab(rgb))))
    if args.oklch:
        lines.append(("oklch", format_colorspace("oklch", *conv.to_oklch(rgb))))
    if args.luminance:
        lines.append(("luminance", f"{relative_luminance(rgb):.6f}"))
    if args.contrast:
        for name, other in (("white", WHITE), ("black", BLACK)):
            result = check_contrast(rgb, other)
            lines.append((
                f"vs {name}",
                f"{format_ratio(result.ratio)}  AA {pass_fail(result.aa_normal)}"
                f"  AA-Large {pass_fail(result.aa_large)}"
                f"  AAA {pass_fail(result.aaa_normal)}"
                f"  AAA-Large {pass_fail(result.aaa_large)}",
            ))

    if lines:
        print()
    for label, value in lines:
        print_info_line(label, value)
    print()


def handle_color_command(args: argparse.Namespace) -> None:
    """Entry point for the core color command."""
    parser = get_color_parser()

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            try:
                getter = getattr(module, f"get_{name}_parser")
                getter().print_help()
            except AttributeError:
                log("info", f"help for '{name}' not available")
        sys.exit(0)

    # Routing Validation (if a command was passed in the wrong place)
    if args.command:
        if args.command.lower() in SUBCOMMANDS:
            log("error", f"the '{args.command}' command must be the first argument")
        else:
            log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    if not args.hex and not args.random:
        parser.print_help()
        sys.exit(0)

    if args.all_tech_infos:
        for key in c.TECH_INFO_KEYS:
            setattr(args, key, True)

    with engine_errors():
        rgb, title = resolve_base(args)
        print_color_and_info(rgb, title, args)


def main() -> None:
    """Main entry point for chromalab CLI"""
    # Subcommand Routing (Global behavior)
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            ensure_truecolor()
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_color_parser()
    args = parser.parse_args()
    ensure_truecolor()
    handle_color_command(args)


if __name__ == "__main__":
    main()

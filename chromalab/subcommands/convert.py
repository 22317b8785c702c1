#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/convert.py

import argparse
import sys

from chromalab.core import config as c
from chromalab.core import conversions as conv
from chromalab.logic.resolver import engine_errors, fail
from chromalab.shared.formatting import format_colorspace
from chromalab.shared.logger import ChromalabArgumentParser
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor


def _read_value(value: str, from_format: str):
    if from_format == "hex":
        return conv.parse_hex(INPUT_HANDLERS["hex"](value))
    return conv.as_rgb8(tuple(int(p) for p in INPUT_HANDLERS["rgb"](value).split(",")))


def convert_value(value: str, from_format: str, to_format: str) -> str:
    """Convert a textual colour between the supported formats."""
    rgb = _read_value(value, from_format)
    if to_format == "hex":
        return conv.format_hex(rgb)
    if to_format == "rgb":
        return format_colorspace("rgb", *rgb)
    if to_format == "linear":
        return format_colorspace("linear", *conv.to_linear(rgb))
    if to_format == "hsl":
        return format_colorspace("hsl", *conv.rgb_to_hsl(rgb))
    if to_format == "oklab":
        return format_colorspace("oklab", *conv.to_oklab(rgb))
    return format_colorspace("oklch", *conv.to_oklch(rgb))


def handle_convert_command(args: argparse.Namespace) -> None:
    from_format = c.FORMAT_ALIASES.get(args.from_format)
    to_format = c.FORMAT_ALIASES.get(args.to_format)
    if from_format not in c.INPUT_FORMATS:
        fail(f"unsupported input format: '{args.from_format}'", "use -f hex or -f rgb")
    if to_format is None:
        fail(
            f"unsupported output format: '{args.to_format}'",
            f"choose one of: {', '.join(sorted(set(c.FORMAT_ALIASES.values())))}",
        )
    try:
        with engine_errors():
            print(convert_value(args.value, from_format, to_format))
    except argparse.ArgumentTypeError as exc:
        fail(str(exc))


def get_convert_parser() -> argparse.ArgumentParser:
    parser = ChromalabArgumentParser(
        prog="chromalab convert",
        description="chromalab convert: convert a colour between formats",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-v", "--value",
        required=True,
        help="colour value, e.g. '#ff8800' or '255,136,0'",
    )
    parser.add_argument(
        "-f", "--from-format",
        type=INPUT_HANDLERS["format"],
        default="hex",
        help="input format: hex or rgb (default: hex)",
    )
    parser.add_argument(
        "-t", "--to-format",
        type=INPUT_HANDLERS["format"],
        required=True,
        help="output format: hex, rgb, linear, hsl, oklab, oklch",
    )
    return parser


def main() -> None:
    parser = get_convert_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    handle_convert_command(args)


if __name__ == "__main__":
    main()

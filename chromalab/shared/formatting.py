#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/shared/formatting.py


def format_colorspace(fmt: str, *args) -> str:
    if fmt == 'hex':
        return str(args[0])
    elif fmt == 'rgb':
        return f"rgb({args[0]}, {args[1]}, {args[2]})"
    elif fmt == 'linear':
        return f"linear({args[0]:.6f}, {args[1]:.6f}, {args[2]:.6f})"
    elif fmt == 'hsl':
        h, s, l = args
        return f"hsl({h:.2f}deg, {s * 100:.2f}%, {l * 100:.2f}%)"
    elif fmt == 'oklab':
        return f"oklab({args[0]:.4f} {args[1]:.4f} {args[2]:.4f})"
    elif fmt == 'oklch':
        return f"oklch({args[0]:.4f} {args[1]:.4f} {args[2]:.4f}deg)"

    raise ValueError(f"unknown colour format: {fmt!r}")


def format_ratio(ratio: float) -> str:
    return f"{ratio:.2f}:1"


def pass_fail(passed: bool) -> str:
    return "Pass" if passed else "Fail"

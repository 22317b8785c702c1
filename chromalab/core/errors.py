#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/errors.py


class ColourError(ValueError):
    """Base class for every failure raised by the colour engine."""


class InvalidHexError(ColourError):
    """Text is not exactly six hex digits with an optional leading '#'."""

    def __init__(self, text) -> None:
        self.text = text
        super().__init__(f"invalid hex colour: {text!r}")


class UnknownSelectorError(ColourError):
    """A scheme, deficiency, strategy or policy name is not in its catalogue."""

    def __init__(self, kind: str, name) -> None:
        self.kind = kind
        self.name = name
        super().__init__(f"unknown {kind}: {name!r}")


class DomainError(ColourError):
    """A numeric argument lies outside its documented domain."""

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/shared/logger.py

import sys
import argparse

from chromalab.core import config as c

# Everything else (warning, error) goes to stderr
STDOUT_LEVELS = ("info", "success")


def format_message(level: str, message: str) -> str:
    """Render `[level] message` with the tag and body coloured per level."""
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    return f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}"


def log(level: str, message: str) -> None:
    level = str(level).lower()
    stream = sys.stdout if level in STDOUT_LEVELS else sys.stderr
    print(format_message(level, message), file=stream)


class ChromalabArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """Bad command line: one `[error]` line on stderr, then exit status 2."""
        log("error", message)
        sys.exit(2)

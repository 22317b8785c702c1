#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/shared/truecolor.py

import os
import sys
from typing import MutableMapping, Optional

TRUECOLOR = "truecolor"


def ensure_truecolor(environ: Optional[MutableMapping[str, str]] = None,
                     platform: Optional[str] = None) -> bool:
    """
    Mark the terminal as 24-bit capable so swatch escapes render as exact
    RGB. Windows consoles are left alone. Returns True when COLORTERM was
    changed.
    """
    environ = os.environ if environ is None else environ
    platform = sys.platform if platform is None else platform
    if platform == "win32" or environ.get("COLORTERM") == TRUECOLOR:
        return False
    environ["COLORTERM"] = TRUECOLOR
    return True

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettematch/shared/preview.py

import re

from palettematch.core import config as c
from palettematch.core.conversions import hex_to_rgb, normalize_hex

_ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def get_visible_len(s: str) -> int:
    return len(_ANSI_ESCAPE.sub("", s))


def color_block(hex_code: str, title: str = "color", width: int = 16) -> str:
    r, g, b = hex_to_rgb(hex_code)
    padding = " " * max(0, 18 - get_visible_len(title))
    return (
        f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   "
        f"\033[48;2;{r};{g};{b}m{' ' * width}{c.RESET}  "
        f"{c.BOLD_WHITE}#{normalize_hex(hex_code)}{c.RESET}"
    )


def print_color_block(hex_code: str, title: str = "color", end: str = "\n") -> None:
    print(color_block(hex_code, title), end=end)

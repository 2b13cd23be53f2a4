#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettematch/core/difference.py

import math
from typing import Tuple

from . import config as c
from .conversions import hex_to_lab


def delta_e_cie76(
    lab1: Tuple[float, float, float], lab2: Tuple[float, float, float]
) -> float:
    """
    Calculate the CIE76 color difference (ΔE*ab) between two CIE LAB colors.
    This is the plain Euclidean distance in LAB space.

    Source: CIE Publication 15 (1976).
    """
    L1, a1, b1 = lab1
    L2, a2, b2 = lab2
    return math.sqrt((L1 - L2) ** c.EXP_2 + (a1 - a2) ** c.EXP_2 + (b1 - b2) ** c.EXP_2)


def delta_e_hex(hex1: str, hex2: str) -> float:
    """CIE76 distance between two hex colors."""
    return delta_e_cie76(hex_to_lab(hex1), hex_to_lab(hex2))

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettematch/core/conversions.py

import functools
import re
from typing import Tuple

from . import config as c
from .errors import MalformedColorError

_HEX_RE = re.compile(r"#?([0-9A-Fa-f]{6})")


def normalize_hex(hex_code: str) -> str:
    """
    Strip one optional leading '#' and return the six digits uppercased.
    Anything else raises MalformedColorError.
    """
    if not isinstance(hex_code, str):
        raise MalformedColorError(hex_code, "not a string")
    m = _HEX_RE.fullmatch(hex_code)
    if m is None:
        raise MalformedColorError(hex_code)
    return m.group(1).upper()


def hex_to_rgb(hex_code: str) -> Tuple[int, int, int]:
    """Convert hex string to RGB tuple."""
    h = normalize_hex(hex_code)
    return tuple(int(h[i : i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to a '#RRGGBB' string."""
    r_clamped = max(0, min(int(c.RGB_MAX), int(round(r))))
    g_clamped = max(0, min(int(c.RGB_MAX), int(round(g))))
    b_clamped = max(0, min(int(c.RGB_MAX), int(round(b))))
    return f"#{r_clamped:02X}{g_clamped:02X}{b_clamped:02X}"


def _srgb_to_linear(channel: int) -> float:
    """Undo sRGB gamma for one 8-bit channel, result in [0, 1]."""
    v = channel / c.RGB_MAX
    if v > c.SRGB_TO_LINEAR_TH:
        return ((v + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA
    return v / c.SRGB_SLOPE


def rgb_to_xyz(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert RGB to CIE XYZ (D65, scaled to 100)."""
    r_lin = _srgb_to_linear(r) * c.XYZ_SCALING
    g_lin = _srgb_to_linear(g) * c.XYZ_SCALING
    b_lin = _srgb_to_linear(b) * c.XYZ_SCALING
    x = r_lin * c.M_SRGB_XYZ_X[0] + g_lin * c.M_SRGB_XYZ_X[1] + b_lin * c.M_SRGB_XYZ_X[2]
    y = r_lin * c.M_SRGB_XYZ_Y[0] + g_lin * c.M_SRGB_XYZ_Y[1] + b_lin * c.M_SRGB_XYZ_Y[2]
    z = r_lin * c.M_SRGB_XYZ_Z[0] + g_lin * c.M_SRGB_XYZ_Z[1] + b_lin * c.M_SRGB_XYZ_Z[2]
    return x, y, z


def _xyz_f(t: float) -> float:
    """CIE Lab companding function."""
    if t > c.LAB_E:
        return t ** c.LAB_CUBE_ROOT_EXP
    return (c.LAB_K * t) + c.LAB_OFFSET


def xyz_to_lab(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Convert CIE XYZ to LAB against the D65 white point."""
    x_r = _xyz_f(x / c.D65_X)
    y_r = _xyz_f(y / c.D65_Y)
    z_r = _xyz_f(z / c.D65_Z)
    L = (c.LAB_L_MULT * y_r) - c.LAB_L_SUB
    a = c.LAB_A_MULT * (x_r - y_r)
    b = c.LAB_B_MULT * (y_r - z_r)
    return L, a, b


def rgb_to_lab(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Direct RGB to LAB conversion."""
    x, y, z = rgb_to_xyz(r, g, b)
    return xyz_to_lab(x, y, z)


@functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)
def _lab_for_digits(digits: str) -> Tuple[float, float, float]:
    r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    return rgb_to_lab(r, g, b)


def hex_to_lab(hex_code: str) -> Tuple[float, float, float]:
    """Direct hex to LAB conversion, cached on the normalized digits."""
    return _lab_for_digits(normalize_hex(hex_code))

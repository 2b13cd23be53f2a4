#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettematch/core/contrast.py

from . import config as c
from .conversions import hex_to_rgb


def get_yiq_luma(r: int, g: int, b: int) -> float:
    """
    Calculate the YIQ luma of an 8-bit RGB color, in [0, 255].

    Formula: (299R + 587G + 114B) / 1000
    """
    return (c.YIQ_R * r + c.YIQ_G * g + c.YIQ_B * b) / c.YIQ_DIVISOR


def get_contrast_text_color(hex_code: str) -> str:
    """Pick black or white overlay text for the given background."""
    luma = get_yiq_luma(*hex_to_rgb(hex_code))
    return c.TEXT_DARK if luma >= c.YIQ_THRESHOLD else c.TEXT_LIGHT

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettematch/shared/sanitizer.py

import argparse
import re

from palettematch.core import config as c
from palettematch.core.conversions import normalize_hex
from palettematch.core.errors import MalformedColorError


def _sanitize_for_log(value) -> str:
    """Collapse whitespace and newlines so the value fits on one log line."""
    if value is None:
        return ""
    return " ".join(str(value).split())


def _extract_positive_only_int(value: str) -> int:
    if value is None:
        return None
    digits_only = re.sub(r"[^0-9]", "", str(value))
    if not digits_only:
        return None
    return int(digits_only)


def _extract_alpha_only(value: str) -> str:
    if value is None:
        return ""
    return "".join(re.findall(r"[a-z]", str(value).lower()))


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> str:
    """
    Validator for hex CLI arguments. Surrounding spaces are dropped, then the
    value must be exactly six hex digits with an optional leading '#'.
    Returns '#RRGGBB'.
    """
    raw = str(v).strip()
    try:
        return f"#{normalize_hex(raw)}"
    except MalformedColorError:
        raise argparse.ArgumentTypeError(f"invalid hex value: '{_sanitize_for_log(v)}'")


def handle_format(choices):
    """Factory returning a validator for format names, case-insensitive."""
    def validator(v: str) -> str:
        cleaned = _extract_alpha_only(v)
        if cleaned not in choices:
            raise argparse.ArgumentTypeError(
                f"invalid format: '{_sanitize_for_log(v)}' (choose from {', '.join(choices)})"
            )
        return cleaned
    return validator


def handle_positive_int(min_v: int, max_v: int):
    """
    Factory function returning a validator that handles positive integers
    clamped within a given range.
    """
    def validator(v: str) -> int:
        val = _extract_positive_only_int(v)

        if val is None:
            raise argparse.ArgumentTypeError(f"invalid numeric value: '{_sanitize_for_log(v)}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "hex": handle_hex,
    "output_format": handle_format(c.OUTPUT_FORMATS),
    "catalog_format": handle_format(c.CATALOG_FORMATS),
    "workers": handle_positive_int(1, c.MAX_WORKERS),
    "rank": handle_positive_int(1, c.MAX_RANK),
}

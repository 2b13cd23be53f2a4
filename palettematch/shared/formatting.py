#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettematch/shared/formatting.py

import json
from typing import Any


def format_lab(L: float, a: float, b: float) -> str:
    return f"lab({L:.4f} {a:.4f} {b:.4f})"


def format_entry(entry: Any) -> str:
    """'PMS 185 C Red' for ink swatches, just the name for paints."""
    code = getattr(entry, "code", None)
    return f"{code} {entry.name}" if code else entry.name


def format_delta_e(distance: float) -> str:
    return f"ΔE76: {distance:.2f}"


def dump_json(data: Any, fmt: str = "json") -> str:
    if fmt == "prettyjson":
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, ensure_ascii=False)

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettematch/logic/match/renderer.py

from typing import Any, Dict, List, Tuple

from palettematch.core import config as c
from palettematch.shared.formatting import format_delta_e, format_entry, format_lab
from palettematch.shared.preview import color_block
from .resolver import Match


def match_data(
    hex_code: str,
    lab: Tuple[float, float, float],
    text_color: str,
    paint: List[Match],
    ink: List[Match],
) -> Dict[str, Any]:
    """JSON-ready summary of a single-color lookup."""
    def rows(matches: List[Match]) -> List[Dict[str, Any]]:
        return [dict(m.entry.to_dict(), deltaE=round(m.distance, 4)) for m in matches]

    return {
        "hex": hex_code,
        "lab": {"l": lab[0], "a": lab[1], "b": lab[2]},
        "textColor": text_color,
        "paint": rows(paint),
        "pantone": rows(ink),
    }


def render_match_info(
    hex_code: str,
    lab: Tuple[float, float, float],
    text_color: str,
    paint: List[Match],
    ink: List[Match],
) -> str:
    lines = [
        color_block(hex_code, "query"),
        f"{'lab':<18}{c.BOLD_WHITE}:{c.RESET}   {format_lab(*lab)}",
        f"{'text color':<18}{c.BOLD_WHITE}:{c.RESET}   {text_color}",
        "",
    ]

    for label, matches in ((c.PAINT_CATALOG_LABEL, paint), (c.INK_CATALOG_LABEL, ink)):
        for i, m in enumerate(matches):
            title = label if len(matches) == 1 else f"{label} {i + 1}"
            lines.append(
                color_block(m.entry.hex, title)
                + f"  {format_entry(m.entry)}  ({format_delta_e(m.distance)})"
            )
        lines.append("")

    return "\n".join(lines)

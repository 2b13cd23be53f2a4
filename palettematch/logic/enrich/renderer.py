#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettematch/logic/enrich/renderer.py

from typing import List

from palettematch.core import config as c
from palettematch.shared.formatting import dump_json, format_entry
from palettematch.shared.preview import color_block
from .engine import EnrichedColor


def render_enriched(items: List[EnrichedColor], fmt: str = "json") -> str:
    if fmt in ("json", "prettyjson"):
        return dump_json([item.to_dict() for item in items], fmt)

    lines = []
    for i, item in enumerate(items):
        title = str(item.color.name) if item.color.name else f"color {i + 1}"
        lines.append(color_block(item.color.hex, title))
        lines.append(f"{'  text':<18}{c.BOLD_WHITE}:{c.RESET}   {item.text_color}")
        if item.matching_paint is not None:
            lines.append(color_block(item.matching_paint.hex, "  paint") + f"  {format_entry(item.matching_paint)}")
        if item.matching_pantone is not None:
            lines.append(color_block(item.matching_pantone.hex, "  pantone") + f"  {format_entry(item.matching_pantone)}")
        lines.append("")
    return "\n".join(lines)

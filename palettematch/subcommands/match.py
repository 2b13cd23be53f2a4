#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettematch/subcommands/match.py

import argparse
import sys

from palettematch.core import config as c
from palettematch.core.catalog import INK_CATALOG, PAINT_CATALOG
from palettematch.core.contrast import get_contrast_text_color
from palettematch.core.conversions import hex_to_lab
from palettematch.core.errors import PaletteMatchError
from palettematch.logic.match.renderer import match_data, render_match_info
from palettematch.logic.match.resolver import rank_matches
from palettematch.shared.formatting import dump_json
from palettematch.shared.logger import log, PaletteMatchArgumentParser
from palettematch.shared.sanitizer import INPUT_HANDLERS


def handle_match_command(args: argparse.Namespace) -> None:
    hex_code = args.hexcode
    try:
        lab = hex_to_lab(hex_code)
        text_color = get_contrast_text_color(hex_code)
        paint = rank_matches(hex_code, PAINT_CATALOG, args.number)
        ink = rank_matches(hex_code, INK_CATALOG, args.number)
    except PaletteMatchError as e:
        log("error", str(e))
        sys.exit(2)

    if args.json:
        print(dump_json(match_data(hex_code, lab, text_color, paint, ink), "prettyjson"))
        return

    print()
    print(render_match_info(hex_code, lab, text_color, paint, ink))


def get_match_parser() -> argparse.ArgumentParser:
    parser = PaletteMatchArgumentParser(
        prog="palettematch match",
        description="palettematch match: find the nearest paint and pantone swatch for one color",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-H", "--hex",
        dest="hexcode",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="6-digit hex color code, '#' optional",
    )
    parser.add_argument(
        "-n", "--number",
        type=INPUT_HANDLERS["rank"],
        default=c.DEFAULT_RANK,
        help=f"number of closest entries per catalog (min: 1, max: {c.MAX_RANK}, default: {c.DEFAULT_RANK})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the result as JSON",
    )
    return parser


def main() -> None:
    parser = get_match_parser()
    args = parser.parse_args(sys.argv[1:])
    handle_match_command(args)


if __name__ == "__main__":
    main()

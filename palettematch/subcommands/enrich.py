#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettematch/subcommands/enrich.py

import argparse
import json
import sys

from palettematch.core import config as c
from palettematch.core.errors import PaletteMatchError
from palettematch.logic.enrich.engine import enrich_palette
from palettematch.logic.enrich.renderer import render_enriched
from palettematch.logic.enrich.resolver import resolve_catalogs, resolve_palette_input
from palettematch.shared.logger import log, PaletteMatchArgumentParser
from palettematch.shared.sanitizer import INPUT_HANDLERS, _sanitize_for_log


def handle_enrich_command(args: argparse.Namespace) -> None:
    try:
        records = resolve_palette_input(args)
        paint, ink = resolve_catalogs(args)
        items = enrich_palette(records, paint_catalog=paint, ink_catalog=ink, workers=args.workers)
    except json.JSONDecodeError as e:
        log("error", f"invalid JSON input: {e}")
        sys.exit(2)
    except (OSError, UnicodeDecodeError) as e:
        log("error", f"cannot read input: {_sanitize_for_log(e)}")
        sys.exit(2)
    except PaletteMatchError as e:
        log("error", str(e))
        sys.exit(2)

    print(render_enriched(items, args.format))


def get_enrich_parser() -> argparse.ArgumentParser:
    parser = PaletteMatchArgumentParser(
        prog="palettematch enrich",
        description=(
            "palettematch enrich: attach text color, nearest paint and nearest pantone\n"
            "to every color of a palette"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Palette Input Group
    input_group = parser.add_mutually_exclusive_group()
    input_group.add_argument(
        "file",
        nargs="?",
        default=None,
        help="JSON palette (list of {hex, name, description} or {\"palette\": [...]}), '-' for stdin",
    )
    input_group.add_argument(
        "-H", "--hex",
        dest="hex",
        action="append",
        type=INPUT_HANDLERS["hex"],
        help="hex color to enrich instead of a file (repeatable)",
    )
    parser.add_argument(
        "-f", "--format",
        type=INPUT_HANDLERS["output_format"],
        default="json",
        help=f"output format: {' '.join(c.OUTPUT_FORMATS)} (default: json)",
    )
    parser.add_argument(
        "-w", "--workers",
        type=INPUT_HANDLERS["workers"],
        default=None,
        help=f"worker threads for large palettes (max: {c.MAX_WORKERS}, default: sequential)",
    )

    catalog_group = parser.add_argument_group("catalogs")
    catalog_group.add_argument(
        "--paint-catalog",
        default=None,
        help="JSON list of {name, hex} used instead of the bundled paints",
    )
    catalog_group.add_argument(
        "--ink-catalog",
        default=None,
        help="JSON list of {code, name, hex} used instead of the bundled pantone swatches",
    )
    catalog_group.add_argument(
        "--no-paint",
        action="store_true",
        help="skip the paint lookup",
    )
    catalog_group.add_argument(
        "--no-pantone",
        action="store_true",
        help="skip the pantone lookup",
    )
    return parser


def main() -> None:
    parser = get_enrich_parser()
    args = parser.parse_args(sys.argv[1:])
    handle_enrich_command(args)


if __name__ == "__main__":
    main()

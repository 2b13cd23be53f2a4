#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettematch/subcommands/catalog.py

import argparse
import sys

from palettematch.core import config as c
from palettematch.core.catalog import CATALOGS
from palettematch.shared.formatting import dump_json, format_entry
from palettematch.shared.logger import PaletteMatchArgumentParser
from palettematch.shared.preview import print_color_block
from palettematch.shared.sanitizer import INPUT_HANDLERS


def handle_catalog_command(args: argparse.Namespace) -> None:
    entries = CATALOGS[args.name]

    if args.format in ("json", "prettyjson"):
        print(dump_json([e.to_dict() for e in entries], args.format))
        return

    print()
    for entry in entries:
        print_color_block(entry.hex, format_entry(entry))
    print()


def get_catalog_parser() -> argparse.ArgumentParser:
    parser = PaletteMatchArgumentParser(
        prog="palettematch catalog",
        description="palettematch catalog: list a bundled reference catalog",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "name",
        choices=list(CATALOGS),
        help="catalog to list",
    )
    parser.add_argument(
        "-f", "--format",
        type=INPUT_HANDLERS["catalog_format"],
        default="text",
        help=f"output format: {' '.join(c.CATALOG_FORMATS)} (default: text)",
    )
    return parser


def main() -> None:
    parser = get_catalog_parser()
    args = parser.parse_args(sys.argv[1:])
    handle_catalog_command(args)


if __name__ == "__main__":
    main()

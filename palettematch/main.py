#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettematch/main.py

import argparse
import sys

from palettematch import __version__
from palettematch.subcommands.command_registry import SUBCOMMANDS
from palettematch.shared.logger import log, PaletteMatchArgumentParser


def get_root_parser() -> argparse.ArgumentParser:
    """Create the top-level parser that only knows about subcommands."""
    parser = PaletteMatchArgumentParser(
        prog="palettematch",
        description=(
            "palettematch: match palette colors to the nearest paint and pantone swatch\n\n"
            "subcommands:\n"
            "  match     nearest paint / pantone for one hex color\n"
            "  enrich    enrich a whole palette (JSON in, JSON out)\n"
            "  catalog   list a bundled reference catalog\n\n"
            "use 'palettematch <subcommand> --help' for details"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"palettematch {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def main() -> None:
    """Main entry point for palettematch CLI"""
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_root_parser()
    args = parser.parse_args()

    if args.command:
        log("error", f"unrecognized command or argument: '{args.command}'")
        log("info", "use 'palettematch --help' for more information")
        sys.exit(2)

    parser.print_help()


if __name__ == "__main__":
    main()

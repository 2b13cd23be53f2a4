#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettematch/logic/enrich/resolver.py

import argparse
import json
import sys
from typing import Any, List, Optional, Sequence

from palettematch.core import catalog as cat
from palettematch.core.catalog import CatalogEntry
from palettematch.shared.logger import log


def resolve_palette_input(args: argparse.Namespace) -> Any:
    """
    Turn CLI input into raw palette records: a JSON file, stdin ('-') or a
    list of -H values. Raises OSError / json.JSONDecodeError on bad input.
    """
    if args.hex:
        return [
            {"hex": h, "name": f"color {i + 1}", "description": ""}
            for i, h in enumerate(args.hex)
        ]

    if args.file is None:
        log("error", "a palette FILE, '-' for stdin, or at least one -H/--hex is required")
        log("info", "use 'palettematch enrich --help' for more information")
        sys.exit(2)

    if args.file == "-":
        return json.load(sys.stdin)

    with open(args.file, "r", encoding="utf-8") as fh:
        return json.load(fh)


def resolve_catalogs(
    args: argparse.Namespace,
) -> List[Optional[Sequence[CatalogEntry]]]:
    """Pick the paint and ink catalogs, honoring overrides and --no-* flags."""
    paint = cat.PAINT_CATALOG
    ink = cat.INK_CATALOG

    if getattr(args, "paint_catalog", None):
        paint = cat.load_catalog(args.paint_catalog)
    if getattr(args, "ink_catalog", None):
        ink = cat.load_catalog(args.ink_catalog)

    if getattr(args, "no_paint", False):
        paint = None
    if getattr(args, "no_pantone", False):
        ink = None

    return [paint, ink]

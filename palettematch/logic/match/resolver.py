#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettematch/logic/match/resolver.py

from typing import Any, List, NamedTuple, Sequence

from palettematch.core.catalog import INK_CATALOG, PAINT_CATALOG
from palettematch.core.conversions import hex_to_lab
from palettematch.core.difference import delta_e_cie76
from palettematch.core.errors import InvalidCatalogError


class Match(NamedTuple):
    entry: Any
    distance: float


def _require_entries(catalog: Sequence[Any]) -> None:
    if catalog is None or len(catalog) == 0:
        raise InvalidCatalogError("cannot match against an empty catalog")


def find_closest(hex_code: str, catalog: Sequence[Any]) -> Match:
    """
    Return the catalog entry with the smallest CIE76 ΔE to hex_code.

    Entries only need a 'hex' attribute. On equal distances the entry that
    comes first in the catalog wins.
    """
    _require_entries(catalog)
    target = hex_to_lab(hex_code)

    best = catalog[0]
    best_dist = delta_e_cie76(target, hex_to_lab(best.hex))
    for entry in catalog[1:]:
        dist = delta_e_cie76(target, hex_to_lab(entry.hex))
        if dist < best_dist:
            best, best_dist = entry, dist
    return Match(best, best_dist)


def rank_matches(hex_code: str, catalog: Sequence[Any], n: int = 5) -> List[Match]:
    """The n closest entries in ascending ΔE, ties kept in catalog order."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    _require_entries(catalog)
    target = hex_to_lab(hex_code)

    scored = [Match(entry, delta_e_cie76(target, hex_to_lab(entry.hex))) for entry in catalog]
    # sort is stable, so equal distances keep catalog order
    scored.sort(key=lambda m: m.distance)
    return scored[:n]


def find_closest_paint(hex_code: str) -> Match:
    return find_closest(hex_code, PAINT_CATALOG)


def find_closest_pantone(hex_code: str) -> Match:
    return find_closest(hex_code, INK_CATALOG)

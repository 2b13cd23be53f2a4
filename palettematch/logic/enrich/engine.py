#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettematch/logic/enrich/engine.py

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from palettematch.core import config as c
from palettematch.core.catalog import INK_CATALOG, PAINT_CATALOG, CatalogEntry
from palettematch.core.contrast import get_contrast_text_color
from palettematch.core.conversions import normalize_hex
from palettematch.core.errors import MalformedColorError
from palettematch.logic.match.resolver import find_closest

_CORE_FIELDS = ("hex", "name", "description")


@dataclass(frozen=True)
class PaletteColor:
    """A raw palette record. Unknown fields ride along in 'extras'."""

    hex: str
    name: Optional[str] = None
    description: Optional[str] = None
    extras: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        normalize_hex(self.hex)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "PaletteColor":
        if isinstance(record, PaletteColor):
            return record
        if not isinstance(record, Mapping):
            raise MalformedColorError(record, "palette record must be an object")
        if "hex" not in record:
            raise MalformedColorError(None, "palette record has no 'hex' field")
        extras = {k: v for k, v in record.items() if k not in _CORE_FIELDS}
        return cls(
            hex=record["hex"],
            name=record.get("name"),
            description=record.get("description"),
            extras=extras,
        )


@dataclass(frozen=True)
class EnrichedColor:
    color: PaletteColor
    text_color: str
    matching_paint: Optional[CatalogEntry] = None
    matching_pantone: Optional[CatalogEntry] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Wire shape: the original fields plus textColor and the matches.
        name and description are only written when the input had them.
        """
        out = {"hex": self.color.hex}
        if self.color.name is not None:
            out["name"] = self.color.name
        if self.color.description is not None:
            out["description"] = self.color.description
        out.update(self.color.extras)
        out["textColor"] = self.text_color
        if self.matching_paint is not None:
            out["matchingPaint"] = self.matching_paint.to_dict()
        if self.matching_pantone is not None:
            out["matchingPantone"] = self.matching_pantone.to_dict()
        return out


def parse_palette(payload: Any) -> List[PaletteColor]:
    """
    Accept a list of records or a '{"palette": [...]}' envelope and return
    validated PaletteColor values in the same order.
    """
    if isinstance(payload, Mapping):
        if "palette" not in payload:
            raise MalformedColorError(None, "expected a list of colors or a 'palette' field")
        payload = payload["palette"]
    if isinstance(payload, (str, bytes)) or not isinstance(payload, Iterable):
        raise MalformedColorError(payload, "palette must be a list of records")
    return [PaletteColor.from_record(r) for r in payload]


def enrich_color(
    color: PaletteColor,
    paint_catalog: Optional[Sequence[CatalogEntry]] = PAINT_CATALOG,
    ink_catalog: Optional[Sequence[CatalogEntry]] = INK_CATALOG,
) -> EnrichedColor:
    paint = find_closest(color.hex, paint_catalog).entry if paint_catalog is not None else None
    ink = find_closest(color.hex, ink_catalog).entry if ink_catalog is not None else None
    return EnrichedColor(
        color=color,
        text_color=get_contrast_text_color(color.hex),
        matching_paint=paint,
        matching_pantone=ink,
    )


def enrich_palette(
    records: Any,
    paint_catalog: Optional[Sequence[CatalogEntry]] = PAINT_CATALOG,
    ink_catalog: Optional[Sequence[CatalogEntry]] = INK_CATALOG,
    workers: Optional[int] = None,
) -> List[EnrichedColor]:
    """
    Enrich every color with its text color and nearest catalog matches.

    Output order and length match the input. The first failing item (in
    input order) aborts the whole batch. A catalog of None skips that
    lookup; an empty catalog raises InvalidCatalogError.
    """
    colors = parse_palette(records)

    def _one(color: PaletteColor) -> EnrichedColor:
        return enrich_color(color, paint_catalog, ink_catalog)

    if not workers or workers <= 1 or len(colors) <= 1:
        return [_one(color) for color in colors]

    pool_size = min(workers, c.MAX_WORKERS, len(colors))
    with ThreadPoolExecutor(max_workers=pool_size) as pool:
        return list(pool.map(_one, colors))


def enrich_records(records: Any, **kwargs) -> List[Dict[str, Any]]:
    """Same as enrich_palette but returns plain dicts in the wire shape."""
    return [item.to_dict() for item in enrich_palette(records, **kwargs)]

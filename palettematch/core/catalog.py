#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettematch/core/catalog.py

import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from . import config as c
from .conversions import normalize_hex
from .errors import InvalidCatalogError, MalformedColorError
from palettematch.data.paints import GOLDEN_HEAVY_BODY_ACRYLICS
from palettematch.data.pantone import PANTONE_COLORS


@dataclass(frozen=True)
class CatalogEntry:
    """One named reference color. Ink swatches carry a code, paints do not."""

    hex: str
    name: str
    code: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        out = {}
        if self.code is not None:
            out["code"] = self.code
        out["name"] = self.name
        out["hex"] = self.hex
        return out


Catalog = Tuple[CatalogEntry, ...]


def _entry_from_record(record: Mapping[str, Any]) -> CatalogEntry:
    if not isinstance(record, Mapping):
        raise InvalidCatalogError(f"catalog entry must be an object, got {type(record).__name__}")
    hex_code = record.get("hex")
    # validate eagerly so a bad row never reaches a distance comparison
    normalize_hex(hex_code)
    name = record.get("name")
    if not isinstance(name, str) or not name.strip():
        raise InvalidCatalogError(f"catalog entry {hex_code!r} has no name")
    code = record.get("code")
    return CatalogEntry(hex=hex_code, name=name, code=None if code is None else str(code))


def catalog_from_records(records: Iterable[Mapping[str, Any]]) -> Catalog:
    """
    Build a catalog from '{hex, name, code?}' records, keeping their order.
    Raises MalformedColorError for a bad hex and InvalidCatalogError when
    there are no entries.
    """
    entries = tuple(_entry_from_record(r) for r in records)
    if not entries:
        raise InvalidCatalogError()
    return entries


def load_catalog(path: str) -> Catalog:
    """Read a JSON list of catalog records from disk."""
    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, list):
        raise InvalidCatalogError(f"{path}: expected a JSON list of entries")
    try:
        return catalog_from_records(data)
    except InvalidCatalogError as e:
        raise InvalidCatalogError(f"{path}: {e}") from e
    except MalformedColorError as e:
        raise MalformedColorError(e.value, f"{e.reason} (in {path})") from e


PAINT_CATALOG: Catalog = tuple(
    CatalogEntry(hex=hex_code, name=name) for name, hex_code in GOLDEN_HEAVY_BODY_ACRYLICS
)

INK_CATALOG: Catalog = tuple(
    CatalogEntry(hex=hex_code, name=name, code=code) for code, name, hex_code in PANTONE_COLORS
)

CATALOGS = {
    c.PAINT_CATALOG_LABEL: PAINT_CATALOG,
    c.INK_CATALOG_LABEL: INK_CATALOG,
}

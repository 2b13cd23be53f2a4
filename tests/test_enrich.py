import pytest

from palettematch.core.catalog import INK_CATALOG, PAINT_CATALOG, CatalogEntry
from palettematch.core.errors import InvalidCatalogError, MalformedColorError
from palettematch.logic.enrich.engine import (
    EnrichedColor,
    PaletteColor,
    enrich_color,
    enrich_palette,
    enrich_records,
    parse_palette,
)
from palettematch.logic.match.resolver import find_closest

PALETTE = [
    {"hex": "#2E4A2A", "name": "Moss", "description": "forest floor"},
    {"hex": "#D6C4B1", "name": "Sand", "description": "dune"},
    {"hex": "#0033A0", "name": "Deep Sea", "description": "open water"},
]


def test_single_red_scenario():
    out = enrich_records([{"hex": "#FF0000", "name": "Red", "description": "d"}])
    assert len(out) == 1
    item = out[0]
    assert item["hex"] == "#FF0000"
    assert item["name"] == "Red"
    assert item["description"] == "d"
    assert item["textColor"] == "#FFFFFF"
    assert item["matchingPaint"] == find_closest("#FF0000", PAINT_CATALOG).entry.to_dict()
    assert item["matchingPantone"] == find_closest("#FF0000", INK_CATALOG).entry.to_dict()
    assert set(item["matchingPaint"]) == {"name", "hex"}
    assert set(item["matchingPantone"]) == {"code", "name", "hex"}


def test_order_and_length_preserved():
    out = enrich_palette(PALETTE)
    assert len(out) == 3
    assert [item.color.name for item in out] == ["Moss", "Sand", "Deep Sea"]
    assert all(isinstance(item, EnrichedColor) for item in out)


def test_duplicates_are_kept():
    out = enrich_records([PALETTE[0], PALETTE[0]])
    assert len(out) == 2
    assert out[0] == out[1]


def test_empty_palette():
    assert enrich_palette([]) == []


def test_extra_fields_pass_through():
    record = {"hex": "#D6C4B1", "name": "Sand", "description": "dune", "weight": 0.4, "id": "c1"}
    out = enrich_records([record])[0]
    assert out["weight"] == 0.4
    assert out["id"] == "c1"
    # input untouched
    assert "textColor" not in record


def test_missing_name_and_description_stay_absent():
    out = enrich_records([{"hex": "ABCDEF"}])[0]
    assert "name" not in out
    assert "description" not in out
    assert out["hex"] == "ABCDEF"
    assert out["textColor"] == "#000000"


def test_present_but_empty_fields_are_kept():
    out = enrich_records([{"hex": "ABCDEF", "name": "", "description": ""}])[0]
    assert out["name"] == ""
    assert out["description"] == ""


def test_response_envelope_is_accepted():
    out = enrich_records({"palette": PALETTE})
    assert [item["name"] for item in out] == ["Moss", "Sand", "Deep Sea"]


def test_parallel_matches_sequential():
    many = [{"hex": f"#{(i * 2654435761) % 0xFFFFFF:06X}", "name": str(i), "description": ""} for i in range(40)]
    assert enrich_records(many, workers=8) == enrich_records(many)


def test_malformed_item_aborts_batch():
    bad = PALETTE + [{"hex": "#12", "name": "broken", "description": ""}]
    with pytest.raises(MalformedColorError):
        enrich_palette(bad)
    with pytest.raises(MalformedColorError):
        enrich_palette(bad, workers=4)


def test_missing_hex_field():
    with pytest.raises(MalformedColorError):
        parse_palette([{"name": "no hex"}])


@pytest.mark.parametrize("payload", ["#FF0000", 42, {"colors": []}, [["#FF0000"]]])
def test_bad_payload_shapes(payload):
    with pytest.raises(MalformedColorError):
        parse_palette(payload)


def test_empty_catalog_aborts_batch():
    with pytest.raises(InvalidCatalogError):
        enrich_palette(PALETTE, paint_catalog=())


def test_skipped_catalog_leaves_match_absent():
    out = enrich_records(PALETTE, ink_catalog=None)
    assert all("matchingPantone" not in item for item in out)
    assert all("matchingPaint" in item for item in out)


def test_injected_catalog():
    only = (CatalogEntry("#123456", "Only"),)
    item = enrich_color(PaletteColor("#FEDCBA"), paint_catalog=only, ink_catalog=None)
    assert item.matching_paint is only[0]
    assert item.matching_pantone is None
    assert item.text_color == "#000000"


def test_palette_color_validates_eagerly():
    with pytest.raises(MalformedColorError):
        PaletteColor("#12")
    color = PaletteColor("#ABCDEF", "Sky")
    assert PaletteColor.from_record(color) is color

import io
import json
import sys

import pytest

from palettematch import __version__, main as cli
from palettematch.core.catalog import INK_CATALOG, PAINT_CATALOG
from palettematch.logic.match.resolver import find_closest_paint, find_closest_pantone
from palettematch.shared.logger import log


def run_cli(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["palettematch", *argv])
    with pytest.raises(SystemExit) as exc:
        cli.main()
    return exc.value.code


def test_enrich_hex_arguments(monkeypatch, capsys):
    assert run_cli(monkeypatch, "enrich", "-H", "FF0000", "-H", "#FFFF00") == 0
    out = json.loads(capsys.readouterr().out)
    assert [item["hex"] for item in out] == ["#FF0000", "#FFFF00"]
    assert [item["textColor"] for item in out] == ["#FFFFFF", "#000000"]
    assert out[0]["matchingPantone"] == find_closest_pantone("#FF0000").entry.to_dict()


def test_enrich_file(monkeypatch, capsys, tmp_path):
    path = tmp_path / "palette.json"
    path.write_text(json.dumps({"palette": [
        {"hex": "#6E8574", "name": "Sage", "description": "hills"},
        {"hex": "#F9A3A9", "name": "Blush", "description": "sky"},
    ]}))
    assert run_cli(monkeypatch, "enrich", str(path), "-w", "2", "-f", "prettyjson") == 0
    out = json.loads(capsys.readouterr().out)
    assert [item["name"] for item in out] == ["Sage", "Blush"]
    assert out[0]["matchingPantone"]["code"] == "PMS 5625 C"


def test_enrich_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO('[{"hex": "#101820", "name": "Ink", "description": ""}]'))
    assert run_cli(monkeypatch, "enrich", "-", "--no-paint") == 0
    out = json.loads(capsys.readouterr().out)
    assert "matchingPaint" not in out[0]
    assert out[0]["matchingPantone"]["code"] == "PMS Black 6 C"


def test_enrich_text_format(monkeypatch, capsys):
    assert run_cli(monkeypatch, "enrich", "-H", "#C8102E", "--format", "text") == 0
    out = capsys.readouterr().out
    assert "PMS 186 C" in out


def test_enrich_rejects_malformed_hex(monkeypatch, capsys):
    assert run_cli(monkeypatch, "enrich", "-H", "#12") == 2
    assert "invalid hex value" in capsys.readouterr().err


def test_enrich_rejects_malformed_record(monkeypatch, capsys, tmp_path):
    path = tmp_path / "palette.json"
    path.write_text('[{"hex": "#12", "name": "x", "description": ""}]')
    assert run_cli(monkeypatch, "enrich", str(path)) == 2
    assert "malformed color" in capsys.readouterr().err


def test_enrich_rejects_invalid_json(monkeypatch, capsys, tmp_path):
    path = tmp_path / "palette.json"
    path.write_text("{not json")
    assert run_cli(monkeypatch, "enrich", str(path)) == 2
    assert "invalid JSON" in capsys.readouterr().err


def test_enrich_missing_file(monkeypatch, capsys, tmp_path):
    assert run_cli(monkeypatch, "enrich", str(tmp_path / "nope.json")) == 2
    assert "cannot read input" in capsys.readouterr().err


def test_enrich_requires_input(monkeypatch, capsys):
    assert run_cli(monkeypatch, "enrich") == 2


def test_enrich_empty_catalog_file(monkeypatch, capsys, tmp_path):
    path = tmp_path / "paints.json"
    path.write_text("[]")
    assert run_cli(monkeypatch, "enrich", "-H", "#FF0000", "--paint-catalog", str(path)) == 2
    assert "empty" in capsys.readouterr().err


def test_enrich_custom_ink_catalog(monkeypatch, capsys, tmp_path):
    path = tmp_path / "inks.json"
    path.write_text(json.dumps([
        {"code": "K1", "name": "Black", "hex": "#000000"},
        {"code": "W1", "name": "White", "hex": "#FFFFFF"},
    ]))
    assert run_cli(monkeypatch, "enrich", "-H", "#EEEEEE", "--ink-catalog", str(path)) == 0
    out = json.loads(capsys.readouterr().out)
    assert out[0]["matchingPantone"] == {"code": "W1", "name": "White", "hex": "#FFFFFF"}


def test_match_json(monkeypatch, capsys):
    assert run_cli(monkeypatch, "match", "-H", "ff0000", "-n", "3", "--json") == 0
    out = json.loads(capsys.readouterr().out)
    assert out["hex"] == "#FF0000"
    assert out["textColor"] == "#FFFFFF"
    assert len(out["paint"]) == 3
    assert len(out["pantone"]) == 3
    assert out["paint"][0]["name"] == find_closest_paint("#FF0000").entry.name
    assert out["lab"]["l"] == pytest.approx(53.23, abs=0.2)


def test_match_text(monkeypatch, capsys):
    assert run_cli(monkeypatch, "match", "-H", "#E03C31") == 0
    out = capsys.readouterr().out
    assert "PMS 179 C" in out
    assert "ΔE76: 0.00" in out


def test_match_requires_hex(monkeypatch):
    assert run_cli(monkeypatch, "match") == 2


def test_catalog_json(monkeypatch, capsys):
    assert run_cli(monkeypatch, "catalog", "pantone", "-f", "json") == 0
    out = json.loads(capsys.readouterr().out)
    assert len(out) == len(INK_CATALOG)
    assert out[0] == INK_CATALOG[0].to_dict()


def test_catalog_text(monkeypatch, capsys):
    assert run_cli(monkeypatch, "catalog", "paint") == 0
    out = capsys.readouterr().out
    assert PAINT_CATALOG[0].name in out


def test_catalog_unknown_name(monkeypatch):
    assert run_cli(monkeypatch, "catalog", "crayons") == 2


def test_version(monkeypatch, capsys):
    assert run_cli(monkeypatch, "--version") == 0
    assert __version__ in capsys.readouterr().out


def test_unknown_command(monkeypatch, capsys):
    assert run_cli(monkeypatch, "paint") == 2
    assert "unrecognized command" in capsys.readouterr().err


def test_log_streams(capsys):
    log("info", "hello")
    log("error", "boom")
    captured = capsys.readouterr()
    assert "[info]" in captured.out and "hello" in captured.out
    assert "[error]" in captured.err and "boom" in captured.err


def test_enrich_palette_not_utf8(monkeypatch, capsys, tmp_path):
    path = tmp_path / "palette.json"
    path.write_bytes(b'[{"hex": "#FF0000", "name": "\xff\xfe", "description": ""}]')
    assert run_cli(monkeypatch, "enrich", str(path)) == 2
    assert "cannot read input" in capsys.readouterr().err


def test_enrich_catalog_not_utf8(monkeypatch, capsys, tmp_path):
    path = tmp_path / "inks.json"
    path.write_bytes(b'[{"code": "X", "name": "\xff\xfe", "hex": "#000000"}]')
    assert run_cli(monkeypatch, "enrich", "-H", "#FF0000", "--ink-catalog", str(path)) == 2
    assert "cannot read input" in capsys.readouterr().err


def test_enrich_file_and_hex_are_exclusive(monkeypatch, capsys, tmp_path):
    path = tmp_path / "palette.json"
    path.write_text('[{"hex": "#00FF00", "name": "Green", "description": ""}]')
    assert run_cli(monkeypatch, "enrich", str(path), "-H", "#FF0000") == 2
    captured = capsys.readouterr()
    assert "not allowed with" in captured.err
    assert captured.out == ""


def test_enrich_text_format_non_string_name(monkeypatch, capsys, tmp_path):
    path = tmp_path / "palette.json"
    path.write_text('[{"hex": "#C8102E", "name": {"en": "Red"}, "description": ""}]')
    assert run_cli(monkeypatch, "enrich", str(path), "-f", "text") == 0
    out = capsys.readouterr().out
    assert "{'en': 'Red'}" in out
    assert "PMS 186 C" in out

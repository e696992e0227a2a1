"""Tests for the ``python -m panelgen`` entry point."""

from __future__ import annotations

import json

from panelgen.__main__ import main
from panelgen.panel.serialization import model_to_dict
from tests.panel_fixture import make_mixed_panel


def _write(tmp_path, data) -> str:
    path = tmp_path / "panel.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_summary(tmp_path, capsys):
    path = _write(tmp_path, model_to_dict(make_mixed_panel()))
    assert main(["summary", path]) == 0
    out = capsys.readouterr().out
    assert "Panel: 40.30 x 128.50 mm, 1.6 mm thick" in out
    assert "screw tl: (-12.70, 61.25)" in out
    assert "screw br: (12.70, -61.25)" in out
    assert "Cut features: 3, preview-only: 2" in out
    assert "preview toggle_switch" in out


def test_summary_reports_structural_errors(tmp_path, capsys):
    path = _write(tmp_path, {"features": [{"type": "theremin"}]})
    assert main(["summary", path]) == 1
    assert "Unknown feature type 'theremin'" in capsys.readouterr().out


def test_summary_malformed(tmp_path, capsys):
    path = _write(tmp_path, {"vp": 3})
    assert main(["summary", path]) == 1
    assert "Malformed panel document" in capsys.readouterr().out


def test_summary_missing_file(tmp_path, capsys):
    assert main(["summary", str(tmp_path / "nope.json")]) == 1
    assert "cannot read" in capsys.readouterr().out


def test_presets(capsys):
    assert main(["presets"]) == 0
    out = capsys.readouterr().out
    assert "3U Standard Eurorack Size" in out
    assert "42HP: 213.00 mm, 4 holes" in out
    assert "slide_pot: 20, 25, 30, 35, 40, 45" in out


def test_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out

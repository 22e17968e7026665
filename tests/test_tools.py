"""Tests for the command-line tools under examples/ and scripts/."""

import importlib.util
import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).parent.parent


def _load(relative_path: str):
    path = ROOT / relative_path
    module_spec = importlib.util.spec_from_file_location(path.stem, path)
    module = importlib.util.module_from_spec(module_spec)
    sys.modules[module_spec.name] = module
    module_spec.loader.exec_module(module)
    return module


@pytest.fixture(scope="module")
def slash_fingerings():
    return _load("examples/slash_fingerings.py")


@pytest.fixture(scope="module")
def audit_script():
    return _load("scripts/audit_generated_fingerings.py")


class TestSlashFingeringsCli:
    def test_output_file_is_utf8(self, slash_fingerings, tmp_path, monkeypatch) -> None:
        output = tmp_path / "shapes.json"
        monkeypatch.setattr(sys, "argv", ["slash_fingerings.py", "Dø7/C", "CΔ7/E", "-o", str(output)])

        assert slash_fingerings.main() == 0

        raw = output.read_bytes()
        assert "ø7".encode("utf-8") in raw
        data = json.loads(raw.decode("utf-8"))
        assert [entry["label"] for entry in data] == ["Dø7/C", "CΔ7/E"]
        assert data[1]["pattern"] == "M7/4"

    def test_bad_label_sets_exit_code(self, slash_fingerings, tmp_path, monkeypatch) -> None:
        output = tmp_path / "shapes.json"
        monkeypatch.setattr(sys, "argv", ["slash_fingerings.py", "Am7", "-o", str(output)])

        assert slash_fingerings.main() == 1
        assert json.loads(output.read_text(encoding="utf-8")) == [
            {"label": "Am7", "error": "not a slash chord label"}
        ]


class TestAuditScript:
    def test_reports_unplayable_shapes(self, audit_script, tmp_path) -> None:
        entries, empty = audit_script.audit_fingerings()
        c_over_g = next(entry for entry in entries if entry.label == "C/G")
        assert c_over_g.shape == "3-3-2-5-1-0"
        assert c_over_g.tones_ok
        assert not c_over_g.playable
        assert c_over_g.playability_issues == ["too_many_fingers", "fret_range_exceeded"]
        assert not c_over_g.ok

        output = tmp_path / "audit.json"
        audit_script.write_json(output, entries, empty)
        report = json.loads(output.read_text(encoding="utf-8"))
        assert report["schema"] == "slash-fingering-audit/v2"
        assert report["count"] == len(entries)
        assert report["unplayable"] == sum(1 for entry in entries if not entry.playable)
        assert report["unplayable"] >= 1

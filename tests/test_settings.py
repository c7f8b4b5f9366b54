from __future__ import annotations

import json
from pathlib import Path

from invoicer.core.settings import Settings, load_settings, save_settings


def test_missing_file_writes_defaults(tmp_path: Path) -> None:
    p = tmp_path / "cfg" / "settings.json"
    s = load_settings(p)
    assert s == Settings()
    assert json.loads(p.read_text(encoding="utf-8"))["template"] == "compact"


def test_round_trip(tmp_path: Path) -> None:
    p = tmp_path / "settings.json"
    save_settings(Settings(template="extended", export_scale=3, last_export_dir="/tmp/x"), p)
    s = load_settings(p)
    assert s.template == "extended"
    assert s.export_scale == 3
    assert s.last_export_dir == "/tmp/x"


def test_unknown_keys_ignored_and_bad_scale_reset(tmp_path: Path) -> None:
    p = tmp_path / "settings.json"
    p.write_text(json.dumps({"export_scale": "huge", "legacy": 1, "dark_mode": True}), encoding="utf-8")
    s = load_settings(p)
    assert s.export_scale == 2
    assert s.dark_mode is True


def test_corrupt_file_falls_back_without_overwriting(tmp_path: Path) -> None:
    p = tmp_path / "settings.json"
    p.write_text("{not json", encoding="utf-8")
    assert load_settings(p) == Settings()
    assert p.read_text(encoding="utf-8") == "{not json"


def test_default_locations(monkeypatch, tmp_path: Path) -> None:
    from invoicer.core import paths

    monkeypatch.setattr(paths.Path, "home", classmethod(lambda cls: tmp_path))
    assert paths.default_export_dir() == tmp_path / "Documents" / "Invoicer"
    assert paths.settings_path().name == "settings.json"
    monkeypatch.setattr(paths.sys, "frozen", True, raising=False)
    monkeypatch.setattr(paths.sys, "executable", str(tmp_path / "bin" / "invoicer"))
    assert paths.user_writable_dir() == (tmp_path / "bin").resolve()

from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from invoicer.core.model import new_invoice_data
from invoicer.widgets import logo_picker as picker_mod
from invoicer.widgets.invoice_editor import InvoiceEditor
from invoicer.widgets.logo_picker import LogoPicker, pixmap_from_data_uri


pytest.importorskip("pytestqt")


def _png_file(tmp_path: Path) -> Path:
    p = tmp_path / "logo.png"
    Image.new("RGB", (40, 20), "red").save(p, "PNG")
    return p


def test_load_file_sets_logo_and_emits(qtbot, tmp_path: Path) -> None:  # type: ignore[reportUnknownParameterType]
    picker = LogoPicker()
    qtbot.addWidget(picker)
    assert picker.btn_remove.isHidden()
    with qtbot.waitSignal(picker.logoChanged) as blocker:
        assert picker.load_file(_png_file(tmp_path)) is True
    assert blocker.args[0].startswith("data:image/png;base64,")
    assert picker.logo() == blocker.args[0]
    assert picker.btn_upload.text() == "Change"
    assert not picker.btn_remove.isHidden()


def test_unreadable_file_keeps_previous_logo(qtbot, monkeypatch, tmp_path: Path) -> None:  # type: ignore[reportUnknownParameterType]
    warnings: list[str] = []
    monkeypatch.setattr(picker_mod.QMessageBox, "warning", lambda *a, **kw: warnings.append(a[2]))
    picker = LogoPicker()
    qtbot.addWidget(picker)
    picker.load_file(_png_file(tmp_path))
    before = picker.logo()
    assert picker.load_file(tmp_path / "missing.png") is False
    assert picker.logo() == before
    assert len(warnings) == 1


def test_clear_emits_empty(qtbot, tmp_path: Path) -> None:  # type: ignore[reportUnknownParameterType]
    picker = LogoPicker()
    qtbot.addWidget(picker)
    picker.load_file(_png_file(tmp_path))
    with qtbot.waitSignal(picker.logoChanged) as blocker:
        picker.clear()
    assert blocker.args == [""]
    assert picker.logo() == ""


def test_malformed_uri_gives_no_pixmap(qtbot) -> None:  # type: ignore[reportUnknownParameterType]
    assert pixmap_from_data_uri("") is None
    assert pixmap_from_data_uri("data:image/png;base64,@@") is None


def test_editor_commits_logo_on_save(qtbot, tmp_path: Path) -> None:  # type: ignore[reportUnknownParameterType]
    saved: list[str] = []
    ed = InvoiceEditor(new_invoice_data(), on_save=lambda d, logo: saved.append(logo))
    qtbot.addWidget(ed)
    ed.form.logo_picker.load_file(_png_file(tmp_path))
    assert saved == []
    ed.save()
    assert saved and saved[0].startswith("data:image/png;base64,")
    assert ed.paper is not None

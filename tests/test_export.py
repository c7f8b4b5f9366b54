from __future__ import annotations

import io
from pathlib import Path

import pytest
from PIL import Image
from PySide6.QtWidgets import QLabel

from invoicer.core.model import new_invoice_data
from invoicer.core.templates import Template
from invoicer.pdf.export import export_widget_pdf, grab_png
from invoicer.widgets.invoice_paper import PAPER_WIDTH, InvoicePaper


pytest.importorskip("pytestqt")


@pytest.mark.parametrize("scale", [1, 2])
def test_grab_png_size_is_widget_size_times_scale(qtbot, scale: int) -> None:  # type: ignore[reportUnknownParameterType]
    label = QLabel("Voucher INV-1")
    label.setFixedSize(120, 40)
    qtbot.addWidget(label)
    png = grab_png(label, scale=scale)
    with Image.open(io.BytesIO(png)) as img:
        assert img.format == "PNG"
        assert img.size == (120 * scale, 40 * scale)


def test_grab_png_sizes_an_unshown_paper(qtbot) -> None:  # type: ignore[reportUnknownParameterType]
    paper = InvoicePaper(new_invoice_data(), template=Template.EXTENDED)
    qtbot.addWidget(paper)
    with Image.open(io.BytesIO(grab_png(paper, scale=1))) as img:
        assert img.size[0] == PAPER_WIDTH
        # Whole sheet, not a default-sized window
        assert img.size[1] >= paper.sizeHint().height()


def test_export_widget_pdf_writes_file(qtbot, tmp_path: Path) -> None:  # type: ignore[reportUnknownParameterType]
    paper = InvoicePaper(new_invoice_data())
    qtbot.addWidget(paper)
    out = export_widget_pdf(paper, tmp_path / "out" / "invoice-draft.pdf", scale=1)
    assert out.exists()
    assert out.read_bytes().startswith(b"%PDF")

from __future__ import annotations

import io
import math
from pathlib import Path

import pytest
from PIL import Image
from pypdf import PdfReader

from invoicer.pdf.image_pdf import build_image_pdf, fit_to_page


def _a4_size_points() -> tuple[float, float]:
    # ReportLab A4 in points
    return (595.2755905511812, 841.8897637795277)


def _png(width: int, height: int) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (width, height), "white").save(buf, "PNG")
    return buf.getvalue()


def test_fit_to_page_wide_image_fills_width() -> None:
    w, h = fit_to_page(2000, 1000, 210, 297)
    assert w == 210
    assert math.isclose(h, 105)


def test_fit_to_page_tall_image_fills_height() -> None:
    w, h = fit_to_page(1000, 2000, 210, 297)
    assert h == 297
    assert math.isclose(w, 148.5)


def test_fit_to_page_rejects_empty_image() -> None:
    with pytest.raises(ValueError):
        fit_to_page(0, 10, 210, 297)


def test_build_image_pdf_single_a4_page(tmp_path: Path) -> None:
    out = tmp_path / "nested" / "invoice-INV-1.pdf"
    written = build_image_pdf(out, _png(1588, 2000), title="Invoice INV-1")
    assert written == out and out.exists()

    reader = PdfReader(str(out))
    assert len(reader.pages) == 1
    box = reader.pages[0].mediabox
    width = float(box.right - box.left)
    height = float(box.top - box.bottom)
    a4w, a4h = _a4_size_points()
    assert math.isclose(width, a4w, rel_tol=0, abs_tol=1.0)
    assert math.isclose(height, a4h, rel_tol=0, abs_tol=1.0)
    assert reader.metadata.title == "Invoice INV-1"


def test_build_image_pdf_rejects_garbage(tmp_path: Path) -> None:
    with pytest.raises(Exception):
        build_image_pdf(tmp_path / "x.pdf", b"not an image")

from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Tuple

from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen.canvas import Canvas


PAGE_SIZE = A4


def fit_to_page(img_w: float, img_h: float, page_w: float, page_h: float) -> Tuple[float, float]:
    """Scale an image to the page keeping its aspect ratio.

    Wider-than-page images fill the page width, the rest fill the page height.
    """
    if img_w <= 0 or img_h <= 0:
        raise ValueError(f"image has no area: {img_w}x{img_h}")
    ratio = img_w / img_h
    if ratio > page_w / page_h:
        return page_w, page_w / ratio
    return page_h * ratio, page_h


def build_image_pdf(
    out_path: Path | str,
    png_bytes: bytes,
    page_size: Tuple[float, float] = PAGE_SIZE,
    title: str = "Invoice",
    author: str = "Invoicer",
) -> Path:
    """Write a one-page PDF holding the image, anchored at the top-left corner."""
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    image = ImageReader(BytesIO(png_bytes))
    iw, ih = image.getSize()
    page_w, page_h = page_size
    w, h = fit_to_page(float(iw), float(ih), page_w, page_h)

    c = Canvas(str(out), pagesize=page_size)
    c.setTitle(title)
    c.setAuthor(author)
    # ReportLab's origin is bottom-left
    c.drawImage(image, 0, page_h - h, width=w, height=h, mask="auto")
    c.showPage()
    c.save()
    return out

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QBuffer, QByteArray, QIODevice, QPoint, Qt
from PySide6.QtGui import QImage, QPainter
from PySide6.QtWidgets import QWidget

from invoicer.pdf.image_pdf import build_image_pdf

logger = logging.getLogger(__name__)


class CaptureError(RuntimeError):
    """The widget could not be rasterised."""


def grab_png(widget: QWidget, scale: int = 2) -> bytes:
    """Render the widget into a PNG at `scale` device pixels per logical pixel."""
    widget.ensurePolished()
    layout = widget.layout()
    if layout is not None:
        layout.activate()
    # Never capture less than the layout needs, e.g. a sheet that was never shown
    hint = widget.sizeHint()
    if hint.isValid():
        widget.resize(widget.size().expandedTo(hint))
    size = widget.size()
    if size.width() <= 0 or size.height() <= 0:
        raise CaptureError(f"widget has no area: {size.width()}x{size.height()}")
    scale = max(1, int(scale))
    image = QImage(size.width() * scale, size.height() * scale, QImage.Format_ARGB32)
    if image.isNull():
        raise CaptureError(f"cannot allocate {size.width()}x{size.height()} image")
    image.setDevicePixelRatio(scale)
    image.fill(Qt.white)
    painter = QPainter(image)
    try:
        widget.render(painter, QPoint(0, 0))
    finally:
        painter.end()

    data = QByteArray()
    buf = QBuffer(data)
    buf.open(QIODevice.WriteOnly)
    try:
        if not image.save(buf, "PNG"):
            raise CaptureError("PNG encoding failed")
    finally:
        buf.close()
    return bytes(data.data())


def export_widget_pdf(widget: QWidget, out_path: Path | str, scale: int = 2, title: str = "Invoice") -> Path:
    """Rasterise the widget and wrap the image in an A4 PDF.

    Errors from either step propagate unchanged.
    """
    png = grab_png(widget, scale=scale)
    logger.info("Captured %d bytes of PNG for %s", len(png), out_path)
    out = build_image_pdf(out_path, png, title=title)
    logger.info("PDF written: %s", out)
    return out

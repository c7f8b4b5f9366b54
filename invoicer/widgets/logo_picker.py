from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import (
    QWidget,
    QHBoxLayout,
    QVBoxLayout,
    QLabel,
    QPushButton,
    QFileDialog,
    QMessageBox,
)

from invoicer.core.logo import decode_data_uri, read_logo_data_uri

logger = logging.getLogger(__name__)

IMAGE_FILTER = "Images (*.png *.jpg *.jpeg *.gif *.bmp *.webp *.svg)"
PREVIEW_HEIGHT = 64


def pixmap_from_data_uri(uri: str) -> Optional[QPixmap]:
    """Decode a data: URI into a pixmap; None when empty or undecodable."""
    if not uri:
        return None
    try:
        payload = decode_data_uri(uri)
    except ValueError:
        logger.warning("Ignoring malformed logo data URI")
        return None
    pm = QPixmap()
    if not pm.loadFromData(payload):
        return None
    return pm


class LogoPicker(QWidget):
    """Logo preview with Upload/Change and Remove actions.

    Emits logoChanged(str) with the new data: URI ("" after Remove).
    """

    logoChanged = Signal(str)

    def __init__(self, logo: str = "", parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._logo = logo

        v = QVBoxLayout(self)
        v.setContentsMargins(0, 0, 0, 0)
        title = QLabel("Company Logo (editable)")
        title.setObjectName("SectionTitle")
        v.addWidget(title)

        row = QHBoxLayout()
        self.preview = QLabel()
        self.preview.setObjectName("LogoPreview")
        self.preview.setMinimumSize(120, PREVIEW_HEIGHT)
        self.preview.setAlignment(Qt.AlignCenter)
        row.addWidget(self.preview)
        self.btn_upload = QPushButton("Click to upload logo")
        self.btn_remove = QPushButton("Remove")
        row.addWidget(self.btn_upload)
        row.addWidget(self.btn_remove)
        row.addStretch(1)
        v.addLayout(row)

        self.btn_upload.clicked.connect(self._browse)
        self.btn_remove.clicked.connect(self.clear)
        self._render()

    def logo(self) -> str:
        return self._logo

    def load_file(self, path: str | Path) -> bool:
        """Read an image file into the picker. On failure the current logo is kept."""
        try:
            uri = read_logo_data_uri(path)
        except OSError as e:
            logger.exception("Could not read logo %s", path)
            QMessageBox.warning(self, "Logo", f"Could not read the selected image.\n\nDetails: {e}")
            return False
        self._logo = uri
        self._render()
        self.logoChanged.emit(uri)
        return True

    def clear(self) -> None:
        self._logo = ""
        self._render()
        self.logoChanged.emit("")

    def _browse(self) -> None:
        path, _ = QFileDialog.getOpenFileName(self, "Choose logo", "", IMAGE_FILTER)
        if path:
            self.load_file(path)

    def _render(self) -> None:
        pm = pixmap_from_data_uri(self._logo)
        if pm is not None:
            self.preview.setPixmap(pm.scaledToHeight(PREVIEW_HEIGHT, Qt.SmoothTransformation))
            self.btn_upload.setText("Change")
            self.btn_remove.show()
        else:
            self.preview.clear()
            self.preview.setText("No logo")
            self.btn_upload.setText("Click to upload logo")
            self.btn_remove.hide()

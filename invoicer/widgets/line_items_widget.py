from __future__ import annotations

from typing import List, Sequence

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QWidget,
    QHBoxLayout,
    QVBoxLayout,
    QLabel,
    QLineEdit,
    QScrollArea,
    QPushButton,
    QFrame,
)

from invoicer.core.model import ITEM_FIELDS, InvoiceItem

# Column widths in px; 0 = stretch
_COL_WIDTHS = {
    "ac_code": 80,
    "description": 0,
    "quantity": 64,
    "rate": 80,
    "taxable_value": 100,
    "vat_percent": 60,
    "vat": 80,
    "total_amount": 100,
}
_NUMERIC = {"quantity", "rate", "taxable_value", "vat", "total_amount"}
REMOVE_W = 28


class LineItemRow(QWidget):
    """One editable line item row.

    Emits:
      - edited(int, str, str): row index, field name, new text
      - removeRequested(int): row index
    """

    edited = Signal(int, str, str)
    removeRequested = Signal(int)

    def __init__(self, index: int, item: InvoiceItem, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.index = index

        self.hbox = QHBoxLayout()
        self.hbox.setContentsMargins(0, 0, 0, 0)
        self.hbox.setSpacing(6)

        self.edits: dict[str, QLineEdit] = {}
        for name, label in ITEM_FIELDS:
            ed = QLineEdit(getattr(item, name))
            ed.setPlaceholderText(label)
            ed.setObjectName(f"item_{name}")
            if name in _NUMERIC:
                ed.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
            width = _COL_WIDTHS.get(name, 0)
            if width:
                ed.setFixedWidth(width)
                self.hbox.addWidget(ed)
            else:
                self.hbox.addWidget(ed, 1)
            # Bind name now; the row index is read at emit time
            ed.textEdited.connect(lambda text, n=name: self.edited.emit(self.index, n, text))
            self.edits[name] = ed

        self.remove_btn = QPushButton("×")
        self.remove_btn.setFixedWidth(REMOVE_W)
        self.remove_btn.setToolTip("Remove row")
        self.remove_btn.clicked.connect(lambda: self.removeRequested.emit(self.index))
        self.hbox.addWidget(self.remove_btn)

        # Wrap the row in a CardRow frame
        frame = QFrame(self)
        frame.setObjectName("CardRow")
        inner = QVBoxLayout(frame)
        inner.setContentsMargins(0, 0, 0, 0)
        inner.addLayout(self.hbox)

        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        outer.addWidget(frame)


class LineItemsWidget(QWidget):
    """Scrollable list of LineItemRow widgets under a header.

    The widget does not own the items; the editor pushes them in with
    set_items() and applies edits reported through the signals.
    """

    fieldEdited = Signal(int, str, str)
    removeRequested = Signal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(6)

        header = QHBoxLayout()
        header.setSpacing(6)
        for name, label in ITEM_FIELDS:
            lbl = QLabel(label)
            width = _COL_WIDTHS.get(name, 0)
            if width:
                lbl.setFixedWidth(width)
                header.addWidget(lbl)
            else:
                header.addWidget(lbl, 1)
        header.addSpacing(REMOVE_W)
        root.addLayout(header)

        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.rows_container = QWidget()
        self.vbox = QVBoxLayout(self.rows_container)
        self.vbox.setContentsMargins(0, 0, 0, 0)
        self.vbox.setSpacing(6)
        self.vbox.addStretch(1)
        self.scroll.setWidget(self.rows_container)
        root.addWidget(self.scroll)

        self.rows: List[LineItemRow] = []

    def set_items(self, items: Sequence[InvoiceItem]) -> None:
        for row in self.rows:
            self.vbox.removeWidget(row)
            row.hide()
            row.deleteLater()
        self.rows = []
        for i, item in enumerate(items):
            row = LineItemRow(i, item)
            row.edited.connect(self.fieldEdited)
            row.removeRequested.connect(self.removeRequested)
            # Keep the trailing stretch last
            self.vbox.insertWidget(self.vbox.count() - 1, row)
            self.rows.append(row)
        only_one = len(self.rows) == 1
        for row in self.rows:
            row.remove_btn.setEnabled(not only_one)

    def row_count(self) -> int:
        return len(self.rows)

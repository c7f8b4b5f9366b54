from __future__ import annotations

from typing import Dict, Sequence

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
	QWidget,
	QFrame,
	QGridLayout,
	QLineEdit,
	QVBoxLayout,
	QHBoxLayout,
	QLabel,
	QPushButton,
)

from invoicer.core.model import SCALAR_LABELS, InvoiceData
from invoicer.widgets.line_items_widget import LineItemsWidget
from invoicer.widgets.logo_picker import LogoPicker

# Field groups in on-screen order, with column counts
HEADER_FIELDS = ("company_name", "voucher_no", "invoice_date", "payment_due")
COMPANY_FIELDS = ("company_brand_name", "company_arabic_name", "company_trn", "ref")
CUSTOMER_FIELDS = (
	"customer_name",
	"trn_no",
	"customer_code",
	"customer_ref",
	"po_box",
	"client_code",
	"customer_ref_name",
)
TOTAL_FIELDS = ("sub_total", "vat_total", "grand_total")
FOOTER_FIELDS = ("amount_in_words", "footer_contact", "footer_email")

PLACEHOLDERS = {
	"invoice_date": "YYYY-MM-DD",
	"payment_due": "Date or terms",
	"amount_in_words": "e.g. Six hundred and eighty two AED 50/100 Fils",
}


def _card(title: str) -> tuple[QFrame, QVBoxLayout]:
	card = QFrame()
	card.setObjectName("Card")
	lay = QVBoxLayout(card)
	lay.setContentsMargins(12, 12, 12, 12)
	lay.setSpacing(8)
	if title:
		lbl = QLabel(title)
		lbl.setObjectName("SectionTitle")
		lay.addWidget(lbl)
	return card, lay


class InvoiceForm(QWidget):
	"""Edit form for every InvoiceData field plus the logo.

	Emits fieldEdited(name, value) for scalar fields; line edits and row
	removals come through `items`; addItemRequested fires for "+ Add Row".
	"""

	fieldEdited = Signal(str, str)
	addItemRequested = Signal()

	def __init__(self, data: InvoiceData, logo: str = "", parent=None) -> None:
		super().__init__(parent)
		self.edits: Dict[str, QLineEdit] = {}

		root = QVBoxLayout(self)
		root.setContentsMargins(0, 0, 0, 0)
		root.setSpacing(12)

		self.logo_picker = LogoPicker(logo)
		root.addWidget(self.logo_picker)

		card, lay = _card("")
		lay.addLayout(self._grid(HEADER_FIELDS, 4))
		root.addWidget(card)

		card, lay = _card("Company (extended layout)")
		lay.addLayout(self._grid(COMPANY_FIELDS, 4))
		self.edits["company_arabic_name"].setLayoutDirection(Qt.RightToLeft)
		root.addWidget(card)

		card, lay = _card("Bill To / Customer")
		lay.addLayout(self._grid(CUSTOMER_FIELDS, 2))
		root.addWidget(card)

		card, lay = _card("")
		head = QHBoxLayout()
		items_title = QLabel("Line Items")
		items_title.setObjectName("SectionTitle")
		head.addWidget(items_title)
		head.addStretch(1)
		self.btn_add_row = QPushButton("+ Add Row")
		self.btn_add_row.clicked.connect(self.addItemRequested)
		head.addWidget(self.btn_add_row)
		lay.addLayout(head)
		self.items = LineItemsWidget(self)
		self.items.setMinimumHeight(160)
		lay.addWidget(self.items)
		root.addWidget(card, 1)

		card, lay = _card("")
		lay.addLayout(self._grid(TOTAL_FIELDS, 3))
		lay.addLayout(self._grid(FOOTER_FIELDS, 1))
		root.addWidget(card)

		self.set_data(data)

	def _grid(self, names: Sequence[str], columns: int) -> QGridLayout:
		grid = QGridLayout()
		grid.setHorizontalSpacing(12)
		grid.setVerticalSpacing(4)
		for i, name in enumerate(names):
			r, c = divmod(i, columns)
			ed = QLineEdit()
			ed.setObjectName(name)
			ed.setPlaceholderText(PLACEHOLDERS.get(name, SCALAR_LABELS[name]))
			ed.textEdited.connect(lambda text, n=name: self.fieldEdited.emit(n, text))
			grid.addWidget(QLabel(SCALAR_LABELS[name]), r * 2, c)
			grid.addWidget(ed, r * 2 + 1, c)
			self.edits[name] = ed
		return grid

	def set_data(self, data: InvoiceData) -> None:
		for name, ed in self.edits.items():
			ed.setText(getattr(data, name))
		self.items.set_items(data.items)

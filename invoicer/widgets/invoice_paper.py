from __future__ import annotations

from html import escape

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QLabel,
    QVBoxLayout,
    QHBoxLayout,
    QGridLayout,
    QTableWidget,
    QTableWidgetItem,
    QHeaderView,
    QAbstractItemView,
)

from invoicer.core.model import ITEM_FIELDS, InvoiceData
from invoicer.core.templates import Template, or_dash, table_rows
from invoicer.styles.themes import paper_qss
from invoicer.widgets.logo_picker import pixmap_from_data_uri

# A4 at 96 dpi, close enough for an on-screen sheet
PAPER_WIDTH = 794
LOGO_HEIGHT = 72
ROW_HEIGHT = 24

_NUMERIC_COLS = {2, 3, 4, 5, 6, 7}


def _label(text: str, name: str = "", align=None) -> QLabel:
    lbl = QLabel(text)
    lbl.setTextFormat(Qt.PlainText)
    if name:
        lbl.setObjectName(name)
    if align is not None:
        lbl.setAlignment(align)
    return lbl


def _rich(label: str, value: str, align=None) -> QLabel:
    """Bold caption followed by an escaped user value."""
    lbl = QLabel(f"<b>{escape(label)}</b> {escape(value)}")
    lbl.setTextFormat(Qt.RichText)
    if align is not None:
        lbl.setAlignment(align)
    return lbl


def _rule() -> QFrame:
    line = QFrame()
    line.setObjectName("PaperRule")
    line.setFixedHeight(2)
    return line


class InvoicePaper(QFrame):
    """Printable sheet for one invoice, laid out by a fixed template.

    Both templates read the same InvoiceData; EXTENDED adds the brand,
    Arabic name, footer and signature blocks and pads the item table.
    """

    def __init__(self, data: InvoiceData, logo: str = "", template: Template = Template.COMPACT, parent=None) -> None:
        super().__init__(parent)
        self.setObjectName("InvoicePaper")
        self.setStyleSheet(paper_qss())
        self.setFixedWidth(PAPER_WIDTH)
        self.template = template

        v = QVBoxLayout(self)
        v.setContentsMargins(36, 32, 36, 32)
        v.setSpacing(10)
        extended = template is Template.EXTENDED

        # Header
        header = QHBoxLayout()
        left = QVBoxLayout()
        pm = pixmap_from_data_uri(logo)
        if pm is not None:
            logo_lbl = QLabel()
            logo_lbl.setPixmap(pm.scaledToHeight(LOGO_HEIGHT, Qt.SmoothTransformation))
        else:
            logo_lbl = _label("Logo", "PaperLogoPlaceholder", Qt.AlignCenter)
            logo_lbl.setFixedSize(LOGO_HEIGHT * 2, LOGO_HEIGHT)
        left.addWidget(logo_lbl)
        if extended and data.company_brand_name:
            left.addWidget(_label(data.company_brand_name, "PaperBrand"))
        left.addWidget(_label(data.company_name or "Company Name", "PaperCompany"))
        if extended:
            if data.company_arabic_name:
                arabic = _label(data.company_arabic_name, "PaperArabic")
                arabic.setLayoutDirection(Qt.RightToLeft)
                left.addWidget(arabic)
            if data.company_trn:
                left.addWidget(_label(f"TRN: {data.company_trn}"))
        header.addLayout(left, 1)

        right = QVBoxLayout()
        right.addWidget(_label("INVOICE", "PaperTitle", Qt.AlignRight))
        meta = [
            ("Voucher No:", data.voucher_no),
            ("Date:", data.invoice_date),
            ("Payment Due:", data.payment_due),
        ]
        if extended:
            meta.append(("Ref:", data.ref))
        right.addLayout(self._pairs(meta))
        header.addLayout(right)
        v.addLayout(header)
        v.addWidget(_rule())

        # Bill to
        bill = QVBoxLayout()
        bill.setSpacing(2)
        head_row = QHBoxLayout()
        head_row.addWidget(_rich("BILL TO", ""))
        head_row.addWidget(_label(or_dash(data.customer_name)), 1)
        bill.addLayout(head_row)
        if data.po_box:
            bill.addWidget(_label(data.po_box))
        refs = QHBoxLayout()
        refs.addWidget(_rich("TRN:", or_dash(data.trn_no)))
        refs.addWidget(_rich("Customer Code:", or_dash(data.customer_code)))
        refs.addWidget(_rich("Client Code:", or_dash(data.client_code)))
        refs.addStretch(1)
        bill.addLayout(refs)
        refs2 = QHBoxLayout()
        if extended:
            refs2.addWidget(_rich("Customer Ref:", or_dash(data.customer_ref)))
        refs2.addWidget(_rich("Customer Ref Name:", or_dash(data.customer_ref_name)))
        refs2.addStretch(1)
        bill.addLayout(refs2)
        v.addLayout(bill)

        # Items
        self.table = self._items_table(table_rows(data.items, template))
        v.addWidget(self.table)

        # Totals, right aligned
        totals = QHBoxLayout()
        totals.addStretch(1)
        grid = QGridLayout()
        grid.setHorizontalSpacing(24)
        for r, (label, value) in enumerate(
            (("Sub Total", data.sub_total), ("VAT Total", data.vat_total), ("Grand Total", data.grand_total))
        ):
            name = "PaperGrand" if r == 2 else ""
            grid.addWidget(_label(label, name), r, 0)
            grid.addWidget(_label(value, name, Qt.AlignRight), r, 1)
        totals.addLayout(grid)
        v.addLayout(totals)

        if data.amount_in_words:
            words = _label(data.amount_in_words, "PaperWords")
            words.setWordWrap(True)
            v.addWidget(words)

        if extended:
            v.addSpacing(24)
            v.addLayout(self._signatures(data))
            footer = " · ".join(p for p in (data.footer_contact, data.footer_email) if p)
            if footer:
                v.addWidget(_rule())
                f = _label(footer, "PaperFooter", Qt.AlignCenter)
                f.setWordWrap(True)
                v.addWidget(f)

        v.addStretch(1)

    @staticmethod
    def _pairs(rows) -> QGridLayout:
        grid = QGridLayout()
        grid.setHorizontalSpacing(8)
        grid.setVerticalSpacing(2)
        for r, (label, value) in enumerate(rows):
            grid.addWidget(_rich(label, "", Qt.AlignRight), r, 0)
            grid.addWidget(_label(value, align=Qt.AlignRight), r, 1)
        return grid

    @staticmethod
    def _signatures(data: InvoiceData) -> QHBoxLayout:
        row = QHBoxLayout()
        for caption in ("Received by", f"For {data.company_name or 'Company'}"):
            box = QVBoxLayout()
            box.addSpacing(40)
            box.addWidget(_rule())
            box.addWidget(_label(caption, align=Qt.AlignCenter))
            row.addLayout(box)
            row.addStretch(1)
        return row

    def _items_table(self, rows) -> QTableWidget:
        t = QTableWidget(len(rows), len(ITEM_FIELDS))
        t.setObjectName("PaperItems")
        t.setHorizontalHeaderLabels([label for _name, label in ITEM_FIELDS])
        t.verticalHeader().setVisible(False)
        t.setEditTriggers(QAbstractItemView.NoEditTriggers)
        t.setSelectionMode(QAbstractItemView.NoSelection)
        t.setFocusPolicy(Qt.NoFocus)
        t.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        t.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        hh = t.horizontalHeader()
        hh.setSectionResizeMode(QHeaderView.ResizeToContents)
        hh.setSectionResizeMode(1, QHeaderView.Stretch)
        for r, cells in enumerate(rows):
            t.setRowHeight(r, ROW_HEIGHT)
            for c, text in enumerate(cells):
                it = QTableWidgetItem(text)
                if c in _NUMERIC_COLS:
                    it.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
                t.setItem(r, c, it)
        # Show every row; the sheet grows instead of scrolling
        t.setFixedHeight(hh.sizeHint().height() + ROW_HEIGHT * len(rows) + 4)
        return t

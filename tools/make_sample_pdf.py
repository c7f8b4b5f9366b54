from __future__ import annotations

import os
import sys
from pathlib import Path

# Allow running from the repo root without installing
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication

from invoicer.core.model import InvoiceItem, new_invoice_data
from invoicer.core.templates import Template, export_filename
from invoicer.pdf.export import export_widget_pdf
from invoicer.widgets.invoice_paper import InvoicePaper

# Renders a redacted sample invoice in both layouts for README/demo purposes.


def _sample():
    data = new_invoice_data()
    data.company_name = "Sample Trading LLC"
    data.company_brand_name = "SAMPLE"
    data.company_trn = "(redacted)"
    data.voucher_no = "INV-00001"
    data.invoice_date = "09-08-2025"
    data.payment_due = "30 days"
    data.customer_name = "(Customer Name)"
    data.trn_no = "(redacted)"
    data.po_box = "P.O. Box 0000"
    data.items = [
        InvoiceItem(description="Sample item A", quantity="1", rate="100.00", taxable_value="100.00",
                    vat_percent="5", vat="5.00", total_amount="105.00"),
        InvoiceItem(description="Sample item B", quantity="2", rate="150.00", taxable_value="300.00",
                    vat_percent="5", vat="15.00", total_amount="315.00"),
    ]
    data.sub_total = "400.00"
    data.vat_total = "20.00"
    data.grand_total = "420.00"
    data.amount_in_words = "Four hundred twenty only"
    data.footer_contact = "(redacted)"
    data.footer_email = "accounts@example.com"
    return data


def main() -> None:
    _app = QApplication.instance() or QApplication(sys.argv)
    out_dir = Path(__file__).resolve().parents[1] / "assets" / "samples"
    data = _sample()
    for template in Template:
        paper = InvoicePaper(data, template=template)
        out = out_dir / export_filename(f"{data.voucher_no}-{template.value}")
        export_widget_pdf(paper, out, scale=2, title=f"Invoice {data.voucher_no}")
        print(f"Wrote sample to: {out}")


if __name__ == "__main__":
    main()

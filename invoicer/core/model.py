from __future__ import annotations

from dataclasses import dataclass, field, fields, asdict
from typing import Dict, List, Tuple


# (attribute, label) in form/print order
ITEM_FIELDS: Tuple[Tuple[str, str], ...] = (
	("ac_code", "AC Code"),
	("description", "Description"),
	("quantity", "Qty"),
	("rate", "Rate"),
	("taxable_value", "Taxable Value"),
	("vat_percent", "VAT %"),
	("vat", "VAT"),
	("total_amount", "Total Amount"),
)


@dataclass
class InvoiceItem:
	ac_code: str = ""
	description: str = ""
	quantity: str = ""
	rate: str = ""
	taxable_value: str = ""
	vat_percent: str = ""
	vat: str = ""
	total_amount: str = ""

	def cells(self) -> Tuple[str, ...]:
		return tuple(getattr(self, name) for name, _label in ITEM_FIELDS)


@dataclass
class InvoiceData:
	"""One invoice. Every value is free text; totals are typed in, never computed."""

	# Company
	company_name: str = ""
	company_brand_name: str = ""
	company_arabic_name: str = ""
	company_trn: str = ""
	# Identifiers
	voucher_no: str = ""
	ref: str = ""
	invoice_date: str = ""
	# Either a date or free text such as "30 days"
	payment_due: str = ""
	# Bill to
	customer_name: str = ""
	trn_no: str = ""
	customer_code: str = ""
	customer_ref: str = ""
	customer_ref_name: str = ""
	po_box: str = ""
	client_code: str = ""
	# Lines, printed in this order
	items: List[InvoiceItem] = field(default_factory=lambda: [empty_item()])
	# Totals
	sub_total: str = ""
	vat_total: str = ""
	grand_total: str = ""
	amount_in_words: str = ""
	# Footer
	footer_contact: str = ""
	footer_email: str = ""

	def copy(self) -> "InvoiceData":
		"""Return a copy that shares no item instances with this one."""
		scalars = {name: getattr(self, name) for name in scalar_field_names()}
		return InvoiceData(items=[InvoiceItem(**asdict(it)) for it in self.items], **scalars)


def scalar_field_names() -> Tuple[str, ...]:
	return tuple(f.name for f in fields(InvoiceData) if f.name != "items")


# Labels for the scalar fields shown in the edit form
SCALAR_LABELS: Dict[str, str] = {
	"company_name": "Company Name",
	"company_brand_name": "Brand Name",
	"company_arabic_name": "Arabic Name",
	"company_trn": "Company TRN",
	"voucher_no": "Voucher No",
	"ref": "Ref",
	"invoice_date": "Invoice Date",
	"payment_due": "Payment Due",
	"customer_name": "Customer Name",
	"trn_no": "TRN No",
	"customer_code": "Customer Code",
	"customer_ref": "Customer Ref",
	"customer_ref_name": "Customer Ref Name",
	"po_box": "PO Box",
	"client_code": "Client Code",
	"sub_total": "Sub Total",
	"vat_total": "VAT Total",
	"grand_total": "Grand Total",
	"amount_in_words": "Amount in Words",
	"footer_contact": "Footer Contact",
	"footer_email": "Footer Email",
}

SCALAR_FIELDS: Tuple[Tuple[str, str], ...] = tuple((name, SCALAR_LABELS[name]) for name in scalar_field_names())


def empty_item() -> InvoiceItem:
	return InvoiceItem()


def new_invoice_data() -> InvoiceData:
	"""Blank invoice with exactly one blank line; never shares its items list."""
	return InvoiceData(items=[empty_item()])

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Tuple

from invoicer.core.model import ITEM_FIELDS, InvoiceData, InvoiceItem

# Extended layout pads the item table to at least this many rows
EXTENDED_MIN_ROWS = 12

DASH = "—"
DRAFT_NAME = "draft"


class Template(Enum):
	COMPACT = "compact"
	EXTENDED = "extended"

	@classmethod
	def parse(cls, value: object) -> "Template":
		"""Accept an enum member or its value; unknown values fall back to COMPACT."""
		if isinstance(value, cls):
			return value
		try:
			return cls(str(value).strip().lower())
		except ValueError:
			return cls.COMPACT

	@property
	def label(self) -> str:
		return self.value.capitalize()


def table_rows(items: Iterable[InvoiceItem], template: Template) -> List[Tuple[str, ...]]:
	rows = [item.cells() for item in items]
	if template is Template.EXTENDED:
		blank = ("",) * len(ITEM_FIELDS)
		rows.extend([blank] * max(0, EXTENDED_MIN_ROWS - len(rows)))
	return rows


def or_dash(value: str) -> str:
	return value if value else DASH


def export_filename(voucher_no: str) -> str:
	"""Suggested PDF name, `invoice-<voucher>.pdf`.

	The voucher is stripped and any `/` or `\\` becomes `-`, so "INV/2024/07"
	gives `invoice-INV-2024-07.pdf`. A blank voucher gives `invoice-draft.pdf`.
	"""
	stem = voucher_no.strip() if voucher_no else ""
	stem = stem.replace("/", "-").replace("\\", "-")
	return f"invoice-{stem or DRAFT_NAME}.pdf"


def tab_title(data: InvoiceData) -> str:
	title = data.voucher_no or "Draft"
	if data.company_name:
		title += f" – {data.company_name}"
	return title

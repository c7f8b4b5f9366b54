from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from invoicer.core.model import InvoiceData, new_invoice_data

logger = logging.getLogger(__name__)


@dataclass
class SavedInvoice:
	id: str
	data: InvoiceData = field(default_factory=new_invoice_data)
	# data: URI of the logo image, or "" for none
	logo: str = ""


class Workspace:
	"""In-memory collection of open invoices plus the active selection.

	Records are kept in insertion order, which is also the tab order.
	Nothing is persisted; closing the app drops everything.
	"""

	def __init__(self) -> None:
		self._invoices: List[SavedInvoice] = []
		self.active_id: Optional[str] = None

	@property
	def invoices(self) -> Tuple[SavedInvoice, ...]:
		return tuple(self._invoices)

	def __len__(self) -> int:
		return len(self._invoices)

	def __iter__(self) -> Iterator[SavedInvoice]:
		return iter(tuple(self._invoices))

	def is_empty(self) -> bool:
		return not self._invoices

	def get(self, invoice_id: str) -> Optional[SavedInvoice]:
		for inv in self._invoices:
			if inv.id == invoice_id:
				return inv
		return None

	def add_invoice(self) -> SavedInvoice:
		record = SavedInvoice(id=uuid.uuid4().hex, data=new_invoice_data(), logo="")
		self._invoices.append(record)
		self.active_id = record.id
		logger.info("Added invoice %s (%d open)", record.id, len(self._invoices))
		return record

	def save_invoice(self, invoice_id: str, data: InvoiceData, logo: Optional[str] = None) -> bool:
		"""Replace the stored data (and the logo, when one is given).

		An unknown id is ignored and reported as False.
		"""
		record = self.get(invoice_id)
		if record is None:
			logger.warning("save_invoice: no invoice with id %s", invoice_id)
			return False
		record.data = data.copy()
		if logo is not None:
			record.logo = logo
		logger.info("Saved invoice %s (voucher=%r)", invoice_id, record.data.voucher_no)
		return True

	def delete_invoice(self, invoice_id: str) -> bool:
		remaining = [inv for inv in self._invoices if inv.id != invoice_id]
		if len(remaining) == len(self._invoices):
			logger.warning("delete_invoice: no invoice with id %s", invoice_id)
			return False
		self._invoices = remaining
		if self.active_id == invoice_id:
			self.active_id = remaining[0].id if remaining else None
		logger.info("Deleted invoice %s (%d open)", invoice_id, len(remaining))
		return True

	def select(self, invoice_id: str) -> bool:
		if self.get(invoice_id) is None:
			return False
		self.active_id = invoice_id
		return True

	def active_invoice(self) -> Optional[SavedInvoice]:
		if self.active_id is None:
			return None
		return self.get(self.active_id)

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional, TypeVar

from invoicer.core.model import ITEM_FIELDS, InvoiceData, InvoiceItem, empty_item, scalar_field_names

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Mode(Enum):
	EDITING = "editing"
	VIEWING = "viewing"


class ExportInProgressError(RuntimeError):
	"""Raised when an export is requested while another one is still running."""


class EditorState:
	"""Working copy and edit/view mode of one invoice.

	The owner passes the committed record in and receives it back through
	``on_save``. Edits stay local until ``save()``; dropping the instance
	discards them.
	"""

	def __init__(
		self,
		data: InvoiceData,
		logo: str = "",
		on_save: Optional[Callable[[InvoiceData, str], None]] = None,
		on_delete: Optional[Callable[[], None]] = None,
	) -> None:
		self.working: InvoiceData = data.copy()
		self._committed: InvoiceData = data.copy()
		self.logo: str = logo or ""
		self.mode: Mode = Mode.EDITING
		self.exporting: bool = False
		self._on_save = on_save
		self._on_delete = on_delete

	# --- Mode transitions ---
	@property
	def is_editing(self) -> bool:
		return self.mode is Mode.EDITING

	def save(self) -> None:
		self._committed = self.working.copy()
		if self._on_save is not None:
			self._on_save(self.working.copy(), self.logo)
		self.mode = Mode.VIEWING

	def edit(self) -> None:
		self.working = self._committed.copy()
		self.mode = Mode.EDITING

	@property
	def can_delete(self) -> bool:
		return self._on_delete is not None

	def delete(self) -> bool:
		if self._on_delete is None:
			return False
		self._on_delete()
		return True

	# --- Field and line mutations ---
	def update_field(self, name: str, value: str) -> None:
		if name not in scalar_field_names():
			raise KeyError(name)
		setattr(self.working, name, value)

	def update_item(self, index: int, field: str, value: str) -> None:
		item: InvoiceItem = self.working.items[index]
		if field not in {name for name, _label in ITEM_FIELDS}:
			raise KeyError(field)
		setattr(item, field, value)

	def add_item(self) -> None:
		self.working.items.append(empty_item())

	def remove_item(self, index: int) -> None:
		# Keep at least one line
		if len(self.working.items) <= 1:
			return
		del self.working.items[index]

	def set_logo(self, data_uri: str) -> None:
		self.logo = data_uri

	def clear_logo(self) -> None:
		self.logo = ""

	# --- Export ---
	def begin_export(self) -> None:
		"""Claim the single export slot; run the work through finish_export()."""
		if self.exporting:
			raise ExportInProgressError("an export is already running")
		self.exporting = True

	def end_export(self) -> None:
		self.exporting = False

	def finish_export(self, run: Callable[[], T]) -> T:
		"""Run the export for a slot already claimed with begin_export(); always releases it."""
		try:
			return run()
		finally:
			self.end_export()

	def export(self, run: Callable[[], T]) -> T:
		"""Run one export; ``exporting`` is True for exactly its duration."""
		self.begin_export()
		return self.finish_export(run)

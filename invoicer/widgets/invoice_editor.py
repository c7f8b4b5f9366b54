from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QStackedWidget,
    QFileDialog,
    QMessageBox,
)

from invoicer.core.editor_state import EditorState, Mode
from invoicer.core.model import InvoiceData
from invoicer.core.paths import default_export_dir
from invoicer.core.settings import Settings
from invoicer.core.templates import Template, export_filename
from invoicer.pdf.export import export_widget_pdf
from invoicer.printing.viewer import open_file
from invoicer.widgets.invoice_form import InvoiceForm
from invoicer.widgets.invoice_paper import InvoicePaper

logger = logging.getLogger(__name__)

DOWNLOAD_LABEL = "Download PDF"
BUSY_LABEL = "Generating…"


def _scroll(widget: QWidget, center: bool = False) -> QScrollArea:
    area = QScrollArea()
    area.setWidgetResizable(not center)
    if center:
        area.setAlignment(Qt.AlignHCenter | Qt.AlignTop)
    area.setWidget(widget)
    return area


class InvoiceEditor(QWidget):
    """Edit form and printable view for one invoice.

    Starts in edit mode. "Save & View" hands the working copy to `on_save`
    and shows the printable sheet; "Edit" goes back to the form with the
    saved data. The owner drops the instance to discard unsaved edits.

    Emits:
      - modeChanged(str): Mode value after each transition
      - exported(str): path of a written PDF
    """

    modeChanged = Signal(str)
    exported = Signal(str)

    def __init__(
        self,
        data: InvoiceData,
        logo: str = "",
        on_save: Optional[Callable[[InvoiceData, str], None]] = None,
        on_delete: Optional[Callable[[], None]] = None,
        template: Template = Template.COMPACT,
        settings: Settings | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.state = EditorState(data, logo, on_save=on_save, on_delete=on_delete)
        self.template = template
        self.settings = settings or Settings()
        self.paper: Optional[InvoicePaper] = None

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        self.stack = QStackedWidget()
        root.addWidget(self.stack)

        # Edit page
        edit_page = QWidget()
        ev = QVBoxLayout(edit_page)
        head = QHBoxLayout()
        title = QLabel("Edit Invoice")
        title.setObjectName("SectionTitle")
        head.addWidget(title)
        head.addStretch(1)
        self.btn_save = QPushButton("Save && View")
        self.btn_delete_edit = QPushButton("Delete Invoice")
        self.btn_delete_edit.setObjectName("Danger")
        head.addWidget(self.btn_save)
        head.addWidget(self.btn_delete_edit)
        ev.addLayout(head)
        self.form = InvoiceForm(self.state.working, self.state.logo)
        ev.addWidget(_scroll(self.form), 1)
        self.stack.addWidget(edit_page)

        # View page
        view_page = QWidget()
        vv = QVBoxLayout(view_page)
        actions = QHBoxLayout()
        self.btn_edit = QPushButton("Edit")
        self.btn_download = QPushButton(DOWNLOAD_LABEL)
        self.btn_delete_view = QPushButton("Delete Invoice")
        self.btn_delete_view.setObjectName("Danger")
        for b in (self.btn_edit, self.btn_download, self.btn_delete_view):
            actions.addWidget(b)
        actions.addStretch(1)
        vv.addLayout(actions)
        self.paper_holder = QVBoxLayout()
        vv.addLayout(self.paper_holder, 1)
        self.stack.addWidget(view_page)

        for b in (self.btn_delete_edit, self.btn_delete_view):
            b.setVisible(self.state.can_delete)

        # Signals
        self.btn_save.clicked.connect(self.save)
        self.btn_edit.clicked.connect(self.edit)
        self.btn_download.clicked.connect(self.download_pdf)
        self.btn_delete_edit.clicked.connect(self.delete)
        self.btn_delete_view.clicked.connect(self.delete)
        self.form.fieldEdited.connect(self.state.update_field)
        self.form.items.fieldEdited.connect(self.state.update_item)
        self.form.items.removeRequested.connect(self.remove_item)
        self.form.addItemRequested.connect(self.add_item)
        self.form.logo_picker.logoChanged.connect(self._on_logo_changed)

        self._show_mode()

    # --- Transitions ---
    @property
    def mode(self) -> Mode:
        return self.state.mode

    def save(self) -> None:
        self.state.save()
        logger.info("Invoice saved; switching to view (voucher=%r)", self.state.working.voucher_no)
        self._show_mode()

    def edit(self) -> None:
        self.state.edit()
        self.form.set_data(self.state.working)
        self._show_mode()

    def delete(self) -> None:
        self.state.delete()

    # --- Line items ---
    def add_item(self) -> None:
        self.state.add_item()
        self.form.items.set_items(self.state.working.items)

    def remove_item(self, index: int) -> None:
        self.state.remove_item(index)
        self.form.items.set_items(self.state.working.items)

    def _on_logo_changed(self, uri: str) -> None:
        if uri:
            self.state.set_logo(uri)
        else:
            self.state.clear_logo()

    # --- Template ---
    def set_template(self, template: Template) -> None:
        self.template = template
        if self.state.mode is Mode.VIEWING:
            self._rebuild_paper()

    def _rebuild_paper(self) -> None:
        while self.paper_holder.count():
            w = self.paper_holder.takeAt(0).widget()
            if w is not None:
                w.hide()
                w.deleteLater()
        self.paper = InvoicePaper(self.state.working, self.state.logo, self.template)
        self.paper_holder.addWidget(_scroll(self.paper, center=True))

    def _show_mode(self) -> None:
        if self.state.mode is Mode.VIEWING:
            self._rebuild_paper()
            self.stack.setCurrentIndex(1)
        else:
            self.stack.setCurrentIndex(0)
        self._sync_busy()
        self.modeChanged.emit(self.state.mode.value)

    # --- Export ---
    def _sync_busy(self) -> None:
        busy = self.state.exporting
        self.btn_download.setEnabled(not busy)
        self.btn_download.setText(BUSY_LABEL if busy else DOWNLOAD_LABEL)

    def _ask_export_path(self) -> Optional[Path]:
        start_dir = Path(self.settings.last_export_dir) if self.settings.last_export_dir else default_export_dir()
        suggested = start_dir / export_filename(self.state.working.voucher_no)
        path, _ = QFileDialog.getSaveFileName(self, "Save PDF", str(suggested), "PDF files (*.pdf)")
        return Path(path) if path else None

    def download_pdf(self) -> None:
        """Ask for a destination, then export on the next event-loop turn."""
        if self.state.exporting or self.paper is None:
            return
        out = self._ask_export_path()
        if out is None:
            return
        self.state.begin_export()
        self._sync_busy()
        # Let the busy label paint before the capture blocks the loop
        QTimer.singleShot(0, lambda: self._run_export(out))

    def _run_export(self, out: Path) -> None:
        paper = self.paper
        title = f"Invoice {self.state.working.voucher_no}".strip()
        try:
            written = self.state.finish_export(
                lambda: export_widget_pdf(paper, out, scale=self.settings.export_scale, title=title)
            )
        except Exception as e:
            logger.exception("PDF export failed: %s", out)
            QMessageBox.critical(self, "PDF failed", f"Could not generate the PDF.\n\nDetails: {e}")
            return
        finally:
            self._sync_busy()

        self.exported.emit(str(written))
        if self.settings.open_after_export:
            open_file(written)


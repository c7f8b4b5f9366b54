from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QApplication,
    QMainWindow,
    QWidget,
    QHBoxLayout,
    QVBoxLayout,
    QPushButton,
    QLabel,
    QStackedWidget,
    QTabBar,
    QComboBox,
)

from invoicer.core.model import InvoiceData
from invoicer.core.settings import Settings, load_settings, save_settings
from invoicer.core.templates import Template, tab_title
from invoicer.core.workspace import Workspace
from invoicer.styles.themes import light_qss, dark_qss
from invoicer.widgets.invoice_editor import InvoiceEditor

logger = logging.getLogger(__name__)

EMPTY_PAGE, EDITOR_PAGE = 0, 1


def _empty_state(on_create) -> QWidget:
    w = QWidget()
    v = QVBoxLayout(w)
    v.addStretch(1)
    msg = QLabel("No invoices yet. Create one to get started.")
    msg.setAlignment(Qt.AlignCenter)
    v.addWidget(msg)
    btn = QPushButton("Create Invoice")
    btn.setObjectName("Primary")
    btn.clicked.connect(on_create)
    row = QHBoxLayout()
    row.addStretch(1)
    row.addWidget(btn)
    row.addStretch(1)
    v.addLayout(row)
    v.addStretch(2)
    w.create_button = btn  # type: ignore[attr-defined]
    return w


class AppWindow(QMainWindow):
    """Tabs of open invoices over a single InvoiceEditor for the active one.

    Switching tabs rebuilds the editor from the stored record, so unsaved
    edits on the tab being left are dropped.
    """

    def __init__(self, settings: Settings | None = None, settings_path: Path | str | None = None) -> None:
        super().__init__()
        self._settings_path = settings_path
        self.settings = settings or load_settings(settings_path)
        self.workspace = Workspace()
        self.editor: Optional[InvoiceEditor] = None
        self._editor_id: Optional[str] = None
        self.setWindowTitle(self.settings.window_title)

        root = QWidget(self)
        layout = QVBoxLayout(root)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        # Header
        header_w = QWidget()
        header_w.setObjectName("Header")
        header = QHBoxLayout(header_w)
        header.setContentsMargins(12, 8, 12, 8)
        title = QLabel(self.settings.window_title)
        f = QFont(); f.setPointSize(14); f.setBold(True)
        title.setFont(f)
        header.addWidget(title)
        header.addStretch(1)
        header.addWidget(QLabel("Layout"))
        self.template_combo = QComboBox()
        for t in Template:
            self.template_combo.addItem(t.label, t.value)
        self.template_combo.setCurrentIndex(self.template_combo.findData(self.template.value))
        self.template_combo.currentIndexChanged.connect(self._on_template_changed)
        header.addWidget(self.template_combo)
        self.btn_theme = QPushButton("Dark Mode")
        self.btn_theme.setCheckable(True)
        self.btn_theme.setChecked(self.settings.dark_mode)
        self.btn_theme.toggled.connect(self._on_toggle_theme)
        header.addWidget(self.btn_theme)
        self.btn_new_invoice = QPushButton("+ New Invoice")
        self.btn_new_invoice.setObjectName("Primary")
        self.btn_new_invoice.clicked.connect(self.add_invoice)
        header.addWidget(self.btn_new_invoice)
        layout.addWidget(header_w)

        # Tabs + routed body
        self.tabs = QTabBar()
        self.tabs.setExpanding(False)
        self.tabs.setDocumentMode(True)
        self.tabs.currentChanged.connect(self._on_tab_changed)
        layout.addWidget(self.tabs)

        self.stack = QStackedWidget()
        self.empty_view = _empty_state(self.add_invoice)
        self.stack.addWidget(self.empty_view)
        self.editor_host = QWidget()
        self.editor_layout = QVBoxLayout(self.editor_host)
        self.editor_layout.setContentsMargins(12, 8, 12, 12)
        self.stack.addWidget(self.editor_host)
        layout.addWidget(self.stack, 1)

        self.setCentralWidget(root)
        self._apply_theme()
        self._refresh()

    @property
    def template(self) -> Template:
        return Template.parse(self.settings.template)

    # --- Workspace operations ---
    def add_invoice(self) -> None:
        self.workspace.add_invoice()
        self._refresh()

    def _save_active(self, invoice_id: str, data: InvoiceData, logo: str) -> None:
        self.workspace.save_invoice(invoice_id, data, logo)
        self._refresh_titles()

    def _delete(self, invoice_id: str) -> None:
        self.workspace.delete_invoice(invoice_id)
        self._refresh()

    def _on_tab_changed(self, index: int) -> None:
        if index < 0:
            return
        invoice_id = self.tabs.tabData(index)
        if invoice_id and self.workspace.select(invoice_id):
            self._refresh()

    # --- View sync ---
    def _refresh_titles(self) -> None:
        for i, inv in enumerate(self.workspace):
            if i < self.tabs.count():
                self.tabs.setTabText(i, tab_title(inv.data))

    def _refresh(self) -> None:
        self.tabs.blockSignals(True)
        try:
            while self.tabs.count():
                self.tabs.removeTab(0)
            for inv in self.workspace:
                idx = self.tabs.addTab(tab_title(inv.data))
                self.tabs.setTabData(idx, inv.id)
                if inv.id == self.workspace.active_id:
                    self.tabs.setCurrentIndex(idx)
        finally:
            self.tabs.blockSignals(False)
        self.tabs.setVisible(not self.workspace.is_empty())

        active = self.workspace.active_invoice()
        if active is None:
            self._drop_editor()
            self.stack.setCurrentIndex(EMPTY_PAGE)
            return
        if self.editor is None or self._editor_id != active.id:
            self._drop_editor()
            invoice_id = active.id
            self.editor = InvoiceEditor(
                active.data,
                active.logo,
                on_save=lambda data, logo: self._save_active(invoice_id, data, logo),
                on_delete=lambda: self._delete(invoice_id),
                template=self.template,
                settings=self.settings,
            )
            self.editor.exported.connect(self._on_exported)
            self._editor_id = invoice_id
            self.editor_layout.addWidget(self.editor)
        self.stack.setCurrentIndex(EDITOR_PAGE)

    def _drop_editor(self) -> None:
        if self.editor is not None:
            self.editor_layout.removeWidget(self.editor)
            self.editor.hide()
            self.editor.deleteLater()
        self.editor = None
        self._editor_id = None

    # --- Preferences ---
    def _persist_settings(self) -> None:
        try:
            save_settings(self.settings, self._settings_path)
        except OSError:
            logger.exception("Could not save settings")

    def _on_template_changed(self, _index: int) -> None:
        template = Template.parse(self.template_combo.currentData())
        self.settings.template = template.value
        self._persist_settings()
        if self.editor is not None:
            self.editor.set_template(template)

    def _on_exported(self, path: str) -> None:
        folder = str(Path(path).parent)
        self.statusBar().showMessage(f"Saved {path}", 5000)
        if self.settings.last_export_dir != folder:
            self.settings.last_export_dir = folder
            self._persist_settings()

    def _on_toggle_theme(self, checked: bool) -> None:
        self.settings.dark_mode = bool(checked)
        self._persist_settings()
        self._apply_theme()

    def _apply_theme(self) -> None:
        app = QApplication.instance()
        if self.settings.dark_mode:
            # Optionally apply qdarkstyle at app level, then layer our dark QSS
            try:
                import qdarkstyle  # type: ignore
                if app:
                    app.setStyleSheet(qdarkstyle.load_stylesheet_pyside6())
            except ImportError:
                if app:
                    app.setStyleSheet("")
            self.setStyleSheet(dark_qss())
        else:
            if app:
                app.setStyleSheet("")
            self.setStyleSheet(light_qss())


def create_app_window(settings: Settings | None = None, settings_path: Path | str | None = None) -> AppWindow:
    return AppWindow(settings=settings, settings_path=settings_path)

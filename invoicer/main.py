from __future__ import annotations

# Allow running this file directly (python invoicer/main.py) by ensuring the project root is on sys.path
import os
import sys
if __package__ in (None, ""):
    sys.path.append(os.path.dirname(os.path.dirname(__file__)))

import logging

from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import QApplication

from invoicer.core.settings import load_settings
from invoicer.shell import create_app_window

logger = logging.getLogger(__name__)


def _wire_shortcuts(win) -> None:
    # Ctrl+N -> new invoice, Ctrl+S -> Save & View on the active editor
    QShortcut(QKeySequence.New, win).activated.connect(win.add_invoice)

    def _save_active() -> None:
        if win.editor is not None and win.editor.state.is_editing:
            win.editor.save()

    QShortcut(QKeySequence.Save, win).activated.connect(_save_active)


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(sys.argv)
    QApplication.setStyle("Fusion")
    settings = load_settings()
    logger.info("Starting (template=%s)", settings.template)

    win = create_app_window(settings)
    _wire_shortcuts(win)
    win.resize(1200, 860)
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()

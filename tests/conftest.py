from __future__ import annotations

import os

# Headless Qt for CI; must be set before QApplication exists
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import logging
import os
import subprocess
import sys

logger = logging.getLogger(__name__)


def open_file(path) -> bool:
    """Open a file in the system's default viewer. Returns False on failure."""
    path = str(path)
    try:
        if sys.platform == "win32":
            os.startfile(path)  # type: ignore[attr-defined]
        elif sys.platform == "darwin":
            subprocess.Popen(["open", path])
        else:
            subprocess.Popen(["xdg-open", path])
        return True
    except Exception:
        logger.exception("Failed to open file: %s", path)
        return False

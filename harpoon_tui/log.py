"""Package logger.

Textual owns the terminal while the app runs, so nothing is logged to
stderr.  ``--debug`` routes records to a log file instead.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .platform import harpoon_file

logger = logging.getLogger("harpoon_tui")
logger.addHandler(logging.NullHandler())

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(debug: bool = False, log_file: Path | None = None) -> None:
    """Attach a file handler when *debug* is set; otherwise stay silent."""
    if not debug:
        return
    path = log_file or harpoon_file("harpoon.log")
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

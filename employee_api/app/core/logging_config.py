"""
Process‑wide logging for the directory API and the mock server.

Both apps log through module loggers (``logging.getLogger(__name__)``)
that propagate to the root logger configured here.  When ``run.py``
hosts both apps in one process the second call finds the root logger
already set up and leaves it alone.
"""

import logging
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send log records to stderr and, if ``logfile`` is given, to that file.

    Unknown level names fall back to ``INFO``.  Does nothing when the
    root logger already has handlers.
    """
    if logging.getLogger().handlers:
        return

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(logfile, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
    )

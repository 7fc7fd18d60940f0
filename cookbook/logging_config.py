"""Logging setup shared by the HTTP app and the demo runner."""

from __future__ import annotations

import logging
import sys

from cookbook.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def setup_logging(level: str | None = None) -> None:
    """Attach a stdout handler to the root logger.

    Safe to call more than once; only the level is updated on later calls.
    """
    global _configured

    resolved = (level or settings.log_level or "INFO").upper()
    root = logging.getLogger()
    root.setLevel(resolved)

    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    _configured = True

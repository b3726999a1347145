"""
Process-wide logging setup.
"""

from __future__ import annotations

import logging
import os
import sys

_HANDLER_NAME = "brandstudio-stdout"


def log_level() -> int:
    name = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    root = logging.getLogger()
    root.setLevel(log_level())

    # Safe to call more than once (app import + CLI).
    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s"))
    root.addHandler(handler)

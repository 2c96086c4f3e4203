# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Application logging helpers.

All loggers live under the ``adaquote`` namespace; the handler is attached
once to the root ``adaquote`` logger and children propagate to it.
"""

from __future__ import annotations

import logging
import threading

ROOT_NAME = "adaquote"
_FORMAT = "[adaquote] %(asctime)s %(levelname)s %(name)s %(message)s"
_LOCK = threading.Lock()


def configure_logging(level_name: str = "INFO") -> logging.Logger:
    level = getattr(logging, (level_name or "INFO").upper(), logging.INFO)
    with _LOCK:
        root = logging.getLogger(ROOT_NAME)
        root.setLevel(level)
        if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(_FORMAT))
            root.addHandler(handler)
    return root


def get_logger(name: str = ROOT_NAME) -> logging.Logger:
    if name != ROOT_NAME and not name.startswith(ROOT_NAME + "."):
        name = f"{ROOT_NAME}.{name}"
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger"]

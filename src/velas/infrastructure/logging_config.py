"""Logging setup for the command-line entry point.

Library modules only create module-level loggers; handlers and levels are
configured here, once, by the CLI.
"""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "VELAS_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger("velas")
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

"""Central logging setup for the project."""
from __future__ import annotations
import logging
import os
import sys

def setup_logging(level: int | str | None = None) -> None:
    """
    Configure root logger with sane defaults.

    Args:
        level: Logging level. Falls back to ``LOG_LEVEL`` from the environment, then INFO.
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO").upper()
    handler = logging.StreamHandler(sys.stdout)
    fmt = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

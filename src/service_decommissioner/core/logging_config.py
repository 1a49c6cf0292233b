"""
Logging configuration.

Operator dialogue goes through the Reporter. Logging carries diagnostics:
detection errors that were treated as absent, commands issued, and per target
failures. setup_logging configures the root logger exactly once.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "WARNING", logfile: Path | None = None) -> None:
    """
    Configure the root logger.

    If handlers are already attached nothing is changed, which keeps repeated
    calls from tests or embedding code harmless.

    level
    Level name such as DEBUG or INFO, case insensitive. Unknown names fall
    back to WARNING.

    logfile
    Optional path for an additional file handler.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    root.addHandler(console)

    if logfile is not None:
        logfile.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(logfile, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

"""
Process-wide logging setup.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    if root.handlers:
        # Already configured (uvicorn, pytest, or a repeated create_app()).
        return

    logging.basicConfig(
        level=getattr(logging, (level or "").upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )

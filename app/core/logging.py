"""
Purpose:
- One place to configure stdlib logging for the API process.
- Modules log through logging.getLogger(__name__).
"""

from __future__ import annotations
import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_configured = False

def setup_logging(level: str = "INFO") -> None:
    """
    Attach a single stderr handler to the root logger.
    Safe to call more than once (create_app runs per test client).
    """
    global _configured
    root = logging.getLogger()
    root.setLevel(level.upper())
    if _configured:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # uvicorn ships its own access log; keep it but at our level
    logging.getLogger("uvicorn.access").setLevel(level.upper())
    _configured = True

# invoice_docgen/logging_setup.py
from __future__ import annotations

import logging
from typing import Optional

from .config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once for the CLI and the API process."""
    resolved = (level or LOG_LEVEL or "INFO").upper()
    logging.basicConfig(level=getattr(logging, resolved, logging.INFO), format=LOG_FORMAT)

from __future__ import annotations

import logging
from typing import Optional

from src.utils.config import get_log_level

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Root logging setup shared by the API, CLI and batch runner."""
    logging.basicConfig(level=(level or get_log_level()), format=LOG_FORMAT)

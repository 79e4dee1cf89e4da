from __future__ import annotations

import logging
import sys
from typing import Any


def configure_logging(level: str = "INFO", stream: Any | None = None) -> logging.Logger:
    logger = logging.getLogger("batch_namer")
    logger.handlers.clear()
    logger.propagate = False
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s", "%Y-%m-%d %H:%M:%S")
    )
    logger.addHandler(handler)
    return logger

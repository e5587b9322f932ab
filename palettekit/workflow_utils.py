"""
Workflow utilities: logging setup and structured (JSON) log lines for the CLI.
"""
import json
import logging
from typing import Any

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | int = "WARNING") -> None:
    """Configure the root logger once. Unknown level names fall back to WARNING."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


def log_structured(level: str, **kwargs: Any) -> None:
    """Emit one JSON log line."""
    record = {"level": level, **kwargs}
    line = json.dumps(record)
    if level == "error":
        logger.error("%s", line)
    elif level == "warning":
        logger.warning("%s", line)
    else:
        logger.info("%s", line)

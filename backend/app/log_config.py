from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone

PACKAGE_LOGGER = "backend"


class KeyValueFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")
        line = f"{ts} level={record.levelname} logger={record.name} msg={record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(level: str = "INFO") -> logging.Logger:
    lvl = getattr(logging, level.upper(), logging.INFO)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(lvl)

    # one handler per process
    for handler in logger.handlers:
        if isinstance(handler.formatter, KeyValueFormatter):
            handler.setLevel(lvl)
            return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(lvl)
    handler.setFormatter(KeyValueFormatter())
    logger.addHandler(handler)
    return logger

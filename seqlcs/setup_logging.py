"""Logging setup for applications embedding seqlcs; the library itself only emits records."""

import logging
import os
import sys
from pathlib import Path

LOG_LEVEL = logging.WARNING
LOG_LEVEL_ENV = "SEQLCS_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s:%(lineno)d  →  %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: int | str | None = None,
    log_file: str | Path | None = None,
) -> None:
    """
    Configures logging for applications embedding seqlcs. An explicit level
    wins over $SEQLCS_LOG_LEVEL, which wins over LOG_LEVEL. Under pytest it
    only adds a file handler instead of reconfiguring the root logger.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, LOG_LEVEL)

    if isinstance(level, str):
        level = level.upper()

    root = logging.getLogger()
    root.setLevel(level)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # skip if a handler for this file is already attached
        if not any(
            isinstance(h, logging.FileHandler)
            and h.baseFilename == str(log_path.resolve())
            for h in root.handlers
        ):
            file_handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            root.addHandler(file_handler)

    if not root.handlers:
        logging.basicConfig(
            level=level,
            format=LOG_FORMAT,
            datefmt=DATE_FORMAT,
            handlers=[logging.StreamHandler(sys.stdout)],
        )

"""Logging setup shared by the API, the web demo and the CLI."""
from __future__ import annotations

import logging
import os
from pathlib import Path

_NOISY_LOGGERS = ("urllib3", "httpx")


def setup_logging(level: str | None = None) -> None:
    """Log to the console and, unless ``SCHOOLSEARCH_LOG_FILE`` is empty, to a file.

    Does nothing when the root logger is already configured.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    level_name = (level or os.getenv("SCHOOLSEARCH_LOG_LEVEL", "INFO")).upper()
    resolved_level = getattr(logging, level_name, logging.INFO)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    log_file = os.getenv("SCHOOLSEARCH_LOG_FILE", "schoolsearch.log")
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    root_logger.setLevel(resolved_level)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(resolved_level, logging.WARNING))

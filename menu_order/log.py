"""Structured debug logging written to a file next to the TUI."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

import structlog

from menu_order.config import DEBUG_LOG_PATH, LOG_LEVEL


def configure_logging(path: str | Path = DEBUG_LOG_PATH, level: int = LOG_LEVEL) -> TextIO:
    """Route structlog output to ``path`` as JSON lines.

    The terminal belongs to Textual, so nothing may be printed to stdout
    while the app is running. The caller owns the returned file and closes
    it once logging is no longer needed.
    """
    log_path = Path(path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    log_file = log_path.open("a", encoding="utf-8")
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=log_file),
        cache_logger_on_first_use=False,
    )
    return log_file

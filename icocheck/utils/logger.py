#!/usr/bin/env python3
"""
Logging utilities for icocheck
"""

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class _StderrProxy:
    """Resolve sys.stderr at write time so redirected streams are honoured."""

    def write(self, data: str) -> int:
        return sys.stderr.write(data)

    def flush(self) -> None:
        sys.stderr.flush()


def setup_logger(
    name: str = "icocheck",
    level: int = logging.WARNING,
    log_file: str | Path | None = None,
) -> logging.Logger:
    """Setup logger with a stderr console handler and an optional file handler"""

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)

    # Console handler; stdout carries the verdict line only
    console_handler = logging.StreamHandler(_StderrProxy())
    console_handler.setLevel(logging.DEBUG)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Could not open log file {log_file}: {e}")

    return logger


def get_logger(name: str = "icocheck") -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)

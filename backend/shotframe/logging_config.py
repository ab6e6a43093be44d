"""Structured logging configuration for ShotFrame."""

from __future__ import annotations

import logging
import sys
import warnings

from PIL import Image

_NOISY_LOGGERS = ("PIL", "httpx", "gradio", "matplotlib")


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure structured logging for the application.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR).

    Returns:
        The root shotframe logger.
    """
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)-30s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger("shotframe")
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Avoid duplicate handlers on repeated calls
    if not root_logger.handlers:
        root_logger.addHandler(handler)

    # Third-party chatter stays at WARNING regardless of our level
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    # Pillow warns on very large exports; the export size is user-driven
    warnings.filterwarnings("ignore", category=Image.DecompressionBombWarning)

    return root_logger

"""
Logging Configuration
=====================

Configures the root logger exactly once with a console handler and,
optionally, a file handler.
"""
import logging
from pathlib import Path
from typing import Optional


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """
    Configure root logger.

    If the root logger already has handlers (tests, repeated app creation)
    this is a no-op.

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO"), case insensitive
        logfile: Optional path of a file to also log to
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

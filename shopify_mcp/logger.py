"""
File + stderr logger — NEVER writes to stdout (would corrupt the stdio MCP transport)
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .config import Config

_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"


def _rotating_handler(log_path: Path, level: int) -> RotatingFileHandler:
    """Rotating file handler on an owner-only (0600) log file."""
    # Log files may contain customer data; create them private before the
    # handler opens them, and tighten files left by an earlier run
    log_path.touch(mode=0o600, exist_ok=True)
    os.chmod(log_path, 0o600)

    handler = RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def get_logger(name: str) -> logging.Logger:
    """Get a logger that writes to the log files and stderr"""
    logger = logging.getLogger(f"shopify_mcp.{name}")
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)

    try:
        Config.ensure_dirs()
        logger.addHandler(_rotating_handler(Config.LOG_FILE, logging.DEBUG))
        # Separate error log
        logger.addHandler(_rotating_handler(Config.ERROR_LOG, logging.ERROR))
    except OSError as exc:
        sys.stderr.write(f"shopify-mcp: file logging disabled ({exc})\n")

    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(logging.INFO)
    sh.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(sh)

    # Never propagate to root (which might have stdout handlers)
    logger.propagate = False

    return logger

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from promptdirector.utils.env_cfg import load_log_env

_CONSOLE_FORMAT = "{time:HH:mm:ss} | {level:<8} | {name} | {message}"
_FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{line} | {message}"
)


def setup_logging(rotation: str = "2 MB", retention: int = 5) -> Path:
    """
    Route loguru output to stderr and to a rotating log file.

    The console sink honours ``LOG_LEVEL``; the file sink always records DEBUG
    so that request sizes and counter updates can be inspected after a run.

    Args:
        rotation (str, optional): Size at which the log file rotates. Defaults to "2 MB".
        retention (int, optional): Number of rotated files to keep. Defaults to 5.

    Returns:
        Path: The path to the log file.
    """
    log_cfg = load_log_env()
    log_cfg.path.parent.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.add(sink=sys.stderr, level=log_cfg.level, format=_CONSOLE_FORMAT)
    logger.add(
        sink=log_cfg.path,
        level="DEBUG",
        rotation=rotation,
        retention=retention,
        encoding="utf-8",
        enqueue=True,
        format=_FILE_FORMAT,
    )
    logger.debug("Logging to {} (console level {})", log_cfg.path, log_cfg.level)
    return log_cfg.path

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from bytekit.infra.paths import PACKAGE_NAME

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILENAME = f"{PACKAGE_NAME}.log"


def setup_logging(
    log_level: str = "INFO",
    log_dir: str | Path | None = None,
    *,
    max_bytes: int = 1_048_576,
    backup_count: int = 3,
) -> logging.Logger:
    """Configure the package logger.

    Existing handlers on the package logger are replaced, so repeated calls
    do not duplicate output.

    Args:
        log_level: Level name such as ``"DEBUG"`` or ``"INFO"``.
        log_dir: Directory for a rotating log file. Console only if None.
        max_bytes: Size at which the log file rotates.
        backup_count: Number of rotated files to keep.

    Returns:
        The configured ``bytekit`` logger.

    Raises:
        ValueError: If ``log_level`` is not a known level name.
    """
    if not isinstance(log_level, str):
        raise ValueError(f"Log level must be str, got {type(log_level).__name__}")

    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    logger = logging.getLogger(PACKAGE_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_dir is not None:
        path = Path(log_dir).expanduser()
        path.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            path / LOG_FILENAME,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.setLevel(level)
    logger.propagate = False
    return logger

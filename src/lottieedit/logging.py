from __future__ import annotations
import logging, logging.handlers
from pathlib import Path

from .config import APP_NAME, LOG_DIR, LOG_LEVEL

FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int | str | None = None, log_dir: Path | None = None) -> logging.Logger:
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(level or LOG_LEVEL)

    # Clear duplicate handlers if reinit
    for h in list(logger.handlers):
        logger.removeHandler(h)

    fmt = logging.Formatter(fmt=FORMAT, datefmt=DATEFMT)

    log_dir = log_dir or LOG_DIR
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(
            log_dir / f"{APP_NAME}.log", maxBytes=1_000_000, backupCount=3, encoding="utf-8"
        )
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    logger.debug("%s logging initialised (level %s)", APP_NAME, logging.getLevelName(logger.level))
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return a logger under the package logger configured by setup_logging().
    Usage: from lottieedit.logging import get_logger; log = get_logger(__name__)
    """
    return logging.getLogger(name or APP_NAME)

from __future__ import annotations
import logging, logging.handlers
from pathlib import Path

APP_NAME = "DropKit"
LOG_DIR = Path.home() / "DropKit" / "logs"


def setup_logging(level: int = logging.INFO, log_dir: Path | None = None) -> logging.Logger:
    log_dir = log_dir or LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{APP_NAME.lower()}.log"

    logger = logging.getLogger()  # root
    logger.setLevel(level)

    # Clear duplicate handlers if reinit
    for h in list(logger.handlers):
        logger.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    fh = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=10_000_000, backupCount=5, encoding="utf-8"
    )
    fh.setFormatter(fmt)
    fh.setLevel(level)
    logger.addHandler(fh)

    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    ch.setLevel(level)
    logger.addHandler(ch)

    logger.info("%s logging initialised • %s", APP_NAME, log_file)
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return a child logger of the root configured by setup_logging().
    Usage: from dropkit.core.logging import get_logger; log = get_logger(__name__)
    """
    return logging.getLogger(name or APP_NAME)

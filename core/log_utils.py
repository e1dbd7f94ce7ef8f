# core/log_utils.py
from __future__ import annotations
import logging
import sys
from typing import Optional

LOGGER_NAME = "spg"
_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the 'spg' logger once: stderr handler, plus a file handler when log_file is set.
    Calling it again only updates the level.
    """
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    if not log.handlers:
        fmt = logging.Formatter(_FORMAT, _DATEFMT)
        eh = logging.StreamHandler(sys.stderr)  # stdout belongs to the CLI output
        eh.setFormatter(fmt)
        log.addHandler(eh)
        if log_file:
            fh = logging.FileHandler(log_file, encoding="utf-8")
            fh.setFormatter(fmt)
            log.addHandler(fh)
    return log


def get_logger(name: str) -> logging.Logger:
    # core.password_utils -> spg.password_utils
    return logging.getLogger(f"{LOGGER_NAME}.{name.rsplit('.', 1)[-1]}")

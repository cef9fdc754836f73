"""Logging setup shared by the app entry point and the module servers."""
import logging
import sys
from typing import Optional

from module_gallery.config import get_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
ROOT_LOGGER = "module_gallery"

_configured = False


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
    """Configure the package logger once; later calls only adjust the level."""
    global _configured
    settings = get_settings()
    level = (level or settings.log_level).upper()
    log_file = log_file or settings.log_file

    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(getattr(logging, level, logging.INFO))

    if not _configured:
        formatter = logging.Formatter(LOG_FORMAT)
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        root.addHandler(handler)

        if log_file:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

        root.propagate = False
        _configured = True

    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)

# Licensed under the Apache License, Version 2.0
import logging
import os
from pathlib import Path
from typing import Optional, Union

from . import __version__
from .adapters.local_fs import LocalFS
from .services.file_service import FileService

FMT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def log_file_name() -> str:
    return f"arbor-{__version__}.log"


def setup_logging(log_dir: Optional[Union[str, Path]] = None) -> Optional[Path]:
    """
    Configure root logging from ARBOR_LOG_LEVEL. When a log directory is given
    (or ARBOR_LOG_DIR is set) it is created if needed and a file sink is added.

    Returns the log file path, or None when logging only to stderr.
    """
    level_name = os.getenv("ARBOR_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level, format=FMT)

    log_dir = log_dir or os.getenv("ARBOR_LOG_DIR")
    if not log_dir:
        return None

    FileService(LocalFS()).create_directory(log_dir)
    target = Path(log_dir) / log_file_name()
    root = logging.getLogger()
    for h in root.handlers:
        if isinstance(h, logging.FileHandler) and h.baseFilename == os.path.abspath(target):
            return target
    handler = logging.FileHandler(target, encoding="utf-8")
    handler.setFormatter(logging.Formatter(FMT))
    root.addHandler(handler)
    return target

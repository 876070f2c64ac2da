"""Logging utilities."""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def init_logging(
    level: str = "WARNING", log_path: Optional[Union[str, Path]] = None
) -> None:
    """Set up logging to stderr and, optionally, to ``log_path``.

    stdout is left alone: it carries the rendered report.
    """
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_path is not None:
        handlers.append(logging.FileHandler(log_path, mode="w"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

# logger_utils.py - logging setup and timing helpers

import logging
import os
import time
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# format used for the optional log file
FILE_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER = "markov_text_generator"


def configure_logging(level: str = "INFO", log_path: Optional[str] = None) -> logging.Logger:
    """
    Attach handlers to the package logger.
    Console output goes through Rich, and a plain-text file is written
    as well when log_path is given. Safe to call more than once.
    """
    root = logging.getLogger(PACKAGE_LOGGER)
    root.setLevel(level.upper() if isinstance(level, str) else level)
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    console = RichHandler(console=Console(stderr=True), show_path=False)
    console.setFormatter(logging.Formatter("%(message)s", datefmt=DATE_FORMAT))
    root.addHandler(console)

    if log_path:
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(fh)

    root.propagate = False
    return root


def time_block(label: str, logger: Optional[logging.Logger] = None) -> "_Timer":
    """
    Helper for measuring execution time of a code block.
    To use:
        with time_block("training"):
            do_some_work()
    The elapsed time is logged at INFO level when the block exits.
    """
    return _Timer(label, logger or logging.getLogger(PACKAGE_LOGGER))


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label: str, logger: logging.Logger):
        self.label = label
        self.logger = logger
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = round(time.perf_counter() - self.start, 3)
        if exc_type is None:
            self.logger.info("%s done in %.3fs", self.label, self.elapsed)
        else:
            self.logger.warning("%s failed after %.3fs", self.label, self.elapsed)
        return False

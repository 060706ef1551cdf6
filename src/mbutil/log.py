"""Logging setup for applications embedding mbutil. The library itself never configures logging."""

from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    level: str = "INFO",
    log_file: str | os.PathLike | None = None,
) -> logging.Logger:
    """
    Configure the "mbutil" logger: level from verbose/quiet or level, console handler,
    optional file handler for log_file. Handlers are added only once.
    """
    if verbose:
        level_name = "DEBUG"
    elif quiet:
        level_name = "ERROR"
    else:
        level_name = (level or "INFO").upper()
    root = logging.getLogger("mbutil")
    root.setLevel(getattr(logging, level_name, logging.INFO))
    if not root.handlers:
        fmt = logging.Formatter(LOG_FORMAT)
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(fmt)
        root.addHandler(console)
        if log_file:
            try:
                fh = logging.FileHandler(log_file, encoding="utf-8")
            except OSError:
                root.warning("Cannot open log file %s; logging to stderr only", log_file)
            else:
                fh.setFormatter(fmt)
                root.addHandler(fh)
    return root

"""Logging — console handler plus an optional rotating log file."""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys

from server.config import LOG_FILE, LOG_LEVEL


def setup_logging(*, level: str = LOG_LEVEL, log_file: str = LOG_FILE) -> None:
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for h in list(root.handlers):
        root.removeHandler(h)

    # Console: stderr, so plan output on stdout stays clean
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(getattr(logging, level.upper(), logging.INFO))
    ch.setFormatter(logging.Formatter(fmt="%(levelname)s %(name)s: %(message)s"))
    root.addHandler(ch)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(
            filename=log_file,
            maxBytes=1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)-8s %(name)s [%(filename)s:%(lineno)d] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(fh)

    root.debug("Logging initialized. level=%s log_file=%s", level, log_file or "-")

from __future__ import annotations

import logging
import sys

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
QUIET_FORMAT = "%(message)s"


def setup_logging(level: str = "WARNING", quiet: bool = False) -> None:
    name = level.upper()
    if name not in LEVELS:
        raise ValueError(f"unknown log level: {level}")

    root = logging.getLogger()
    root.handlers.clear()
    lvl = getattr(logging, name)
    root.setLevel(lvl)

    # stdout carries decoded results; diagnostics go to stderr
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(lvl)
    ch.setFormatter(logging.Formatter(QUIET_FORMAT if quiet else LOG_FORMAT))
    root.addHandler(ch)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)

"""Logging setup for sparse-scene."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
THREADED_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(threadName)-24s | %(name)s | %(message)s"


def setup_logging(level: str | int = "INFO", show_threads: bool = False) -> None:
    """Configure root logging on stdout.

    ``show_threads`` adds the thread name, which identifies the assembly
    worker that handled each view.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())
    logging.basicConfig(
        level=level,
        format=THREADED_LOG_FORMAT if show_threads else LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )

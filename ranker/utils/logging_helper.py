#!/usr/bin/env python
"""
logging_helper.py – per-module loggers for ranker.

Usage:
    from ranker.utils.logging_helper import get_logger
    log = get_logger()                  # named after the calling module
    log.warning("Skipping decision %s", decision_id)

Every logger echoes to stdout. It also appends to <log dir>/<module>.log,
where the log dir is $RANKER_LOG_DIR (default ``logs``). Setting
RANKER_LOG_DIR to an empty string turns file output off. $RANKER_LOG_LEVEL
(e.g. ``WARNING``) sets the default level.
"""

from __future__ import annotations
import inspect, logging, os, sys
from pathlib import Path

FILE_FMT    = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
CONSOLE_FMT = "[%(levelname)s] %(message)s"
DATE_FMT    = "%Y-%m-%d %H:%M:%S"


def _caller_module_name(frame_info: inspect.FrameInfo) -> str:
    """Last dotted part of the caller's module, or its file stem for scripts."""
    module = inspect.getmodule(frame_info.frame)
    if module is not None and module.__name__ != "__main__":
        return module.__name__.rsplit(".", 1)[-1]
    return Path(frame_info.filename).stem


def _default_level() -> int:
    level = logging.getLevelName(os.environ.get("RANKER_LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def get_logger(level: int | None = None,
               log_dir: str | Path | None = None) -> logging.Logger:
    """Return the ``ranker.<module>`` logger, attaching handlers on first use."""
    name = _caller_module_name(inspect.stack()[1])
    logger = logging.getLogger(f"ranker.{name}")
    if logger.handlers:
        return logger

    level = _default_level() if level is None else level
    logger.setLevel(level)
    logger.propagate = False

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter(CONSOLE_FMT))
    logger.addHandler(console)

    target = os.environ.get("RANKER_LOG_DIR", "logs") if log_dir is None else str(log_dir)
    if target:
        Path(target).mkdir(parents=True, exist_ok=True)
        to_file = logging.FileHandler(Path(target) / f"{name}.log", encoding="utf-8")
        to_file.setFormatter(logging.Formatter(FILE_FMT, DATE_FMT))
        logger.addHandler(to_file)
    return logger

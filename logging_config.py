# logging_config.py
from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "PATTERN_DEMOS_LOG_LEVEL"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def resolve_level(name: str | None, default: int = logging.WARNING) -> int:
    """Level for a name like "debug"; unknown or empty names fall back to `default`."""
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def configure_logging(level: str | None = None) -> int:
    """
    Sends log records to stderr so they never mix with the demo output on stdout.
    `level` wins over PATTERN_DEMOS_LOG_LEVEL; the default is WARNING.
    Returns the level that was applied.
    """
    requested = level if level is not None else os.getenv(LOG_LEVEL_ENV)
    resolved = resolve_level(requested)

    root = logging.getLogger()
    if not any(getattr(h, "_pattern_demos", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._pattern_demos = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    root.setLevel(resolved)

    if requested and resolve_level(requested, default=-1) == -1:
        logging.getLogger(__name__).warning("Unknown log level %r, using WARNING", requested)
    return resolved

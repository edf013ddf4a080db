from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = "INFO"


def env_log_level() -> str:
    """LOG_LEVEL=DEBUG / INFO / WARNING / ERROR, read at call time."""
    return os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def setup_logging(level: str | None = None) -> None:
    """Call once at program start (cli.main). ``level=None`` uses LOG_LEVEL."""
    name = (level or env_log_level()).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)

"""Logging utilities for the crossword engine and its command-line host."""

from __future__ import annotations

import logging
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
ROOT_LOGGER_NAME = "wordquest"


def resolve_level(level: Union[int, str]) -> int:
    """Accept ``logging.DEBUG`` style ints or names such as ``"debug"``."""

    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.INFO)


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure root logging with a single stream handler.

    The engine only logs above DEBUG for data problems, so the default INFO
    level mostly shows level changes and dictionary lookups made by the host.
    """

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolve_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or ROOT_LOGGER_NAME)

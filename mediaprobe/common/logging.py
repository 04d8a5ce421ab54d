# mediaprobe/common/logging.py
from __future__ import annotations

import logging
from typing import Optional, Union

ROOT_LOGGER = "mediaprobe"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_level(level: Union[int, str, None]) -> int:
    """Map "debug"/"WARNING"/10 style levels to an int; unknown names fall back to INFO."""
    if isinstance(level, int):
        return level
    if not level:
        return logging.INFO
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else logging.INFO


def get_logger(name: Optional[str] = None, level: Union[int, str, None] = None) -> logging.Logger:
    """
    Logger under the `mediaprobe` hierarchy; pass `__name__` from a module.

    The package logger takes its level from Settings.log_level (LOG_LEVEL env)
    unless one is given. Under Uvicorn the existing handlers are reused;
    otherwise basicConfig runs once.
    """
    if level is None:
        from mediaprobe.common.settings import get_settings
        level = get_settings().log_level

    root = logging.getLogger(ROOT_LOGGER)
    if not logging.getLogger().handlers and not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(resolve_level(level))

    if not name or name == ROOT_LOGGER:
        return root
    if not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)

import logging
import os
from typing import Optional

ROOT_LOGGER_NAME = "basketball"


def get_logger(name: Optional[str] = None, log_level: Optional[str] = None) -> logging.Logger:
    """Get a logger under the package root logger.

    The root ``basketball`` logger gets a single stream handler the first time
    it is requested; children propagate to it. The level comes from
    ``log_level`` or the ``LOG_LEVEL`` environment variable (default WARNING).
    An unknown ``LOG_LEVEL`` falls back to WARNING; an unknown ``log_level``
    raises ``ValueError``.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter(
            "[%(asctime)s] %(levelname)s %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(fmt)
        root.addHandler(handler)
        env_level = os.environ.get("LOG_LEVEL", "WARNING")
        level = logging.getLevelName(env_level.upper())
        if isinstance(level, int):
            root.setLevel(level)
        else:
            root.setLevel(logging.WARNING)
            root.warning("Ignoring unknown LOG_LEVEL %r", env_level)
    if log_level is not None:
        root.setLevel(log_level.upper())

    if not name or name == ROOT_LOGGER_NAME:
        return root
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_log_level(log_level: str) -> None:
    get_logger(log_level=log_level)

"""
Logging setup for the Juice Bar API.

All application modules log through ``logging.getLogger(__name__)``.
``setup_logging`` installs one console handler (and optionally a file
handler) on the root logger and routes uvicorn's loggers through it so
that server and application messages share one format.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers of third‑party components whose output should go through
# the root handlers instead of their own.
PROPAGATED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _resolve_level(level: str) -> int:
    numeric_level = logging.getLevelName(level.upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"``; unknown names fall back to INFO.
    logfile : Optional[str]
        Extra file to append log records to.

    Calling it again, or after another tool (pytest, uvicorn's
    ``--log-config``) attached handlers, changes nothing.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(_resolve_level(level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in PROPAGATED_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True

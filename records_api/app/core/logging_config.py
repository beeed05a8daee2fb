"""
Logging setup for the records service.

Everything logs through the stdlib ``logging`` module.  ``setup_logging``
attaches the handlers built by ``build_handlers`` to the root logger
once, and keeps uvicorn's own loggers at the same level so request and
storage messages share one threshold.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its number; unknown names mean INFO."""
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def build_handlers(logfile: Optional[str] = None) -> List[logging.Handler]:
    """Return a console handler plus a UTF-8 file handler when ``logfile`` is set."""
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger unless something already has.

    Repeated calls, e.g. one ``create_app`` per test, leave existing
    handlers in place.
    """
    numeric_level = resolve_level(level)
    for name in SERVER_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(numeric_level)
    for handler in build_handlers(logfile):
        root.addHandler(handler)

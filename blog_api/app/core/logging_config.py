"""
Logging setup for the application.

Logging is configured once, on the root logger, when the app is
created.  Modules log through ``logging.getLogger(__name__)`` and
inherit whatever handlers are installed here: always the console,
plus a file when ``LOG_FILE`` is set.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    return handlers


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Install console (and optional file) handlers on ``logger``.

    ``logger`` defaults to the root logger.  Does nothing when it
    already has handlers, which is the case under a test runner or
    when ``create_app`` runs twice.
    ``level`` is a level name such as ``"debug"``; unknown names mean
    ``INFO``.
    """
    target = logger or logging.getLogger()
    if target.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(logfile):
        handler.setFormatter(formatter)
        target.addHandler(handler)
    numeric_level = getattr(logging, level.upper(), None)
    target.setLevel(numeric_level if isinstance(numeric_level, int) else logging.INFO)

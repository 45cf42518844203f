"""
Logging configuration for the API process.

``setup_logging`` installs one timestamped format on the root logger
(console, plus a file when ``LOG_FILE`` is set) and routes uvicorn's
own loggers through it, so server, access and application records all
come out in the same format whether the app is started by ``run.py``
or by the ``uvicorn`` command line.
"""

import logging
from pathlib import Path
from typing import List

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers uvicorn configures with handlers of its own.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def build_handlers(settings: Settings) -> List[logging.Handler]:
    """Return the console handler and, if configured, the file handler."""
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(settings: Settings) -> None:
    """Configure the root logger and hand uvicorn's loggers over to it.

    Root handlers are only attached when none exist yet, so calling
    this twice (tests, repeated ``create_app``) does not duplicate
    output.  Uvicorn's loggers are stripped of their handlers on every
    call and made to propagate to the root logger.
    """
    root = logging.getLogger()
    if not root.handlers:
        root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
        for handler in build_handlers(settings):
            root.addHandler(handler)

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True

"""
Logging setup shared by the application and the uvicorn server.

Application modules log through ``logging.getLogger(__name__)``.  The
server's own loggers are routed through the same root handler so that
access and error lines from uvicorn share the application's format
instead of uvicorn's default one.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger and hand uvicorn's loggers over to it.

    ``level`` is a logging level name such as ``"DEBUG"``; unknown names
    fall back to ``INFO``.  The root handler is only installed once per
    process, so calling this again (e.g. one app per test) is harmless.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, datefmt=DATE_FORMAT)

    for name in UVICORN_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True

from __future__ import annotations

import logging
import time
from typing import Optional

from fastapi import Request

ROOT_LOGGER = "tasks_api"

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_console_handler: Optional[logging.Handler] = None


# PUBLIC_INTERFACE
def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the application logger hierarchy.

    A single console handler is attached to the 'tasks_api' logger; calling
    this again only adjusts the level, so repeated app construction (tests)
    does not duplicate output.
    """
    global _console_handler

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    if _console_handler is None:
        _console_handler = logging.StreamHandler()
        _console_handler.setFormatter(logging.Formatter(_FORMAT))
    if _console_handler not in logger.handlers:
        logger.addHandler(_console_handler)
    return logger


# PUBLIC_INTERFACE
def get_logger(name: str) -> logging.Logger:
    """Return a logger under the application hierarchy."""
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


_request_logger = get_logger("requests")


async def log_requests(request: Request, call_next):
    """HTTP middleware: one line per request with status and duration."""
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    _request_logger.info(
        "%s %s -> %d (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response

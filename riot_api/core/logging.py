"""Logging configuration for applications using the Riot API client.

The library only emits through ``structlog.get_logger``. Applications call
``setup_logging`` once to route those events, and the stdlib records of
``httpx``, to a handler under the ``riot_api`` logger namespace.
"""

import logging
from typing import Any, List, Optional

import structlog

from .config import get_global_settings

LOGGER_NAMESPACE = "riot_api"


def _resolve_level(log_level: Optional[str]) -> int:
    if log_level is None:
        log_level = get_global_settings().log_level
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {log_level!r}")
    return level


def setup_logging(
    log_level: Optional[str] = None,
    json_logs: bool = True,
    handler: Optional[logging.Handler] = None,
) -> logging.Handler:
    """
    Configure structlog on top of stdlib logging.

    :param log_level: Level name; defaults to ``Settings.log_level``
    :param json_logs: One JSON object per line, or human readable console
        output when False
    :param handler: Where rendered lines go; stderr if None
    :returns: The handler installed on the ``riot_api`` logger
    :raises ValueError: If ``log_level`` is not a stdlib level name
    """
    level = _resolve_level(log_level)

    shared_processors: List[Any] = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = handler or logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    # httpx logs each request at INFO; keep it with the client's events
    for name in (LOGGER_NAMESPACE, "httpx"):
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.handlers = [handler]
        stdlib_logger.setLevel(level)
        stdlib_logger.propagate = False

    return handler


def get_logger(name: str) -> Any:
    """
    Get a structlog logger.

    :param name: Logger name (usually __name__)
    :returns: Logger instance
    """
    return structlog.get_logger(name)

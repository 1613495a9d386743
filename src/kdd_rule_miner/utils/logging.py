"""Structured logging utilities."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

import structlog


def configure_logging(level: Union[int, str] = logging.INFO, json_output: bool = False) -> None:
    """Configure structlog for console output filtered at ``level``."""

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")
    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        cache_logger_on_first_use=False,
    )
    logging.basicConfig(level=level)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(name)


def log_config(logger: structlog.stdlib.BoundLogger, config: Dict[str, Any]) -> None:
    """Log a configuration snapshot."""

    logger.info("config", **config)

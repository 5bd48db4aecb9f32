"""
Structlog configuration and helpers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import structlog

if TYPE_CHECKING:
    from survey_kpi.infra.config.settings import Settings

_configured = False


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    settings: Optional["Settings"] = None,
) -> None:
    """Configure structlog for the package.

    Args:
        log_level: Optional log level name (e.g., "INFO"). Defaults from settings.
        log_format: "json" or "console". Defaults from settings.
        settings: Settings to read defaults from; the cached instance if omitted.
    """
    global _configured
    if settings is None:
        from survey_kpi.infra.config.settings import get_settings

        settings = get_settings()

    level_name = (log_level or settings.log_level or "INFO").upper()
    fmt = (log_format or settings.log_format or "json").lower()
    level = getattr(logging, level_name, logging.INFO)

    # The OpenAI SDK logs every HTTP request through httpx at INFO
    logging.basicConfig(level=level)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    renderer = (
        structlog.processors.JSONRenderer(sort_keys=True)
        if fmt == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
    _configured = True


def ensure_logging(settings: Optional["Settings"] = None) -> None:
    """Run setup_logging once; later calls keep the existing configuration."""
    if not _configured:
        setup_logging(settings=settings)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:  # type: ignore[name-defined]
    if name:
        return structlog.get_logger(name)
    return structlog.get_logger()


def bind_context(**kwargs) -> None:
    """Bind fields (record_count, language) onto every log line of this task."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()

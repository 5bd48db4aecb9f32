"""Configuration: settings and logging."""

from .settings import Settings, get_settings, reset_settings
from .logging_config import (
    bind_context,
    clear_context,
    ensure_logging,
    get_logger,
    setup_logging,
)

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "setup_logging",
    "ensure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]

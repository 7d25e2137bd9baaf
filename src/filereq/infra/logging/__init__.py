from __future__ import annotations

from .config import LoggingConfig, parse_level
from .core import (
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    configure_logging,
    shutdown_logging,
)

__all__ = [
    "LoggingConfig",
    "configure_logging",
    "parse_level",
    "shutdown_logging",
]

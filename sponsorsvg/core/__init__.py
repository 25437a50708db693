"""Core utilities for sponsorsvg.

This module exports commonly used utilities for easy importing:
    from sponsorsvg.core import get_logger, get_settings
"""

from sponsorsvg.core.config import (
    DEFAULT_INLINE_CSS,
    ImageFormat,
    Settings,
    clear_settings_cache,
    get_settings,
)
from sponsorsvg.core.logger import (
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
)

__all__ = [
    "DEFAULT_INLINE_CSS",
    "ImageFormat",
    "Settings",
    "bind_contextvars",
    "clear_contextvars",
    "clear_settings_cache",
    "configure_logging",
    "get_logger",
    "get_settings",
]

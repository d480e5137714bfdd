"""
Shared module - Cross-cutting concerns / Shared Layer

Constants, enums and logging helpers used across the domain, application,
infrastructure and presentation layers. It must not depend on any of them.
"""

from .consts import DEFAULT_MODEL_LABEL, EnumEnvironment, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "DEFAULT_MODEL_LABEL",
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]

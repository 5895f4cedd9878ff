"""Core package containing errors and logging."""

from agent_guides.core.errors import (
    ConfigError,
    DuplicateIdError,
    GuideParseError,
    GuidesError,
    InvalidIdError,
    NotFoundError,
    RegistryError,
)
from agent_guides.core.logging import get_logger, setup_logging

__all__ = [
    "ConfigError",
    "DuplicateIdError",
    "GuideParseError",
    "GuidesError",
    "InvalidIdError",
    "NotFoundError",
    "RegistryError",
    "get_logger",
    "setup_logging",
]

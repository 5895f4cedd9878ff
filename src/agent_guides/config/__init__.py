"""Configuration system for agent-guides."""

from agent_guides.config.loader import ConfigLoader
from agent_guides.config.models import GuidesConfig
from agent_guides.config.sources import (
    EnvironmentSource,
    IConfigSource,
    JsonFileSource,
    YamlFileSource,
)

__all__ = [
    "ConfigLoader",
    "EnvironmentSource",
    "GuidesConfig",
    "IConfigSource",
    "JsonFileSource",
    "YamlFileSource",
]

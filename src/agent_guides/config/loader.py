"""Configuration loader for agent-guides.

This module implements the ConfigLoader class that handles layered
configuration loading, merging, and validation.
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from agent_guides.config.models import GuidesConfig
from agent_guides.config.sources import (
    EnvironmentSource,
    IConfigSource,
    JsonFileSource,
    YamlFileSource,
)
from agent_guides.core import ConfigError, get_logger

logger = get_logger("config.loader")


class ConfigLoader:
    """Configuration loader with layered merging.

    Load order (later overrides earlier):
    1. Defaults (from GuidesConfig)
    2. User settings (~/.guides/settings.json or .yaml)
    3. Project settings (.guides/settings.json or .yaml)
    4. Environment variables (GUIDES_*)
    """

    def __init__(
        self,
        user_dir: Path | None = None,
        project_dir: Path | None = None,
        environ: dict[str, str] | None = None,
    ) -> None:
        """Initialize configuration loader.

        Args:
            user_dir: User configuration directory. Defaults to ~/.guides
            project_dir: Project configuration directory. Defaults to ./.guides
            environ: Environment mapping. Defaults to os.environ
        """
        self._user_dir = user_dir or Path.home() / ".guides"
        self._project_dir = project_dir or Path.cwd() / ".guides"
        self._environ = environ

    @property
    def user_dir(self) -> Path:
        """Get user configuration directory."""
        return self._user_dir

    @property
    def project_dir(self) -> Path:
        """Get project configuration directory."""
        return self._project_dir

    def _file_source(self, directory: Path) -> IConfigSource:
        """Pick settings.json if present, else settings.yaml."""
        json_path = directory / "settings.json"
        if json_path.exists():
            return JsonFileSource(json_path)
        return YamlFileSource(directory / "settings.yaml")

    def load_all(self) -> GuidesConfig:
        """Load and merge all configuration sources.

        Returns:
            Validated GuidesConfig with all sources merged.

        Raises:
            ConfigError: If the merged configuration is invalid.
        """
        config: dict[str, Any] = GuidesConfig().model_dump()

        config = self._load_and_merge(config, self._file_source(self._user_dir))
        config = self._load_and_merge(config, self._file_source(self._project_dir))
        config = self._load_and_merge(config, EnvironmentSource(self._environ))

        try:
            return GuidesConfig.model_validate(config)
        except ValidationError as e:
            logger.error("Configuration validation failed: %s", e)
            raise ConfigError(f"Configuration validation failed: {e}") from e

    def _load_and_merge(
        self,
        base: dict[str, Any],
        source: IConfigSource,
    ) -> dict[str, Any]:
        """Load from source and merge into base config.

        Unreadable sources are skipped and base is returned unchanged.
        """
        try:
            if source.exists():
                override = source.load()
                if override:
                    logger.debug("Loaded config from %s", source)
                    return self.merge(base, override)
        except ConfigError as e:
            logger.debug("Skipped config source %s: %s", source, e)
        except FileNotFoundError:
            # File was deleted between exists() and load()
            logger.debug("Config source %s disappeared before load", source)
        return base

    def merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Merge two configuration dictionaries.

        Settings are flat, so each key in override replaces the value in
        base, lists included. Inputs are not modified.
        """
        result = copy.deepcopy(base)
        result.update(copy.deepcopy(override))
        return result

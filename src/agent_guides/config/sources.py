"""Configuration sources for agent-guides.

Each source loads a partial settings dictionary from one place: a JSON
file, a YAML file, or the environment.
"""

from __future__ import annotations

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, ClassVar

import yaml

from agent_guides.core import ConfigError, get_logger

logger = get_logger("config.sources")


class IConfigSource(ABC):
    """Interface for configuration sources."""

    @abstractmethod
    def load(self) -> dict[str, Any]:
        """Load configuration from source.

        Returns:
            Dictionary containing configuration data.
            Returns empty dict if source doesn't exist.

        Raises:
            ConfigError: If source exists but cannot be parsed.
        """
        ...

    @abstractmethod
    def exists(self) -> bool:
        """Check if source exists."""
        ...


class JsonFileSource(IConfigSource):
    """Load configuration from JSON file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> dict[str, Any]:
        """Load configuration from JSON file.

        Raises:
            ConfigError: If file exists but contains invalid JSON.
        """
        if not self.exists():
            return {}

        try:
            content = self._path.read_text(encoding="utf-8")
        except OSError as e:
            logger.warning("Cannot read %s: %s", self._path, e)
            raise ConfigError(f"Cannot read {self._path}: {e}") from e

        if not content.strip():
            return {}

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.warning("Invalid JSON in %s: %s", self._path, e)
            raise ConfigError(f"Invalid JSON in {self._path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"JSON root must be object, got {type(data).__name__}")
        return data

    def exists(self) -> bool:
        """Check if JSON file exists."""
        return self._path.is_file()

    @property
    def path(self) -> Path:
        """Get the file path."""
        return self._path

    def __repr__(self) -> str:
        return f"JsonFileSource({self._path})"


class YamlFileSource(IConfigSource):
    """Load configuration from YAML file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> dict[str, Any]:
        """Load configuration from YAML file.

        Raises:
            ConfigError: If file exists but contains invalid YAML.
        """
        if not self.exists():
            return {}

        try:
            with self._path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.warning("Invalid YAML in %s: %s", self._path, e)
            raise ConfigError(f"Invalid YAML in {self._path}: {e}") from e
        except OSError as e:
            logger.warning("Cannot read %s: %s", self._path, e)
            raise ConfigError(f"Cannot read {self._path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"YAML root must be mapping, got {type(data).__name__}")
        return data

    def exists(self) -> bool:
        """Check if YAML file exists."""
        return self._path.is_file()

    @property
    def path(self) -> Path:
        """Get the file path."""
        return self._path

    def __repr__(self) -> str:
        return f"YamlFileSource({self._path})"


class EnvironmentSource(IConfigSource):
    """Load configuration from environment variables.

    - GUIDES_DIRS -> guide_dirs (os.pathsep separated)
    - GUIDES_INCLUDE_BUILTIN -> include_builtin
    - GUIDES_INCLUDE_DEFAULT_PATHS -> include_default_paths
    - GUIDES_LOG_LEVEL -> log_level
    """

    MAPPINGS: ClassVar[dict[str, str]] = {
        "GUIDES_DIRS": "guide_dirs",
        "GUIDES_INCLUDE_BUILTIN": "include_builtin",
        "GUIDES_INCLUDE_DEFAULT_PATHS": "include_default_paths",
        "GUIDES_LOG_LEVEL": "log_level",
    }

    BOOLEAN_KEYS: ClassVar[frozenset[str]] = frozenset({
        "include_builtin", "include_default_paths"
    })
    PATH_LIST_KEYS: ClassVar[frozenset[str]] = frozenset({"guide_dirs"})

    def __init__(self, environ: dict[str, str] | None = None) -> None:
        """Initialize environment source.

        Args:
            environ: Environment dictionary. Defaults to os.environ.
        """
        self._environ = environ if environ is not None else dict(os.environ)

    def load(self) -> dict[str, Any]:
        """Load configuration from environment variables."""
        config: dict[str, Any] = {}

        for env_var, key in self.MAPPINGS.items():
            value = self._environ.get(env_var)
            if value is not None:
                config[key] = self._convert_value(value, key)

        return config

    def exists(self) -> bool:
        """Environment always exists."""
        return True

    def _convert_value(self, value: str, key: str) -> Any:
        """Convert string value to the type expected for key."""
        if key in self.BOOLEAN_KEYS:
            return value.strip().lower() in ("true", "1", "yes", "on")

        if key in self.PATH_LIST_KEYS:
            return [part for part in value.split(os.pathsep) if part.strip()]

        return value

    def __repr__(self) -> str:
        return "EnvironmentSource()"

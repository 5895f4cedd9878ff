"""Configuration models for agent-guides.

Settings decide which directories feed the registry and how loudly it
logs. Validation happens once, when the merged settings are loaded.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from agent_guides.core.logging import LOG_LEVEL_MAP


class GuidesConfig(BaseModel):
    """Root configuration model.

    Attributes:
        guide_dirs: Extra directories (or files) of guide documents.
        include_builtin: Load the guides shipped with the package.
        include_default_paths: Load ~/.guides/agents and ./.guides/agents.
        extensions: File suffixes treated as guide documents.
        log_level: Console log level.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields
    )

    guide_dirs: list[Path] = Field(default_factory=list)
    include_builtin: bool = True
    include_default_paths: bool = True
    extensions: list[str] = Field(default_factory=lambda: [".md", ".markdown", ".txt"])
    log_level: str = "WARNING"

    @field_validator("guide_dirs")
    @classmethod
    def expand_guide_dirs(cls, v: list[Path]) -> list[Path]:
        """Expand ~ in guide directories."""
        return [path.expanduser() for path in v]

    @field_validator("extensions")
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        """Normalize suffixes to lowercase with a leading dot."""
        result: list[str] = []
        for ext in v:
            ext = ext.strip().lower()
            if not ext or ext == ".":
                raise ValueError("Extension must be a non-empty string")
            if not ext.startswith("."):
                ext = f".{ext}"
            if ext not in result:
                result.append(ext)
        if not result:
            raise ValueError("At least one extension is required")
        return result

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known level name."""
        level = v.strip().upper()
        if level not in LOG_LEVEL_MAP:
            raise ValueError(f"log_level must be one of: {', '.join(LOG_LEVEL_MAP)}")
        return level

"""
Agent registry package.

Maps agent ids to their guideline documents.
"""

from pathlib import Path

from agent_guides.config import ConfigLoader, GuidesConfig

from .loader import (
    DEFAULT_EXTENSIONS,
    GuideLoader,
    get_builtin_guides_dir,
    get_default_search_paths,
)
from .models import AgentEntry, AgentListing, is_slug, slugify, title_from_id
from .parser import GuideParser, ParseResult
from .store import AgentRegistry, AgentSource


def get_search_paths(config: GuidesConfig) -> list[Path]:
    """Resolve the ordered guide search paths for a configuration.

    Built-in guides come first, then existing default directories, then
    the configured directories.
    """
    paths: list[Path] = []
    if config.include_builtin:
        paths.append(get_builtin_guides_dir())
    if config.include_default_paths:
        paths.extend(p for p in get_default_search_paths() if p.is_dir())
    paths.extend(config.guide_dirs)
    return paths


def build_registry(config: GuidesConfig) -> AgentRegistry:
    """Load every guide the configuration points at.

    Raises:
        DuplicateIdError: If two documents resolve to the same id
    """
    loader = GuideLoader(get_search_paths(config), extensions=config.extensions)
    return AgentRegistry.load(loader.discover())


def setup_guides(config: GuidesConfig | None = None) -> AgentRegistry:
    """Set up the agent registry.

    Args:
        config: Settings to use (loaded from disk and environment if None)

    Returns:
        Loaded registry
    """
    if config is None:
        config = ConfigLoader().load_all()
    return build_registry(config)


__all__ = [
    "build_registry",
    "get_search_paths",
    "setup_guides",
    "DEFAULT_EXTENSIONS",
    "AgentEntry",
    "AgentListing",
    "AgentRegistry",
    "AgentSource",
    "GuideLoader",
    "GuideParser",
    "ParseResult",
    "get_builtin_guides_dir",
    "get_default_search_paths",
    "is_slug",
    "slugify",
    "title_from_id",
]

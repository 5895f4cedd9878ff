"""Tests for the built-in guides and registry setup."""

from pathlib import Path

import pytest

from agent_guides.config import GuidesConfig
from agent_guides.core import DuplicateIdError
from agent_guides.registry import (
    GuideLoader,
    build_registry,
    get_builtin_guides_dir,
    get_search_paths,
    setup_guides,
)

BUILTIN_IDS = [
    "code-review",
    "commit-readiness",
    "debugging",
    "documentation",
    "refactoring",
    "test-creation",
    "test-review",
]


class TestBuiltinGuides:
    """Every shipped guide parses cleanly."""

    @pytest.fixture
    def loader(self) -> GuideLoader:
        """Loader over the packaged guides."""
        return GuideLoader([get_builtin_guides_dir()])

    def test_all_builtin_guides_load(self, loader: GuideLoader) -> None:
        """All seven guides load without errors."""
        entries = loader.discover()
        assert loader.errors == {}
        assert [e.id for e in entries] == BUILTIN_IDS

    @pytest.mark.parametrize("agent_id", BUILTIN_IDS)
    def test_builtin_guide_metadata(self, loader: GuideLoader, agent_id: str) -> None:
        """Each guide has a title, description, tags, and content."""
        entries = {e.id: e for e in loader.discover()}
        entry = entries[agent_id]
        assert entry.title
        assert entry.description
        assert entry.tags
        assert entry.content.startswith("# ")


class TestSetup:
    """Tests for building a registry from configuration."""

    def test_search_paths_builtin_only(self, isolated_env: Path) -> None:
        """Default paths that do not exist are left out."""
        paths = get_search_paths(GuidesConfig())
        assert paths == [get_builtin_guides_dir()]

    def test_search_paths_order(self, isolated_env: Path, guides_dir: Path) -> None:
        """Built-in, then default, then configured paths."""
        project_agents = isolated_env / ".guides" / "agents"
        project_agents.mkdir(parents=True)

        paths = get_search_paths(GuidesConfig(guide_dirs=[guides_dir]))
        assert paths == [get_builtin_guides_dir(), project_agents, guides_dir]

    def test_search_paths_without_builtin(self, isolated_env: Path) -> None:
        """Built-ins can be switched off."""
        config = GuidesConfig(include_builtin=False, include_default_paths=False)
        assert get_search_paths(config) == []

    def test_build_registry_builtin(self, isolated_env: Path) -> None:
        """Default config loads the built-in guides."""
        registry = build_registry(GuidesConfig())
        assert list(registry.ids()) == BUILTIN_IDS
        assert registry.get("debugging").title == "Debugging"

    def test_build_registry_custom_dir(self, isolated_env: Path, guides_dir: Path) -> None:
        """Custom directories replace built-ins when those are off."""
        config = GuidesConfig(guide_dirs=[guides_dir], include_builtin=False)
        registry = build_registry(config)
        assert registry.ids() == ("debugging", "test-creation")

    def test_build_registry_duplicate_with_builtin(
        self, isolated_env: Path, guides_dir: Path
    ) -> None:
        """A custom guide reusing a built-in id is a misconfiguration."""
        with pytest.raises(DuplicateIdError):
            build_registry(GuidesConfig(guide_dirs=[guides_dir]))

    def test_setup_guides_reads_config(self, isolated_env: Path, guides_dir: Path) -> None:
        """setup_guides() picks up project settings."""
        settings = isolated_env / ".guides" / "settings.yaml"
        settings.parent.mkdir()
        settings.write_text(
            f"guide_dirs: ['{guides_dir}']\ninclude_builtin: false\n",
            encoding="utf-8",
        )

        registry = setup_guides()
        assert registry.ids() == ("debugging", "test-creation")

    def test_setup_guides_with_config(self, isolated_env: Path) -> None:
        """An explicit config skips settings files."""
        registry = setup_guides(GuidesConfig(include_builtin=False))
        assert len(registry) == 0

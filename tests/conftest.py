"""Shared test fixtures for agent-guides tests.

::

    isolated_env (HOME, cwd, and GUIDES_* variables isolated under tmp_path)
    guides_dir (directory with two guide documents)
    sample_sources ((id, title, content) triples)
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate user and project settings from the real machine.

    Returns:
        The project directory, which is also the working directory.
    """
    home = tmp_path / "home"
    project = tmp_path / "project"
    home.mkdir()
    project.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(project)
    for name in (
        "GUIDES_DIRS",
        "GUIDES_INCLUDE_BUILTIN",
        "GUIDES_INCLUDE_DEFAULT_PATHS",
        "GUIDES_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return project


@pytest.fixture
def guides_dir(tmp_path: Path) -> Path:
    """Create a directory with two guide documents."""
    directory = tmp_path / "guides"
    directory.mkdir()

    (directory / "debugging.md").write_text(
        "---\n"
        "title: Debugging\n"
        "description: Find root causes\n"
        "tags: [debugging]\n"
        "---\n"
        "\n"
        "Reproduce first.\n",
        encoding="utf-8",
    )
    (directory / "test-creation.txt").write_text(
        "# Test Creation\n\nOne behavior per test.\n",
        encoding="utf-8",
    )
    return directory


@pytest.fixture
def sample_sources() -> list[tuple[str, str, str]]:
    """Sources in the shape accepted by AgentRegistry.load()."""
    return [
        ("test-creation", "Test Creation", "Write focused tests."),
        ("debugging", "Debugging", "Find the root cause."),
    ]


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Drop handlers added by setup_logging() during a test."""
    yield
    logger = logging.getLogger("agent-guides")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)

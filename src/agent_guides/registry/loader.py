"""
Guide loader.

Discovers guide documents in search paths and turns them into entries
ready for AgentRegistry.load().
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from agent_guides.core import GuideParseError, get_logger

from .models import AgentEntry
from .parser import GuideParser

logger = get_logger("registry.loader")

DEFAULT_EXTENSIONS = (".md", ".markdown", ".txt")


def get_builtin_guides_dir() -> Path:
    """Get the directory of guides shipped with the package."""
    return Path(__file__).resolve().parent.parent / "guides"


def get_default_search_paths() -> list[Path]:
    """Get default guide search paths.

    Returns:
        User then project guide directories
    """
    return [
        Path.home() / ".guides" / "agents",
        Path.cwd() / ".guides" / "agents",
    ]


class GuideLoader:
    """Loads guide documents from files and directories."""

    def __init__(
        self,
        search_paths: Iterable[Path] | None = None,
        parser: GuideParser | None = None,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    ) -> None:
        """Initialize loader.

        Args:
            search_paths: Directories or single files to load, in order
            parser: Parser to use (created if None)
            extensions: File suffixes treated as guide documents
        """
        self.search_paths: list[Path] = []
        for path in search_paths or []:
            self.add_search_path(path)
        self.parser = parser or GuideParser()
        self.extensions = tuple(ext.lower() for ext in extensions)
        self.errors: dict[str, list[str]] = {}

    def add_search_path(self, path: Path) -> None:
        """Add a search path, ignoring repeats."""
        path = Path(path).expanduser()
        if path not in self.search_paths:
            self.search_paths.append(path)

    def is_guide_file(self, path: Path) -> bool:
        """Check whether a file should be loaded as a guide."""
        return (
            path.is_file()
            and not path.name.startswith(".")
            and path.suffix.lower() in self.extensions
        )

    def load_file(self, path: Path, strict: bool = False) -> AgentEntry | None:
        """Load a single guide file.

        Args:
            path: Guide file
            strict: Raise instead of logging when the file cannot be parsed

        Returns:
            The parsed entry, or None if parsing failed

        Raises:
            GuideParseError: If strict and the file cannot be parsed
        """
        result = self.parser.parse_file(path)

        for warning in result.warnings:
            logger.debug("%s: %s", path, warning)

        if result.entry is None:
            if strict:
                raise GuideParseError(str(path), result.errors)
            self.errors[str(path)] = result.errors
            logger.warning("Skipping guide %s: %s", path, "; ".join(result.errors))
            return None

        return result.entry

    def load_directory(self, directory: Path) -> list[AgentEntry]:
        """Load all guides directly inside a directory, in name order."""
        entries: list[AgentEntry] = []
        for path in sorted(directory.iterdir(), key=lambda p: p.name):
            if not self.is_guide_file(path):
                continue
            entry = self.load_file(path)
            if entry is not None:
                entries.append(entry)
        logger.debug("Loaded %d guide(s) from %s", len(entries), directory)
        return entries

    def discover(self) -> list[AgentEntry]:
        """Load guides from every search path.

        Missing paths are skipped. Duplicate ids are left in place so that
        the registry can reject them.

        Returns:
            Entries in search path order
        """
        self.errors.clear()
        entries: list[AgentEntry] = []

        for path in self.search_paths:
            if path.is_dir():
                entries.extend(self.load_directory(path))
            elif path.is_file():
                entry = self.load_file(path)
                if entry is not None:
                    entries.append(entry)
            else:
                logger.warning("Guide path does not exist: %s", path)

        return entries


__all__ = [
    "DEFAULT_EXTENSIONS",
    "GuideLoader",
    "get_builtin_guides_dir",
    "get_default_search_paths",
]

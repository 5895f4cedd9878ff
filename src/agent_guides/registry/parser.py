"""
Guide document parser.

Parses one guideline document into an AgentEntry. The body is kept as-is;
only an optional YAML frontmatter block is interpreted.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, ClassVar

import yaml

from .models import AgentEntry, is_slug, slugify, title_from_id

FRONTMATTER_PATTERN = re.compile(r"^---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|$)(.*)$", re.DOTALL)
HEADING_PATTERN = re.compile(r"#[ \t]+(.+?)[ \t#]*$")
FENCE_PATTERN = re.compile(r" {0,3}(`{3,}|~{3,})")


@dataclass
class ParseResult:
    """Result of parsing a guide document."""

    entry: AgentEntry | None
    errors: list[str]
    warnings: list[str]


class GuideParser:
    """Parses guide documents with optional YAML frontmatter."""

    # Frontmatter keys that are understood; anything else is warned about
    KNOWN_FIELDS: ClassVar[set[str]] = {"id", "title", "description", "tags"}

    def parse_file(self, path: Path) -> ParseResult:
        """Parse a guide file.

        The file stem, slugified, is the default id.

        Args:
            path: Path to guide file

        Returns:
            ParseResult with entry or errors
        """
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            return ParseResult(
                entry=None,
                errors=[f"Failed to read file: {e}"],
                warnings=[],
            )

        return self.parse(content, default_id=slugify(path.stem), source_path=str(path))

    def parse(self, content: str, default_id: str = "", source_path: str = "") -> ParseResult:
        """Parse guide content.

        Args:
            content: Document text
            default_id: Id to use when frontmatter does not set one
            source_path: Source file path

        Returns:
            ParseResult
        """
        errors: list[str] = []
        warnings: list[str] = []

        data: dict[str, Any] = {}
        body = content
        match = FRONTMATTER_PATTERN.match(content)
        if match:
            try:
                loaded = yaml.safe_load(match.group(1))
            except yaml.YAMLError as e:
                return ParseResult(None, [f"YAML parse error: {e}"], [])

            if loaded is None:
                loaded = {}
            if not isinstance(loaded, dict):
                return ParseResult(None, ["Frontmatter must be a YAML mapping"], [])

            data = loaded
            body = match.group(2)

        for key in data:
            if key not in self.KNOWN_FIELDS:
                warnings.append(f"Ignoring unknown frontmatter field: {key}")

        body = body.strip()
        if not body:
            errors.append("Guide has no content")

        agent_id = data.get("id", default_id)
        if not isinstance(agent_id, str) or not is_slug(agent_id):
            errors.append(f"Invalid agent id: {agent_id!r}")

        title = data.get("title")
        if title is not None and not isinstance(title, str):
            errors.append("Field 'title' must be a string")

        description = data.get("description", "")
        if not isinstance(description, str):
            errors.append("Field 'description' must be a string")

        tags = self._extract_tags(data.get("tags", []), errors)

        if errors:
            return ParseResult(None, errors, warnings)

        if not title:
            title = self._title_from_body(body) or title_from_id(agent_id)

        entry = AgentEntry(
            id=agent_id,
            title=title.strip(),
            content=body,
            description=description.strip(),
            tags=tags,
            source_path=source_path or None,
        )
        return ParseResult(entry, [], warnings)

    def _title_from_body(self, body: str) -> str | None:
        """Get the first level-1 markdown heading outside code fences, if any."""
        fence: str | None = None
        for line in body.splitlines():
            fence_match = FENCE_PATTERN.match(line)
            if fence_match:
                marker = fence_match.group(1)
                if fence is None:
                    fence = marker
                elif marker.startswith(fence):
                    fence = None
                continue
            if fence is not None:
                continue
            match = HEADING_PATTERN.match(line)
            if match:
                return match.group(1)
        return None

    def _extract_tags(self, raw: Any, errors: list[str]) -> tuple[str, ...]:
        """Accept a list of strings or a single comma-separated string."""
        if isinstance(raw, str):
            raw = raw.split(",")
        if not isinstance(raw, list) or not all(isinstance(t, str) for t in raw):
            errors.append("Field 'tags' must be a list of strings")
            return ()
        return tuple(t.strip() for t in raw if t.strip())


__all__ = [
    "GuideParser",
    "ParseResult",
]

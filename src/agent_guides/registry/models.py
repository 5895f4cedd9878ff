"""
Data model for the agent registry.

An AgentEntry pairs a slug-form id with the title and text of one
guideline document.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

# Slug form: lowercase letters, digits, and hyphens, not starting with a hyphen
SLUG_PATTERN = re.compile(r"[a-z0-9][a-z0-9-]*")


def is_slug(value: object) -> bool:
    """Check whether a value is a slug-form agent id."""
    return isinstance(value, str) and SLUG_PATTERN.fullmatch(value) is not None


def slugify(text: str) -> str:
    """Turn arbitrary text into a slug-form id.

    Example: "Test_Creation Guide" -> "test-creation-guide"
    """
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower())
    return slug.strip("-")


def title_from_id(agent_id: str) -> str:
    """Derive a display title from an id ("commit-readiness" -> "Commit Readiness")."""
    return " ".join(part.capitalize() for part in agent_id.split("-") if part)


@dataclass(frozen=True)
class AgentEntry:
    """A named guideline document.

    Attributes:
        id: Unique slug-form identifier
        title: Human-readable title
        content: Guideline text, treated as opaque
        description: One-line summary for listings
        tags: Categorization tags
        source_path: File the entry was loaded from, if any
    """

    id: str
    title: str
    content: str
    description: str = ""
    tags: tuple[str, ...] = ()
    source_path: str | None = field(default=None, compare=False)

    def matches_query(self, query: str) -> bool:
        """Check if the entry matches a case-insensitive search query."""
        query_lower = query.lower()
        if query_lower in self.id:
            return True
        if query_lower in self.title.lower():
            return True
        if query_lower in self.description.lower():
            return True
        return any(query_lower in tag.lower() for tag in self.tags)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        result: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "content": self.content,
        }
        if self.description:
            result["description"] = self.description
        if self.tags:
            result["tags"] = list(self.tags)
        if self.source_path:
            result["source_path"] = self.source_path
        return result


class AgentListing:
    """Lazy, restartable view of (id, title) pairs in insertion order.

    Nothing is copied up front; every iteration walks the registry's
    mapping again, so a listing can be iterated any number of times.
    """

    def __init__(self, entries: Mapping[str, AgentEntry], tag: str | None = None) -> None:
        self._entries = entries
        self._tag = tag

    def _selected(self) -> Iterator[AgentEntry]:
        for entry in self._entries.values():
            if self._tag is None or self._tag in entry.tags:
                yield entry

    def __iter__(self) -> Iterator[tuple[str, str]]:
        for entry in self._selected():
            yield entry.id, entry.title

    def __len__(self) -> int:
        if self._tag is None:
            return len(self._entries)
        return sum(1 for _ in self._selected())

    def __bool__(self) -> bool:
        return len(self) > 0

    def __repr__(self) -> str:
        return f"AgentListing({list(self)!r})"

"""
Agent registry store and lookup API.

The registry is built once from a sequence of sources and is read-only
afterwards, so it can be shared between readers without locking.
"""

from __future__ import annotations

import difflib
from collections.abc import Iterable, Iterator, Sequence
from types import MappingProxyType

from agent_guides.core import (
    DuplicateIdError,
    InvalidIdError,
    NotFoundError,
    RegistryError,
    get_logger,
)

from .models import AgentEntry, AgentListing, is_slug

logger = get_logger("registry")

# A source is either a full entry or a bare (id, title, content) triple
AgentSource = AgentEntry | Sequence[str]


def _to_entry(source: AgentSource) -> AgentEntry:
    """Normalize one source into an AgentEntry.

    Raises:
        InvalidIdError: If the id is not slug-form
        RegistryError: If the source is not an entry or a triple of strings
    """
    if isinstance(source, AgentEntry):
        entry = source
    else:
        if isinstance(source, str) or not isinstance(source, Sequence) or len(source) != 3:
            raise RegistryError(f"Agent source must be an (id, title, content) triple: {source!r}")
        agent_id, title, content = source
        entry = AgentEntry(id=agent_id, title=title, content=content)

    if not is_slug(entry.id):
        raise InvalidIdError(entry.id)
    if not isinstance(entry.title, str) or not isinstance(entry.content, str):
        raise RegistryError(f"Agent {entry.id}: title and content must be strings")
    return entry


class AgentRegistry:
    """Immutable mapping from agent id to AgentEntry.

    Every id is checked to be slug-form and unique when the registry is
    built. Insertion order follows the order in which sources were
    supplied and is kept for listings.
    """

    def __init__(self, sources: Iterable[AgentSource] = ()) -> None:
        """Build a registry from a sequence of sources.

        Args:
            sources: AgentEntry objects or (id, title, content) triples

        Raises:
            DuplicateIdError: If two sources share an id
            InvalidIdError: If an id is not slug-form
            RegistryError: If a source is malformed
        """
        entries: dict[str, AgentEntry] = {}
        for source in sources:
            entry = _to_entry(source)
            existing = entries.get(entry.id)
            if existing is not None:
                raise DuplicateIdError(entry.id, existing.source_path, entry.source_path)
            entries[entry.id] = entry
            logger.debug("Registered agent: %s", entry.id)

        logger.info("Loaded %d agent(s)", len(entries))
        self._entries = MappingProxyType(entries)

    @classmethod
    def load(cls, sources: Iterable[AgentSource]) -> AgentRegistry:
        """Build a registry from a sequence of sources.

        Args:
            sources: AgentEntry objects or (id, title, content) triples

        Returns:
            A new registry containing every source in the order given

        Raises:
            DuplicateIdError: If two sources share an id
            InvalidIdError: If an id is not slug-form
            RegistryError: If a source is malformed
        """
        return cls(sources)

    def list(self, tag: str | None = None) -> AgentListing:
        """List (id, title) pairs in insertion order.

        Args:
            tag: Only include entries carrying this tag (None = all)

        Returns:
            Lazy, restartable listing
        """
        return AgentListing(self._entries, tag)

    def get(self, agent_id: str) -> AgentEntry:
        """Get an entry by id.

        Args:
            agent_id: Agent id

        Returns:
            The matching AgentEntry

        Raises:
            NotFoundError: If no entry has this id
        """
        entry = self._entries.get(agent_id)
        if entry is None:
            suggestions = difflib.get_close_matches(str(agent_id), self._entries.keys(), n=3)
            raise NotFoundError(agent_id, suggestions)
        return entry

    def exists(self, agent_id: str) -> bool:
        """Check if an entry exists."""
        return agent_id in self._entries

    def ids(self) -> tuple[str, ...]:
        """Get all ids in insertion order."""
        return tuple(self._entries)

    def search(self, query: str) -> tuple[AgentEntry, ...]:
        """Search entries by id, title, description, or tag.

        Args:
            query: Case-insensitive search text

        Returns:
            Matching entries in insertion order
        """
        return tuple(e for e in self._entries.values() if e.matches_query(query))

    def get_tags(self) -> list[str]:
        """Get all unique tags across entries."""
        tags: set[str] = set()
        for entry in self._entries.values():
            tags.update(entry.tags)
        return sorted(tags)

    def __contains__(self, agent_id: object) -> bool:
        return agent_id in self._entries

    def __iter__(self) -> Iterator[AgentEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"AgentRegistry({len(self._entries)} agents)"


__all__ = [
    "AgentRegistry",
    "AgentSource",
]

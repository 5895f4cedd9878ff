"""Exception hierarchy for agent-guides."""

from __future__ import annotations

from collections.abc import Iterable


class GuidesError(Exception):
    """Base class for all agent-guides errors."""

    pass


class ConfigError(GuidesError):
    """Configuration could not be read or validated."""

    pass


class RegistryError(GuidesError):
    """Error building or querying the agent registry."""

    pass


class DuplicateIdError(RegistryError):
    """Two sources given to a single load share the same agent id."""

    def __init__(self, agent_id: str, first: str | None = None, second: str | None = None) -> None:
        """Initialize with the repeated id.

        Args:
            agent_id: The id that appeared more than once.
            first: Where the id was first defined, if known.
            second: Where the id was defined again, if known.
        """
        self.agent_id = agent_id
        self.first = first
        self.second = second
        message = f"Duplicate agent id: {agent_id}"
        if first and second:
            message += f" (defined in {first} and {second})"
        super().__init__(message)


class NotFoundError(RegistryError):
    """Lookup of an agent id that was never loaded."""

    def __init__(self, agent_id: str, suggestions: Iterable[str] = ()) -> None:
        """Initialize with the unknown id.

        Args:
            agent_id: The id that was looked up.
            suggestions: Known ids close to the requested one.
        """
        self.agent_id = agent_id
        self.suggestions = list(suggestions)
        message = f"Unknown agent: {agent_id}"
        if self.suggestions:
            message += f". Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)


class InvalidIdError(RegistryError):
    """Agent id is not slug-form."""

    def __init__(self, agent_id: object) -> None:
        self.agent_id = agent_id
        super().__init__(
            f"Invalid agent id {agent_id!r}: must start with a lowercase letter "
            "or digit and contain only lowercase letters, digits, and hyphens"
        )


class GuideParseError(GuidesError):
    """A guide document could not be parsed."""

    def __init__(self, path: str, errors: list[str]) -> None:
        self.path = path
        self.errors = errors
        super().__init__(f"Failed to parse {path}: {'; '.join(errors)}")

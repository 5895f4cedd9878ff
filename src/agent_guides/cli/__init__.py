"""Command line interface for agent-guides."""

from agent_guides.cli.main import main

__all__ = ["main"]

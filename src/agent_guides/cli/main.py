"""CLI entry point for agent-guides."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

from agent_guides import __version__
from agent_guides.config import ConfigLoader, GuidesConfig
from agent_guides.core import GuidesError, NotFoundError, get_logger, setup_logging
from agent_guides.registry import AgentEntry, AgentRegistry, build_registry

logger = get_logger("cli")

COMMANDS = ("list", "show", "search")


class UsageError(Exception):
    """Invalid command line."""

    pass


@dataclass
class CliArgs:
    """Parsed command line."""

    command: str = "list"
    argument: str | None = None
    tag: str | None = None
    dirs: list[Path] = field(default_factory=list)
    no_builtin: bool = False
    json_output: bool = False


def parse_args(args: list[str]) -> CliArgs:
    """Parse command line arguments.

    Args:
        args: Arguments without the program name

    Returns:
        Parsed arguments

    Raises:
        UsageError: On unknown options, missing values, or extra arguments
    """
    parsed = CliArgs()
    positional: list[str] = []

    it = iter(args)
    for arg in it:
        if arg in ("--dir", "--tag"):
            value = next(it, None)
            if value is None:
                raise UsageError(f"Option '{arg}' requires a value")
            if arg == "--dir":
                parsed.dirs.append(Path(value))
            else:
                parsed.tag = value
        elif arg == "--no-builtin":
            parsed.no_builtin = True
        elif arg == "--json":
            parsed.json_output = True
        elif arg.startswith("-"):
            raise UsageError(f"Unknown option '{arg}'")
        else:
            positional.append(arg)

    if positional:
        parsed.command = positional.pop(0)
    if parsed.command not in COMMANDS:
        raise UsageError(f"Unknown command '{parsed.command}'")

    if parsed.command in ("show", "search"):
        if not positional:
            raise UsageError(f"Command '{parsed.command}' requires an argument")
        parsed.argument = positional.pop(0)
    if positional:
        raise UsageError(f"Unexpected argument '{positional[0]}'")
    if parsed.tag is not None and parsed.command != "list":
        raise UsageError("Option '--tag' only applies to 'list'")

    return parsed


def load_registry(cli_args: CliArgs, config: GuidesConfig) -> AgentRegistry:
    """Build the registry from config with command line overrides applied."""
    if cli_args.no_builtin:
        config.include_builtin = False
    if cli_args.dirs:
        config.guide_dirs = [*config.guide_dirs, *cli_args.dirs]
    return build_registry(config)


def print_listing(console: Console, entries: list[AgentEntry], json_output: bool) -> None:
    """Print entries as a table or JSON array."""
    if json_output:
        data = [
            {"id": e.id, "title": e.title, "description": e.description, "tags": list(e.tags)}
            for e in entries
        ]
        print(json.dumps(data, indent=2))
        return

    if not entries:
        console.print("No agents found.")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title")
    table.add_column("Description")
    for entry in entries:
        table.add_row(entry.id, entry.title, entry.description)
    console.print(table)


def print_entry(console: Console, entry: AgentEntry, json_output: bool) -> None:
    """Print one entry as markdown or JSON."""
    if json_output:
        print(json.dumps(entry.to_dict(), indent=2))
        return
    console.print(Markdown(entry.content))


def main() -> int:
    """Main entry point for the guides CLI.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    args = sys.argv[1:]

    if "--version" in args or "-v" in args:
        print(f"guides {__version__}")
        return 0

    if "--help" in args or "-h" in args:
        print_help()
        return 0

    try:
        cli_args = parse_args(args)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Run 'guides --help' for usage information", file=sys.stderr)
        return 1

    try:
        config = ConfigLoader().load_all()
    except GuidesError as e:
        print(f"Error: Failed to load configuration: {e}", file=sys.stderr)
        print(
            "Hint: Check your config files at ~/.guides/settings.yaml or "
            ".guides/settings.yaml",
            file=sys.stderr,
        )
        return 1

    setup_logging(level=config.log_level)
    console = Console()

    try:
        registry = load_registry(cli_args, config)

        if cli_args.command == "list":
            entries = [registry.get(agent_id) for agent_id, _ in registry.list(cli_args.tag)]
            print_listing(console, entries, cli_args.json_output)
        elif cli_args.command == "search":
            assert cli_args.argument is not None
            print_listing(console, list(registry.search(cli_args.argument)), cli_args.json_output)
        else:
            assert cli_args.argument is not None
            print_entry(console, registry.get(cli_args.argument), cli_args.json_output)
    except NotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except GuidesError as e:
        logger.debug("Failed to load guides", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def print_help() -> None:
    """Print help message."""
    help_text = """
agent-guides - guideline documents for AI coding agents

Usage: guides [OPTIONS] [COMMAND] [ARG]

Commands:
  list              List available agents (default)
  show ID           Print the guide for an agent
  search QUERY      Find agents by id, title, description, or tag

Options:
  -v, --version     Show version and exit
  -h, --help        Show this help message
  --dir PATH        Also load guides from PATH (repeatable)
  --no-builtin      Do not load the built-in guides
  --tag TAG         Only list agents with TAG
  --json            Output JSON

Environment:
  GUIDES_DIRS       Extra guide directories, separated by the path separator
  GUIDES_LOG_LEVEL  Console log level (default: WARNING)
"""
    print(help_text.strip())


if __name__ == "__main__":
    sys.exit(main())

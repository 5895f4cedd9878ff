"""Tests for CLI entry point."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from agent_guides import __version__
from agent_guides.cli.main import CliArgs, UsageError, main, parse_args


def run(*args: str) -> int:
    """Run main() with the given arguments."""
    with patch.object(sys, "argv", ["guides", *args]):
        return main()


class TestParseArgs:
    """Tests for parse_args()."""

    def test_default_command_is_list(self) -> None:
        """No arguments lists agents."""
        assert parse_args([]) == CliArgs()

    def test_show(self) -> None:
        """show takes an id."""
        parsed = parse_args(["show", "debugging"])
        assert parsed.command == "show"
        assert parsed.argument == "debugging"

    def test_global_options(self) -> None:
        """Options can appear anywhere."""
        parsed = parse_args(["--dir", "a", "list", "--dir", "b", "--no-builtin", "--json"])
        assert parsed.dirs == [Path("a"), Path("b")]
        assert parsed.no_builtin is True
        assert parsed.json_output is True

    def test_tag(self) -> None:
        """list accepts --tag."""
        assert parse_args(["list", "--tag", "testing"]).tag == "testing"

    @pytest.mark.parametrize(
        "args",
        [
            ["--bogus"],
            ["frobnicate"],
            ["show"],
            ["search"],
            ["show", "a", "b"],
            ["--dir"],
            ["show", "a", "--tag", "x"],
        ],
    )
    def test_usage_errors(self, args: list[str]) -> None:
        """Invalid command lines raise UsageError."""
        with pytest.raises(UsageError):
            parse_args(args)


class TestMainFlags:
    """Tests for flags handled before loading."""

    def test_version_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--version prints version and returns 0."""
        assert run("--version") == 0
        assert __version__ in capsys.readouterr().out

    def test_help_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--help prints usage."""
        assert run("-h") == 0
        out = capsys.readouterr().out
        assert "Usage:" in out
        assert "Commands:" in out

    def test_usage_error_exit_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Bad usage exits 1 with a hint."""
        assert run("--bogus") == 1
        err = capsys.readouterr().err
        assert "Unknown option '--bogus'" in err
        assert "guides --help" in err


@pytest.mark.usefixtures("isolated_env")
class TestMainCommands:
    """Tests for list, show, and search."""

    def test_list_builtin_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        """list --json prints built-in agents in order."""
        assert run("list", "--json") == 0
        data = json.loads(capsys.readouterr().out)
        ids = [item["id"] for item in data]
        assert ids[0] == "code-review"
        assert "debugging" in ids
        assert len(ids) == 7

    def test_list_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Default output is a table."""
        assert run() == 0
        out = capsys.readouterr().out
        assert "ID" in out
        assert "debugging" in out

    def test_list_by_tag(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--tag filters the listing."""
        assert run("list", "--tag", "testing", "--json") == 0
        data = json.loads(capsys.readouterr().out)
        assert [item["id"] for item in data] == ["test-creation", "test-review"]

    def test_list_empty(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No guides at all."""
        assert run("--no-builtin") == 0
        assert "No agents found." in capsys.readouterr().out

    def test_custom_dir(self, capsys: pytest.CaptureFixture[str], guides_dir: Path) -> None:
        """--dir adds guides."""
        assert run("--no-builtin", "--dir", str(guides_dir), "--json") == 0
        data = json.loads(capsys.readouterr().out)
        assert [item["id"] for item in data] == ["debugging", "test-creation"]

    def test_show_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        """show --json prints the full entry."""
        assert run("show", "debugging", "--json") == 0
        data = json.loads(capsys.readouterr().out)
        assert data["id"] == "debugging"
        assert data["title"] == "Debugging"
        assert "root causes" in data["content"]

    def test_show_markdown(self, capsys: pytest.CaptureFixture[str]) -> None:
        """show renders the guide."""
        assert run("show", "commit-readiness") == 0
        assert "Checklist" in capsys.readouterr().out

    def test_show_unknown(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Unknown agent exits 1 with a suggestion."""
        assert run("show", "debuging") == 1
        err = capsys.readouterr().err
        assert "Unknown agent: debuging" in err
        assert "debugging" in err

    def test_search(self, capsys: pytest.CaptureFixture[str]) -> None:
        """search matches descriptions and tags."""
        assert run("search", "git", "--json") == 0
        data = json.loads(capsys.readouterr().out)
        assert [item["id"] for item in data] == ["commit-readiness"]

    def test_duplicate_ids(self, capsys: pytest.CaptureFixture[str], guides_dir: Path) -> None:
        """A custom guide clashing with a built-in exits 1."""
        assert run("--dir", str(guides_dir)) == 1
        assert "Duplicate agent id" in capsys.readouterr().err

    def test_bad_config(self, capsys: pytest.CaptureFixture[str], isolated_env: Path) -> None:
        """Invalid settings exit 1."""
        settings = isolated_env / ".guides" / "settings.yaml"
        settings.parent.mkdir()
        settings.write_text("log_level: chatty\n", encoding="utf-8")

        assert run() == 1
        assert "Failed to load configuration" in capsys.readouterr().err

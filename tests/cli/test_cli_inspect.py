"""Tests for ``curlgen inspect`` CLI command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from click.testing import CliRunner

from curlgen.cli import main

if TYPE_CHECKING:
    from pathlib import Path

_TOOLS = [
    {"name": "search", "alias": "web_search", "description": "Search", "type": "tool"},
    {"type": "function", "function": {"name": "get_time", "parameters": {"type": "object"}}},
]


class TestInspectCommand:
    def test_table(self, tmp_path: Path) -> None:
        f = tmp_path / "tools.json"
        f.write_text(json.dumps(_TOOLS))

        runner = CliRunner()
        result = runner.invoke(main, ["inspect", str(f)])

        assert result.exit_code == 0
        assert "web_search" in result.output
        assert "get_time" in result.output
        assert "Name Map" in result.output

    def test_json(self, tmp_path: Path) -> None:
        f = tmp_path / "tools.json"
        f.write_text(json.dumps(_TOOLS))

        runner = CliRunner()
        result = runner.invoke(main, ["inspect", str(f), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["name_map"] == {
            "search": "web_search",
            "web_search": "web_search",
            "get_time": "get_time",
        }
        assert data["tools"][0]["function"]["name"] == "web_search"

    def test_no_tools(self, tmp_path: Path) -> None:
        f = tmp_path / "tools.json"
        f.write_text("[]")

        runner = CliRunner()
        result = runner.invoke(main, ["inspect", str(f)])

        assert result.exit_code == 0
        assert "No tools defined" in result.output

    def test_bad_file(self, tmp_path: Path) -> None:
        f = tmp_path / "tools.json"
        f.write_text("[1, 2]")

        runner = CliRunner()
        result = runner.invoke(main, ["inspect", str(f)])

        assert result.exit_code == 1
        assert "Error loading tools" in result.output

    def test_non_mapping_function_payload(self, tmp_path: Path) -> None:
        f = tmp_path / "tools.json"
        f.write_text(json.dumps([{"type": "function", "function": "x"}]))

        runner = CliRunner()
        result = runner.invoke(main, ["inspect", str(f)])

        assert result.exit_code == 0
        assert "Converted Tools" in result.output

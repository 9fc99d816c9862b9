"""Tests for ``curlgen format`` CLI command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from click.testing import CliRunner

from curlgen.cli import main

if TYPE_CHECKING:
    from pathlib import Path


class TestFormatCommand:
    def test_prints_formatted(self, tmp_path: Path) -> None:
        f = tmp_path / "m.json"
        f.write_text('[{"role":"user","content":"hi"}]')

        runner = CliRunner()
        result = runner.invoke(main, ["format", str(f)])

        assert result.exit_code == 0
        assert result.output == '[\n  {\n    "role": "user",\n    "content": "hi"\n  }\n]\n'

    def test_in_place(self, tmp_path: Path) -> None:
        f = tmp_path / "m.json"
        f.write_text('{"a":[1,2]}')

        runner = CliRunner()
        result = runner.invoke(main, ["format", str(f), "--in-place"])

        assert result.exit_code == 0
        assert f.read_text() == '{\n  "a": [\n    1,\n    2\n  ]\n}\n'

    def test_invalid_json(self, tmp_path: Path) -> None:
        f = tmp_path / "m.json"
        f.write_text("{oops")

        runner = CliRunner()
        result = runner.invoke(main, ["format", str(f)])

        assert result.exit_code == 1
        assert "Cannot format" in result.output

    def test_undecodable_file(self, tmp_path: Path) -> None:
        f = tmp_path / "m.json"
        f.write_bytes(b'["\xff"]')

        runner = CliRunner()
        result = runner.invoke(main, ["format", str(f)])

        assert result.exit_code == 1
        assert "Cannot format" in result.output

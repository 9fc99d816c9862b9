"""Tests for input and settings loading."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from curlgen.sdk.errors import InputValidationError, SettingsError
from curlgen.sdk.loader import InputLoader, SettingsLoader

if TYPE_CHECKING:
    from pathlib import Path


class TestInputLoader:
    def test_parse_array(self) -> None:
        assert InputLoader("Tools").parse('[{"name": "a"}, {"name": "b"}]') == [
            {"name": "a"},
            {"name": "b"},
        ]

    def test_empty_array_is_valid(self) -> None:
        assert InputLoader().parse("[]") == []

    def test_blank_input(self) -> None:
        with pytest.raises(InputValidationError, match="empty"):
            InputLoader("Tools").parse("   \n")

    def test_invalid_json(self) -> None:
        with pytest.raises(InputValidationError, match="Invalid JSON") as exc_info:
            InputLoader("Messages").parse("[{")
        assert exc_info.value.label == "Messages"

    def test_not_an_array(self) -> None:
        with pytest.raises(InputValidationError, match="must be an array"):
            InputLoader("Tools").parse('{"name": "a"}')

    def test_load_file(self, tmp_path: Path) -> None:
        f = tmp_path / "tools.json"
        f.write_text('[{"name": "a"}]', encoding="utf-8")
        assert InputLoader().load(f) == [{"name": "a"}]

    def test_load_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(InputValidationError, match="cannot read"):
            InputLoader().load(tmp_path / "missing.json")

    def test_describe(self) -> None:
        assert InputLoader.describe([1, 2, 3]) == "Valid (3 items)"


class TestSettingsLoader:
    def test_load_full(self, tmp_path: Path) -> None:
        f = tmp_path / "settings.yaml"
        f.write_text(
            "endpoint:\n"
            "  api_endpoint: https://example.com/chat\n"
            "  api_key: secret\n"
            "generation:\n"
            "  temperature: 0.5\n"
            "  tool_choice: none\n"
        )
        settings = SettingsLoader(f).load()
        assert settings.endpoint.api_endpoint == "https://example.com/chat"
        assert settings.endpoint.api_key == "secret"
        assert settings.endpoint.api_version == "2024-02-01"
        assert settings.generation.temperature == 0.5
        assert settings.generation.top_p == 0.1
        assert settings.generation.tool_choice == "none"

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        f = tmp_path / "settings.yaml"
        f.write_text("")
        settings = SettingsLoader(f).load()
        assert settings.generation.tool_choice == "auto"

    def test_env_expansion(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CURLGEN_TEST_KEY", "from-env")
        f = tmp_path / "settings.yaml"
        f.write_text("endpoint:\n  api_key: ${CURLGEN_TEST_KEY}\n")
        assert SettingsLoader(f).load().endpoint.api_key == "from-env"

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        f = tmp_path / "settings.yaml"
        f.write_text("- a\n- b\n")
        with pytest.raises(SettingsError, match="mapping"):
            SettingsLoader(f).load()

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        f = tmp_path / "settings.yaml"
        f.write_text("endpoint: [unclosed\n")
        with pytest.raises(SettingsError, match="YAML parse error"):
            SettingsLoader(f).load()

    def test_validation_error(self, tmp_path: Path) -> None:
        f = tmp_path / "settings.yaml"
        f.write_text("generation:\n  temperature: hot\n")
        with pytest.raises(SettingsError, match="temperature"):
            SettingsLoader(f).load()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SettingsError, match="Cannot read"):
            SettingsLoader(tmp_path / "nope.yaml").load()


class TestInputLoaderEncoding:
    def test_undecodable_file(self, tmp_path: Path) -> None:
        f = tmp_path / "tools.json"
        f.write_bytes(b'["\xff\xfe"]')
        with pytest.raises(InputValidationError, match="cannot read"):
            InputLoader("Tools").load(f)

"""Loading of conversion inputs and generator settings."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from curlgen.sdk.errors import InputValidationError, SettingsError
from curlgen.sdk.models import GeneratorSettings


class InputLoader:
    """Parse a tools or messages document into a JSON array.

    Both inputs must be JSON arrays; the conversion engine relies on that.
    """

    def __init__(self, label: str = "input") -> None:
        self.label = label

    def parse(self, text: str) -> list[Any]:
        """Parse *text* as a JSON array.

        Raises:
            InputValidationError: If *text* is blank, not JSON, or not an array.
        """
        if not text.strip():
            raise InputValidationError(self.label, "input is empty, paste a JSON array")

        try:
            data: Any = json.loads(text)
        except json.JSONDecodeError as exc:
            raise InputValidationError(self.label, f"Invalid JSON ({exc})") from exc

        if not isinstance(data, list):
            raise InputValidationError(self.label, "must be an array")

        return data

    def load(self, path: Path) -> list[Any]:
        """Read and parse the JSON array stored at *path*."""
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise InputValidationError(self.label, f"cannot read {path}: {exc}") from exc
        return self.parse(text)

    @staticmethod
    def describe(items: list[Any]) -> str:
        return f"Valid ({len(items)} items)"


class SettingsLoader:
    """Load and validate a settings YAML file into :class:`GeneratorSettings`."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> GeneratorSettings:
        """Read YAML, interpolate env vars, and validate.

        Environment variables in the form ``${VAR}`` or ``$VAR`` are expanded
        using :func:`os.path.expandvars` before YAML parsing, so API keys can
        stay out of the file.

        Raises:
            SettingsError: On read errors, YAML parse errors or validation failures.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SettingsError(f"Cannot read {self._path}: {exc}") from exc

        expanded = os.path.expandvars(raw)

        try:
            data: Any = yaml.safe_load(expanded)
        except yaml.YAMLError as exc:
            raise SettingsError(f"YAML parse error: {exc}") from exc

        if data is None:
            return GeneratorSettings()

        if not isinstance(data, dict):
            raise SettingsError("Settings YAML must be a mapping")

        try:
            return GeneratorSettings.model_validate(data)
        except ValidationError as exc:
            raise SettingsError(str(exc)) from exc

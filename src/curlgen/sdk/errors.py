"""SDK error types."""

from __future__ import annotations


class InputValidationError(Exception):
    """Raised when a tools or messages input is empty, not JSON, or not an array."""

    def __init__(self, label: str, detail: str) -> None:
        self.label = label
        self.detail = detail
        super().__init__(f"{label}: {detail}")


class SettingsError(Exception):
    """Raised when a settings YAML fails reading, parsing, or validation."""

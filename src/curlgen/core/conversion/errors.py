"""Shared error types for the conversion engine."""


class ConversionError(Exception):
    """Base error for all conversion failures."""


class StructuralError(ConversionError):
    """An input element has a shape the engine cannot convert."""

    def __init__(self, location: str, detail: str = "") -> None:
        self.location = location
        self.detail = detail
        msg = f"Unexpected structure at {location}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)

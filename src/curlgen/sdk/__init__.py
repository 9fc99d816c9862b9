"""curlgen SDK — programmatic interface for loading inputs and generating commands."""

from curlgen.sdk.errors import InputValidationError, SettingsError
from curlgen.sdk.generator import CurlGenerator
from curlgen.sdk.loader import InputLoader, SettingsLoader
from curlgen.sdk.models import GenerationOutput, GeneratorSettings

__all__ = [
    "CurlGenerator",
    "GenerationOutput",
    "GeneratorSettings",
    "InputLoader",
    "InputValidationError",
    "SettingsError",
    "SettingsLoader",
]

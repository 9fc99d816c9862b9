"""Pydantic models for the settings YAML consumed by ``curlgen convert``."""

from __future__ import annotations

from pydantic import BaseModel, Field

from curlgen.core.conversion.payload import ConversionResult, GenerationParams
from curlgen.core.rendering.config import EndpointConfig


class GeneratorSettings(BaseModel):
    """Top-level settings: where to send the request and how to sample.

    Example YAML::

        endpoint:
          api_endpoint: https://my-resource.openai.azure.com/openai/deployments/gpt-4o/chat/completions
          api_key: ${AZURE_OPENAI_KEY}
          host_header: my-resource.openai.azure.com
        generation:
          temperature: 0.2
          tool_choice: auto
    """

    endpoint: EndpointConfig = Field(default_factory=EndpointConfig)
    generation: GenerationParams = Field(default_factory=GenerationParams)


class GenerationOutput(BaseModel):
    """Everything produced for one tools + transcript pair."""

    result: ConversionResult
    body: str | None = None
    curl: str | None = None
    powershell: str | None = None

    @property
    def summary(self) -> str:
        if self.result.is_empty:
            return "No valid messages found after conversion. Please check your input."
        return f"Generated! {self.result.message_count} messages, {self.result.tool_count} tools"

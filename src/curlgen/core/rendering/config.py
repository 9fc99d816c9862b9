"""Endpoint configuration for rendered commands."""

from pydantic import BaseModel


class EndpointConfig(BaseModel):
    """Where and how the rendered commands send the request.

    The API key is embedded in the query string, as Azure-style deployments
    expect; the placeholder default keeps rendered commands shareable.
    """

    api_endpoint: str = "https://api.openai.com/v1/chat/completions"
    api_version: str = "2024-02-01"
    api_key: str = "<Your openai key>"
    host_header: str = "api.openai.com"

    @property
    def url(self) -> str:
        """Full request URL with version and key query parameters."""
        return f"{self.api_endpoint}?api-version={self.api_version}&api-key={self.api_key}"

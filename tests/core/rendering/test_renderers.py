"""Tests for command renderers."""

from __future__ import annotations

import json

from curlgen.core.conversion.models import ChatMessage
from curlgen.core.conversion.payload import GenerationParams, RequestPayload, assemble_payload
from curlgen.core.rendering.config import EndpointConfig
from curlgen.core.rendering.renderers import render, render_body, render_curl, render_powershell


def _payload(content: str = "hi") -> RequestPayload:
    return assemble_payload(GenerationParams(), [ChatMessage(role="user", content=content)], [])


class TestEndpointConfig:
    def test_defaults(self) -> None:
        cfg = EndpointConfig()
        assert cfg.url == (
            "https://api.openai.com/v1/chat/completions"
            "?api-version=2024-02-01&api-key=<Your openai key>"
        )
        assert cfg.host_header == "api.openai.com"


class TestRenderBody:
    def test_two_space_json(self) -> None:
        body = render_body(_payload())
        assert body.startswith('{\n  "temperature": 0.1,')
        assert json.loads(body)["messages"] == [{"role": "user", "content": "hi"}]

    def test_non_ascii_kept(self) -> None:
        assert "Grüße" in render_body(_payload("Grüße"))


class TestRenderCurl:
    def test_layout(self) -> None:
        cfg = EndpointConfig(api_endpoint="https://example.com/chat", api_version="v1", api_key="k", host_header="example.com")
        text = render_curl(_payload(), cfg)
        lines = text.splitlines()

        assert lines[0] == "curl --location 'https://example.com/chat?api-version=v1&api-key=k' \\"
        assert lines[1] == "--header 'Host: example.com' \\"
        assert lines[2] == "--header 'Content-Type: application/json' \\"
        assert lines[3] == "--data '{"
        assert lines[4] == '    "temperature": 0.1,'
        assert text.endswith("}'")

    def test_single_quotes_escaped(self) -> None:
        text = render_curl(_payload("it's"), EndpointConfig())
        assert "it'\\''s" in text


class TestRenderPowerShell:
    def test_layout(self) -> None:
        cfg = EndpointConfig(api_endpoint="https://example.com/chat", api_version="v1", api_key="k", host_header="example.com")
        text = render_powershell(_payload("it's"), cfg)

        assert text.startswith('$headers = @{\n    "Host" = "example.com"\n')
        assert "$body = @'\n{\n  \"temperature\": 0.1," in text
        assert "it's" in text
        assert text.endswith(
            'Invoke-RestMethod -Uri "https://example.com/chat?api-version=v1&api-key=k" '
            "-Method Post -Headers $headers -Body $body"
        )


class TestRenderDispatch:
    def test_formats(self) -> None:
        payload = _payload()
        cfg = EndpointConfig()
        assert render(payload, cfg, "body") == render_body(payload)
        assert render(payload, cfg, "curl") == render_curl(payload, cfg)
        assert render(payload, cfg, "powershell") == render_powershell(payload, cfg)

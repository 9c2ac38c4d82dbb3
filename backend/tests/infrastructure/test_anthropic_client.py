"""Anthropic Text Generator — SDK error mapping with a mocked client."""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import anthropic
import httpx
import pytest

from pretalab_api.core.errors import GenerationAuthError, GenerationError
from pretalab_api.infrastructure.anthropic_client import AnthropicTextGenerator

_REQUEST = httpx.Request("POST", "https://api.anthropic.com/v1/messages")


def _generator(api_key="sk-ant-test"):
    generator = AnthropicTextGenerator(
        api_key=api_key, model="claude-3-5-haiku-latest", max_output_tokens=500,
    )
    generator.client = SimpleNamespace(
        messages=SimpleNamespace(create=AsyncMock()), close=AsyncMock(),
    )
    return generator


def _response(*texts):
    return SimpleNamespace(
        content=[SimpleNamespace(type="text", text=t) for t in texts],
        usage=SimpleNamespace(input_tokens=4, output_tokens=2),
    )


async def test_returns_joined_text_and_sends_single_turn():
    generator = _generator()
    generator.client.messages.create.return_value = _response("Olá", " mundo")

    assert await generator.generate("Diga olá") == "Olá mundo"
    generator.client.messages.create.assert_awaited_once_with(
        model="claude-3-5-haiku-latest",
        max_tokens=500,
        messages=[{"role": "user", "content": "Diga olá"}],
    )


async def test_missing_key_raises_auth_error():
    generator = _generator(api_key="")
    with pytest.raises(GenerationAuthError):
        await generator.generate("x")
    generator.client.messages.create.assert_not_awaited()


async def test_authentication_error_maps_to_auth_error():
    generator = _generator()
    generator.client.messages.create.side_effect = anthropic.AuthenticationError(
        "invalid x-api-key",
        response=httpx.Response(401, request=_REQUEST),
        body=None,
    )
    with pytest.raises(GenerationAuthError):
        await generator.generate("x")


async def test_timeout_maps_to_timeout_error():
    generator = _generator()
    generator.client.messages.create.side_effect = anthropic.APITimeoutError(
        request=_REQUEST,
    )
    with pytest.raises(GenerationError) as exc_info:
        await generator.generate("x")
    assert exc_info.value.error_type == "timeout"


async def test_connection_error_maps_to_connection_error():
    generator = _generator()
    generator.client.messages.create.side_effect = anthropic.APIConnectionError(
        request=_REQUEST,
    )
    with pytest.raises(GenerationError) as exc_info:
        await generator.generate("x")
    assert exc_info.value.error_type == "connection_error"


async def test_rate_limit_maps_to_client_error():
    generator = _generator()
    generator.client.messages.create.side_effect = anthropic.RateLimitError(
        "rate limited",
        response=httpx.Response(429, request=_REQUEST),
        body=None,
    )
    with pytest.raises(GenerationError) as exc_info:
        await generator.generate("x")
    assert exc_info.value.error_type == "client_error"


async def test_aclose_closes_client():
    generator = _generator()
    await generator.aclose()
    generator.client.close.assert_awaited_once()

"""Gemini Text Generator — request shape and error mapping over httpx.MockTransport."""

import json

import httpx
import pytest

from pretalab_api.core.errors import GenerationAuthError, GenerationError
from pretalab_api.infrastructure.gemini_client import GeminiTextGenerator


def _generator(handler, api_key="test-key"):
    return GeminiTextGenerator(
        api_key=api_key,
        model="gemini-2.5-flash",
        max_output_tokens=500,
        timeout_seconds=5,
        base_url="https://example.test/v1beta",
        transport=httpx.MockTransport(handler),
    )


def _success(text="Olá!"):
    return httpx.Response(200, json={
        "candidates": [{"content": {"parts": [{"text": text}]}}],
        "usageMetadata": {"promptTokenCount": 3, "candidatesTokenCount": 2},
    })


async def test_sends_single_user_turn_with_token_limit():
    seen = {}

    def handler(request: httpx.Request):
        seen["url"] = str(request.url)
        seen["key"] = request.headers["x-goog-api-key"]
        seen["body"] = json.loads(request.content)
        return _success("Brasília")

    generator = _generator(handler)
    text = await generator.generate("Qual a capital do Brasil?")
    await generator.aclose()

    assert text == "Brasília"
    assert seen["url"] == (
        "https://example.test/v1beta/models/gemini-2.5-flash:generateContent"
    )
    assert seen["key"] == "test-key"
    assert seen["body"] == {
        "contents": [{"role": "user", "parts": [{"text": "Qual a capital do Brasil?"}]}],
        "generationConfig": {"maxOutputTokens": 500},
    }


async def test_joins_multiple_parts():
    def handler(request):
        return httpx.Response(200, json={
            "candidates": [{"content": {"parts": [{"text": "a"}, {"text": "b"}]}}],
        })

    assert await _generator(handler).generate("x") == "ab"


async def test_missing_key_raises_auth_without_calling():
    calls = []

    def handler(request):
        calls.append(request)
        return _success()

    with pytest.raises(GenerationAuthError):
        await _generator(handler, api_key="").generate("x")
    assert calls == []


@pytest.mark.parametrize("status_code, body", [
    (400, {"error": {"message": "API key not valid. Please pass a valid API key.",
                     "details": [{"reason": "API_KEY_INVALID"}]}}),
    (401, {"error": {"message": "Unauthorized"}}),
    (403, {"error": {"message": "Permission denied"}}),
])
async def test_credential_rejection_raises_auth_error(status_code, body):
    generator = _generator(lambda request: httpx.Response(status_code, json=body))
    with pytest.raises(GenerationAuthError):
        await generator.generate("x")


@pytest.mark.parametrize("status_code, error_type", [
    (429, "client_error"),
    (500, "server_error"),
])
async def test_other_status_raises_generation_error(status_code, error_type):
    generator = _generator(
        lambda request: httpx.Response(status_code, json={"error": {"message": "nope"}}),
    )
    with pytest.raises(GenerationError) as exc_info:
        await generator.generate("x")
    assert exc_info.value.error_type == error_type
    assert "nope" in exc_info.value.message


async def test_timeout_maps_to_timeout_error():
    def handler(request):
        raise httpx.ReadTimeout("slow", request=request)

    with pytest.raises(GenerationError) as exc_info:
        await _generator(handler).generate("x")
    assert exc_info.value.error_type == "timeout"


async def test_connection_failure_maps_to_connection_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(GenerationError) as exc_info:
        await _generator(handler).generate("x")
    assert exc_info.value.error_type == "connection_error"


async def test_blocked_prompt_raises_empty_response():
    generator = _generator(lambda request: httpx.Response(
        200, json={"promptFeedback": {"blockReason": "SAFETY"}},
    ))
    with pytest.raises(GenerationError) as exc_info:
        await generator.generate("x")
    assert exc_info.value.error_type == "empty_response"
    assert "SAFETY" in exc_info.value.message

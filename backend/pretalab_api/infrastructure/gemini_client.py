"""Gemini Text Generator — single-turn calls to the Generative Language REST API.

Invariants:
    - Each generate() call sends a fresh conversation: one user turn, no history
    - maxOutputTokens always set from settings (500 by default)
    - Every call is bounded by an explicit timeout; no retries
    - Credential failures (missing key, HTTP 401/403, API_KEY_INVALID) raise
      GenerationAuthError; everything else raises GenerationError

Design Decisions:
    - Raw REST over httpx instead of the Google SDK: async, and tests swap
      the transport with httpx.MockTransport
"""

import logging

import httpx

from pretalab_api.core.errors import GenerationAuthError, GenerationError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
_AUTH_STATUS_CODES = (401, 403)
_AUTH_REASONS = ("API_KEY_INVALID", "API_KEY_SERVICE_BLOCKED")


class GeminiTextGenerator:
    """TextGenerator backed by Gemini generateContent."""

    provider = "gemini"
    credential_env_var = "GEMINI_API_KEY"

    def __init__(
        self,
        api_key: str,
        model: str,
        max_output_tokens: int = 500,
        timeout_seconds: float = 30,
        base_url: str = DEFAULT_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.max_output_tokens = max_output_tokens
        self.client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout_seconds,
            transport=transport,
        )

    async def generate(self, prompt: str) -> str:
        if not self.api_key:
            raise GenerationAuthError("Gemini API key not configured", self.provider)

        try:
            response = await self.client.post(
                f"/models/{self.model}:generateContent",
                headers={"x-goog-api-key": self.api_key},
                json=self._build_payload(prompt),
            )
        except httpx.TimeoutException:
            raise GenerationError("Gemini API timeout", self.provider, "timeout")
        except httpx.HTTPError as e:
            raise GenerationError(
                f"Gemini connection error: {e}", self.provider, "connection_error",
            )

        if response.is_error:
            self._raise_for_status(response)

        data = response.json()
        text = self._extract_text(data)
        usage = data.get("usageMetadata", {})
        logger.info(
            "Gemini API success",
            extra={
                "provider": self.provider,
                "input_tokens": usage.get("promptTokenCount"),
                "output_tokens": usage.get("candidatesTokenCount"),
            },
        )
        return text

    async def aclose(self) -> None:
        await self.client.aclose()

    def _build_payload(self, prompt: str) -> dict:
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {"maxOutputTokens": self.max_output_tokens},
        }

    def _raise_for_status(self, response: httpx.Response) -> None:
        error = _error_body(response)
        message = error.get("message") or response.reason_phrase
        reasons = {
            d.get("reason") for d in error.get("details", []) if isinstance(d, dict)
        }
        if (
            response.status_code in _AUTH_STATUS_CODES
            or reasons.intersection(_AUTH_REASONS)
            or "API key not valid" in message
        ):
            raise GenerationAuthError(message, self.provider)
        raise GenerationError(
            f"Gemini API error ({response.status_code}): {message}",
            self.provider,
            "client_error" if response.status_code < 500 else "server_error",
        )

    def _extract_text(self, data: dict) -> str:
        candidates = data.get("candidates") or []
        if not candidates:
            reason = data.get("promptFeedback", {}).get("blockReason", "no candidates")
            raise GenerationError(
                f"Gemini returned no text ({reason})", self.provider, "empty_response",
            )
        parts = candidates[0].get("content", {}).get("parts", [])
        return "".join(p.get("text", "") for p in parts)


def _error_body(response: httpx.Response) -> dict:
    """Extract the {"error": {...}} envelope; empty dict for non-JSON bodies."""
    try:
        body = response.json()
    except ValueError:
        return {}
    error = body.get("error") if isinstance(body, dict) else None
    return error if isinstance(error, dict) else {}

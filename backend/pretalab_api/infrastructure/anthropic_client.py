"""Anthropic Text Generator — single-turn Messages API calls with error mapping.

Invariants:
    - Each generate() call sends one user message, no history, no system prompt
    - SDK retries disabled (max_retries=0); timeout always explicit
    - AuthenticationError / PermissionDeniedError → GenerationAuthError
    - Timeouts, connection failures and other API errors → GenerationError
"""

import logging

import anthropic
from anthropic import (
    APIError,
    APIConnectionError,
    APITimeoutError,
    AuthenticationError,
    PermissionDeniedError,
)

from pretalab_api.core.errors import GenerationAuthError, GenerationError

logger = logging.getLogger(__name__)


class AnthropicTextGenerator:
    """TextGenerator backed by the Anthropic Messages API."""

    provider = "anthropic"
    credential_env_var = "ANTHROPIC_API_KEY"

    def __init__(
        self,
        api_key: str,
        model: str,
        max_output_tokens: int = 500,
        timeout_seconds: float = 30,
    ):
        self.api_key = api_key
        self.model = model
        self.max_output_tokens = max_output_tokens
        self.client = anthropic.AsyncAnthropic(
            api_key=api_key or None,
            timeout=timeout_seconds,
            max_retries=0,
        )

    async def generate(self, prompt: str) -> str:
        if not self.api_key:
            raise GenerationAuthError("Anthropic API key not configured", self.provider)

        try:
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=self.max_output_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except (AuthenticationError, PermissionDeniedError) as e:
            raise GenerationAuthError(str(e), self.provider)
        except APITimeoutError:
            raise GenerationError("Anthropic API timeout", self.provider, "timeout")
        except APIConnectionError as e:
            raise GenerationError(
                f"Anthropic connection error: {e}", self.provider, "connection_error",
            )
        except APIError as e:
            raise GenerationError(str(e), self.provider, "client_error")

        self._log_success(response)
        return "".join(
            block.text for block in response.content
            if getattr(block, "type", None) == "text"
        )

    async def aclose(self) -> None:
        await self.client.close()

    def _log_success(self, response) -> None:
        usage = response.usage
        logger.info(
            "Anthropic API success",
            extra={
                "provider": self.provider,
                "input_tokens": usage.input_tokens,
                "output_tokens": usage.output_tokens,
            },
        )

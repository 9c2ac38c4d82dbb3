"""API test fixtures — in-memory database + injected container + ASGI client.

Invariants:
    - The app under test is built with create_app(container=...): no lifespan,
      no module-level state, no real generation provider
    - fake_generator records prompts and can be told to fail
"""

import pytest
from httpx import ASGITransport, AsyncClient

from pretalab_api.config import Settings
from pretalab_api.core.errors import GenerationAuthError, GenerationError
from pretalab_api.infrastructure.container import AppContainer
from pretalab_api.main import create_app


class FakeTextGenerator:
    """Stand-in TextGenerator: returns canned text or raises a configured error."""

    provider = "fake"
    credential_env_var = "GEMINI_API_KEY"

    def __init__(self, reply: str = "Brasília é a capital do Brasil."):
        self.reply = reply
        self.error: Exception | None = None
        self.prompts: list[str] = []
        self.closed = False

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply

    def reject_credentials(self) -> None:
        self.error = GenerationAuthError("API key not valid", self.provider)

    def fail(self, message: str = "upstream exploded") -> None:
        self.error = GenerationError(message, self.provider)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def fake_generator():
    return FakeTextGenerator()


@pytest.fixture
def container(db_manager, task_store, transaction_store, fake_generator):
    return AppContainer(
        tasks=task_store,
        transactions=transaction_store,
        text_generator=fake_generator,
        db=db_manager,
        expose_error_details=True,
    )


@pytest.fixture
def test_settings():
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        cors_origins=["http://localhost:5173"],
        log_format="text",
    )


@pytest.fixture
async def client(test_settings, container):
    """ASGI client against an app wired to the test container."""
    app = create_app(test_settings, container=container)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

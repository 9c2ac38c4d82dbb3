"""Application Container — explicitly constructed dependencies handed to the app.

Invariants:
    - One container per FastAPI app instance (app.state.container); no module globals
    - Routes reach stores and the generator only through the container
    - close() releases the HTTP client and the engine pool exactly once per container
"""

import logging
from dataclasses import dataclass

from pretalab_api.config import Settings
from pretalab_api.core.repository_protocols import DocumentStore, TextGenerator
from pretalab_api.infrastructure.anthropic_client import AnthropicTextGenerator
from pretalab_api.infrastructure.database import DatabaseSessionManager
from pretalab_api.infrastructure.document_store import (
    TASKS, TRANSACTIONS, SqlDocumentStore,
)
from pretalab_api.infrastructure.gemini_client import GeminiTextGenerator

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    tasks: DocumentStore
    transactions: DocumentStore
    text_generator: TextGenerator
    db: DatabaseSessionManager | None = None
    expose_error_details: bool = True

    async def clear_collections(self) -> None:
        """Empty both collections (test isolation, local resets)."""
        for store in (self.tasks, self.transactions):
            await store.clear()

    async def close(self) -> None:
        await self.text_generator.aclose()
        if self.db is not None:
            await self.db.dispose()


def build_text_generator(settings: Settings) -> TextGenerator:
    """Instantiate the configured generation provider."""
    if settings.generation_provider == "anthropic":
        return AnthropicTextGenerator(
            api_key=settings.anthropic_api_key,
            model=settings.anthropic_model,
            max_output_tokens=settings.generation_max_output_tokens,
            timeout_seconds=settings.generation_timeout_seconds,
        )
    return GeminiTextGenerator(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        max_output_tokens=settings.generation_max_output_tokens,
        timeout_seconds=settings.generation_timeout_seconds,
        base_url=settings.gemini_base_url,
    )


def build_container(
    settings: Settings,
    db: DatabaseSessionManager | None = None,
    text_generator: TextGenerator | None = None,
) -> AppContainer:
    """Wire stores and generator from settings; explicit arguments win."""
    db = db or DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    generator = text_generator or build_text_generator(settings)
    logger.info(
        "Container built",
        extra={"provider": generator.provider},
    )
    return AppContainer(
        tasks=SqlDocumentStore(db, TASKS),
        transactions=SqlDocumentStore(db, TRANSACTIONS),
        text_generator=generator,
        db=db,
        expose_error_details=settings.expose_error_details,
    )

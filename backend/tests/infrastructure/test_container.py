"""Settings & Container — URL normalization and provider wiring."""

from pretalab_api.config import Settings
from pretalab_api.infrastructure.anthropic_client import AnthropicTextGenerator
from pretalab_api.infrastructure.container import build_container, build_text_generator
from pretalab_api.infrastructure.document_store import SqlDocumentStore
from pretalab_api.infrastructure.gemini_client import GeminiTextGenerator


def test_postgres_urls_are_rewritten_for_asyncpg():
    for url in ("postgres://u:p@h/db", "postgresql://u:p@h/db"):
        assert Settings(database_url=url).database_url == "postgresql+asyncpg://u:p@h/db"


def test_sqlite_url_untouched():
    url = "sqlite+aiosqlite:///:memory:"
    assert Settings(database_url=url).database_url == url


async def test_gemini_is_default_provider():
    generator = build_text_generator(Settings(gemini_api_key="k"))
    assert isinstance(generator, GeminiTextGenerator)
    assert generator.max_output_tokens == 500
    await generator.aclose()


async def test_anthropic_provider_selected_by_setting():
    generator = build_text_generator(
        Settings(generation_provider="anthropic", anthropic_api_key="k"),
    )
    assert isinstance(generator, AnthropicTextGenerator)
    assert generator.credential_env_var == "ANTHROPIC_API_KEY"
    await generator.aclose()


async def test_build_container_wires_stores_to_shared_db(db_manager):
    container = build_container(
        Settings(expose_error_details=False), db=db_manager,
    )
    assert isinstance(container.tasks, SqlDocumentStore)
    assert container.tasks.spec.label == "tarefa"
    assert container.transactions.spec.label == "transação"
    assert container.db is db_manager
    assert container.expose_error_details is False
    await container.text_generator.aclose()


async def test_clear_collections_empties_both(db_manager):
    container = build_container(Settings(), db=db_manager)
    await container.tasks.create({"title": "x"})

    await container.clear_collections()

    assert (await container.tasks.list_all()).value == []
    await container.text_generator.aclose()

"""Boundary Protocols — contracts between the router and its collaborators.

Invariants:
    - Routes only see DocumentStore and TextGenerator, never ORM sessions or SDK clients
    - Store methods never raise for expected outcomes; they return a StoreResult
    - TextGenerator.generate raises GenerationAuthError or GenerationError on failure

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from typing import Any, Protocol

from pretalab_api.core.store_results import StoreResult


class DocumentStore(Protocol):
    """One schema-validated collection addressed by object id."""

    async def list_all(self) -> StoreResult: ...
    async def get(self, token: str) -> StoreResult: ...
    async def create(self, payload: dict[str, Any]) -> StoreResult: ...
    async def update(self, token: str, payload: dict[str, Any]) -> StoreResult: ...
    async def delete(self, token: str) -> StoreResult: ...
    async def clear(self) -> None: ...


class TextGenerator(Protocol):
    """Single-turn, stateless text generation."""

    provider: str
    credential_env_var: str

    async def generate(self, prompt: str) -> str: ...
    async def aclose(self) -> None: ...

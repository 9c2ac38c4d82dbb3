"""CRUD Router Builder — the five document routes shared by every collection.

Invariants:
    - Each handler performs exactly one store call, then maps the StoreResult
    - Mapping table: Ok → 200/201/204, MalformedId → 400, NotFound → 404,
      ValidationFailed → 400, Unexpected → 500
    - Error bodies always carry "message"; "error" only on 500 when the
      container allows debug details
    - Request bodies must be JSON objects; anything else is rejected by FastAPI
      before the handler runs (RequestValidationError → 400)
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse, Response

from pretalab_api.api.dependencies import get_container
from pretalab_api.core.domain_types import Resource
from pretalab_api.core.messages import RESOURCE_MESSAGES, ResourceMessages
from pretalab_api.core.repository_protocols import DocumentStore
from pretalab_api.core.store_results import (
    MalformedId, NotFound, Ok, StoreResult, Unexpected, ValidationFailed,
)
from pretalab_api.infrastructure.container import AppContainer

logger = logging.getLogger(__name__)


def to_response(
    result: StoreResult,
    messages: ResourceMessages,
    failure_message: str,
    expose_error_details: bool,
    success_status: int = status.HTTP_200_OK,
) -> Response:
    """Translate one store outcome into an HTTP response."""
    if isinstance(result, Ok):
        if success_status == status.HTTP_204_NO_CONTENT:
            return Response(status_code=success_status)
        return JSONResponse(status_code=success_status, content=result.value)

    if isinstance(result, MalformedId):
        logger.warning(f"Malformed {messages.label} id: {result.token!r}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": messages.invalid_id},
        )

    if isinstance(result, NotFound):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": messages.not_found},
        )

    if isinstance(result, ValidationFailed):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": result.message},
        )

    if isinstance(result, Unexpected):
        body = {"message": failure_message}
        if expose_error_details:
            body["error"] = result.detail
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body,
        )

    raise TypeError(f"Unhandled store result: {result!r}")


def build_crud_router(resource: Resource, prefix: str) -> APIRouter:
    """Create list/get/create/update/delete routes for one collection."""
    messages = RESOURCE_MESSAGES[resource]
    router = APIRouter(prefix=prefix, tags=[prefix.strip("/")])

    def get_store(container: AppContainer = Depends(get_container)) -> DocumentStore:
        if resource is Resource.TASK:
            return container.tasks
        return container.transactions

    @router.get("")
    async def list_documents(
        store: DocumentStore = Depends(get_store),
        container: AppContainer = Depends(get_container),
    ):
        result = await store.list_all()
        return to_response(
            result, messages, messages.list_failed, container.expose_error_details,
        )

    @router.get("/{document_id}")
    async def get_document(
        document_id: str,
        store: DocumentStore = Depends(get_store),
        container: AppContainer = Depends(get_container),
    ):
        result = await store.get(document_id)
        return to_response(
            result, messages, messages.get_failed, container.expose_error_details,
        )

    @router.post("", status_code=status.HTTP_201_CREATED)
    async def create_document(
        payload: dict[str, Any] | None = Body(None),
        store: DocumentStore = Depends(get_store),
        container: AppContainer = Depends(get_container),
    ):
        result = await store.create(payload or {})
        return to_response(
            result, messages, messages.create_failed,
            container.expose_error_details, status.HTTP_201_CREATED,
        )

    @router.put("/{document_id}")
    async def update_document(
        document_id: str,
        payload: dict[str, Any] | None = Body(None),
        store: DocumentStore = Depends(get_store),
        container: AppContainer = Depends(get_container),
    ):
        result = await store.update(document_id, payload or {})
        return to_response(
            result, messages, messages.update_failed, container.expose_error_details,
        )

    @router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_document(
        document_id: str,
        store: DocumentStore = Depends(get_store),
        container: AppContainer = Depends(get_container),
    ):
        result = await store.delete(document_id)
        return to_response(
            result, messages, messages.delete_failed,
            container.expose_error_details, status.HTTP_204_NO_CONTENT,
        )

    return router

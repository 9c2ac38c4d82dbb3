"""Transaction Routes — /transactions CRUD over the transactions collection."""

from pretalab_api.api.routes.crud import build_crud_router
from pretalab_api.core.domain_types import Resource

router = build_crud_router(Resource.TRANSACTION, "/transactions")

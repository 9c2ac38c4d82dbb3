"""Root Route — plain-text welcome message."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from pretalab_api.core.messages import WELCOME_TEXT

router = APIRouter(tags=["root"])


@router.get("/", response_class=PlainTextResponse)
async def welcome():
    return WELCOME_TEXT

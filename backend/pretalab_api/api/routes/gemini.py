"""Generation Route — POST /gemini/generate, a stateless single-turn text call.

Invariants:
    - Missing, null, or blank prompt → 400 before the generator is touched
    - GenerationAuthError → 401 naming the provider's credential variable
    - Any other generator failure → 500 (with "error" detail when allowed)
    - Nothing is remembered between calls
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from pretalab_api.api.dependencies import get_container
from pretalab_api.core.errors import GenerationAuthError, PretalabError
from pretalab_api.core.messages import (
    GENERATION_FAILED, PROMPT_REQUIRED, generation_auth_failed,
)
from pretalab_api.infrastructure.container import AppContainer
from pretalab_api.schemas.generation import GenerateRequest, GenerateResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/gemini", tags=["generation"])


@router.post("/generate", response_model=GenerateResponse)
async def generate_text(
    body: GenerateRequest | None = None,
    container: AppContainer = Depends(get_container),
):
    """Send the prompt to the configured provider and return its text."""
    prompt = body.prompt if body else None
    if not prompt or not prompt.strip():
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": PROMPT_REQUIRED},
        )

    generator = container.text_generator
    try:
        text = await generator.generate(prompt)
    except GenerationAuthError as e:
        logger.warning(
            f"Generation credential rejected: {e.message}",
            extra=e.log_fields(),
        )
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"message": generation_auth_failed(generator.credential_env_var)},
        )
    except Exception as e:
        logger.error(
            f"Generation failed: {e}",
            exc_info=True,
            extra=(
                e.log_fields() if isinstance(e, PretalabError)
                else {"provider": generator.provider}
            ),
        )
        content = {"message": GENERATION_FAILED}
        if container.expose_error_details:
            content["error"] = str(e)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content,
        )

    return GenerateResponse(generated_text=text)

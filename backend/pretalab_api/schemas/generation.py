"""Generation Schemas — request/response bodies for POST /gemini/generate."""

from pydantic import BaseModel, ConfigDict, Field


class GenerateRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    prompt: str | None = None


class GenerateResponse(BaseModel):
    generated_text: str = Field(serialization_alias="generatedText")

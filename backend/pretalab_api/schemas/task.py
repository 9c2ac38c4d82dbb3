"""Task Schemas — write validation and JSON projection for the tasks collection.

Invariants:
    - title: required, stripped, non-empty
    - completed: bool, defaults to False when omitted
    - Unknown keys and client-supplied _id/createdAt/updatedAt are ignored
"""

from pydantic import BaseModel, ConfigDict, Field

from pretalab_api.schemas.document import DocumentRead

TASK_REQUIRED_MESSAGES = {
    "title": "O título da tarefa é obrigatório.",
}


class TaskFields(BaseModel):
    """Client-settable task fields (the validated write shape)."""
    model_config = ConfigDict(
        str_strip_whitespace=True, extra="ignore", coerce_numbers_to_str=True,
    )

    title: str = Field(min_length=1)
    completed: bool = False


class TaskRead(DocumentRead):
    """Task as returned to callers."""
    title: str
    completed: bool

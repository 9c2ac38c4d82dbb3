"""Document Projection — shared read-model fields for every collection.

Invariants:
    - Serialized keys: _id, createdAt, updatedAt (by_alias=True)
    - All datetimes leave the API as UTC ISO-8601, even when the driver
      hands back naive values (SQLite)
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes; convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class DocumentRead(BaseModel):
    """Base projection: identifier and store-managed timestamps."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(serialization_alias="_id")
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    @field_validator("created_at", "updated_at")
    @classmethod
    def as_utc(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)

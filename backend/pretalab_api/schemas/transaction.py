"""Transaction Schemas — write validation and JSON projection for the transactions collection.

Invariants:
    - description, category: required, stripped, non-empty
    - amount: required finite number (sign carries direction)
    - date: required; ISO date or date-time, stored as UTC (values whose UTC
      conversion leaves the datetime range are rejected, not raised)
    - type: exactly "income" or "expense"
"""

from datetime import date, datetime, time, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from pretalab_api.core.domain_types import TransactionType
from pretalab_api.schemas.document import DocumentRead, ensure_utc

TRANSACTION_REQUIRED_MESSAGES = {
    "description": "A descrição da transação é obrigatória.",
    "amount": "O valor da transação é obrigatório.",
    "date": "A data da transação é obrigatória.",
    "type": "O tipo da transação é obrigatório (income/expense).",
    "category": "A categoria da transação é obrigatória.",
}

TRANSACTION_ENUM_MESSAGES = {
    "type": "`{value}` não é um tipo de transação válido (income/expense).",
}


class TransactionFields(BaseModel):
    """Client-settable transaction fields (the validated write shape)."""
    model_config = ConfigDict(
        str_strip_whitespace=True, extra="ignore", coerce_numbers_to_str=True,
        use_enum_values=True,
    )

    description: str = Field(min_length=1)
    amount: float = Field(allow_inf_nan=False)
    date: datetime
    type: TransactionType
    category: str = Field(min_length=1)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v):
        if isinstance(v, str):
            text = v.strip()
            if not text:
                return None
            try:
                v = datetime.fromisoformat(text.replace("Z", "+00:00"))
            except ValueError:
                raise PydanticCustomError(
                    "datetime_parsing", "invalid date {value}", {"value": v},
                )
        if isinstance(v, date) and not isinstance(v, datetime):
            v = datetime.combine(v, time.min, tzinfo=timezone.utc)
        return v

    @field_validator("date")
    @classmethod
    def date_as_utc(cls, v: datetime) -> datetime:
        try:
            return ensure_utc(v)
        except OverflowError:
            raise PydanticCustomError(
                "datetime_parsing", "date out of range {value}", {"value": v},
            )


class TransactionRead(DocumentRead):
    """Transaction as returned to callers."""
    description: str
    amount: float
    date: datetime
    type: TransactionType
    category: str

    @field_validator("date")
    @classmethod
    def read_date_as_utc(cls, v: datetime) -> datetime:
        return ensure_utc(v)

"""Store Results — the closed set of outcomes a document store call can produce.

Invariants:
    - Every store operation returns exactly one of: Ok, NotFound, MalformedId,
      ValidationFailed, Unexpected
    - ValidationFailed keeps every failing field, in schema declaration order
    - Routes branch on the variant type, never on exception identity
"""

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class FieldError:
    """One field-level constraint violation."""
    field: str
    message: str


@dataclass(frozen=True)
class Ok:
    """Operation succeeded. value is a document, a list of documents, or None (delete)."""
    value: Any = None


@dataclass(frozen=True)
class NotFound:
    document_id: str


@dataclass(frozen=True)
class MalformedId:
    token: str


@dataclass(frozen=True)
class ValidationFailed:
    """Write rejected by the schema engine."""
    label: str
    errors: list[FieldError] = field(default_factory=list)

    @property
    def message(self) -> str:
        """All field explanations joined into one human-readable message."""
        details = ", ".join(f"{e.field}: {e.message}" for e in self.errors)
        return f"Falha na validação da {self.label}: {details}"


@dataclass(frozen=True)
class Unexpected:
    """Anything else (store unreachable, driver failure, bug)."""
    detail: str


StoreResult = Union[Ok, NotFound, MalformedId, ValidationFailed, Unexpected]

"""Schema Engine Glue — turns pydantic ValidationError into FieldError lists.

Invariants:
    - Missing, null, or blank (after strip) required values → the field's required message
    - Enum mismatches → the field's enum message (formatted with the offending value)
    - Anything else uncoercible → generic "Valor inválido" message
    - At most one FieldError per field, in the order pydantic reports them
"""

from collections.abc import Mapping

from pydantic import ValidationError

from pretalab_api.core.store_results import FieldError

_REQUIRED_TYPES = frozenset({"missing", "string_too_short"})
_ENUM_TYPES = frozenset({"enum", "literal_error"})


def invalid_value_message(field: str) -> str:
    return f'Valor inválido para o campo "{field}".'


def collect_field_errors(
    exc: ValidationError,
    required_messages: Mapping[str, str],
    enum_messages: Mapping[str, str] | None = None,
) -> list[FieldError]:
    """Map pydantic errors to localized per-field explanations."""
    enum_messages = enum_messages or {}
    seen: set[str] = set()
    errors: list[FieldError] = []
    for err in exc.errors():
        field = str(err["loc"][0]) if err["loc"] else "__root__"
        if field in seen:
            continue
        seen.add(field)
        errors.append(FieldError(field, _describe(err, field, required_messages, enum_messages)))
    return errors


def _describe(
    err: Mapping,
    field: str,
    required_messages: Mapping[str, str],
    enum_messages: Mapping[str, str],
) -> str:
    value = err.get("input")
    if field in required_messages and (
        err["type"] in _REQUIRED_TYPES or value is None
    ):
        return required_messages[field]
    if field in enum_messages and err["type"] in _ENUM_TYPES:
        return enum_messages[field].format(value=value)
    return invalid_value_message(field)

"""Field rules for inbound catalog payloads.

Each (resource, operation) pair maps to a pydantic model that holds its rule
set. ``validate`` runs a raw mapping through the matching model and returns
only the fields that passed, typed; it never touches the store.
"""
from typing import Any, Dict, Iterable, List, Mapping

from pydantic import BaseModel, ValidationError

from catalog_service.app.exceptions import ValidationFailure
from catalog_service.app.schemas import (
    CategoryCreate,
    CategoryUpdate,
    ProductCreate,
    ProductUpdate,
)

RULES: Dict[tuple, type] = {
    ("category", "create"): CategoryCreate,
    ("category", "update"): CategoryUpdate,
    ("product", "create"): ProductCreate,
    ("product", "update"): ProductUpdate,
}

_REQUEST_SECTIONS = ("body", "query", "path", "header", "cookie")


def errors_by_field(errors: Iterable[Mapping[str, Any]]) -> Dict[str, List[str]]:
    """Fold pydantic error entries into ``{field: [reason, ...]}``."""
    result: Dict[str, List[str]] = {}
    for error in errors:
        loc = [part for part in error.get("loc", ()) if part not in _REQUEST_SECTIONS]
        field = loc[0] if loc and isinstance(loc[0], str) else "payload"
        if error.get("type") == "missing":
            reason = f"The {field} field is required."
        else:
            reason = error.get("msg", "Invalid value.")
        reasons = result.setdefault(field, [])
        if reason not in reasons:
            reasons.append(reason)
    return result


def validate(resource: str, operation: str, payload: Any) -> Dict[str, Any]:
    """Return the sanitized fields of ``payload`` or raise ValidationFailure.

    Fields the rule set marks optional are only returned when the caller
    actually sent them, so an update never overwrites what it did not name.
    A payload that is not a mapping is treated as empty.
    """
    try:
        model: type = RULES[(resource, operation)]
    except KeyError:
        raise ValueError(f"No validation rules for {resource}/{operation}")

    if not isinstance(payload, Mapping):
        payload = {}

    try:
        validated: BaseModel = model.model_validate(dict(payload))
    except ValidationError as e:
        raise ValidationFailure(errors_by_field(e.errors())) from e

    if operation == "update":
        return validated.model_dump(exclude_unset=True, exclude_none=True)
    return validated.model_dump()

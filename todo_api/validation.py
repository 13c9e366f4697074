"""
Todo API - Request Validation Messages

Request payloads are validated by the pydantic schemas of each router.
Clients receive a single message describing the first failing field,
e.g. ``"password" length must be at least 6 characters long``.
"""

from typing import Any, Sequence, Type, TypeVar

from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError as PydanticValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

# Location prefixes FastAPI adds in front of the field name
_LOCATION_PREFIXES = {"body", "path", "query", "header", "cookie"}

_MESSAGES = {
    "missing": "is required",
    "extra_forbidden": "is not allowed",
    "string_type": "must be a string",
    "string_too_short": "length must be at least {min_length} characters long",
    "string_too_long": "length must be less than or equal to {max_length} characters long",
    "bool_type": "must be a boolean",
    "bool_parsing": "must be a boolean",
    "int_type": "must be a number",
    "int_parsing": "must be a number",
    "model_type": "must be of type object",
    "model_attributes_type": "must be of type object",
    "dict_type": "must be of type object",
    "json_invalid": "must be valid JSON",
}

# validate_email reports a plain value_error
_FIELD_MESSAGES = {
    ("email", "value_error"): "must be a valid email",
}


def field_label(loc: Sequence[Any]) -> str:
    """Human-readable field name from a pydantic error location."""
    parts = [str(part) for part in loc if not isinstance(part, int)]
    if len(parts) > 1 and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts) or "value"


def format_error(error: dict) -> str:
    """Format one pydantic error dict as ``"<field>" <reason>``."""
    label = field_label(error.get("loc", ()))
    error_type = error.get("type", "")
    template = _FIELD_MESSAGES.get((label, error_type)) or _MESSAGES.get(error_type)
    if template is None:
        return f'"{label}" {error.get("msg", "is invalid")}'
    try:
        reason = template.format(**(error.get("ctx") or {}))
    except KeyError:
        reason = template
    return f'"{label}" {reason}'


def first_error_message(errors: Sequence[dict]) -> str:
    """Message for the first failing field; later errors are ignored."""
    if not errors:
        return "Invalid request"
    return format_error(errors[0])


def validate_payload(model: Type[ModelT], payload: Any) -> ModelT:
    """Validate ``payload`` against ``model`` as if it were the request body."""
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        raise RequestValidationError(
            [{**error, "loc": ("body", *error["loc"])} for error in exc.errors()]
        ) from exc

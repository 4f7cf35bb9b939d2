"""
Request validation helpers shared by the pet and vaccine services.

These helpers raise ``service.handlers.utils.errors.ValidationError`` so the
handler boundary can turn them into 400 responses. None of them touch the
store.
"""

import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from service.handlers.utils.errors import ValidationError

T = TypeVar('T', bound=BaseModel)


def require_path_parameter(value: Optional[str], message: str) -> str:
    """Return the path parameter, or fail with ``message`` when it is missing or blank."""
    if not value or not value.strip():
        raise ValidationError(message)
    return value


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON and cannot be stored
    raise ValidationError("Invalid JSON in request body")


def parse_request_body(body: Optional[str]) -> Dict[str, Any]:
    """
    Decode a JSON request body.

    Args:
        body: Raw request body as received from API Gateway

    Returns:
        The decoded JSON object

    Raises:
        ValidationError: If the body is missing, not JSON, or not an object
    """
    if not body:
        raise ValidationError("Request body is required")

    try:
        payload = json.loads(body, parse_constant=_reject_constant)
    except json.JSONDecodeError:
        raise ValidationError("Invalid JSON in request body")

    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid age or weight
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_date(value: Any) -> Optional[datetime]:
    """
    Parse a date or ISO-8601 timestamp string.

    Date-only values mean midnight; values without an offset are taken as UTC.

    Returns:
        An aware datetime, or None when the value is not a valid date
    """
    if not isinstance(value, str) or not value.strip():
        return None

    try:
        parsed = datetime.fromisoformat(value.strip().replace('Z', '+00:00'))
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def validate_model(model: Type[T], payload: Dict[str, Any]) -> T:
    """Validate a payload against a request model, as a service validation error."""
    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e)

"""
Request parsing shared by the route modules.
"""
import json
import logging
from typing import Any, Dict, Type, TypeVar
from fastapi import Request
from pydantic import BaseModel, ValidationError as PydanticValidationError
from exercise_tracker.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def first_error_message(exc: PydanticValidationError) -> str:
    """Return the message of the first validation error."""
    errors = exc.errors()
    if not errors:
        return "Bad Request"
    return errors[0]["msg"]


def validate_payload(schema: Type[SchemaT], data: Dict[str, Any]) -> SchemaT:
    """Validate raw request data against a schema, raising a 400-class error."""
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        message = first_error_message(e)
        logger.debug(f"Rejected {schema.__name__}: {message}")
        raise ValidationError(message) from e


async def read_body(request: Request) -> Dict[str, Any]:
    """Read a form-encoded or JSON request body into a plain dict."""
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return dict(form)

    raw = await request.body()
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise ValidationError("Request body is not valid JSON") from e
    if not isinstance(data, dict):
        raise ValidationError("Request body must be an object")
    return data

from __future__ import annotations

from typing import Any, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class RequestValidationFailed(ValueError):
    """Raised when a request body does not satisfy its schema."""


def validation_message(exc: ValidationError) -> str:
    """Return the first validation error as a plain sentence.

    Custom ``ValueError`` messages raised from validators are returned
    verbatim; built-in constraint errors fall back to pydantic's ``msg``.
    """
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    ctx = first.get("ctx") or {}
    custom = ctx.get("error")
    if custom is not None:
        return str(custom)
    return str(first.get("msg") or "Invalid request")


async def read_json_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        return {}


def parse_body(model: type[ModelT], body: Any) -> ModelT:
    if not isinstance(body, dict):
        body = {}
    try:
        return model.model_validate(body)
    except ValidationError as exc:
        raise RequestValidationFailed(validation_message(exc)) from exc

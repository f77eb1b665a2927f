"""
Translation of validation failures into 400 responses.

Both request binding errors (`RequestValidationError`) and Pydantic errors raised
while validating an entity in the CRUD layer become a JSON list of `Violation`
objects (`{"field": ..., "message": ...}`).
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..schemas.error import Violation

logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}

# OpenAPI declaration for routes that can answer with violations.
VALIDATION_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": List[Violation], "description": "Validation failed"},
}


def to_violations(errors: List[Dict[str, Any]]) -> List[Violation]:
    """
    Converts Pydantic error dicts into field/message violations.

    Args:
        errors (List[Dict[str, Any]]): Output of `ValidationError.errors()`.

    Returns:
        List[Violation]: One violation per error.
    """
    violations = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if len(loc) > 1 and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        field = ".".join(loc) or "body"

        message = error.get("msg", "Invalid value")
        ctx_error = error.get("ctx", {}).get("error")
        if error.get("type") == "value_error" and ctx_error is not None:
            message = str(ctx_error)
        violations.append(Violation(field=field, message=message))
    return violations


def _violation_response(violations: List[Violation]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=[violation.model_dump() for violation in violations],
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    violations = to_violations(exc.errors())
    logger.info(f"Rejected {request.method} {request.url.path}: {violations}")
    return _violation_response(violations)


async def entity_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    violations = to_violations(exc.errors())
    logger.info(f"Invalid entity on {request.method} {request.url.path}: {violations}")
    return _violation_response(violations)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, entity_validation_handler)

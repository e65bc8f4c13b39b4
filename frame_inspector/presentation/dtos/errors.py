"""Error handling utilities for invalid requests."""
from typing import List, Dict
from fastapi.responses import JSONResponse
from pydantic import ValidationError


def create_invalid_request_response(errors: List[Dict[str, str]]) -> JSONResponse:
    """Create standardized invalid request response."""
    return JSONResponse(
        status_code=400,
        content={
            "message": "Invalid request",
            "errors": errors
        }
    )


def create_validation_error_response(validation_error: ValidationError) -> JSONResponse:
    """Convert Pydantic validation error to standardized error response."""
    errors = []

    for error in validation_error.errors():
        field = ".".join(str(loc) for loc in error["loc"])
        error_msg = error["msg"]

        if error["type"] == "extra_forbidden":
            error_msg = f"unexpected field '{field}'"

        errors.append({
            "field": field,
            "error": error_msg
        })

    return create_invalid_request_response(errors)


def create_internal_error_response() -> JSONResponse:
    """Create standardized internal error response."""
    return JSONResponse(
        status_code=500,
        content={
            "message": "Internal error",
            "errors": []
        }
    )

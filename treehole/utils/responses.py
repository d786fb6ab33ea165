"""
Utility functions for API responses
"""
from typing import Optional
from fastapi import status
from fastapi.responses import JSONResponse


def error_response(
    error: str,
    detail: Optional[str] = None,
    status_code: int = status.HTTP_400_BAD_REQUEST
) -> JSONResponse:
    """
    Create error response

    Args:
        error: Error message
        detail: Optional error details
        status_code: HTTP status code

    Returns:
        JSONResponse object
    """
    response = {
        "ok": False,
        "error": error
    }

    if detail:
        response["detail"] = detail

    return JSONResponse(content=response, status_code=status_code)


def format_validation_errors(errors) -> str:
    """Flatten pydantic/FastAPI validation errors into one line"""
    parts = []
    for err in errors:
        location = ".".join(str(item) for item in err.get("loc", ()) if item != "body")
        message = err.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)

"""Error response schemas.

All error responses use the same envelope: {"error": {"message": "...", "status": 404}}.
Exception handlers in main.py build these from raised exceptions.
"""

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Inner error object: human-readable message plus the HTTP status."""

    message: str
    status: int


class ErrorResponse(BaseModel):
    """Top-level error envelope returned by all error responses."""

    error: ErrorDetail

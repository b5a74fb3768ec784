"""Standardized success and error envelopes."""

import logging
from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.api.models import ErrorResponse
from src.services.verdict.errors import (
    InvalidInput,
    MalformedResponse,
    UnknownPersona,
    UpstreamFailure,
    VerdictError,
)

logger = logging.getLogger(__name__)

PARSE_FAILURE_MESSAGE = "Failed to parse AI response"


def build_success(data: BaseModel) -> dict[str, Any]:
    """Wrap a result model in the success envelope."""
    return {"success": True, "data": data.model_dump(mode="json")}


def build_error(message: str) -> dict[str, Any]:
    """Build an error envelope with Pydantic validation."""
    return ErrorResponse(error=message).model_dump()


def status_for(error: VerdictError) -> int:
    """Map an error class to its HTTP status code."""
    if isinstance(error, UnknownPersona):
        return 404
    if isinstance(error, InvalidInput):
        return 400
    return 500


def public_message(error: VerdictError) -> str:
    """Message safe to show a client; completion text never leaks."""
    if isinstance(error, MalformedResponse):
        return PARSE_FAILURE_MESSAGE
    if isinstance(error, UpstreamFailure):
        return error.message or "Model request failed"
    return error.message


def error_response(error: VerdictError) -> JSONResponse:
    """Turn a pipeline error into a JSON error envelope."""
    status_code = status_for(error)
    if status_code >= 500:
        logger.error("%s: %s", type(error).__name__, error.message)
    else:
        logger.info("Rejected request (%s): %s", type(error).__name__, error.message)
    return JSONResponse(status_code=status_code, content=build_error(public_message(error)))

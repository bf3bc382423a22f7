# =============================================================================
# app/responses.py - Response Helpers
# =============================================================================
# Builds the uniform JSON envelopes returned by the API:
# - success: the payload itself (object or array)
# - error:   {"message": "..."}
#
# Pydantic payloads are dumped with exclude_none so optional fields such as
# `age` disappear from the output instead of rendering as null.
# =============================================================================

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from core.models.response import ErrorResponse


def _encode(payload: Any) -> Any:
    return jsonable_encoder(payload, exclude_none=True)


def http_ok(payload: Any) -> JSONResponse:
    """HTTP 200 OK with a JSON body."""
    return JSONResponse(status_code=200, content=_encode(payload))


def http_no_content() -> Response:
    """HTTP 204 No Content with an empty body."""
    return Response(status_code=204)


def http_error(status_code: int, message: str) -> JSONResponse:
    """Error envelope with an arbitrary status code."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
    )


def http_bad_request(message: str) -> JSONResponse:
    """HTTP 400 Bad Request with an error envelope."""
    return http_error(400, message)


def http_internal_server_error(message: str) -> JSONResponse:
    """HTTP 500 Internal Server Error with an error envelope."""
    return http_error(500, message)

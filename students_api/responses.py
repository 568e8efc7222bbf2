"""Uniform JSON envelope for every reply.

Success: `{"status": "OK", "data": ...}`. Errors carry either a single
`error` message or an `errors` mapping of field -> constraint tag.
"""

import logging
from typing import Any, Iterable, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from .validation import Violation

logger = logging.getLogger("students_api.api")

STATUS_OK = "OK"
STATUS_ERROR = "Error"

_FALLBACK_BODY = b'{"status":"Error","error":"internal error"}'


def _render(body: dict, status_code: int, headers: Optional[dict] = None) -> Response:
    try:
        return JSONResponse(status_code=status_code, content=jsonable_encoder(body), headers=headers)
    except (TypeError, ValueError):
        logger.exception("failed to serialize response envelope (status=%s)", status_code)
        return Response(content=_FALLBACK_BODY, status_code=500, media_type="application/json")


def success(data: Any, status_code: int = 200) -> Response:
    return _render({"status": STATUS_OK, "data": data}, status_code)


def error(message: str, status_code: int, headers: Optional[dict] = None) -> Response:
    return _render({"status": STATUS_ERROR, "error": message}, status_code, headers)


def validation_error(violations: Iterable[Violation]) -> Response:
    """400 with one `field: tag` entry per violation."""
    errors = {v.field: v.tag for v in violations}
    return _render({"status": STATUS_ERROR, "errors": errors}, 400)

"""HTTP handlers for the student resource.

Each handler decodes the request, validates it, calls storage and wraps
the outcome in the response envelope. Handlers never let an exception
escape: every path ends in an envelope.
"""

import asyncio
import json
import logging
import re
from typing import Any, Callable

from fastapi import Depends, Request
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool

from . import responses
from .errors import MalformedRequest, NotFoundError, StorageError, ValidationFailed
from .schemas import INT64_MAX, CreatedOut, StudentIn
from .storage import Storage
from .validation import validate_student

logger = logging.getLogger("students_api.api")

_ID_RE = re.compile(r"-?[0-9]+")


def get_storage(request: Request) -> Storage:
    """FastAPI dependency returning the storage bound by `create_app`."""
    return request.app.state.storage


async def _call(request: Request, fn: Callable, *args) -> Any:
    """Run a blocking storage call on the request threadpool, bounded by the configured timeout.

    On timeout the request stops waiting; the worker thread still finishes
    its own transaction, so the store is never left half-written.
    """
    timeout = request.app.state.settings.STORAGE_TIMEOUT_SECONDS
    try:
        return await asyncio.wait_for(run_in_threadpool(fn, *args), timeout=timeout)
    except asyncio.TimeoutError as exc:
        raise StorageError(f"storage call timed out after {timeout}s") from exc


async def _decode_body(request: Request) -> Any:
    raw = await request.body()
    if not raw.strip():
        raise MalformedRequest("empty body")
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, ValueError) as exc:
        raise MalformedRequest("invalid request body") from exc


def _parse_id(raw: str) -> int:
    """Decimal digits with an optional sign, within the signed 64-bit range."""
    if not _ID_RE.fullmatch(raw):
        raise MalformedRequest("invalid id")
    value = int(raw)
    if not -INT64_MAX - 1 <= value <= INT64_MAX:
        raise MalformedRequest("invalid id")
    return value


def _validated(payload: Any) -> StudentIn:
    student, violations = validate_student(payload)
    if violations:
        raise ValidationFailed(violations)
    return student


def _failure(exc: Exception) -> Response:
    """Map an exception to its envelope. Must be called from an except block."""
    if isinstance(exc, MalformedRequest):
        return responses.error(str(exc), 400)
    if isinstance(exc, ValidationFailed):
        return responses.validation_error(exc.violations)
    if isinstance(exc, NotFoundError):
        return responses.error("student not found", 404)
    if isinstance(exc, StorageError):
        logger.exception("storage failure")
    else:
        logger.exception("unhandled error in handler")
    return responses.error("internal error", 500)


async def create_student(request: Request, storage: Storage = Depends(get_storage)) -> Response:
    """Create a student from a JSON body and return its id (201)."""
    logger.info("creating a student")
    try:
        student = _validated(await _decode_body(request))
        new_id = await _call(request, storage.create, student.name, student.email, student.age)
    except Exception as exc:
        return _failure(exc)
    return responses.success(CreatedOut(id=new_id), status_code=201)


async def get_student(student_id: str, request: Request, storage: Storage = Depends(get_storage)) -> Response:
    logger.info("getting a student id=%s", student_id)
    try:
        record = await _call(request, storage.get_by_id, _parse_id(student_id))
    except Exception as exc:
        return _failure(exc)
    return responses.success(record)


async def list_students(request: Request, storage: Storage = Depends(get_storage)) -> Response:
    logger.info("getting all students")
    try:
        records = await _call(request, storage.get_all)
    except Exception as exc:
        return _failure(exc)
    return responses.success(records)


async def update_student(student_id: str, request: Request, storage: Storage = Depends(get_storage)) -> Response:
    """Replace name, email and age of an existing student.

    The id is parsed before the body so a bad id is reported even when the
    body is also broken.
    """
    logger.info("updating a student id=%s", student_id)
    try:
        sid = _parse_id(student_id)
        patch = _validated(await _decode_body(request))
        record = await _call(request, storage.update_by_id, sid, patch)
    except Exception as exc:
        return _failure(exc)
    return responses.success(record)

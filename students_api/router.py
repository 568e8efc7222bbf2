"""Route table for the student API.

Path parameters reach handlers as raw strings; turning them into ids is
the handler's job. Unmatched paths answer 404 and known paths with the
wrong method answer 405, both through the envelope handlers below.
"""

from fastapi import APIRouter, Request
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.routing import Match

from . import handlers, responses

router = APIRouter(prefix="/api/students")

router.add_api_route("", handlers.create_student, methods=["POST"])
router.add_api_route("", handlers.list_students, methods=["GET"])
router.add_api_route("/{student_id}", handlers.get_student, methods=["GET"])
router.add_api_route("/{student_id}", handlers.update_student, methods=["PUT", "PATCH"])

_MESSAGES = {404: "not found", 405: "method not allowed"}


def _allowed_methods(request: Request) -> str:
    """Methods of every route whose path matches the request, for the Allow header."""
    methods = set()
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match != Match.NONE and getattr(route, "methods", None):
            methods.update(route.methods)
    return ", ".join(sorted(methods))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render routing errors (404/405 and friends) in the envelope shape."""
    message = _MESSAGES.get(exc.status_code, str(exc.detail))
    headers = dict(getattr(exc, "headers", None) or {})
    if exc.status_code == 405:
        headers["Allow"] = _allowed_methods(request)
    return responses.error(message, exc.status_code, headers=headers or None)

"""Validation of inbound student payloads.

The pydantic model `StudentIn` carries the rules; this module turns its
error list into one `Violation` per offending field so a single response
can report every problem at once.
"""

from typing import Any, List, NamedTuple, Optional, Tuple

from pydantic import ValidationError

from .errors import MalformedRequest
from .schemas import StudentIn

FIELDS = ("name", "email", "age")

# pydantic error type -> constraint tag
_TAGS = {
    "missing": "required",
    "string_too_short": "required",
    "value_error": "email",
    "greater_than": "positive",
    "less_than_equal": "max",
    "string_type": "string",
    "int_type": "integer",
    "int_parsing": "integer",
    "int_from_float": "integer",
}


class Violation(NamedTuple):
    field: str
    tag: str


def _tag_for(error: dict) -> str:
    if error.get("input", ...) is None:
        return "required"
    return _TAGS.get(error["type"], error["type"])


def validate_student(payload: Any) -> Tuple[Optional[StudentIn], List[Violation]]:
    """Validate a decoded JSON object.

    Returns `(student, [])` when every field passes, otherwise
    `(None, violations)` with violations ordered as `FIELDS`. Anything other
    than a JSON object is rejected as `MalformedRequest`.
    """
    if not isinstance(payload, dict):
        raise MalformedRequest("request body must be a JSON object")
    try:
        return StudentIn.model_validate(payload), []
    except ValidationError as exc:
        found = {}
        for err in exc.errors():
            field = str(err["loc"][0]) if err["loc"] else ""
            # first failure per field wins
            if field in FIELDS and field not in found:
                found[field] = _tag_for(err)
        return None, [Violation(f, found[f]) for f in FIELDS if f in found]

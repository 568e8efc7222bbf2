"""Pydantic request/response schemas used by the API.

`StudentIn` is the inbound shape checked by the validator; `StudentRead`
is what storage hands back and what handlers serialize.
"""

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from typing import Annotated

INT64_MAX = 2**63 - 1


def _check_email(value: str) -> str:
    """Accept a bare address only; the value is stored exactly as sent."""
    if "<" in value or ">" in value or value != value.strip():
        raise ValueError("value is not a bare email address")
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(f"value is not a valid email address: {exc}") from exc
    return value


class StudentIn(BaseModel):
    """Payload for create and update. Any `id` sent by the client is ignored."""
    model_config = ConfigDict(strict=True)

    name: str = Field(min_length=1)
    email: Annotated[str, AfterValidator(_check_email)]
    age: int = Field(gt=0, le=INT64_MAX)


class StudentRead(BaseModel):
    """A stored student record."""
    id: int
    name: str
    email: str
    age: int


class CreatedOut(BaseModel):
    """Create response payload containing the assigned id."""
    id: int

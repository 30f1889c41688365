"""Error response schemas.

Classified errors serialize as {"statusCode": ..., "error": "...", "message": "..."}
with an optional "data" object. Everything else serializes as the fixed
GENERIC_ERROR_BODY so internal messages never reach the client.
"""

from collections.abc import Mapping
from http import HTTPStatus
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def reason_phrase(status_code: int) -> str:
    """Return the standard reason phrase, or "Unknown" for non-standard codes."""
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Unknown"


class ErrorBody(BaseModel):
    """Body of a classified error response."""

    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(alias="statusCode")
    error: str
    message: str
    data: dict[str, Any] | None = None

    @classmethod
    def build(cls, status_code: int, message: str, data: Mapping[str, Any]) -> "ErrorBody":
        """data is only included when non-empty."""
        return cls(
            status_code=status_code,
            error=reason_phrase(status_code),
            message=message,
            data=dict(data) if data else None,
        )


class GenericErrorBody(BaseModel):
    """Body of an unclassified error response."""

    message: str = "Internal Server Error"


GENERIC_ERROR_BODY = GenericErrorBody().model_dump_json()

"""Turn any error value into an HTTP status and a JSON body.

render() is shared by ErrorCat.respond (which writes to a raw response sink)
and by the FastAPI exception handlers in errorcat.handlers.
"""

from typing import Protocol

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from errorcat.classify import ClassifiedError, classify
from errorcat.logging import get_logger
from errorcat.schemas.error import GENERIC_ERROR_BODY, ErrorBody

logger = get_logger(__name__)

INTERNAL_SERVER_ERROR = 500


class ResponseSink(Protocol):
    """Outbound HTTP response: one status, then one body, then done."""

    def write_head(self, status_code: int) -> object: ...

    def end(self, body: str) -> object: ...


def render(error: object) -> tuple[int, str]:
    """Return (status_code, json_body) for any error value.

    Classified errors keep their status and message. Everything else,
    including classified errors whose fields or data can't be serialized,
    becomes a 500 with the generic body. Never raises.
    """
    try:
        variant = classify(error)
    except Exception:
        logger.warning("error_classify_failed", error_type=type(error).__name__, exc_info=True)
        return INTERNAL_SERVER_ERROR, GENERIC_ERROR_BODY
    if not isinstance(variant, ClassifiedError):
        return INTERNAL_SERVER_ERROR, GENERIC_ERROR_BODY

    try:
        body = ErrorBody.build(variant.status_code, variant.message, variant.data)
        return body.status_code, body.model_dump_json(by_alias=True, exclude_none=True)
    except (ValidationError, PydanticSerializationError, TypeError, ValueError):
        logger.warning("error_body_invalid", status_code=variant.status_code, exc_info=True)
        return INTERNAL_SERVER_ERROR, GENERIC_ERROR_BODY


def write_response(sink: ResponseSink, status_code: int, body: str) -> None:
    sink.write_head(status_code)
    sink.end(body)

"""Split arbitrary error values into classified and unclassified variants.

Everything downstream (debug, report, render) works on the variant returned by
classify() instead of probing the raw value for attributes.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from starlette.exceptions import HTTPException

from errorcat.exceptions import StructuredError
from errorcat.schemas.error import reason_phrase


@dataclass(frozen=True)
class ClassifiedError:
    """An error that carries an intended HTTP status and a client-safe message."""

    status_code: int
    message: str
    data: Mapping[str, Any] = field(default_factory=dict)
    raw: object = None


@dataclass(frozen=True)
class UnclassifiedError:
    """Any other error value. Its message is never shown to clients."""

    raw: object
    data: Mapping[str, Any] | None = None


ErrorVariant = ClassifiedError | UnclassifiedError


def classify(error: object) -> ErrorVariant:
    if isinstance(error, StructuredError):
        return ClassifiedError(error.status_code, error.message, error.data, error)
    if isinstance(error, HTTPException):
        # Raised by Starlette/FastAPI themselves (404 routes, 405, validation...)
        detail = error.detail
        message = detail if isinstance(detail, str) else reason_phrase(error.status_code)
        return ClassifiedError(error.status_code, message, {}, error)
    return UnclassifiedError(error, _extract_data(error))


def _extract_data(error: object) -> Mapping[str, Any] | None:
    try:
        data = error.get("data") if isinstance(error, Mapping) else getattr(error, "data", None)
    except Exception:
        # Properties and __getattr__ on foreign errors may raise anything
        return None
    return data if isinstance(data, Mapping) else None

"""Create, log, report and respond to HTTP errors.

    import errorcat

    raise errorcat.create(404, "Deal not found", {"deal_id": 42})
"""

from collections.abc import Mapping
from typing import Any

from errorcat.classify import ClassifiedError, UnclassifiedError, classify
from errorcat.config import ReportingSettings
from errorcat.core import ErrorCat
from errorcat.exceptions import StructuredError
from errorcat.gate import can_report
from errorcat.responder import ResponseSink, render


def create(status_code: int, message: str, data: Mapping[str, Any] | None = None) -> StructuredError:
    return ErrorCat.instance.create(status_code, message, data)


def log(error: object) -> None:
    ErrorCat.instance.log(error)


def report(error: object) -> None:
    ErrorCat.instance.report(error)


def respond(error: object, request: object, response: ResponseSink) -> None:
    ErrorCat.instance.respond(error, request, response)


__all__ = [
    "ClassifiedError",
    "ErrorCat",
    "ReportingSettings",
    "ResponseSink",
    "StructuredError",
    "UnclassifiedError",
    "can_report",
    "classify",
    "create",
    "log",
    "render",
    "report",
    "respond",
]

"""ErrorCat: create, log, report and respond to HTTP errors.

Two paths run through this class:

    create(code, message, data) -> StructuredError -> log() -> debug() + report()
    respond(error, request, response) -> status + JSON body written to response

respond() is independent of the logging path: it neither logs nor reports.
Callers that want both call create()/log() before responding.

One instance per process is exposed as ErrorCat.instance, and
ErrorCat.responder is a plain function bound to it that can be handed to a
framework as an error callback. Both are read-only class attributes.
"""

import functools
from collections.abc import Callable, Mapping
from typing import Any

from errorcat.classify import ClassifiedError, classify
from errorcat.config import ReportingSettings
from errorcat.exceptions import StructuredError
from errorcat.gate import can_report
from errorcat.logging import get_logger
from errorcat.reporter import RollbarTransport, Transport
from errorcat.responder import INTERNAL_SERVER_ERROR, ResponseSink, render, write_response
from errorcat.schemas.error import GENERIC_ERROR_BODY

logger = get_logger(__name__)

Responder = Callable[[object, object, ResponseSink], None]


class _ErrorCatMeta(type):
    """Exposes the process-wide instance and responder as read-only attributes."""

    @property
    def instance(cls) -> "ErrorCat":
        return _default_instance()

    @property
    def responder(cls) -> Responder:
        return _respond_with_default_instance


class ErrorCat(metaclass=_ErrorCatMeta):
    """Error factory, logger, reporter and responder.

    Args:
        settings_provider: Returns the current ReportingSettings. Called on
            every eligibility check so environment changes take effect
            without rebuilding the instance.
        transport: Where reports go. Defaults to Rollbar.
    """

    def __init__(
        self,
        settings_provider: Callable[[], ReportingSettings] = ReportingSettings,
        transport: Transport | None = None,
    ) -> None:
        self._settings_provider = settings_provider
        self._transport = transport or RollbarTransport()

        settings = self._settings_provider()
        if can_report(settings) and settings.rollbar_key:
            self._transport.init(settings.rollbar_key, settings.environment)
            logger.info("rollbar_initialized", environment=settings.environment)

    def can_use_rollbar(self) -> bool:
        return can_report(self._settings_provider())

    def create(
        self,
        status_code: int,
        message: str,
        data: Mapping[str, Any] | None = None,
    ) -> StructuredError:
        """Build a StructuredError and log it. Returns the error for raising."""
        error = StructuredError(status_code, message, data)
        self.log(error)
        return error

    def log(self, error: object) -> None:
        """Emit a local diagnostic record, then report. Both always run."""
        try:
            self.debug(error)
        except Exception:
            logger.exception("error_debug_failed")
        finally:
            self.report(error)

    def debug(self, error: object) -> None:
        variant = classify(error)
        if isinstance(variant, ClassifiedError):
            logger.debug(
                "error_logged",
                status_code=variant.status_code,
                error_message=variant.message,
                error_type=type(error).__name__,
            )
        elif isinstance(error, BaseException):
            logger.debug("error_logged", error_type=type(error).__name__, exc_info=error)
        else:
            logger.debug("error_logged", error_type=type(error).__name__, error_repr=repr(error))

    def report(self, error: object) -> None:
        """Send the error to Rollbar if allowed. Never raises, never retries."""
        if not self.can_use_rollbar():
            return

        try:
            variant = classify(error)
            payload = {"custom": variant.data if variant.data is not None else {}}
            self._transport.send(error, payload)
        except Exception:
            logger.warning("error_report_failed", error_type=type(error).__name__, exc_info=True)

    def respond(self, error: object, request: object, response: ResponseSink) -> None:
        """Write exactly one JSON error response. Never raises."""
        try:
            status_code, body = render(error)
        except Exception:
            logger.exception("error_render_failed", error_type=type(error).__name__)
            status_code, body = INTERNAL_SERVER_ERROR, GENERIC_ERROR_BODY
        try:
            write_response(response, status_code, body)
        except Exception:
            logger.exception("error_respond_failed", status_code=status_code)


@functools.cache
def _default_instance() -> ErrorCat:
    return ErrorCat()


def _respond_with_default_instance(error: object, request: object, response: ResponseSink) -> None:
    ErrorCat.instance.respond(error, request, response)

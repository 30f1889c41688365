"""FastAPI / Starlette exception handlers backed by ErrorCat.

    app = FastAPI()
    app.add_middleware(RequestIDMiddleware)
    register_error_handlers(app)

Classified errors (StructuredError, HTTPException) keep their status and
message. Anything else becomes a 500 with {"message": "Internal Server Error"}.
No stack traces or internal messages reach the client.
"""

from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import Response

from errorcat.classify import UnclassifiedError, classify
from errorcat.core import ErrorCat
from errorcat.logging import get_logger
from errorcat.responder import INTERNAL_SERVER_ERROR

logger = get_logger(__name__)


class BufferedResponseSink:
    """Collects what a responder writes and turns it into a Starlette Response."""

    def __init__(self) -> None:
        self.status_code = INTERNAL_SERVER_ERROR
        self.body = ""

    def write_head(self, status_code: int) -> None:
        self.status_code = status_code

    def end(self, body: str) -> None:
        self.body = body

    def to_response(self) -> Response:
        return Response(content=self.body, status_code=self.status_code, media_type="application/json")


def register_error_handlers(
    app: Starlette,
    error_cat: ErrorCat | None = None,
    *,
    report_unhandled: bool = True,
) -> None:
    """Register ErrorCat-backed exception handlers on the application.

    Args:
        app: FastAPI or Starlette application.
        error_cat: Instance to respond and report with. Defaults to
            ErrorCat.instance, resolved per request.
        report_unhandled: Also report unclassified exceptions. Errors built
            with ErrorCat.create() were reported when they were created.
    """

    def _error_cat() -> ErrorCat:
        return error_cat if error_cat is not None else ErrorCat.instance

    async def handle_http_error(request: Request, exc: Exception) -> Response:
        sink = BufferedResponseSink()
        _error_cat().respond(exc, request, sink)
        return sink.to_response()

    async def handle_unexpected(request: Request, exc: Exception) -> Response:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.error("unhandled_exception", path=request.url.path, method=request.method, exc_info=exc)
        if report_unhandled and isinstance(classify(exc), UnclassifiedError):
            _error_cat().report(exc)
        sink = BufferedResponseSink()
        _error_cat().respond(exc, request, sink)
        return sink.to_response()

    app.add_exception_handler(HTTPException, handle_http_error)
    app.add_exception_handler(Exception, handle_unexpected)

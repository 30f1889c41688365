from collections.abc import AsyncIterator
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
import structlog
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from errorcat.core import ErrorCat
from errorcat.handlers import register_error_handlers
from errorcat.middleware import RequestIDMiddleware
from tests.factories import make_error_cat, make_transport


@pytest.fixture(autouse=True)
def reporting_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test in the "test" environment with no Rollbar key.

    Tests that need reporting enabled set the variables themselves or use an
    ErrorCat built by make_error_cat().
    """
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.delenv("ROLLBAR_KEY", raising=False)


@pytest.fixture
def transport() -> MagicMock:
    return make_transport()


@pytest.fixture
def error_cat(transport: MagicMock) -> ErrorCat:
    return make_error_cat(transport=transport)


@pytest.fixture
def app(error_cat: ErrorCat) -> FastAPI:
    """Small app with one route per kind of failure."""
    app = FastAPI()
    app.add_middleware(RequestIDMiddleware)
    register_error_handlers(app, error_cat)

    @app.get("/created")
    async def created() -> None:
        raise error_cat.create(404, "Deal not found", {"deal_id": 42})

    @app.get("/crash")
    async def crash() -> None:
        raise RuntimeError("password=hunter2")

    @app.get("/ok")
    async def ok() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/context")
    async def context() -> dict[str, object]:
        return structlog.contextvars.get_contextvars()

    return app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    # Starlette re-raises unhandled exceptions after the 500 handler has run
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as client:
        yield client

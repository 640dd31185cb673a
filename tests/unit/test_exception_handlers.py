"""Exception handlers: domain error codes map to HTTP status and JSON body."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from access_admin.core.exception_handlers import register_exception_handlers
from access_admin.domain.exceptions import (
    AccessAdminException,
    ForeignKeyConflictException,
    InternalErrorException,
    InvalidCurrentPasswordException,
    RequestTimeoutException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    UserExistsException,
    ValidationException,
)

_RAISERS = {
    "not-found": lambda: ResourceNotFoundException("user", "u1"),
    "exists": lambda: UserExistsException("alice"),
    "fk": ForeignKeyConflictException,
    "password": InvalidCurrentPasswordException,
    "timeout": RequestTimeoutException,
    "internal": InternalErrorException,
    "validation": lambda: ValidationException("bad", field="limit"),
    "no-sql": SqlNotConfiguredException,
    "unmapped": lambda: AccessAdminException("odd", error_code="SOMETHING_ELSE"),
}


def _app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/raise/{kind}")
    async def raise_kind(kind: str) -> None:
        raise _RAISERS[kind]()

    @app.get("/crash")
    async def crash() -> None:
        raise RuntimeError("secret detail")

    @app.get("/typed/{number}")
    async def typed(number: int) -> dict[str, int]:
        return {"number": number}

    return app


@pytest.fixture
async def handler_client() -> AsyncClient:
    transport = ASGITransport(app=_app(), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.mark.parametrize(
    ("kind", "status", "error"),
    [
        ("not-found", 404, "RESOURCE_NOT_FOUND"),
        ("exists", 409, "USER_EXISTS"),
        ("fk", 409, "FOREIGN_KEY_CONFLICT"),
        ("password", 400, "INVALID_CURRENT_PASSWORD"),
        ("timeout", 408, "REQUEST_TIMEOUT"),
        ("internal", 500, "INTERNAL_ERROR"),
        ("validation", 400, "VALIDATION_ERROR"),
        ("no-sql", 503, "SERVICE_UNAVAILABLE"),
        ("unmapped", 500, "SOMETHING_ELSE"),
    ],
)
async def test_domain_exception_status(handler_client, kind, status, error) -> None:
    response = await handler_client.get(f"/raise/{kind}")
    assert response.status_code == status
    body = response.json()
    assert body["error"] == error
    assert set(body) == {"error", "message", "details"}


async def test_user_exists_body_has_username(handler_client) -> None:
    response = await handler_client.get("/raise/exists")
    assert response.json()["details"] == {"username": "alice"}


async def test_request_validation_returns_422(handler_client) -> None:
    response = await handler_client.get("/typed/not-a-number")
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_unhandled_exception_hides_detail(handler_client) -> None:
    """Without debug the generic handler does not echo the exception text."""
    response = await handler_client.get("/crash")
    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "INTERNAL_ERROR"
    assert "secret" not in body["message"]

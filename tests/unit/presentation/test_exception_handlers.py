"""Tests for mapping domain exceptions to HTTP status codes."""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from beststories.domain.shared import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from beststories.presentation.api.exception_handlers import (
    _get_status_for_exception,
    setup_exception_handlers,
)


class TestStatusMapping:
    def test_validation_error(self) -> None:
        assert _get_status_for_exception(ValidationError("bad count")) == 400

    def test_not_found_maps_to_bad_gateway(self) -> None:
        assert _get_status_for_exception(EntityNotFoundError("gone")) == 502

    def test_upstream_unavailable(self) -> None:
        exc = DomainException("down", code=ErrorCode.UPSTREAM_UNAVAILABLE)
        assert _get_status_for_exception(exc) == 503

    def test_internal_error(self) -> None:
        exc = DomainException("oops", code=ErrorCode.INTERNAL_ERROR)
        assert _get_status_for_exception(exc) == 500


class TestHandlers:
    def _client(self, exc: Exception) -> TestClient:
        app = FastAPI()
        setup_exception_handlers(app)

        @app.get("/boom")
        async def boom() -> None:
            raise exc

        return TestClient(app, raise_server_exceptions=False)

    def test_validation_error_body(self) -> None:
        response = self._client(ValidationError("count must be >= 0")).get("/boom")

        assert response.status_code == 400
        assert response.json() == {
            "detail": "count must be >= 0",
            "code": "VALIDATION_ERROR",
        }

    def test_unexpected_error_is_generic(self) -> None:
        response = self._client(RuntimeError("secret detail")).get("/boom")

        assert response.status_code == 500
        assert response.json()["code"] == "INTERNAL_ERROR"
        assert "secret" not in response.json()["detail"]

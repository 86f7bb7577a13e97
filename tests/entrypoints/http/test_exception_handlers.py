"""Tests for FastAPI exception handlers."""

import logging

import pytest
from fastapi import FastAPI, Query
from fastapi.testclient import TestClient

from pokedex_lite.domain.errors import (
    DomainError,
    InternalError,
    NotFoundError,
    PagingValidationError,
    UpstreamFetchError,
    ValidationError,
)
from pokedex_lite.entrypoints.http.exception_handlers import register_exception_handlers


@pytest.fixture
def app() -> FastAPI:
    """Create a minimal FastAPI app with exception handlers registered."""
    test_app = FastAPI()
    register_exception_handlers(test_app)

    @test_app.get("/validation-error")
    def raise_validation_error() -> None:
        raise ValidationError("Validation failed")

    @test_app.get("/validation-error-with-fields")
    def raise_validation_error_with_fields() -> None:
        raise ValidationError(
            errors=[
                {"field": "page", "message": "Must be >= 1", "code": "INVALID_VALUE"},
                {"field": "limit", "message": "Must be <= 100", "code": "INVALID_VALUE"},
            ]
        )

    @test_app.get("/paging-error")
    def raise_paging_error() -> None:
        raise PagingValidationError("limit must be <= 100")

    @test_app.get("/not-found-error")
    def raise_not_found_error() -> None:
        raise NotFoundError("Pokemon", "missingno")

    @test_app.get("/upstream-error")
    def raise_upstream_error() -> None:
        raise UpstreamFetchError("Timed out fetching /pokemon/25", url="/pokemon/25")

    @test_app.get("/internal-error")
    def raise_internal_error() -> None:
        raise InternalError("Unexpected condition")

    @test_app.get("/generic-domain-error")
    def raise_generic_domain_error() -> None:
        raise DomainError("Something domain-specific")

    @test_app.get("/unexpected-error")
    def raise_unexpected_error() -> None:
        raise RuntimeError("Something went wrong")

    @test_app.get("/query")
    def query_route(limit: int = Query(default=20, ge=1)) -> dict:
        return {"limit": limit}

    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


class TestValidationErrorHandler:
    def test_simple_validation_error_returns_422(self, client: TestClient) -> None:
        response = client.get("/validation-error")

        assert response.status_code == 422
        assert response.json() == {"detail": "Validation failed", "code": "VALIDATION_ERROR"}

    def test_validation_error_with_field_errors_returns_422(self, client: TestClient) -> None:
        response = client.get("/validation-error-with-fields")

        assert response.status_code == 422
        data = response.json()
        assert data["detail"] == "Validation failed"
        assert [e["field"] for e in data["errors"]] == ["page", "limit"]

    def test_paging_error_returns_422(self, client: TestClient) -> None:
        response = client.get("/paging-error")

        assert response.status_code == 422
        assert response.json() == {"detail": "limit must be <= 100", "code": "VALIDATION_ERROR"}


class TestNotFoundErrorHandler:
    def test_not_found_error_returns_404(self, client: TestClient) -> None:
        response = client.get("/not-found-error")

        assert response.status_code == 404
        assert response.json() == {
            "detail": "Pokemon with identifier 'missingno' not found",
            "code": "NOT_FOUND",
        }


class TestUpstreamErrorHandler:
    def test_upstream_error_returns_500_and_keeps_message(self, client: TestClient) -> None:
        response = client.get("/upstream-error")

        assert response.status_code == 500
        assert response.json() == {
            "detail": "Timed out fetching /pokemon/25",
            "code": "UPSTREAM_ERROR",
        }

    def test_upstream_error_is_logged_at_error_level(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.ERROR, logger="pokedex_lite.entrypoints.http.exception_handlers"):
            client.get("/upstream-error")

        assert "Domain error occurred" in caplog.text


class TestInternalErrorHandler:
    def test_internal_error_returns_500(self, client: TestClient) -> None:
        response = client.get("/internal-error")

        assert response.status_code == 500
        assert response.json()["code"] == "INTERNAL_ERROR"


class TestUnmappedDomainError:
    def test_unmapped_domain_error_returns_400(self, client: TestClient) -> None:
        response = client.get("/generic-domain-error")

        assert response.status_code == 400
        assert response.json() == {"detail": "Something domain-specific", "code": "DOMAIN_ERROR"}


class TestUnexpectedErrorHandler:
    def test_unexpected_error_returns_500(self, client: TestClient) -> None:
        response = client.get("/unexpected-error")

        assert response.status_code == 500


class TestRequestValidationErrors:
    def test_query_constraint_violation_returns_422(self, client: TestClient) -> None:
        response = client.get("/query", params={"limit": 0})

        assert response.status_code == 422
        data = response.json()
        assert data["detail"] == "Invalid request parameters"
        assert data["code"] == "VALIDATION_ERROR"
        assert data["errors"][0]["field"] == "limit"

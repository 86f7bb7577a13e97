"""Tests for REST error response models."""

from pokedex_lite.entrypoints.http.error_responses import ErrorDetail, ErrorResponse


class TestErrorDetail:
    def test_creates_error_detail_with_all_fields(self) -> None:
        detail = ErrorDetail(field="limit", message="Must be <= 100", code="INVALID_VALUE")

        assert detail.model_dump() == {
            "field": "limit",
            "message": "Must be <= 100",
            "code": "INVALID_VALUE",
        }

    def test_code_is_optional(self) -> None:
        detail = ErrorDetail(field="page", message="Must be >= 1")

        assert detail.code is None


class TestErrorResponse:
    def test_creates_simple_error_response(self) -> None:
        response = ErrorResponse(detail="Pokemon not found", code="NOT_FOUND")

        assert response.detail == "Pokemon not found"
        assert response.code == "NOT_FOUND"
        assert response.errors is None

    def test_creates_error_response_with_field_errors(self) -> None:
        response = ErrorResponse(
            detail="Invalid request parameters",
            code="VALIDATION_ERROR",
            errors=[ErrorDetail(field="page", message="Must be >= 1")],
        )

        assert response.errors is not None
        assert response.errors[0].field == "page"

    def test_json_schema_has_examples(self) -> None:
        schema = ErrorResponse.model_json_schema()

        assert "examples" in schema
        assert schema["examples"][0]["code"] == "NOT_FOUND"

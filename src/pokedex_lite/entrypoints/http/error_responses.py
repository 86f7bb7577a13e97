"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors.

    Used in validation errors to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "limit",
                "message": "Input should be greater than or equal to 1",
                "code": "greater_than_equal",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Pokemon with identifier 'missingno' not found",
                "code": "NOT_FOUND"
            }

        Upstream failure:
            {
                "detail": "Catalog returned HTTP 503 for /pokemon/25",
                "code": "UPSTREAM_ERROR"
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Pokemon with identifier 'missingno' not found", "code": "NOT_FOUND"},
                {"detail": "limit must be <= 100", "code": "VALIDATION_ERROR"},
                {"detail": "Catalog returned HTTP 503 for /pokemon/25", "code": "UPSTREAM_ERROR"},
            ]
        }
    )

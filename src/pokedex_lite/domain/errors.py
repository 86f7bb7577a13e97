"""Domain error classes.

Protocol-agnostic errors that represent failures of the catalog service.
These errors are translated to appropriate formats (HTTP today) by protocol adapters.

"Not found" is NOT an error inside the core: catalog ports and use cases
return ``None``. ``NotFoundError`` is raised only at the protocol boundary.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Protocol-agnostic. Contains error information that can be
    translated to HTTP (or any other protocol) formats.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Request validation error.

    Examples:
        - page < 1
        - limit above the configured maximum

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "limit", "message": "Must be <= 100"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Pokemon name/id unknown to the catalog
        - Type key unknown to the catalog

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Pokemon", "Type")
            identifier: Resource identifier (e.g., name or numeric id)
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class UpstreamFetchError(DomainError):
    """A required fetch against the upstream catalog failed.

    Covers network errors, timeouts, non-404 HTTP statuses and payloads that
    cannot be decoded. Never raised for a plain "does not exist" answer.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "UPSTREAM_ERROR"


class InternalError(DomainError):
    """Internal error (unexpected conditions).

    Should be logged for investigation.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"

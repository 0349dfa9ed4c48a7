"""
Base exception classes for the ProSocial backend.

Each module should define its own exceptions that inherit from these bases.
Business-rule failures (already liked, not authorized, ...) are returned as
values by the services; these exceptions cover authentication, store
failures and the conflicts repositories report back to their service.
"""

from typing import Optional, Any


class ProSocialError(Exception):
    """
    Base exception for all ProSocial errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(ProSocialError):
    """Resource not found."""

    pass


class ValidationError(ProSocialError):
    """Input validation failed."""

    pass


class EmptyContentError(ValidationError):
    """Raised when text is left empty once markup has been removed."""

    def __init__(self, field: str):
        super().__init__(
            f"{field} must contain text",
            code="EMPTY_CONTENT",
            details={"field": field},
        )
        self.field = field


class AuthenticationError(ProSocialError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(ProSocialError):
    """Authorization failed (insufficient permissions)."""

    pass


class ConflictError(ProSocialError):
    """A uniqueness rule was violated."""

    pass


class DuplicateRecordError(ConflictError):
    """Raised by repositories when an insert hits a unique index."""

    def __init__(self, table: str, detail: Optional[str] = None):
        super().__init__(
            f"Duplicate record in {table}",
            code="DUPLICATE_RECORD",
            details={"table": table, "detail": detail},
        )
        self.table = table


class ExternalServiceError(ProSocialError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service

"""
Custom exceptions for the photo2profit API.

Every handler converts collaborator failures into one of these types; the
application-level exception handler renders them as ``{"error": message}``
with the status code from ``EXCEPTION_STATUS_MAPPING``.
"""

from typing import Optional, Dict, Any


class ProfitApiException(Exception):
    """Base exception for all photo2profit API errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "PROFIT_API_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(ProfitApiException):
    """Exception raised when a required parameter is missing or invalid."""

    def __init__(
        self,
        message: str,
        field: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details={**(details or {}), "field": field}
        )


class NotFoundException(ProfitApiException):
    """Exception raised when a lookup yields no record."""

    def __init__(
        self,
        message: str,
        resource: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code="NOT_FOUND",
            details={**(details or {}), "resource": resource}
        )


class MethodNotAllowedException(ProfitApiException):
    """Exception raised when an endpoint is called with the wrong HTTP verb."""

    def __init__(
        self,
        allowed: str = "GET",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message="Method not allowed",
            error_code="METHOD_NOT_ALLOWED",
            details={**(details or {}), "allowed": allowed}
        )


class DatabaseException(ProfitApiException):
    """Exception raised when the database collaborator fails."""

    def __init__(
        self,
        message: str = "Server error",
        operation: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code="DATABASE_ERROR",
            details={**(details or {}), "operation": operation}
        )


class AnalyticsException(DatabaseException):
    """Exception raised when payment analytics cannot be computed."""

    def __init__(
        self,
        message: str = "Could not fetch analytics",
        operation: str = "analytics",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message=message, operation=operation, details=details)
        self.error_code = "ANALYTICS_ERROR"


class PaymentProviderException(ProfitApiException):
    """Exception raised when the payment provider rejects a request."""

    def __init__(
        self,
        message: str,
        provider: str = "stripe",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code="PAYMENT_PROVIDER_ERROR",
            details={**(details or {}), "provider": provider}
        )


# Exception to HTTP status code mapping
EXCEPTION_STATUS_MAPPING = {
    ValidationException: 400,  # Bad Request
    NotFoundException: 404,  # Not Found
    MethodNotAllowedException: 405,  # Method Not Allowed
    DatabaseException: 500,  # Internal Server Error
    AnalyticsException: 500,  # Internal Server Error
    PaymentProviderException: 400,  # Provider message surfaced to the caller
}


def status_code_for(exception: ProfitApiException) -> int:
    """
    Resolve the HTTP status for an exception, walking its class hierarchy.

    Args:
        exception: Custom exception instance

    Returns:
        HTTP status code, 500 when no mapping applies
    """
    for klass in type(exception).__mro__:
        if klass in EXCEPTION_STATUS_MAPPING:
            return EXCEPTION_STATUS_MAPPING[klass]
    return 500

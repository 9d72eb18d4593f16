from typing import Any, Dict, Optional


class BaseAPIException(Exception):
    def __init__(self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        internal_message: Optional[str] = None):
        self.message = message  # User-facing message
        self.internal_message = internal_message or message  # Internal/debug message
        self.status_code = status_code
        self.error_code = error_code or self.__class__.__name__.replace('Error', '').upper()

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to the JSON error envelope"""
        return {
            "success": False,
            "error": self.message,
        }


class ValidationError(BaseAPIException):
    """Raised when request validation fails"""

    def __init__(self, message: str = "Validation failed"):
        super().__init__(message, 400, "VALIDATION_ERROR")


class NotFoundError(BaseAPIException):
    """Raised when a requested resource is not found"""

    def __init__(self, resource: str = "Resource"):
        super().__init__(f"{resource} not found", 404, "NOT_FOUND")


class UnauthorizedError(BaseAPIException):
    """Raised when no identity is attached to the request"""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, 401, "UNAUTHORIZED")


class ForbiddenError(BaseAPIException):
    """Raised when the requester is known but does not own the resource"""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message, 403, "FORBIDDEN")


class ConflictError(BaseAPIException):
    """Raised when a write collides with a unique constraint"""

    def __init__(self, message: str = "Resource conflict"):
        super().__init__(message, 409, "CONFLICT")


class ExternalServiceError(BaseAPIException):
    """Raised when external service calls fail"""

    def __init__(self, service_name: str, message: str = "External service unavailable",
                 internal_message: Optional[str] = None):
        self.service_name = service_name
        super().__init__(message, 503, "EXTERNAL_SERVICE_ERROR", internal_message=internal_message)


class CatalogError(ExternalServiceError):
    """The print-on-demand provider was unreachable or answered with an error"""

    def __init__(self, message: str, status_code: Optional[int] = None, response_body: Any = None):
        self.provider_status = status_code
        self.response_body = response_body
        super().__init__("printify", "Product provider unavailable", internal_message=message)


class DatabaseError(BaseAPIException):
    """Raised when database operations fail"""

    def __init__(self, message: str = "Database operation failed", operation: Optional[str] = None):
        # Don't expose internal database details to users
        self.operation = operation
        super().__init__(
            "An internal error occurred. Please try again later.",
            500,
            "DATABASE_ERROR",
            internal_message=message,
        )



class InternalServerError(BaseAPIException):
    """Raised for unexpected internal errors"""

    def __init__(self, message: str = "An unexpected error occurred"):
        super().__init__(
            "Internal server error",
            500,
            "INTERNAL_ERROR",
            internal_message=message,
        )

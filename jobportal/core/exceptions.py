from typing import Any, Dict, Optional

class AppException(Exception):
    def __init__(
        self,
        message: str,
        status_code: int = 400,
        error_code: str = "BUSINESS_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)

class MissingCredentialError(AppException):
    def __init__(self, message: str = "No token, authorization denied"):
        super().__init__(
            message=message,
            status_code=401,
            error_code="MISSING_CREDENTIAL"
        )

class InvalidCredentialError(AppException):
    def __init__(self, message: str = "Token is not valid"):
        super().__init__(
            message=message,
            status_code=401,
            error_code="INVALID_CREDENTIAL"
        )

class ForbiddenError(AppException):
    """Ownership mismatch between the session identity and the requested records."""
    def __init__(self, message: str = "Unauthorized access"):
        super().__init__(
            message=message,
            status_code=401,
            error_code="FORBIDDEN"
        )

class NotFoundError(AppException):
    def __init__(self, message: str = "Resource not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details
        )

class DanglingReferenceError(AppException):
    def __init__(self, message: str = "Referenced job does not exist", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=404,
            error_code="DANGLING_REFERENCE",
            details=details
        )

class ValidationError(AppException):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=422,
            error_code="VALIDATION_ERROR",
            details=details
        )

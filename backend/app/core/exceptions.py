"""
Custom Exceptions for the Land Records backend
==============================================

The workflow engine raises these; the API layer maps each one to an HTTP
status in app.main.

Usage:
    from app.core.exceptions import NotFoundError, ConflictError

    if application is None:
        raise ApplicationNotFoundError(application_id)

    if application.payment_status == PaymentStatus.COMPLETED:
        raise ConflictError("Already paid")
"""

from typing import Optional, Any, Dict


class LandRecordsError(Exception):
    """Base exception for all land records errors"""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details
        }


# ============================================
# Authentication & Authorization Errors
# ============================================

class AuthenticationError(LandRecordsError):
    """User authentication failed"""

    status_code = 401

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, code="AUTH_FAILED")


class AuthorizationError(LandRecordsError):
    """Caller lacks the role or ownership required for the target resource"""

    status_code = 403

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message, code="NOT_AUTHORIZED")


# ============================================
# Resource Errors (404-type)
# ============================================

class NotFoundError(LandRecordsError):
    """Base class for not found errors"""

    status_code = 404

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} with ID '{resource_id}' not found",
            code=f"{resource_type.upper()}_NOT_FOUND",
            details={"resource_type": resource_type, "resource_id": resource_id}
        )


class ApplicationNotFoundError(NotFoundError):
    """Application not found (or not visible to the caller)"""

    def __init__(self, application_id: str):
        super().__init__("Application", application_id)


class PlotNotFoundError(NotFoundError):
    """Plot not found"""

    def __init__(self, plot_id: str):
        super().__init__("Plot", plot_id)


class UserNotFoundError(NotFoundError):
    """User not found"""

    def __init__(self, user_id: str):
        super().__init__("User", user_id)


# ============================================
# Validation Errors (400-type)
# ============================================

class ValidationError(LandRecordsError):
    """Input validation failed"""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="VALIDATION_ERROR", details=details)


class UnsupportedLanguageError(ValidationError):
    """Language code is not one of the supported languages"""

    def __init__(self, language: str, supported: list):
        super().__init__(f"Unsupported language '{language}'", field="language")
        self.code = "UNSUPPORTED_LANGUAGE"
        self.details["supported"] = supported


# ============================================
# Conflict Errors (409-type)
# ============================================

class ConflictError(LandRecordsError):
    """Operation is valid in isolation but violates current entity state"""

    status_code = 409

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONFLICT", details=details)


class AlreadyPaidError(ConflictError):
    """Payment was already completed for this application"""

    def __init__(self, application_id: str):
        super().__init__("Already paid", details={"application_id": application_id})
        self.code = "ALREADY_PAID"


class InvalidTransitionError(ConflictError):
    """Status change is not allowed by the active status policy"""

    def __init__(self, from_status: str, to_status: str, allowed: list):
        super().__init__(
            f"Cannot move application from '{from_status}' to '{to_status}'",
            details={"from": from_status, "to": to_status, "allowed": allowed}
        )
        self.code = "INVALID_TRANSITION"


class DuplicateUserError(ConflictError):
    """Email already registered"""

    def __init__(self, email: str):
        super().__init__("User already exists", details={"email": email})
        self.code = "USER_EXISTS"


# ============================================
# Helper function for API responses
# ============================================

def error_response(error: LandRecordsError) -> Dict[str, Any]:
    """Convert exception to API error response format"""
    return {
        "success": False,
        "detail": error.message,
        "error": error.to_dict()
    }

"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"

    # Authorization errors (403)
    INVALID_TOKEN = "INVALID_TOKEN"
    FORBIDDEN = "FORBIDDEN"
    FEDERATED_LOGIN_REJECTED = "FEDERATED_LOGIN_REJECTED"

    # Not found errors (404)
    PROJECT_NOT_FOUND = "PROJECT_NOT_FOUND"
    BLOG_POST_NOT_FOUND = "BLOG_POST_NOT_FOUND"
    TESTIMONIAL_NOT_FOUND = "TESTIMONIAL_NOT_FOUND"
    CONTACT_SUBMISSION_NOT_FOUND = "CONTACT_SUBMISSION_NOT_FOUND"
    RESUME_NOT_FOUND = "RESUME_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Conflict errors (409)
    USERNAME_TAKEN = "USERNAME_TAKEN"
    EMAIL_TAKEN = "EMAIL_TAKEN"

    # Upload errors
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"
    UNSUPPORTED_MEDIA_TYPE = "UNSUPPORTED_MEDIA_TYPE"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500/503)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    GOOGLE_AUTH_DISABLED = "GOOGLE_AUTH_DISABLED"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ValidationFailedError(AppException):
    """Input failed a business validation rule."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message=message,
            status_code=400,
            details={"field": field} if field else None,
        )


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class InvalidTokenError(AppException):
    """A bearer token was presented but could not be trusted."""

    def __init__(self, message: str = "Invalid or expired token") -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_TOKEN,
            message=message,
            status_code=403,
        )


class AuthorizationError(AppException):
    """Authorization failed."""

    def __init__(self, message: str = "Access denied") -> None:
        super().__init__(
            error_code=ErrorCode.FORBIDDEN,
            message=message,
            status_code=403,
        )


class FederatedLoginError(AppException):
    """A third-party identity could not be exchanged for a local account."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            error_code=ErrorCode.FEDERATED_LOGIN_REJECTED,
            message=f"Federated login rejected: {reason}",
            status_code=403,
            details={"reason": reason},
        )
        self.reason = reason


class EntityNotFoundError(AppException):
    """No row exists for the requested identifier."""

    _codes = {
        "project": ErrorCode.PROJECT_NOT_FOUND,
        "blog_post": ErrorCode.BLOG_POST_NOT_FOUND,
        "testimonial": ErrorCode.TESTIMONIAL_NOT_FOUND,
        "contact_submission": ErrorCode.CONTACT_SUBMISSION_NOT_FOUND,
        "resume": ErrorCode.RESUME_NOT_FOUND,
        "user": ErrorCode.USER_NOT_FOUND,
    }

    def __init__(self, entity: str, entity_id: str) -> None:
        label = entity.replace("_", " ").capitalize()
        super().__init__(
            error_code=self._codes[entity],
            message=f"{label} not found",
            status_code=404,
            details={f"{entity}_id": entity_id},
        )


class DuplicateUserError(AppException):
    """Username or email is already registered."""

    def __init__(self, field: str) -> None:
        code = ErrorCode.USERNAME_TAKEN if field == "username" else ErrorCode.EMAIL_TAKEN
        super().__init__(
            error_code=code,
            message=f"{field.capitalize()} already exists",
            status_code=409,
            details={"field": field},
        )


class UnsupportedMediaError(AppException):
    """Uploaded file type is not on the allow-list."""

    def __init__(self, content_type: str | None, allowed: list[str]) -> None:
        super().__init__(
            error_code=ErrorCode.UNSUPPORTED_MEDIA_TYPE,
            message=f"Unsupported file type: {content_type or 'unknown'}",
            status_code=415,
            details={"allowed": allowed},
        )


class PayloadTooLargeError(AppException):
    """Uploaded file exceeds the size limit."""

    def __init__(self, max_bytes: int) -> None:
        super().__init__(
            error_code=ErrorCode.PAYLOAD_TOO_LARGE,
            message=f"File exceeds the {max_bytes} byte limit",
            status_code=413,
            details={"max_bytes": max_bytes},
        )


class FeatureDisabledError(AppException):
    """An optional integration is not configured."""

    def __init__(self, error_code: ErrorCode, message: str) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=503,
        )

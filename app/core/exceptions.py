"""
Custom exceptions for the application.
All API exceptions should inherit from APIException for consistent error handling.

Service-layer failures map onto these kinds:
    HashingError        - password hash generation failed
    RepositoryError     - any data-access failure (NotFoundError, ConflictError)
    AuthenticationError - wrong password, missing or invalid token
"""
from typing import Optional, Any


class APIException(Exception):
    """
    Base exception for all API errors.
    Provides consistent error response format.
    """

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Any] = None,
    ):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details
        super().__init__(self.message)


class HashingError(APIException):
    """Password hash could not be generated."""

    def __init__(
        self,
        message: str = "error in hashing the password",
        code: str = "HASHING_FAILED",
    ):
        super().__init__(500, code, message)


class RepositoryError(APIException):
    """Data-access failure. Opaque to the service layer, which re-raises it."""

    def __init__(
        self,
        message: str = "database operation failed",
        code: str = "REPOSITORY_ERROR",
        status_code: int = 500,
        details: Optional[Any] = None,
    ):
        super().__init__(status_code, code, message, details)


class NotFoundError(RepositoryError):
    """404 Not Found"""

    def __init__(self, message: str = "Resource not found", code: str = "NOT_FOUND"):
        super().__init__(message, code, status_code=404)


class ConflictError(RepositoryError):
    """409 Conflict - unique or foreign key constraint rejected the write."""

    def __init__(self, message: str = "Resource conflict", code: str = "CONFLICT"):
        super().__init__(message, code, status_code=409)


class AuthenticationError(APIException):
    """401 Unauthorized"""

    def __init__(
        self,
        message: str = "Unauthorized",
        code: str = "AUTHENTICATION_FAILED",
    ):
        super().__init__(401, code, message)


class WrongPasswordError(AuthenticationError):
    """Password did not match the stored hash"""

    def __init__(self):
        super().__init__(message="entered password is wrong")


class InvalidCredentialsException(AuthenticationError):
    """Login lookup failed - unknown email and database errors look the same"""

    def __init__(self):
        super().__init__(message="Invalid email or password", code="INVALID_CREDENTIALS")


class InvalidTokenException(AuthenticationError):
    """Token is invalid or expired"""

    def __init__(self):
        super().__init__(message="Invalid token", code="INVALID_TOKEN")


# Resource specific exceptions
class UserNotFoundException(NotFoundError):
    """User not found"""

    def __init__(self):
        super().__init__(message="User not found", code="USER_NOT_FOUND")


class CompanyNotFoundException(NotFoundError):
    """Company not found"""

    def __init__(self):
        super().__init__(message="Company not found", code="COMPANY_NOT_FOUND")


class JobNotFoundException(NotFoundError):
    """Job not found"""

    def __init__(self):
        super().__init__(message="Job not found", code="JOB_NOT_FOUND")


class EmailAlreadyExistsException(ConflictError):
    """Email already registered"""

    def __init__(self):
        super().__init__(message="Email already registered", code="EMAIL_EXISTS")

from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when the session has no admin to act on behalf of."""


class ApiError(DomainError):
    """Raised when the backend rejects a request or cannot be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None, *, backend_message: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        # text from the response body, None when the client made the message up
        self.backend_message = backend_message

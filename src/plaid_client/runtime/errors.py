"""
Plaid client error model.

Every failure raised by the client derives from ClientError. A request
produces exactly one of: a typed response, HttpError, ParseError or AppError.
"""

from __future__ import annotations
from typing import Optional, Dict, Any

from ..models.common import ErrorResponse, ErrorType


RESET_LOGIN_FAILED = "failed to reset login"


class ClientError(Exception):
    """
    Base class for all Plaid client errors.

    Carries a message and, where one exists, the underlying exception.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        """
        Initialize a client error.

        Args:
            message: Error message
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message} | Caused by: {self.cause}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result: Dict[str, Any] = {
            "kind": type(self).__name__,
            "message": self.message,
        }
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result


class HttpError(ClientError):
    """Transport failures: connection refused, timeouts, TLS errors."""

    def __init__(self, message: str = "http request failed", cause: Optional[BaseException] = None):
        super().__init__(message, cause)


class ParseError(ClientError):
    """Request serialization or response deserialization failures."""

    def __init__(self, message: str = "failed to parse payload", cause: Optional[BaseException] = None):
        super().__init__(message, cause)


class ConfigError(ClientError):
    """Credentials or environment could not be resolved."""


class AppError(ClientError):
    """
    The API processed the request and reported a failure.

    The full ErrorResponse payload is available on ``response``.
    """

    def __init__(self, response: ErrorResponse):
        self.response = response
        super().__init__(
            f"request failed with code {response.error_code!r}: "
            f"{response.display_message or response.error_message!r}"
        )

    @property
    def error_type(self) -> Optional[ErrorType]:
        return self.response.error_type

    @property
    def error_code(self) -> Optional[str]:
        return self.response.error_code

    @property
    def request_id(self) -> Optional[str]:
        return self.response.request_id

    @property
    def status(self) -> Optional[int]:
        return self.response.status

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["response"] = self.response.model_dump(exclude_none=True, mode="json")
        return result

    @classmethod
    def synthesize(cls, message: str) -> AppError:
        """Build an AppError for a failure reported inside a successful body."""
        return cls(ErrorResponse(error_message=message))


__all__ = [
    "RESET_LOGIN_FAILED",
    "ClientError",
    "HttpError",
    "ParseError",
    "ConfigError",
    "AppError",
]

"""Exceptions for the WafeqPy library.

Every failure surfaced by the client is a ``WafeqError``. Each subclass stands
for one failure origin and carries only the fields that make sense for it.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar

import httpx

if TYPE_CHECKING:
    from wafeqpy.validation import FieldError


class ErrorKind(str, Enum):
    """Origin of a failure."""

    CONFIG = "config"
    VALIDATION = "validation"
    API = "api"
    TRANSPORT = "transport"
    RESPONSE = "response"


class WafeqError(Exception):
    """Base exception for all Wafeq client errors."""

    # Unclassified failures count as API errors
    kind: ClassVar[ErrorKind] = ErrorKind.API

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class WafeqConfigError(WafeqError):
    """Raised when the client configuration is missing or invalid."""

    kind = ErrorKind.CONFIG


class WafeqValidationError(WafeqError):
    """Raised when a payload fails local schema validation.

    Raised before any request is sent, so no network side effect occurred.
    """

    kind = ErrorKind.VALIDATION
    PREFIX: ClassVar[str] = "Validation failed: "

    def __init__(self, message: str, errors: list[FieldError] | None = None) -> None:
        """Initialize WafeqValidationError.

        Args:
            message: Error message, without the validation prefix
            errors: Field-level errors that caused the failure
        """
        if not message.startswith(self.PREFIX):
            message = self.PREFIX + message
        super().__init__(message)
        self.errors = list(errors or [])


class WafeqAPIError(WafeqError):
    """Raised when the API rejects a request.

    Covers non-success HTTP statuses and success responses that carry an
    ``error`` marker in their body.
    """

    kind = ErrorKind.API

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_data: Any = None,
        request: httpx.Request | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        """Initialize WafeqAPIError.

        Args:
            message: Error message
            status_code: HTTP status code from the API response
            response_data: Raw response payload from the API
            request: The request that caused the error
            response: The response from the API
        """
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data
        self.request = request
        self.response = response

    def __str__(self) -> str:
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class WafeqBadRequestError(WafeqAPIError):
    """Raised when the API rejects the payload (400)."""

    pass


class WafeqAuthError(WafeqAPIError):
    """Raised when authentication fails (401/403)."""

    pass


class WafeqNotFoundError(WafeqAPIError):
    """Raised when a resource is not found (404)."""

    pass


class WafeqRateLimitError(WafeqAPIError):
    """Raised when rate limit is exceeded (429)."""

    pass


class WafeqServerError(WafeqAPIError):
    """Raised when server encounters an error (5xx)."""

    pass


class WafeqTransportError(WafeqError):
    """Raised when no response was received (DNS, connection, timeout)."""

    kind = ErrorKind.TRANSPORT


class WafeqResponseError(WafeqError):
    """Raised when a successful response has an unusable body.

    The HTTP exchange succeeded, but the body could not be parsed or does not
    have the expected shape. Distinct from ``WafeqAPIError`` so callers can
    tell a rejection from a nonsensical success.
    """

    kind = ErrorKind.RESPONSE

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_data: Any = None,
        errors: list[FieldError] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data
        self.errors = list(errors or [])

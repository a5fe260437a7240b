"""Base client functionality for Wafeq API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from wafeqpy._version import __version__
from wafeqpy.auth import ApiKeyAuth
from wafeqpy.exceptions import (
    WafeqAPIError,
    WafeqAuthError,
    WafeqBadRequestError,
    WafeqError,
    WafeqNotFoundError,
    WafeqRateLimitError,
    WafeqResponseError,
    WafeqServerError,
    WafeqTransportError,
    WafeqValidationError,
)
from wafeqpy.models import Bill
from wafeqpy.validation import FieldError, describe, field_errors, validate

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

SUCCESS_STATUS_CODES = frozenset({200, 201, 204})
FALLBACK_ERROR_MESSAGE = "An error occurred with the Wafeq API"


class ResponseKind(str, Enum):
    """How a response body should be read."""

    JSON = "json"
    BINARY = "binary"
    EMPTY = "empty"


def default_headers(auth: ApiKeyAuth) -> dict[str, str]:
    """Headers sent with every request."""
    return {
        **auth.get_headers(),
        "Content-Type": "application/json",
        "Accept": "application/json",
        "User-Agent": f"WafeqPy/{__version__}",
    }


def request_headers(
    response_kind: ResponseKind, headers: Mapping[str, str] | None = None
) -> dict[str, str]:
    """Per-request header overrides for a response kind."""
    merged: dict[str, str] = {}
    if response_kind is ResponseKind.BINARY:
        merged["Accept"] = "*/*"
    if headers:
        merged.update(headers)
    return merged


def path_segment(value: str) -> str:
    """Escape a resource ID for use as a single URL path segment."""
    return quote(str(value), safe="")


def _response_payload(response: httpx.Response) -> Any:
    """Best-effort body of a response: parsed JSON, else text, else None."""
    try:
        return response.json()
    except Exception:
        return response.text or None


def _request_of(response: httpx.Response) -> httpx.Request | None:
    try:
        return response.request
    except RuntimeError:
        # Responses built by hand have no request attached
        return None


def _error_message(payload: Any) -> str:
    if isinstance(payload, Mapping):
        message = payload.get("message")
        if isinstance(message, str) and message:
            return message
        error = payload.get("error")
        if isinstance(error, str) and error:
            return error
    return FALLBACK_ERROR_MESSAGE


def parse_error_response(response: httpx.Response) -> WafeqAPIError:
    """Parse error response and return appropriate exception.

    Args:
        response: HTTP response from the API

    Returns:
        Appropriate WafeqAPIError subclass
    """
    status_code = response.status_code
    payload = _response_payload(response)
    message = _error_message(payload)
    request = _request_of(response)

    error_class: type[WafeqAPIError]
    if status_code == 400:
        error_class = WafeqBadRequestError
    elif status_code in (401, 403):
        error_class = WafeqAuthError
    elif status_code == 404:
        error_class = WafeqNotFoundError
    elif status_code == 429:
        error_class = WafeqRateLimitError
    elif status_code >= 500:
        error_class = WafeqServerError
    else:
        error_class = WafeqAPIError
    logger.debug("API error %s: %s", status_code, message)
    return error_class(message, status_code, payload, request, response)


def normalize_error(failure: object) -> WafeqError:
    """Convert any failure into a WafeqError.

    Never raises. Handles HTTP responses, httpx exceptions, pydantic
    validation errors, lists of field errors and arbitrary exceptions.

    Args:
        failure: The failure to convert

    Returns:
        WafeqError describing the failure
    """
    if isinstance(failure, WafeqError):
        return failure
    if isinstance(failure, httpx.HTTPStatusError):
        return parse_error_response(failure.response)
    if isinstance(failure, httpx.Response):
        return parse_error_response(failure)
    if isinstance(failure, httpx.RequestError):
        return WafeqTransportError(str(failure) or type(failure).__name__)
    if isinstance(failure, ValidationError):
        errors = field_errors(failure)
        return WafeqValidationError(f"{failure.title}: {describe(errors)}", errors)
    if isinstance(failure, list) and all(isinstance(item, FieldError) for item in failure):
        return WafeqValidationError(describe(failure), failure)
    if isinstance(failure, Mapping):
        return WafeqAPIError(_error_message(failure), response_data=failure)
    if isinstance(failure, Exception):
        return WafeqAPIError(str(failure) or FALLBACK_ERROR_MESSAGE)
    return WafeqAPIError(FALLBACK_ERROR_MESSAGE)


def check_response(response: httpx.Response, response_kind: ResponseKind) -> None:
    """Raise if a response is not a success.

    Only 200, 201 and 204 count as success. A JSON object body with a truthy
    top-level ``error`` is a failure even with a success status.

    Raises:
        WafeqAPIError: On API errors
    """
    if response.status_code not in SUCCESS_STATUS_CODES:
        raise normalize_error(response)

    if response_kind is ResponseKind.BINARY or not response.content:
        return

    try:
        data = response.json()
    except ValueError:
        return
    if isinstance(data, dict) and data.get("error"):
        raise normalize_error(response)


def read_json(response: httpx.Response) -> Any:
    """Parse a JSON body, or return None when the body is empty.

    Raises:
        WafeqResponseError: If the body is not valid JSON
    """
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError as e:
        raise WafeqResponseError(
            "Invalid response from server. Expected a JSON body.",
            status_code=response.status_code,
            response_data=response.text,
        ) from e


def validate_response(schema: type[T], data: Any, status_code: int | None = None) -> T:
    """Validate a response body against its schema.

    Raises:
        WafeqResponseError: If the body does not match the schema
    """
    result = validate(schema, data)
    if result.value is None:
        raise WafeqResponseError(
            f"Invalid response from server. Unexpected {schema.__name__} shape: "
            f"{describe(result.errors)}",
            status_code=status_code,
            response_data=data,
            errors=result.errors,
        )
    return result.value


def parse_bill_response(data: Any, status_code: int | None = None) -> Bill:
    """Check and parse the body returned when creating a bill.

    Raises:
        WafeqResponseError: If the body is a paginated list or lacks an id or
            bill number
    """
    if isinstance(data, dict) and "count" in data and "results" in data:
        raise WafeqResponseError(
            "Invalid response from server. "
            "Expected bill object but got paginated response.",
            status_code=status_code,
            response_data=data,
        )
    if not isinstance(data, dict) or not data.get("id") or not data.get("bill_number"):
        raise WafeqResponseError(
            "Invalid response from server. Bill was not created properly.",
            status_code=status_code,
            response_data=data,
        )
    return validate_response(Bill, data, status_code)

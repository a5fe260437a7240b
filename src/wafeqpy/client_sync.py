"""Synchronous Wafeq API client."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from wafeqpy.auth import ApiKeyAuth
from wafeqpy.client_base import (
    ResponseKind,
    check_response,
    default_headers,
    normalize_error,
    parse_bill_response,
    path_segment,
    read_json,
    request_headers,
    validate_response,
)
from wafeqpy.config import ClientConfig, resolve_config
from wafeqpy.models import (
    Bill,
    BillCreateRequest,
    BulkSendInvoiceRequest,
    Invoice,
    InvoiceCreateRequest,
)
from wafeqpy.validation import require_valid

logger = logging.getLogger(__name__)


class WafeqClient:
    """Synchronous client for the Wafeq API.

    Every typed method validates its payload before sending and validates the
    JSON it gets back. Use ``request`` to reach endpoints without a typed
    method.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        config: ClientConfig | Mapping[str, Any] | None = None,
    ) -> None:
        """Initialize Wafeq client.

        Args:
            api_key: Wafeq API key
            base_url: Base URL for API (default: https://api.wafeq.com/v1)
            timeout: Request timeout in seconds (default: 10)
            config: Pre-built config or mapping; keyword arguments win

        Raises:
            WafeqConfigError: If no API key is provided
        """
        self.config = resolve_config(
            config, api_key=api_key, base_url=base_url, timeout=timeout
        )
        self.auth = ApiKeyAuth(self.config.api_key)

        self.client = httpx.Client(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            headers=default_headers(self.auth),
        )

    def __enter__(self) -> WafeqClient:
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        self.client.close()

    def _request(
        self,
        method: str,
        endpoint: str,
        *,
        response_kind: ResponseKind = ResponseKind.JSON,
        headers: Mapping[str, str] | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """Make one HTTP request and check the outcome.

        Args:
            method: HTTP method
            endpoint: API endpoint path
            response_kind: How the body will be read
            headers: Extra headers for this request
            **kwargs: Additional arguments for httpx request

        Returns:
            HTTP response with a success status

        Raises:
            WafeqTransportError: If no response was received
            WafeqAPIError: On API errors
        """
        try:
            response = self.client.request(
                method=method,
                url=endpoint,
                headers=request_headers(response_kind, headers),
                **kwargs,
            )
        except httpx.RequestError as e:
            logger.debug("%s %s failed: %s", method, endpoint, e)
            raise normalize_error(e) from e

        logger.debug("%s %s -> %s", method, endpoint, response.status_code)
        check_response(response, response_kind)
        return response

    # Invoice endpoints

    def create_invoice(self, data: InvoiceCreateRequest | Mapping[str, Any]) -> Invoice:
        """Create a new invoice.

        Args:
            data: Invoice data

        Returns:
            Created invoice

        Raises:
            WafeqValidationError: If data does not match InvoiceCreateRequest
        """
        payload = require_valid(InvoiceCreateRequest, data)
        response = self._request(
            "POST",
            "/invoices/",
            json=payload.model_dump(by_alias=True, exclude_none=True, mode="json"),
        )
        return validate_response(Invoice, read_json(response), response.status_code)

    def get_invoice(self, invoice_id: str) -> Invoice:
        """Get a specific invoice.

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice details
        """
        response = self._request("GET", f"/invoices/{path_segment(invoice_id)}/")
        return validate_response(Invoice, read_json(response), response.status_code)

    def delete_invoice(self, invoice_id: str) -> None:
        """Delete an invoice."""
        self._request(
            "DELETE",
            f"/invoices/{path_segment(invoice_id)}/",
            response_kind=ResponseKind.EMPTY,
        )

    def cancel_invoice(self, invoice_id: str) -> None:
        """Cancel an invoice."""
        self._request(
            "POST",
            f"/invoices/{path_segment(invoice_id)}/cancel",
            response_kind=ResponseKind.EMPTY,
        )

    def download_invoice_pdf(self, invoice_id: str) -> bytes:
        """Download an invoice as PDF.

        Args:
            invoice_id: Invoice ID

        Returns:
            Raw PDF bytes
        """
        response = self._request(
            "GET",
            f"/invoices/{path_segment(invoice_id)}/download/",
            response_kind=ResponseKind.BINARY,
        )
        return response.content

    def bulk_send_invoices(self, data: BulkSendInvoiceRequest | Mapping[str, Any]) -> None:
        """Send invoices to customers in bulk.

        Args:
            data: Bulk send data

        Raises:
            WafeqValidationError: If data does not match BulkSendInvoiceRequest
        """
        payload = require_valid(BulkSendInvoiceRequest, data)
        self._request(
            "POST",
            "/api-invoices/bulk_send/",
            json=payload.model_dump(by_alias=True, exclude_none=True, mode="json"),
            response_kind=ResponseKind.EMPTY,
        )

    # Bill endpoints

    def create_bill(self, data: BillCreateRequest | Mapping[str, Any]) -> Bill:
        """Create a new bill.

        Args:
            data: Bill data

        Returns:
            Created bill

        Raises:
            WafeqValidationError: If data does not match BillCreateRequest
            WafeqResponseError: If the API answers with something that is not
                a bill
        """
        payload = require_valid(BillCreateRequest, data)
        response = self._request(
            "POST",
            "/bills/",
            json=payload.model_dump(by_alias=True, exclude_none=True, mode="json"),
        )
        return parse_bill_response(read_json(response), response.status_code)

    def download_bill_pdf(self, bill_id: str) -> bytes:
        """Download a bill as PDF.

        Args:
            bill_id: Bill ID

        Returns:
            Raw PDF bytes
        """
        response = self._request(
            "GET",
            f"/bills/{path_segment(bill_id)}/download/",
            response_kind=ResponseKind.BINARY,
        )
        return response.content

    # Untyped access

    def request(
        self,
        path: str,
        method: str = "GET",
        json: Any = None,
        *,
        response_kind: ResponseKind = ResponseKind.JSON,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Make a raw request to any API path.

        No schema validation is applied in either direction.

        Args:
            path: API endpoint path, relative to the base URL
            method: HTTP method
            json: JSON body
            response_kind: JSON for the parsed body, BINARY for bytes, EMPTY
                to discard the body
            params: Query parameters
            headers: Extra headers

        Returns:
            Parsed JSON (None for an empty body), bytes, or None
        """
        response = self._request(
            method.upper(),
            path,
            json=json,
            params=params,
            headers=headers,
            response_kind=response_kind,
        )
        if response_kind is ResponseKind.BINARY:
            return response.content
        if response_kind is ResponseKind.EMPTY:
            return None
        return read_json(response)


def create_client(**kwargs: Any) -> WafeqClient:
    """Create a WafeqClient. Accepts the same keyword arguments."""
    return WafeqClient(**kwargs)

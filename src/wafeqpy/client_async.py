"""Asynchronous Wafeq API client."""

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


class AsyncWafeqClient:
    """Asynchronous client for the Wafeq API.

    Holds no mutable state besides its connection pool, so calls on one
    instance can run concurrently.

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

        self.client = httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            headers=default_headers(self.auth),
        )

    async def __aenter__(self) -> AsyncWafeqClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()

    async def _request(
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
            response = await self.client.request(
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

    async def create_invoice(self, data: InvoiceCreateRequest | Mapping[str, Any]) -> Invoice:
        """Create a new invoice.

        Args:
            data: Invoice data

        Returns:
            Created invoice

        Raises:
            WafeqValidationError: If data does not match InvoiceCreateRequest
        """
        payload = require_valid(InvoiceCreateRequest, data)
        response = await self._request(
            "POST",
            "/invoices/",
            json=payload.model_dump(by_alias=True, exclude_none=True, mode="json"),
        )
        return validate_response(Invoice, read_json(response), response.status_code)

    async def get_invoice(self, invoice_id: str) -> Invoice:
        """Get a specific invoice.

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice details
        """
        response = await self._request("GET", f"/invoices/{path_segment(invoice_id)}/")
        return validate_response(Invoice, read_json(response), response.status_code)

    async def delete_invoice(self, invoice_id: str) -> None:
        """Delete an invoice."""
        await self._request(
            "DELETE",
            f"/invoices/{path_segment(invoice_id)}/",
            response_kind=ResponseKind.EMPTY,
        )

    async def cancel_invoice(self, invoice_id: str) -> None:
        """Cancel an invoice."""
        await self._request(
            "POST",
            f"/invoices/{path_segment(invoice_id)}/cancel",
            response_kind=ResponseKind.EMPTY,
        )

    async def download_invoice_pdf(self, invoice_id: str) -> bytes:
        """Download an invoice as PDF.

        Args:
            invoice_id: Invoice ID

        Returns:
            Raw PDF bytes
        """
        response = await self._request(
            "GET",
            f"/invoices/{path_segment(invoice_id)}/download/",
            response_kind=ResponseKind.BINARY,
        )
        return response.content

    async def bulk_send_invoices(self, data: BulkSendInvoiceRequest | Mapping[str, Any]) -> None:
        """Send invoices to customers in bulk.

        Args:
            data: Bulk send data

        Raises:
            WafeqValidationError: If data does not match BulkSendInvoiceRequest
        """
        payload = require_valid(BulkSendInvoiceRequest, data)
        await self._request(
            "POST",
            "/api-invoices/bulk_send/",
            json=payload.model_dump(by_alias=True, exclude_none=True, mode="json"),
            response_kind=ResponseKind.EMPTY,
        )

    # Bill endpoints

    async def create_bill(self, data: BillCreateRequest | Mapping[str, Any]) -> Bill:
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
        response = await self._request(
            "POST",
            "/bills/",
            json=payload.model_dump(by_alias=True, exclude_none=True, mode="json"),
        )
        return parse_bill_response(read_json(response), response.status_code)

    async def download_bill_pdf(self, bill_id: str) -> bytes:
        """Download a bill as PDF.

        Args:
            bill_id: Bill ID

        Returns:
            Raw PDF bytes
        """
        response = await self._request(
            "GET",
            f"/bills/{path_segment(bill_id)}/download/",
            response_kind=ResponseKind.BINARY,
        )
        return response.content

    # Untyped access

    async def request(
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
        response = await self._request(
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


def create_async_client(**kwargs: Any) -> AsyncWafeqClient:
    """Create an AsyncWafeqClient. Accepts the same keyword arguments."""
    return AsyncWafeqClient(**kwargs)

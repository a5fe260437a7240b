"""Tests for AsyncWafeqClient (asynchronous)."""

import asyncio
import json

import httpx
import pytest
import respx
from httpx import Response

from wafeqpy import AsyncWafeqClient, ResponseKind, create_async_client
from wafeqpy.exceptions import (
    WafeqAPIError,
    WafeqConfigError,
    WafeqNotFoundError,
    WafeqResponseError,
    WafeqServerError,
    WafeqTransportError,
    WafeqValidationError,
)


class TestInitialization:
    """Test client construction."""

    @pytest.mark.asyncio
    async def test_context_manager(self, api_key: str):
        """Test client works as async context manager."""
        async with AsyncWafeqClient(api_key=api_key) as client:
            assert client.config.api_key == api_key

    def test_missing_api_key_raises_error(self):
        """Test that a blank API key raises WafeqConfigError."""
        with pytest.raises(WafeqConfigError):
            AsyncWafeqClient(api_key="   ")

    @pytest.mark.asyncio
    async def test_create_async_client(self, api_key: str):
        """Test the factory returns a configured client."""
        client = create_async_client(api_key=api_key, timeout=3)
        assert client.config.timeout == 3.0
        await client.close()


class TestInvoiceEndpoints:
    """Test invoice-related endpoints."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_create_invoice(
        self,
        async_client: AsyncWafeqClient,
        base_url: str,
        invoice_payload: dict,
        mock_invoice: dict,
    ):
        """Test creating an invoice."""
        route = respx.post(f"{base_url}/invoices/").mock(
            return_value=Response(201, json=mock_invoice)
        )

        invoice = await async_client.create_invoice(invoice_payload)

        assert invoice.id == "inv_abc123"
        assert json.loads(route.calls.last.request.content) == invoice_payload
        assert route.calls.last.request.headers["Authorization"] == "Api-Key test_api_key_12345"

    @pytest.mark.asyncio
    async def test_create_invoice_validates_before_sending(
        self, async_client: AsyncWafeqClient, base_url: str, invoice_payload: dict
    ):
        """Test an invoice without a number never reaches the network."""
        del invoice_payload["invoice_number"]

        with respx.mock(assert_all_called=False) as respx_mock:
            route = respx_mock.post(f"{base_url}/invoices/")
            with pytest.raises(WafeqValidationError) as exc_info:
                await async_client.create_invoice(invoice_payload)

        assert not route.called
        assert exc_info.value.errors[0].path == "invoice_number"

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_invoice(
        self, async_client: AsyncWafeqClient, base_url: str, mock_invoice: dict
    ):
        """Test getting a specific invoice."""
        respx.get(f"{base_url}/invoices/inv_abc123/").mock(
            return_value=Response(200, json=mock_invoice)
        )

        invoice = await async_client.get_invoice("inv_abc123")
        assert invoice.invoice_number == "INV-2024-001"

    @pytest.mark.asyncio
    @respx.mock
    async def test_concurrent_calls(
        self, async_client: AsyncWafeqClient, base_url: str, mock_invoice: dict
    ):
        """Test concurrent calls on one client are independent."""
        second = {**mock_invoice, "id": "inv_second"}
        respx.get(f"{base_url}/invoices/inv_abc123/").mock(
            return_value=Response(200, json=mock_invoice)
        )
        respx.get(f"{base_url}/invoices/inv_second/").mock(
            return_value=Response(200, json=second)
        )
        respx.get(f"{base_url}/invoices/missing/").mock(return_value=Response(404))

        results = await asyncio.gather(
            async_client.get_invoice("inv_abc123"),
            async_client.get_invoice("inv_second"),
            async_client.get_invoice("missing"),
            return_exceptions=True,
        )

        assert results[0].id == "inv_abc123"
        assert results[1].id == "inv_second"
        assert isinstance(results[2], WafeqNotFoundError)

    @pytest.mark.asyncio
    @respx.mock
    async def test_delete_and_cancel_invoice(
        self, async_client: AsyncWafeqClient, base_url: str
    ):
        """Test deleting and cancelling invoices."""
        delete_route = respx.delete(f"{base_url}/invoices/inv_1/").mock(
            return_value=Response(204)
        )
        cancel_route = respx.post(f"{base_url}/invoices/inv_2/cancel").mock(
            return_value=Response(200)
        )

        assert await async_client.delete_invoice("inv_1") is None
        assert await async_client.cancel_invoice("inv_2") is None
        assert delete_route.called
        assert cancel_route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_download_invoice_pdf(self, async_client: AsyncWafeqClient, base_url: str):
        """Test downloading an invoice PDF returns the exact bytes."""
        pdf_bytes = bytes(range(256))
        respx.get(f"{base_url}/invoices/inv_1/download/").mock(
            return_value=Response(200, content=pdf_bytes)
        )

        assert await async_client.download_invoice_pdf("inv_1") == pdf_bytes


class TestBillAndBulkSend:
    """Test bill and bulk send endpoints."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_create_bill(
        self,
        async_client: AsyncWafeqClient,
        base_url: str,
        bill_payload: dict,
        mock_bill: dict,
    ):
        """Test creating a bill."""
        respx.post(f"{base_url}/bills/").mock(return_value=Response(201, json=mock_bill))

        bill = await async_client.create_bill(bill_payload)
        assert bill.bill_number == "BILL-001"

    @pytest.mark.asyncio
    @respx.mock
    async def test_create_bill_paginated_response(
        self, async_client: AsyncWafeqClient, base_url: str, bill_payload: dict
    ):
        """Test a paginated list body is rejected as malformed."""
        respx.post(f"{base_url}/bills/").mock(
            return_value=Response(200, json={"count": 2, "results": [{}, {}]})
        )

        with pytest.raises(WafeqResponseError):
            await async_client.create_bill(bill_payload)

    @pytest.mark.asyncio
    @respx.mock
    async def test_download_bill_pdf(self, async_client: AsyncWafeqClient, base_url: str):
        """Test downloading a bill PDF."""
        route = respx.get(f"{base_url}/bills/bill_1/download/").mock(
            return_value=Response(200, content=b"%PDF-1.7")
        )

        assert await async_client.download_bill_pdf("bill_1") == b"%PDF-1.7"
        assert route.calls.last.request.headers["Accept"] == "*/*"

    @pytest.mark.asyncio
    @respx.mock
    async def test_download_bill_pdf_escapes_id(self, async_client: AsyncWafeqClient):
        """Test an ID containing slashes stays inside its path segment."""
        route = respx.route(method="GET", host="api.wafeq.com").mock(
            return_value=Response(200, content=b"%PDF-1.7")
        )

        await async_client.download_bill_pdf("b 1/../x")

        assert route.calls.last.request.url.raw_path == b"/v1/bills/b%201%2F..%2Fx/download/"

    @pytest.mark.asyncio
    @respx.mock
    async def test_bulk_send_invoices(
        self, async_client: AsyncWafeqClient, base_url: str, bulk_send_payload: dict
    ):
        """Test bulk sending invoices."""
        route = respx.post(f"{base_url}/api-invoices/bulk_send/").mock(
            return_value=Response(204)
        )

        assert await async_client.bulk_send_invoices(bulk_send_payload) is None
        assert route.called

    @pytest.mark.asyncio
    async def test_bulk_send_too_many_line_items(
        self, async_client: AsyncWafeqClient, bulk_send_payload: dict
    ):
        """Test more than 100 line items fail validation."""
        bulk_send_payload["line_items"] = bulk_send_payload["line_items"] * 101

        with respx.mock(assert_all_called=False):
            with pytest.raises(WafeqValidationError) as exc_info:
                await async_client.bulk_send_invoices(bulk_send_payload)
        assert exc_info.value.errors[0].path == "line_items"


class TestRawRequestAndErrors:
    """Test the untyped request method and error handling."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_request(self, async_client: AsyncWafeqClient, base_url: str):
        """Test raw requests return the body as-is."""
        respx.get(f"{base_url}/accounts/").mock(
            return_value=Response(200, json=[{"id": "acc_1"}])
        )
        respx.get(f"{base_url}/files/f_1/").mock(return_value=Response(200, content=b"\x00\x01"))

        assert await async_client.request("/accounts/") == [{"id": "acc_1"}]
        assert (
            await async_client.request("/files/f_1/", response_kind=ResponseKind.BINARY)
            == b"\x00\x01"
        )

    @pytest.mark.asyncio
    @respx.mock
    async def test_server_error(self, async_client: AsyncWafeqClient, base_url: str):
        """Test that 503 raises WafeqServerError."""
        respx.get(f"{base_url}/invoices/inv_1/").mock(
            return_value=Response(503, json={"message": "Service unavailable"})
        )

        with pytest.raises(WafeqServerError) as exc_info:
            await async_client.get_invoice("inv_1")
        assert exc_info.value.message == "Service unavailable"

    @pytest.mark.asyncio
    @respx.mock
    async def test_error_marker_in_success_body(
        self, async_client: AsyncWafeqClient, base_url: str
    ):
        """Test that a 200 body with an error field raises WafeqAPIError."""
        respx.get(f"{base_url}/invoices/inv_1/").mock(
            return_value=Response(200, json={"error": True})
        )

        with pytest.raises(WafeqAPIError) as exc_info:
            await async_client.get_invoice("inv_1")
        assert exc_info.value.status_code == 200
        assert exc_info.value.message == "An error occurred with the Wafeq API"

    @pytest.mark.asyncio
    @respx.mock
    async def test_connection_error(self, async_client: AsyncWafeqClient, base_url: str):
        """Test that a connection failure raises WafeqTransportError."""
        respx.get(f"{base_url}/invoices/inv_1/").mock(
            side_effect=httpx.ConnectError("Name or service not known")
        )

        with pytest.raises(WafeqTransportError) as exc_info:
            await async_client.get_invoice("inv_1")
        assert "Name or service not known" in str(exc_info.value)

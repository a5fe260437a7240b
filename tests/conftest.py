"""Pytest fixtures for WafeqPy tests."""

from typing import Any

import pytest

from wafeqpy import AsyncWafeqClient, WafeqClient


@pytest.fixture
def api_key() -> str:
    """Return a test API key."""
    return "test_api_key_12345"


@pytest.fixture
def base_url() -> str:
    """Return the base API URL."""
    return "https://api.wafeq.com/v1"


@pytest.fixture
def sync_client(api_key: str):
    """Create a sync WafeqClient for testing."""
    client = WafeqClient(api_key=api_key)
    yield client
    client.close()


@pytest.fixture
async def async_client(api_key: str):
    """Create an async WafeqClient for testing."""
    client = AsyncWafeqClient(api_key=api_key)
    yield client
    await client.close()


@pytest.fixture
def line_item() -> dict[str, Any]:
    """Return a valid line item."""
    return {
        "account": "acc_sales",
        "description": "Consulting services",
        "quantity": 2,
        "unit_amount": 500,
        "tax_rate": "tax_vat_5",
    }


@pytest.fixture
def invoice_payload(line_item: dict[str, Any]) -> dict[str, Any]:
    """Return a valid invoice creation payload."""
    return {
        "invoice_number": "INV-2024-001",
        "invoice_date": "2024-04-15",
        "invoice_due_date": "2024-05-15",
        "contact": "cnt_123",
        "currency": "AED",
        "language": "en",
        "tax_amount_type": "TAX_EXCLUSIVE",
        "line_items": [line_item],
    }


@pytest.fixture
def mock_invoice() -> dict[str, Any]:
    """Return mock invoice data."""
    return {
        "id": "inv_abc123",
        "invoice_number": "INV-2024-001",
        "invoice_date": "2024-04-15",
        "invoice_due_date": "2024-05-15",
        "contact": "cnt_123",
        "currency": "AED",
        "amount": 1050.0,
        "balance": 1050.0,
        "tax_amount": 50.0,
        "status": "DRAFT",
        "created_ts": "2024-04-15T10:00:00Z",
        "modified_ts": "2024-04-15T10:00:00Z",
        "language": "en",
        "branch": None,
        "line_items": [
            {
                "id": "li_1",
                "account": "acc_sales",
                "description": "Consulting services",
                "quantity": 2,
                "unit_amount": 500,
                "line_amount": 1000,
                "tax_amount": 50,
                "tax_rate": "tax_vat_5",
                "created_ts": "2024-04-15T10:00:00Z",
                "modified_ts": "2024-04-15T10:00:00Z",
            }
        ],
    }


@pytest.fixture
def bill_payload(line_item: dict[str, Any]) -> dict[str, Any]:
    """Return a valid bill creation payload."""
    return {
        "bill_number": "BILL-001",
        "bill_date": "2024-04-01",
        "bill_due_date": "2024-04-30",
        "contact": "cnt_supplier",
        "currency": "SAR",
        "status": "AUTHORIZED",
        "line_items": [line_item],
    }


@pytest.fixture
def mock_bill() -> dict[str, Any]:
    """Return mock bill data."""
    return {
        "id": "bill_xyz789",
        "bill_number": "BILL-001",
        "bill_date": "2024-04-01",
        "bill_due_date": "2024-04-30",
        "contact": "cnt_supplier",
        "currency": "SAR",
        "amount": 1150.0,
        "balance": 1150.0,
        "tax_amount": 150.0,
        "status": "AUTHORIZED",
        "created_ts": "2024-04-01T08:30:00Z",
        "modified_ts": "2024-04-01T08:30:00Z",
        "line_items": [
            {
                "id": "li_9",
                "account": "acc_sales",
                "description": "Consulting services",
                "quantity": 2,
                "unit_amount": 500,
                "line_amount": 1000,
                "tax_amount": 150,
                "created_ts": "2024-04-01T08:30:00Z",
                "modified_ts": "2024-04-01T08:30:00Z",
            }
        ],
    }


@pytest.fixture
def bulk_send_payload() -> dict[str, Any]:
    """Return a valid bulk send payload."""
    return {
        "channels": [
            {
                "medium": "Email",
                "data": {
                    "subject": "Your invoice",
                    "message": "Please find your invoice attached.",
                    "recipients": {
                        "to": ["accounts@acme-trading.ae"],
                        "cc": ["finance@acme-trading.ae"],
                    },
                },
            }
        ],
        "contact": {
            "name": "Acme Trading LLC",
            "email": "accounts@acme-trading.ae",
            "city": "Dubai",
            "country": "AE",
        },
        "currency": "AED",
        "invoice_date": "2024-04-15",
        "invoice_number": "INV-2024-002",
        "language": "en",
        "tax_amount_type": "TAX_INCLUSIVE",
        "line_items": [
            {
                "name": "Support plan",
                "description": "Monthly support",
                "price": 250,
                "quantity": 1,
                "discount": {"type": "%", "value": 10},
                "tax_rate": {"name": "VAT", "rate": 5},
            }
        ],
    }

"""WafeqPy - Typed Python client for the Wafeq accounting API."""

from wafeqpy._version import __version__
from wafeqpy.client_async import AsyncWafeqClient, create_async_client
from wafeqpy.client_base import ResponseKind, normalize_error
from wafeqpy.client_sync import WafeqClient, create_client
from wafeqpy.config import ClientConfig, resolve_config
from wafeqpy.exceptions import (
    ErrorKind,
    WafeqAPIError,
    WafeqAuthError,
    WafeqBadRequestError,
    WafeqConfigError,
    WafeqError,
    WafeqNotFoundError,
    WafeqRateLimitError,
    WafeqResponseError,
    WafeqServerError,
    WafeqTransportError,
    WafeqValidationError,
)
from wafeqpy.models import (
    Bill,
    BillCreateRequest,
    BillStatus,
    BulkSendChannel,
    BulkSendChannelData,
    BulkSendContact,
    BulkSendDiscount,
    BulkSendInvoiceRequest,
    BulkSendLineItem,
    BulkSendRecipients,
    BulkSendTaxRate,
    Contact,
    CreditNote,
    CurrencyCode,
    DebitNote,
    DiscountType,
    Invoice,
    InvoiceCreateRequest,
    InvoiceStatus,
    Language,
    LineItem,
    Medium,
    PlaceOfSupply,
    TaxAmountType,
)
from wafeqpy.utils import format_date, is_valid_date_format
from wafeqpy.validation import Constraint, FieldError, ValidationResult, validate

__all__ = [
    "__version__",
    "WafeqClient",
    "AsyncWafeqClient",
    "create_client",
    "create_async_client",
    "ClientConfig",
    "resolve_config",
    "ResponseKind",
    "normalize_error",
    "validate",
    "ValidationResult",
    "FieldError",
    "Constraint",
    "format_date",
    "is_valid_date_format",
    "ErrorKind",
    "WafeqError",
    "WafeqConfigError",
    "WafeqValidationError",
    "WafeqAPIError",
    "WafeqBadRequestError",
    "WafeqAuthError",
    "WafeqNotFoundError",
    "WafeqRateLimitError",
    "WafeqServerError",
    "WafeqTransportError",
    "WafeqResponseError",
    "Invoice",
    "InvoiceCreateRequest",
    "Bill",
    "BillCreateRequest",
    "BulkSendInvoiceRequest",
    "BulkSendChannel",
    "BulkSendChannelData",
    "BulkSendRecipients",
    "BulkSendContact",
    "BulkSendLineItem",
    "BulkSendDiscount",
    "BulkSendTaxRate",
    "Contact",
    "LineItem",
    "CreditNote",
    "DebitNote",
    "CurrencyCode",
    "Language",
    "PlaceOfSupply",
    "InvoiceStatus",
    "BillStatus",
    "TaxAmountType",
    "Medium",
    "DiscountType",
]

"""Request and response models for the Wafeq API.

Request models describe the payloads the client sends and enforce the
constraints the API documents. Response models describe what the API returns;
they are lenient about optional fields and keep any extra fields the server
adds.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    Field,
    StrictFloat,
)

from wafeqpy.utils import DATE_PATTERN, format_date


def _date_to_string(value: Any) -> Any:
    if isinstance(value, date):
        return format_date(value)
    return value


# Shape check only, "2023-02-31" passes
DateString = Annotated[
    str, Field(pattern=DATE_PATTERN), BeforeValidator(_date_to_string)
]
RequiredString = Annotated[str, Field(min_length=1)]


# Enumerations


class CurrencyCode(str, Enum):
    """Currencies supported by Wafeq."""

    AED = "AED"
    SAR = "SAR"
    USD = "USD"
    EUR = "EUR"
    CAD = "CAD"
    AFN = "AFN"
    ALL = "ALL"
    AMD = "AMD"
    ARS = "ARS"
    AUD = "AUD"
    AZN = "AZN"
    BAM = "BAM"
    BDT = "BDT"
    BGN = "BGN"
    BHD = "BHD"
    BIF = "BIF"
    BND = "BND"
    BOB = "BOB"
    BRL = "BRL"
    BWP = "BWP"
    BYN = "BYN"
    BZD = "BZD"
    CDF = "CDF"
    CHF = "CHF"
    CLP = "CLP"
    CNY = "CNY"
    COP = "COP"
    CRC = "CRC"
    CVE = "CVE"
    CZK = "CZK"
    DJF = "DJF"
    DKK = "DKK"
    DOP = "DOP"
    DZD = "DZD"
    EGP = "EGP"
    ERN = "ERN"
    ETB = "ETB"
    GBP = "GBP"
    GEL = "GEL"
    GHS = "GHS"
    GNF = "GNF"
    GTQ = "GTQ"
    HKD = "HKD"
    HNL = "HNL"
    HRK = "HRK"
    HUF = "HUF"
    IDR = "IDR"
    ILS = "ILS"
    INR = "INR"
    IQD = "IQD"
    IRR = "IRR"
    ISK = "ISK"
    JMD = "JMD"
    JOD = "JOD"
    JPY = "JPY"
    KES = "KES"
    KHR = "KHR"
    KMF = "KMF"
    KRW = "KRW"
    KWD = "KWD"
    KZT = "KZT"
    LBP = "LBP"
    LKR = "LKR"
    LYD = "LYD"
    MAD = "MAD"
    MDL = "MDL"
    MGA = "MGA"
    MKD = "MKD"
    MMK = "MMK"
    MOP = "MOP"
    MUR = "MUR"
    MXN = "MXN"
    MYR = "MYR"
    MZN = "MZN"
    NAD = "NAD"
    NGN = "NGN"
    NIO = "NIO"
    NOK = "NOK"
    NPR = "NPR"
    NZD = "NZD"
    OMR = "OMR"
    PAB = "PAB"
    PEN = "PEN"
    PHP = "PHP"
    PKR = "PKR"
    PLN = "PLN"
    PYG = "PYG"
    QAR = "QAR"
    RON = "RON"
    RSD = "RSD"
    RUB = "RUB"
    RWF = "RWF"
    SDG = "SDG"
    SEK = "SEK"
    SGD = "SGD"
    SOS = "SOS"
    SYP = "SYP"
    THB = "THB"
    TND = "TND"
    TOP = "TOP"
    TRY = "TRY"
    TTD = "TTD"
    TWD = "TWD"
    TZS = "TZS"
    UAH = "UAH"
    UGX = "UGX"
    UYU = "UYU"
    UZS = "UZS"
    VES = "VES"
    VND = "VND"
    XAF = "XAF"
    XOF = "XOF"
    YER = "YER"
    ZAR = "ZAR"
    ZMW = "ZMW"


class Language(str, Enum):
    """Document language."""

    AR = "ar"
    EN = "en"


class PlaceOfSupply(str, Enum):
    """Place of supply for UAE organizations."""

    ABU_DHABI = "ABU_DHABI"
    AJMAN = "AJMAN"
    DUBAI = "DUBAI"
    FUJAIRAH = "FUJAIRAH"
    RAS_AL_KHAIMAH = "RAS_AL_KHAIMAH"
    SHARJAH = "SHARJAH"
    UMM_AL_QUWAIN = "UMM_AL_QUWAIN"
    OUTSIDE_UAE = "OUTSIDE_UAE"


class InvoiceStatus(str, Enum):
    """Invoice status. New invoices default to DRAFT."""

    DRAFT = "DRAFT"
    SENT = "SENT"


class BillStatus(str, Enum):
    """Bill status. New bills default to DRAFT."""

    DRAFT = "DRAFT"
    AUTHORIZED = "AUTHORIZED"
    PAID = "PAID"


class TaxAmountType(str, Enum):
    """Whether line amounts include or exclude tax."""

    TAX_INCLUSIVE = "TAX_INCLUSIVE"
    TAX_EXCLUSIVE = "TAX_EXCLUSIVE"


class Medium(str, Enum):
    """Delivery channel for bulk-sent invoices."""

    EMAIL = "Email"


class DiscountType(str, Enum):
    """Discount type on bulk-send line items."""

    PERCENT = "%"
    AMOUNT = "amount"


# Request models


class RequestModel(BaseModel):
    """Base for outgoing payloads.

    Instances are re-validated whenever they pass through validation, so a
    model built with ``model_construct`` is still checked before sending.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        revalidate_instances="always",
    )


class Contact(RequestModel):
    """Customer details embedded in an invoice."""

    name: RequiredString
    email: EmailStr | None = None
    phone: str | None = None
    address: str | None = None
    tax_identification_number: str | None = Field(
        default=None, alias="taxIdentificationNumber"
    )


class LineItem(RequestModel):
    """Line item for invoice and bill creation."""

    account: RequiredString
    description: RequiredString
    quantity: StrictFloat = Field(gt=0)
    unit_amount: StrictFloat = Field(ge=0)
    # Percentage
    discount: StrictFloat | None = Field(default=None, ge=0)
    cost_center: str | None = None
    item: str | None = None
    tax_rate: str | None = None


class CreditNote(RequestModel):
    """Credit note applied to an invoice."""

    amount: StrictFloat = Field(ge=0)
    credit_note: RequiredString


class DebitNote(RequestModel):
    """Debit note applied to a bill."""

    amount: StrictFloat = Field(ge=-1e18, le=1e18)
    debit_note: RequiredString


class InvoiceCreateRequest(RequestModel):
    """Payload for ``POST /invoices/``."""

    invoice_number: RequiredString
    invoice_date: DateString
    contact: RequiredString
    currency: CurrencyCode
    line_items: list[LineItem] = Field(min_length=1)
    invoice_due_date: DateString | None = None
    customer: Contact | None = None
    notes: str | None = None
    language: Language | None = None
    attachments: list[str] | None = None
    branch: str | None = None
    credit_notes: list[CreditNote] | None = None
    place_of_supply: PlaceOfSupply | None = None
    project: str | None = None
    reference: str | None = None
    status: InvoiceStatus | None = None
    tax_amount_type: TaxAmountType | None = None
    warehouse: str | None = None
    discount_account: str | None = None
    discount_amount: StrictFloat | None = Field(default=None, ge=0)
    discount_cost_center: str | None = None
    discount_tax_rate: str | None = None


class BillCreateRequest(RequestModel):
    """Payload for ``POST /bills/``."""

    bill_number: RequiredString
    bill_date: DateString
    bill_due_date: DateString
    currency: CurrencyCode
    line_items: list[LineItem] = Field(min_length=1)
    contact: str | None = None
    debit_notes: list[DebitNote] | None = None
    order_number: str | None = None
    notes: str | None = None
    language: Language | None = None
    attachments: list[str] | None = None
    branch: str | None = None
    project: str | None = None
    reference: str | None = None
    status: BillStatus | None = None
    tax_amount_type: TaxAmountType | None = None


class BulkSendRecipients(RequestModel):
    to: list[EmailStr] = Field(min_length=1, max_length=6)
    cc: list[EmailStr] | None = Field(default=None, max_length=6)
    bcc: list[EmailStr] | None = Field(default=None, max_length=6)


class BulkSendChannelData(RequestModel):
    subject: str
    message: str
    recipients: BulkSendRecipients


class BulkSendChannel(RequestModel):
    medium: Medium
    data: BulkSendChannelData


class BulkSendContact(RequestModel):
    name: RequiredString
    email: EmailStr | None = None
    address: str | None = None
    city: str | None = None
    country: str | None = None
    tax_registration_number: str | None = None


class BulkSendTaxRate(RequestModel):
    name: str
    rate: StrictFloat
    suid: str | None = None


class BulkSendDiscount(RequestModel):
    type: DiscountType
    value: StrictFloat


class BulkSendLineItem(RequestModel):
    name: str
    description: str
    price: StrictFloat
    quantity: StrictFloat
    account: str | None = None
    discount: BulkSendDiscount | None = None
    tax_rate: BulkSendTaxRate | None = None


class BulkSendInvoiceRequest(RequestModel):
    """Payload for ``POST /api-invoices/bulk_send/``."""

    channels: list[BulkSendChannel] = Field(min_length=1)
    contact: BulkSendContact
    currency: CurrencyCode
    invoice_date: DateString
    invoice_number: RequiredString
    language: Language
    line_items: list[BulkSendLineItem] = Field(min_length=1, max_length=100)
    tax_amount_type: TaxAmountType
    notes: str | None = None
    paid_through_account: str | None = None
    reference: str | None = None


# Response models


class ResponseModel(BaseModel):
    """Base for payloads returned by the API."""

    model_config = ConfigDict(extra="allow")


class AppliedCreditNote(ResponseModel):
    amount: float
    credit_note: str


class AppliedDebitNote(ResponseModel):
    amount: float
    debit_note: str


class DocumentLineItem(ResponseModel):
    """Line item as returned by the API, with server-computed amounts."""

    id: str
    account: str
    description: str
    quantity: float
    unit_amount: float
    line_amount: float
    tax_amount: float
    created_ts: str
    modified_ts: str
    cost_center: str | None = None
    discount: float | None = None
    item: str | None = None
    tax_rate: str | None = None


class Invoice(ResponseModel):
    """Invoice as returned by the API."""

    id: str
    invoice_number: str
    invoice_date: str
    contact: str
    currency: str
    amount: float
    balance: float
    tax_amount: float
    created_ts: str
    modified_ts: str
    language: Language
    line_items: list[DocumentLineItem]
    invoice_due_date: str | None = None
    status: str | None = None
    attachments: list[str] | None = None
    branch: str | None = None
    credit_notes: list[AppliedCreditNote] | None = None
    discount_account: str | None = None
    discount_amount: float | None = None
    discount_cost_center: str | None = None
    discount_tax_rate: str | None = None
    notes: str | None = None
    place_of_supply: str | None = None
    project: str | None = None
    reference: str | None = None
    tax_amount_type: str | None = None
    warehouse: str | None = None


class Bill(ResponseModel):
    """Bill as returned by the API."""

    id: str
    bill_number: str
    bill_date: str
    bill_due_date: str
    currency: str
    amount: float
    balance: float
    tax_amount: float
    created_ts: str
    modified_ts: str
    line_items: list[DocumentLineItem]
    contact: str | None = None
    language: Language | None = None
    status: str | None = None
    attachments: list[str] | None = None
    branch: str | None = None
    debit_notes: list[AppliedDebitNote] | None = None
    notes: str | None = None
    order_number: str | None = None
    project: str | None = None
    reference: str | None = None
    tax_amount_type: str | None = None

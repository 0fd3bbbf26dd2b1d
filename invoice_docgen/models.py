# invoice_docgen/models.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any, List, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from .config import DEFAULT_CURRENCY
from .text_utils import coerce_amount

CENT = Decimal("0.01")


def quantize_money(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


class DocumentType(str, Enum):
    INVOICE = "invoice"
    RECEIPT = "receipt"

    @classmethod
    def parse(cls, value: Any) -> "DocumentType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.INVOICE


class TemplateKey(str, Enum):
    CLASSIC = "classic"
    MODERN = "modern"
    MINIMAL = "minimal"
    BOLD = "bold"
    COMPACT = "compact"

    @classmethod
    def parse(cls, value: Any) -> "TemplateKey":
        """Map a raw template name to a key; anything unrecognized is classic."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.CLASSIC


class _Lenient(BaseModel):
    """Base for inputs coming from the mobile client (camelCase, nulls)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _none_to_blank(cls, v, info):
        field = cls.model_fields.get(info.field_name)
        if v is None and field is not None and field.annotation is str:
            return ""
        return v


class CompanyInfo(_Lenient):
    name: str = Field("", validation_alias=AliasChoices("name", "companyName", "company_name"))
    address: str = ""
    email: str = ""
    phone: str = Field("", validation_alias=AliasChoices("phone", "phoneNumber", "phone_number"))
    bank_name: str = Field("", validation_alias=AliasChoices("bank_name", "bankName"))
    account_name: str = Field(
        "", validation_alias=AliasChoices("account_name", "accountName", "bankAccountName")
    )
    account_number: str = Field(
        "", validation_alias=AliasChoices("account_number", "accountNumber", "bankAccountNumber")
    )
    logo: str = ""
    signature: str = ""
    brand_color: Optional[str] = Field(
        None, validation_alias=AliasChoices("brand_color", "brandColor")
    )
    terms_and_conditions: Optional[str] = Field(
        None, validation_alias=AliasChoices("terms_and_conditions", "termsAndConditions", "terms")
    )


class Recipient(_Lenient):
    name: str = Field("", validation_alias=AliasChoices("name", "customerName", "customer_name"))
    address: str = Field(
        "", validation_alias=AliasChoices("address", "customerAddress", "customer_address")
    )
    contact: str = Field(
        "", validation_alias=AliasChoices("contact", "customerContact", "customer_contact")
    )


class LineItem(_Lenient):
    description: str = Field("", validation_alias=AliasChoices("description", "desc"))
    quantity: Decimal = Field(
        Decimal(0), ge=0, validation_alias=AliasChoices("quantity", "qty")
    )
    unit_price: Decimal = Field(
        Decimal(0), ge=0, validation_alias=AliasChoices("unit_price", "unitPrice", "price")
    )

    @field_validator("quantity", "unit_price", mode="before")
    @classmethod
    def _parse_number(cls, v):
        if v is None or v == "":
            return Decimal(0)
        parsed = coerce_amount(v)
        return v if parsed is None else parsed

    @property
    def line_total(self) -> Decimal:
        return quantize_money(self.quantity * self.unit_price)


class DocumentRequest(_Lenient):
    document_type: DocumentType = Field(
        DocumentType.INVOICE, validation_alias=AliasChoices("document_type", "documentType")
    )
    company: CompanyInfo = Field(default_factory=CompanyInfo)
    recipient: Recipient = Field(
        default_factory=Recipient, validation_alias=AliasChoices("recipient", "customer")
    )
    items: List[LineItem] = Field(default_factory=list)
    template: TemplateKey = Field(
        TemplateKey.CLASSIC, validation_alias=AliasChoices("template", "templateKey", "template_key")
    )
    currency_symbol: str = Field(
        DEFAULT_CURRENCY, validation_alias=AliasChoices("currency_symbol", "currencySymbol")
    )
    document_number: Optional[str] = Field(
        None,
        validation_alias=AliasChoices(
            "document_number", "documentNumber", "invoiceNumber", "receiptNumber"
        ),
    )
    document_date: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("document_date", "documentDate", "invoiceDate", "receiptDate"),
    )
    due_date: Optional[str] = Field(None, validation_alias=AliasChoices("due_date", "dueDate"))
    amount_paid: Optional[Decimal] = Field(
        None, ge=0, validation_alias=AliasChoices("amount_paid", "amountPaid")
    )
    invoice_reference: Optional[str] = Field(
        None, validation_alias=AliasChoices("invoice_reference", "invoiceReference")
    )

    @model_validator(mode="before")
    @classmethod
    def _lift_flat_customer(cls, data):
        # The mobile client sends customerName/customerAddress/... at the top level
        if not isinstance(data, dict) or "recipient" in data or "customer" in data:
            return data
        flat = {k: data[k] for k in ("customerName", "customerAddress", "customerContact") if k in data}
        if flat:
            data = {**data, "recipient": flat}
        return data

    @field_validator("document_type", mode="before")
    @classmethod
    def _parse_document_type(cls, v):
        return DocumentType.parse(v)

    @field_validator("template", mode="before")
    @classmethod
    def _parse_template(cls, v):
        return TemplateKey.parse(v)

    @field_validator("currency_symbol", mode="before")
    @classmethod
    def _default_currency(cls, v):
        if v is None or not str(v).strip():
            return DEFAULT_CURRENCY
        return str(v).strip()

    @field_validator("amount_paid", mode="before")
    @classmethod
    def _parse_amount_paid(cls, v):
        if v is None or v == "":
            return None
        parsed = coerce_amount(v)
        return v if parsed is None else parsed

    @field_validator("document_date", "due_date", mode="before")
    @classmethod
    def _stringify_dates(cls, v):
        if v is None:
            return None
        return v.isoformat() if hasattr(v, "isoformat") else str(v)


class Theme(BaseModel):
    model_config = ConfigDict(frozen=True)

    primary_color: str
    accent_color: str


class DocumentLabels(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    recipient_label: str
    number_label: str
    date_label: str
    item_column: str
    total_label: str


class Totals(BaseModel):
    model_config = ConfigDict(frozen=True)

    subtotal: Decimal
    display_total: Decimal
    amount_in_words: str
    is_override: bool = False


@dataclass(frozen=True)
class DocumentContext:
    """Fully defaulted, already-escaped view of a request handed to a layout.

    Text attributes are markup-safe. ``items`` keeps the raw LineItems; the
    table renderer escapes descriptions itself.
    """

    template: TemplateKey
    labels: DocumentLabels
    theme: Theme
    currency_symbol: str
    company_name: str
    company_address: str
    company_email: str
    company_phone: str
    company_initials: str
    logo_src: Optional[str]
    signature_src: Optional[str]
    bank_rows: Tuple[Tuple[str, str], ...]
    terms: str
    recipient_name: str
    recipient_address: str
    recipient_contact: str
    document_number: str
    document_date: str
    due_date: str
    reference: str
    items: Tuple[LineItem, ...]
    totals: Totals
    show_badge: bool

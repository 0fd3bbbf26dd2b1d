# invoice_docgen/assembler.py
from __future__ import annotations

import json
import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import ValidationError

from .assets import initials, resolve_asset
from .config import DOCUMENT_LABELS, NUMBER_PREFIXES
from .exceptions import RequestParsingError
from .layouts import select_layout
from .markup import escape, page_shell
from .models import (
    DocumentContext,
    DocumentLabels,
    DocumentRequest,
    DocumentType,
    Totals,
    quantize_money,
)
from .text_utils import clean_line, clean_text, normalize_date
from .theme import theme_for
from .words import amount_to_words

logger = logging.getLogger(__name__)

DEFAULT_COMPANY_NAME = "Your Company"


def default_document_number(document_type: DocumentType, now: datetime) -> str:
    """<PREFIX>-<last six digits of the epoch in milliseconds>."""
    stamp = str(int(now.timestamp() * 1000))[-6:]
    return f"{NUMBER_PREFIXES[document_type.value]}-{stamp}"


def labels_for(document_type: DocumentType) -> DocumentLabels:
    return DocumentLabels(**DOCUMENT_LABELS[document_type.value])


def compute_totals(request: DocumentRequest) -> Totals:
    subtotal = quantize_money(sum((item.line_total for item in request.items), Decimal(0)))
    display_total = subtotal
    is_override = False
    if request.document_type is DocumentType.RECEIPT and request.amount_paid is not None:
        display_total = quantize_money(request.amount_paid)
        is_override = True
    return Totals(
        subtotal=subtotal,
        display_total=display_total,
        amount_in_words=amount_to_words(display_total, request.currency_symbol),
        is_override=is_override,
    )


def _text(value: Optional[str]) -> str:
    return escape(clean_line(value or ""))


def build_context(
    request: DocumentRequest,
    *,
    now: Optional[datetime] = None,
    api_base_url: Optional[str] = None,
) -> DocumentContext:
    """Normalize a request once so layouts never need their own null guards."""
    now = now or datetime.now()
    company = request.company
    recipient = request.recipient
    is_receipt = request.document_type is DocumentType.RECEIPT

    company_name = clean_line(company.name) or DEFAULT_COMPANY_NAME
    logo = resolve_asset(company.logo, api_base_url)
    signature = resolve_asset(company.signature, api_base_url)

    bank_rows = ()
    if not is_receipt:
        bank_rows = tuple(
            (label, _text(value))
            for label, value in (
                ("Bank", company.bank_name),
                ("Account Name", company.account_name),
                ("Account Number", company.account_number),
            )
            if clean_line(value)
        )

    document_number = clean_line(request.document_number or "") or default_document_number(
        request.document_type, now
    )
    document_date = normalize_date(request.document_date) or now.date().isoformat()
    due_date = "" if is_receipt else normalize_date(request.due_date)

    return DocumentContext(
        template=request.template,
        labels=labels_for(request.document_type),
        theme=theme_for(request.template, company.brand_color),
        currency_symbol=request.currency_symbol,
        company_name=escape(company_name),
        company_address=_text(company.address),
        company_email=_text(company.email),
        company_phone=_text(company.phone),
        company_initials=escape(initials(company_name)),
        logo_src=escape(logo) if logo else None,
        signature_src=escape(signature) if signature else None,
        bank_rows=bank_rows,
        terms=escape(clean_text(company.terms_and_conditions)),
        recipient_name=_text(recipient.name) or "-",
        recipient_address=_text(recipient.address),
        recipient_contact=_text(recipient.contact),
        document_number=escape(document_number),
        document_date=escape(document_date),
        due_date=escape(due_date),
        reference=_text(request.invoice_reference) if is_receipt else "",
        items=tuple(request.items),
        totals=compute_totals(request),
        show_badge=is_receipt,
    )


def build_document(
    request: DocumentRequest,
    *,
    now: Optional[datetime] = None,
    api_base_url: Optional[str] = None,
) -> str:
    """Render a request into a complete, print-ready HTML document."""
    ctx = build_context(request, now=now, api_base_url=api_base_url)
    layout = select_layout(ctx.template)
    body = layout(ctx)
    title = f"{ctx.labels.title.title()} {ctx.document_number}"

    logger.debug(
        "Built %s %s with template %s (%d items)",
        request.document_type.value,
        ctx.document_number,
        ctx.template.value,
        len(ctx.items),
    )
    return page_shell(title, body, ctx.theme, ctx.template.value)


def build_invoice_document(request: DocumentRequest, **kwargs) -> str:
    return build_document(request.model_copy(update={"document_type": DocumentType.INVOICE}), **kwargs)


def build_receipt_document(request: DocumentRequest, **kwargs) -> str:
    return build_document(request.model_copy(update={"document_type": DocumentType.RECEIPT}), **kwargs)


def parse_request(payload: Dict[str, Any], document_type: Optional[str] = None) -> DocumentRequest:
    """Validate a raw JSON payload (camelCase or snake_case) into a request."""
    data = dict(payload)
    if document_type is not None:
        data["document_type"] = document_type
        data.pop("documentType", None)
    try:
        return DocumentRequest.model_validate(data)
    except ValidationError as e:
        raise RequestParsingError(
            f"Invalid document request: {e.error_count()} error(s)", json.loads(e.json())
        ) from e


def build_document_from_payload(
    payload: Dict[str, Any],
    document_type: Optional[str] = None,
    **kwargs,
) -> str:
    return build_document(parse_request(payload, document_type), **kwargs)

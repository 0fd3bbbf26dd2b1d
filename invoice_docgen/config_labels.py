# invoice_docgen/config_labels.py
"""Label sets, currency names and theme constants for document generation."""
from __future__ import annotations

PLATFORM_NAME = "YMOBooks"

DEFAULT_CURRENCY_SYMBOL = "$"

# Spoken currency names used by the amount-in-words line
CURRENCY_NAMES = {
    "₦": "Naira",
    "$": "Dollars",
    "€": "Euros",
    "£": "Pounds",
    "₵": "Cedis",
    "KSh": "Shillings",
    "₹": "Rupees",
    "R": "Rand",
    "¥": "Yen",
}

# Wording per document kind; layouts only ever read from these
DOCUMENT_LABELS = {
    "invoice": {
        "title": "INVOICE",
        "recipient_label": "Bill To",
        "number_label": "Invoice No",
        "date_label": "Invoice Date",
        "item_column": "Item Description",
        "total_label": "Total",
    },
    "receipt": {
        "title": "RECEIPT",
        "recipient_label": "Received From",
        "number_label": "Receipt No",
        "date_label": "Payment Date",
        "item_column": "Services/Items Paid For",
        "total_label": "Total Paid",
    },
}

NUMBER_PREFIXES = {
    "invoice": "INV",
    "receipt": "RCT",
}

# Default primary colour for each template
TEMPLATE_COLORS = {
    "classic": "#1F2937",
    "modern": "#6C63FF",
    "minimal": "#374151",
    "bold": "#DC2626",
    "compact": "#0F766E",
}

# Accent derivation: negative darkens, positive lightens (fraction of range)
ACCENT_SHIFT = {
    "classic": 0.15,
    "modern": -0.20,
    "minimal": 0.40,
    "bold": -0.30,
    "compact": 0.25,
}

PAYMENT_BADGE_TEXT = "Payment Confirmed"
DUE_DATE_LABEL = "Due Date"
REFERENCE_LABEL = "Invoice Ref"
SUBTOTAL_LABEL = "Subtotal"
WORDS_LABEL = "Amount in Words"
SIGNATURE_LABEL = "Authorized Signature"

CLASSIC_FOOTER = f"Generated with {PLATFORM_NAME}. Thank you for your business."
ISSUER_FOOTER = "This document was issued by {company}. Any alteration renders it invalid."

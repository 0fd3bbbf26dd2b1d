# invoice_docgen/config.py
# Environment-driven settings plus re-exports from config_labels.
# New code may import label constants directly from config_labels.
import os

from .config_labels import (
    ACCENT_SHIFT,
    CLASSIC_FOOTER,
    CURRENCY_NAMES,
    DEFAULT_CURRENCY_SYMBOL,
    DOCUMENT_LABELS,
    DUE_DATE_LABEL,
    ISSUER_FOOTER,
    NUMBER_PREFIXES,
    PAYMENT_BADGE_TEXT,
    PLATFORM_NAME,
    REFERENCE_LABEL,
    SIGNATURE_LABEL,
    SUBTOTAL_LABEL,
    TEMPLATE_COLORS,
    WORDS_LABEL,
)

# Origin used to absolutize site-relative asset paths ("/uploads/logo.png")
API_BASE_URL = (
    os.getenv("DOCGEN_API_BASE_URL")
    or os.getenv("EXPO_PUBLIC_API_BASE_URL")
    or "http://localhost:4000"
)

DEFAULT_CURRENCY = os.getenv("DOCGEN_DEFAULT_CURRENCY") or DEFAULT_CURRENCY_SYMBOL

LOG_LEVEL = os.getenv("DOCGEN_LOG_LEVEL", "INFO")

__all__ = [
    "ACCENT_SHIFT",
    "API_BASE_URL",
    "CLASSIC_FOOTER",
    "CURRENCY_NAMES",
    "DEFAULT_CURRENCY",
    "DOCUMENT_LABELS",
    "DUE_DATE_LABEL",
    "ISSUER_FOOTER",
    "LOG_LEVEL",
    "NUMBER_PREFIXES",
    "PAYMENT_BADGE_TEXT",
    "PLATFORM_NAME",
    "REFERENCE_LABEL",
    "SIGNATURE_LABEL",
    "SUBTOTAL_LABEL",
    "TEMPLATE_COLORS",
    "WORDS_LABEL",
]

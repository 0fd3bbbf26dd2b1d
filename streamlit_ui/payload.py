# streamlit_ui/payload.py
"""Turn the preview form's raw values into a render request body."""
from __future__ import annotations

from typing import Any, Dict, List, Optional


def parse_items(text: str) -> List[Dict[str, Any]]:
    """
    One item per line: ``description | quantity | unit price``.
    Blank lines are skipped; missing numbers default to 0.
    """
    items: List[Dict[str, Any]] = []
    for raw in (text or "").splitlines():
        if not raw.strip():
            continue
        parts = [p.strip() for p in raw.split("|")]
        items.append(
            {
                "description": parts[0],
                "quantity": parts[1] if len(parts) > 1 and parts[1] else "0",
                "unit_price": parts[2] if len(parts) > 2 and parts[2] else "0",
            }
        )
    return items


def build_payload(
    form: Dict[str, Any],
    items_text: str,
    kind: str = "invoice",
) -> Dict[str, Any]:
    def _opt(key: str) -> Optional[str]:
        value = (form.get(key) or "").strip()
        return value or None

    payload: Dict[str, Any] = {
        "template": form.get("template") or "classic",
        "currency_symbol": form.get("currency_symbol") or "$",
        "company": {
            "name": form.get("company_name", ""),
            "address": form.get("company_address", ""),
            "email": form.get("company_email", ""),
            "phone": form.get("company_phone", ""),
            "bank_name": form.get("bank_name", ""),
            "account_name": form.get("account_name", ""),
            "account_number": form.get("account_number", ""),
            "logo": form.get("logo", ""),
            "signature": form.get("signature", ""),
            "brand_color": _opt("brand_color"),
            "terms_and_conditions": _opt("terms"),
        },
        "recipient": {
            "name": form.get("recipient_name", ""),
            "address": form.get("recipient_address", ""),
            "contact": form.get("recipient_contact", ""),
        },
        "items": parse_items(items_text),
        "document_number": _opt("document_number"),
        "document_date": _opt("document_date"),
    }
    if kind == "receipt":
        payload["amount_paid"] = _opt("amount_paid")
        payload["invoice_reference"] = _opt("invoice_reference")
    else:
        payload["due_date"] = _opt("due_date")
    return payload

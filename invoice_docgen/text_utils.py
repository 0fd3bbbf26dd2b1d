# invoice_docgen/text_utils.py
from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

import dateparser

AMOUNT_TOKEN = r"[-+]?\d+(?:\.\d+)?"
AMOUNT_RE = re.compile(AMOUNT_TOKEN)
_WS_RE = re.compile(r"[ \t\u00a0]+")
ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Absolute dates only, with day, month and year all present.
DATE_SETTINGS = {
    "DATE_ORDER": "DMY",
    "PARSERS": ["timestamp", "custom-formats", "absolute-time"],
    "REQUIRE_PARTS": ["day", "month", "year"],
}


def clean_line(line: str) -> str:
    return _WS_RE.sub(" ", line.replace("\u00a0", " ")).strip()


def clean_text(text: Optional[str]) -> str:
    """Return text with per-line whitespace collapsed; line breaks are kept."""
    if text is None:
        return ""
    lines = [clean_line(l) for l in str(text).splitlines()]
    return "\n".join(lines).strip()


def coerce_amount(raw: Union[str, int, float, Decimal, None]) -> Optional[Decimal]:
    """Turn user-entered amounts ("$1,200.50", 12, 3.5) into a Decimal.

    Thousands separators and currency symbols are dropped. Returns None when
    nothing numeric can be found.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, Decimal):
        return raw
    if isinstance(raw, int):
        return Decimal(raw)
    if isinstance(raw, float):
        return Decimal(str(raw))

    s = str(raw).strip().replace(",", "")
    m = AMOUNT_RE.search(s)
    if not m:
        return None
    try:
        return Decimal(m.group(0))
    except InvalidOperation:
        return None


def normalize_date(value: Union[str, date, datetime, None]) -> str:
    """Return an ISO date string when the value names one calendar day.

    A bare ISO date is used as-is; anything else goes through dateparser with
    day-first ordering. Relative phrases ("tomorrow"), partial dates and text
    with trailing notes are returned cleaned but unchanged, so the result
    never depends on the clock.
    """
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()

    text = clean_line(str(value))
    if not text:
        return ""
    if ISO_DATE_RE.match(text):
        try:
            return date.fromisoformat(text).isoformat()
        except ValueError:
            return text

    dt = dateparser.parse(text, settings=DATE_SETTINGS)
    if not dt:
        return text
    return dt.date().isoformat()

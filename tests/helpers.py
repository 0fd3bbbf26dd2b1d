"""Shared fixtures and an HTML text extractor for the generator tests."""

from datetime import datetime, timezone
from html.parser import HTMLParser

FIXED_NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


def sample_payload(**overrides):
    payload = {
        "template": "classic",
        "currency_symbol": "$",
        "company": {
            "name": "Acme Trading Ltd",
            "address": "12 Marina Road, Lagos",
            "email": "billing@acme.test",
            "phone": "+234 800 000 0000",
            "bank_name": "First Bank",
            "account_name": "Acme Trading Ltd",
            "account_number": "0123456789",
            "logo": "",
            "signature": "",
        },
        "recipient": {
            "name": "Globex Corp",
            "address": "1 Main Street",
            "contact": "ops@globex.test",
        },
        "items": [
            {"description": "Consulting", "quantity": 10, "unit_price": "100.00"},
            {"description": "License", "quantity": 1, "unit_price": "500.00"},
        ],
        "document_number": "INV-0001",
        "document_date": "2026-10-19",
        "due_date": "2026-11-02",
    }
    payload.update(overrides)
    return payload


class TextByClass(HTMLParser):
    """Collect the decoded text of every element carrying a CSS class."""

    def __init__(self, css_class):
        super().__init__(convert_charrefs=True)
        self.css_class = css_class
        self.texts = []
        self._buf = None
        self._depth = 0

    def handle_starttag(self, tag, attrs):
        if self._buf is not None:
            self._depth += 1
            return
        classes = (dict(attrs).get("class") or "").split()
        if self.css_class in classes:
            self._buf = []
            self._depth = 1

    def handle_endtag(self, tag):
        if self._buf is None:
            return
        self._depth -= 1
        if self._depth == 0:
            self.texts.append("".join(self._buf))
            self._buf = None

    def handle_data(self, data):
        if self._buf is not None:
            self._buf.append(data)


def texts_by_class(html, css_class):
    parser = TextByClass(css_class)
    parser.feed(html)
    parser.close()
    return parser.texts

"""
Unit tests for request models, aliases and text normalization.
"""

import unittest
from datetime import date
from decimal import Decimal

from pydantic import ValidationError

from invoice_docgen.config import DEFAULT_CURRENCY
from invoice_docgen.models import DocumentRequest, DocumentType, LineItem, TemplateKey
from invoice_docgen.text_utils import clean_text, coerce_amount, normalize_date


class TestLineItem(unittest.TestCase):

    def test_line_total_is_derived(self):
        item = LineItem(description="Consulting", quantity=10, unit_price=Decimal("100.00"))
        self.assertEqual(item.line_total, Decimal("1000.00"))

    def test_line_total_rounds_half_up(self):
        item = LineItem(description="Bolt", quantity=3, unit_price=Decimal("0.335"))
        self.assertEqual(item.line_total, Decimal("1.01"))

    def test_client_aliases_and_string_numbers(self):
        item = LineItem.model_validate({"desc": "Paint", "qty": "2", "price": "$1,250.50"})
        self.assertEqual(item.description, "Paint")
        self.assertEqual(item.quantity, Decimal("2"))
        self.assertEqual(item.line_total, Decimal("2501.00"))

    def test_negative_quantity_rejected(self):
        with self.assertRaises(ValidationError):
            LineItem(description="x", quantity=-1, unit_price=1)

    def test_missing_numbers_default_to_zero(self):
        item = LineItem.model_validate({"description": "Free sample", "qty": None})
        self.assertEqual(item.line_total, Decimal("0.00"))


class TestDocumentRequest(unittest.TestCase):

    def test_unknown_template_and_type_fall_back(self):
        req = DocumentRequest.model_validate({"templateKey": "Fancy", "documentType": "memo"})
        self.assertIs(req.template, TemplateKey.CLASSIC)
        self.assertIs(req.document_type, DocumentType.INVOICE)

    def test_template_is_case_insensitive(self):
        req = DocumentRequest.model_validate({"template": " Bold "})
        self.assertIs(req.template, TemplateKey.BOLD)

    def test_mobile_client_shape(self):
        req = DocumentRequest.model_validate(
            {
                "company": {"companyName": "Acme", "phoneNumber": "123", "bankAccountNumber": "99"},
                "customerName": "Globex",
                "customerAddress": "1 Main St",
                "invoiceNumber": "INV-9",
                "invoiceDate": "2026-10-19",
                "currencySymbol": "₦",
                "items": [{"description": "A", "qty": 1, "price": 5}],
            }
        )
        self.assertEqual(req.company.name, "Acme")
        self.assertEqual(req.company.phone, "123")
        self.assertEqual(req.company.account_number, "99")
        self.assertEqual(req.recipient.name, "Globex")
        self.assertEqual(req.recipient.address, "1 Main St")
        self.assertEqual(req.document_number, "INV-9")
        self.assertEqual(req.currency_symbol, "₦")

    def test_nulls_become_blank_strings(self):
        req = DocumentRequest.model_validate(
            {"company": {"name": None, "logo": None}, "currency_symbol": None}
        )
        self.assertEqual(req.company.name, "")
        self.assertEqual(req.company.logo, "")
        self.assertEqual(req.currency_symbol, DEFAULT_CURRENCY)

    def test_amount_paid_parsing(self):
        req = DocumentRequest.model_validate({"documentType": "receipt", "amountPaid": "1,200"})
        self.assertIs(req.document_type, DocumentType.RECEIPT)
        self.assertEqual(req.amount_paid, Decimal("1200"))
        self.assertIsNone(DocumentRequest.model_validate({"amountPaid": ""}).amount_paid)

    def test_items_keep_order(self):
        req = DocumentRequest.model_validate(
            {"items": [{"description": d} for d in ("c", "a", "b")]}
        )
        self.assertEqual([i.description for i in req.items], ["c", "a", "b"])


class TestTextUtils(unittest.TestCase):

    def test_coerce_amount(self):
        self.assertEqual(coerce_amount("$1,200.50"), Decimal("1200.50"))
        self.assertEqual(coerce_amount(3.5), Decimal("3.5"))
        self.assertEqual(coerce_amount(7), Decimal("7"))
        self.assertIsNone(coerce_amount("abc"))
        self.assertIsNone(coerce_amount(None))

    def test_normalize_date(self):
        self.assertEqual(normalize_date("2026-10-19"), "2026-10-19")
        self.assertEqual(normalize_date("19/10/2026"), "2026-10-19")
        self.assertEqual(normalize_date(date(2026, 1, 5)), "2026-01-05")
        self.assertEqual(normalize_date(""), "")
        self.assertEqual(normalize_date(None), "")

    def test_normalize_date_never_reads_the_clock(self):
        for text in ("tomorrow", "in 2 weeks", "yesterday"):
            with self.subTest(text=text):
                self.assertEqual(normalize_date(text), text)
        self.assertEqual(normalize_date("2026-10-19 (tentative)"), "2026-10-19 (tentative)")
        self.assertEqual(normalize_date("  on   receipt "), "on receipt")

    def test_clean_text_keeps_line_breaks(self):
        self.assertEqual(clean_text("  Pay   within 14 days \n\n No refunds "), "Pay within 14 days\n\nNo refunds")


if __name__ == "__main__":
    unittest.main()

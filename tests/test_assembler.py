"""
Tests for the document assembler and the five layouts.

All documents are built with an explicit document number, date and clock so
output is byte-stable.
"""

import unittest
from decimal import Decimal

from invoice_docgen.assembler import (
    build_context,
    build_document,
    build_document_from_payload,
    build_invoice_document,
    build_receipt_document,
    compute_totals,
    default_document_number,
    parse_request,
)
from invoice_docgen.exceptions import RequestParsingError
from invoice_docgen.layouts import LAYOUTS, build_classic, select_layout
from invoice_docgen.models import DocumentType, TemplateKey
from tests.helpers import FIXED_NOW, sample_payload, texts_by_class

TEMPLATES = [t.value for t in TemplateKey]


def render(document_type="invoice", **overrides):
    return build_document(
        parse_request(sample_payload(**overrides), document_type),
        now=FIXED_NOW,
        api_base_url="https://api.example.com",
    )


class TestEndToEnd(unittest.TestCase):
    """Classic dollar invoice with two items."""

    def setUp(self):
        self.html = render()

    def test_document_shell(self):
        self.assertTrue(self.html.startswith("<!DOCTYPE html>"))
        self.assertIn("@page { size: A4; margin: 0; }", self.html)
        self.assertIn("<style>", self.html)
        self.assertIn("<script>", self.html)
        self.assertNotIn("<link", self.html)
        self.assertIn("<title>Invoice INV-0001</title>", self.html)

    def test_rows_and_totals(self):
        self.assertEqual(texts_by_class(self.html, "col-total")[1:], ["$1000.00", "$500.00"])
        self.assertEqual(texts_by_class(self.html, "grand-total"), ["Total$1500.00"])
        self.assertEqual(texts_by_class(self.html, "subtotal-row"), ["Subtotal$1500.00"])

    def test_amount_in_words(self):
        self.assertEqual(
            texts_by_class(self.html, "amount-words"),
            ["Amount in Words: One Thousand Five Hundred Dollars Only"],
        )

    def test_invoice_blocks(self):
        self.assertIn("INVOICE", self.html)
        self.assertIn("Item Description", self.html)
        self.assertIn("Bank Details", self.html)
        self.assertIn("0123456789", self.html)
        self.assertIn("2026-11-02", self.html)
        self.assertNotIn("payment-badge", self.html.split("</style>")[1])
        self.assertIn("YMOBooks", self.html)

    def test_theme_drives_css_variables(self):
        self.assertIn("--primary: #1f2937;", self.html)


class TestProperties(unittest.TestCase):

    def test_idempotent(self):
        for template in TEMPLATES:
            for kind in ("invoice", "receipt"):
                with self.subTest(template=template, kind=kind):
                    self.assertEqual(render(kind, template=template), render(kind, template=template))

    def test_unknown_template_renders_as_classic(self):
        self.assertEqual(render(template="holographic"), render(template="classic"))
        self.assertEqual(render(template=None), render(template="classic"))

    def test_escaping_round_trip(self):
        nasty = "Tom & \"Jerry\" <b>'Ltd'</b>"
        html = render(
            recipient={"name": nasty, "address": nasty, "contact": nasty},
            items=[{"description": nasty, "quantity": 1, "unit_price": 1}],
        )
        body = html.split("</style>")[1]
        self.assertNotIn("<b>", body)
        self.assertNotIn("\"Jerry\"", body)
        self.assertEqual(texts_by_class(html, "recipient-name"), [nasty])
        self.assertEqual(texts_by_class(html, "recipient-address"), [nasty])
        self.assertEqual(texts_by_class(html, "recipient-contact"), [nasty])
        self.assertEqual(texts_by_class(html, "col-desc")[1], nasty)

    def test_escaping_in_every_template(self):
        nasty = "<img src=x onerror=alert(1)>"
        for template in TEMPLATES:
            with self.subTest(template=template):
                html = render(
                    template=template,
                    company={"name": nasty, "terms_and_conditions": nasty, "address": nasty},
                )
                self.assertNotIn(nasty, html)
                self.assertIn(nasty, texts_by_class(html, "company-name"))

    def test_totals_match_rounded_line_totals(self):
        items = [
            {"description": "a", "quantity": 3, "unit_price": "0.335"},
            {"description": "b", "quantity": "1.5", "unit_price": "2.10"},
            {"description": "c", "quantity": 7, "unit_price": "19.99"},
        ]
        req = parse_request(sample_payload(items=items))
        totals = compute_totals(req)
        expected = sum((i.line_total for i in req.items), Decimal(0))
        self.assertEqual(totals.subtotal, expected)
        self.assertEqual(totals.subtotal, Decimal("144.09"))
        html = build_document(req, now=FIXED_NOW)
        self.assertEqual(texts_by_class(html, "subtotal-row"), ["Subtotal$144.09"])

    def test_very_large_totals_still_render(self):
        html = render(items=[{"description": "Bond", "quantity": 1000, "unit_price": "1000000000000"}])
        self.assertEqual(
            texts_by_class(html, "grand-total"), ["Total$1000000000000000.00"]
        )
        self.assertIn("One Thousand Trillion Dollars Only", html)

    def test_items_are_not_mutated(self):
        req = parse_request(sample_payload())
        before = req.model_dump()
        build_document(req, now=FIXED_NOW)
        self.assertEqual(req.model_dump(), before)


class TestReceipts(unittest.TestCase):

    def test_amount_paid_override_shows_both_values(self):
        html = render("receipt", amount_paid="1200", invoice_reference="INV-0001")
        self.assertEqual(texts_by_class(html, "subtotal-row"), ["Subtotal$1500.00"])
        self.assertEqual(texts_by_class(html, "grand-total"), ["Total Paid$1200.00"])
        self.assertIn("One Thousand Two Hundred Dollars Only", html)

    def test_total_paid_defaults_to_subtotal(self):
        html = render("receipt")
        self.assertEqual(texts_by_class(html, "grand-total"), ["Total Paid$1500.00"])

    def test_receipt_blocks(self):
        html = render("receipt", invoice_reference="INV-0001")
        body = html.split("</style>")[1]
        self.assertIn("RECEIPT", body)
        self.assertIn("Payment Confirmed", body)
        self.assertIn("Services/Items Paid For", body)
        self.assertIn("Received From", body)
        self.assertIn("Invoice Ref", body)
        self.assertNotIn("Bank Details", body)
        self.assertNotIn("Due Date", body)

    def test_default_receipt_number(self):
        html = render("receipt", document_number=None)
        self.assertIn("RCT-600000", html)
        self.assertEqual(default_document_number(DocumentType.INVOICE, FIXED_NOW), "INV-600000")

    def test_entry_points_force_document_type(self):
        req = parse_request(sample_payload())
        receipt = build_receipt_document(req, now=FIXED_NOW)
        invoice = build_invoice_document(req.model_copy(update={"document_type": DocumentType.RECEIPT}), now=FIXED_NOW)
        self.assertIn("Payment Confirmed", receipt)
        self.assertNotIn("Payment Confirmed", invoice.split("</style>")[1])


class TestLayouts(unittest.TestCase):

    def test_every_template_is_mapped(self):
        self.assertEqual(set(LAYOUTS), set(TemplateKey))
        self.assertIs(select_layout("unknown"), build_classic)

    def test_templates_differ_but_share_content(self):
        outputs = {t: render(template=t) for t in TEMPLATES}
        self.assertEqual(len(set(outputs.values())), len(TEMPLATES))
        for template, html in outputs.items():
            with self.subTest(template=template):
                self.assertIn(f'class="page tpl-{template}"', html)
                self.assertIn("Globex Corp", html)
                self.assertEqual(texts_by_class(html, "grand-total"), ["Total$1500.00"])
                self.assertIn("One Thousand Five Hundred Dollars Only", html)

    def test_footer_wording(self):
        for template in TEMPLATES:
            with self.subTest(template=template):
                footer = texts_by_class(render(template=template), "footer-line")
                if template == "classic":
                    self.assertEqual(footer, ["Generated with YMOBooks. Thank you for your business."])
                else:
                    self.assertEqual(
                        footer,
                        ["This document was issued by Acme Trading Ltd. Any alteration renders it invalid."],
                    )

    def test_optional_blocks_are_omitted(self):
        company = {"name": "Acme", "terms_and_conditions": "  ", "bank_name": "", "logo": None}
        for template in TEMPLATES:
            with self.subTest(template=template):
                body = render(template=template, company=company, due_date=None).split("</style>")[1]
                self.assertNotIn("bank-details", body)
                self.assertNotIn('class="terms"', body)
                self.assertNotIn("Due Date", body)
                self.assertIn('<div class="logo-placeholder">A</div>', body)
                self.assertIn("signature-space", body)

    def test_assets_are_resolved(self):
        company = {"name": "Acme", "logo": "/uploads/logo.png", "signature": "data:image/png;base64,AAA="}
        html = render(template="modern", company=company)
        self.assertIn('src="https://api.example.com/uploads/logo.png"', html)
        self.assertIn('src="data:image/png;base64,AAA="', html)
        self.assertNotIn("signature-space", html.split("</style>")[1])

    def test_brand_colour_override(self):
        html = render(template="bold", company={"name": "Acme", "brand_color": "#112233"})
        self.assertIn("--primary: #112233;", html)

    def test_named_brand_colour(self):
        html = render(template="modern", company={"name": "Acme", "brand_color": "teal"})
        self.assertIn("--primary: teal;", html)
        self.assertIn("--accent: teal;", html)


class TestNormalization(unittest.TestCase):

    def test_context_defaults(self):
        req = parse_request({"items": []})
        ctx = build_context(req, now=FIXED_NOW)
        self.assertEqual(ctx.company_name, "Your Company")
        self.assertEqual(ctx.recipient_name, "-")
        self.assertEqual(ctx.document_date, "2026-01-01")
        self.assertEqual(ctx.document_number, "INV-600000")
        self.assertIsNone(ctx.logo_src)
        self.assertEqual(ctx.bank_rows, ())

    def test_empty_document_is_well_formed(self):
        html = build_document_from_payload({}, now=FIXED_NOW)
        self.assertIn("No items", html)
        self.assertIn("Zero Dollars Only", html)
        self.assertTrue(html.rstrip().endswith("</html>"))

    def test_loose_dates_are_normalized(self):
        html = render(document_date="19/10/2026")
        self.assertIn("2026-10-19", html)

    def test_relative_dates_are_kept_verbatim(self):
        html = render(due_date="tomorrow")
        self.assertIn("tomorrow", html)
        self.assertEqual(html, render(due_date="tomorrow"))

    def test_malformed_payload_raises(self):
        with self.assertRaises(RequestParsingError) as cm:
            parse_request(sample_payload(items=[{"description": "x", "quantity": -3}]))
        self.assertTrue(cm.exception.errors)


if __name__ == "__main__":
    unittest.main()

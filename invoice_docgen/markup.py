# invoice_docgen/markup.py
"""
Markup building blocks shared by every layout: escaping, money formatting,
the line-item table, the semantic blocks and the page shell.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional

from markupsafe import escape as _escape

from .config import (
    CLASSIC_FOOTER,
    ISSUER_FOOTER,
    PAYMENT_BADGE_TEXT,
    SIGNATURE_LABEL,
    SUBTOTAL_LABEL,
    WORDS_LABEL,
)
from .models import DocumentContext, LineItem, Theme
from .theme import readable_text_color


def escape(value) -> str:
    """Escape & < > " ' for safe insertion into text or attribute values."""
    if value is None:
        return ""
    return str(_escape(str(value)))


def format_money(amount: Decimal, currency_symbol: str) -> str:
    return f"{escape(currency_symbol)}{Decimal(amount):.2f}"


def format_quantity(quantity: Decimal) -> str:
    q = Decimal(quantity)
    if q == q.to_integral_value():
        return str(int(q))
    return format(q.normalize(), "f")


# ---------------------------------------------------------
# LINE-ITEM TABLE
# ---------------------------------------------------------
def render_row(index: int, item: LineItem, currency_symbol: str) -> str:
    stripe = "row-even" if index % 2 == 0 else "row-odd"
    description = escape(item.description.strip()) or "-"
    return (
        f'<tr class="{stripe}">'
        f'<td class="col-desc">{description}</td>'
        f'<td class="col-qty">{format_quantity(item.quantity)}</td>'
        f'<td class="col-price">{format_money(item.unit_price, currency_symbol)}</td>'
        f'<td class="col-total">{format_money(item.line_total, currency_symbol)}</td>'
        "</tr>"
    )


def render_table(
    items: Iterable[LineItem],
    style_class: str,
    currency_symbol: str,
    item_column: str = "Item Description",
) -> str:
    rows = [render_row(i, item, currency_symbol) for i, item in enumerate(items)]
    if not rows:
        rows = ['<tr class="row-empty"><td class="col-desc" colspan="4">No items</td></tr>']
    return (
        f'<table class="items-table {escape(style_class)}">'
        "<thead><tr>"
        f'<th class="col-desc">{escape(item_column)}</th>'
        '<th class="col-qty">Qty</th>'
        '<th class="col-price">Unit Price</th>'
        '<th class="col-total">Amount</th>'
        "</tr></thead>"
        f"<tbody>{''.join(rows)}</tbody>"
        "</table>"
    )


# ---------------------------------------------------------
# SEMANTIC BLOCKS
# ---------------------------------------------------------
def logo_block(ctx: DocumentContext) -> str:
    if ctx.logo_src:
        return f'<img class="logo-img" src="{ctx.logo_src}" alt="Logo" />'
    return f'<div class="logo-placeholder">{ctx.company_initials}</div>'


def line(value: str, css_class: str) -> str:
    """A single text line, dropped entirely when the value is blank."""
    return f'<div class="{css_class}">{value}</div>' if value else ""


def meta_row(label: str, value: str, css_class: str = "meta-row") -> str:
    if not value:
        return ""
    return (
        f'<div class="{css_class}"><span class="label">{escape(label)}:</span> '
        f'<span class="value">{value}</span></div>'
    )


def contact_line(ctx: DocumentContext, separator: str) -> str:
    parts = [p for p in (ctx.company_email, ctx.company_phone) if p]
    return line(f" {separator} ".join(parts), "company-meta")


def badge_block(ctx: DocumentContext) -> str:
    if not ctx.show_badge:
        return ""
    return f'<div class="payment-badge">{PAYMENT_BADGE_TEXT}</div>'


def recipient_block(ctx: DocumentContext, css_class: str = "recipient") -> str:
    return (
        f'<div class="{css_class}">'
        f'<div class="label">{escape(ctx.labels.recipient_label)}</div>'
        f'<div class="recipient-name">{ctx.recipient_name}</div>'
        f'{line(ctx.recipient_address, "recipient-address")}'
        f'{line(ctx.recipient_contact, "recipient-contact")}'
        "</div>"
    )


def totals_block(ctx: DocumentContext) -> str:
    totals = ctx.totals
    return (
        '<div class="totals">'
        f'<div class="total-row subtotal-row"><span>{SUBTOTAL_LABEL}</span>'
        f"<span>{format_money(totals.subtotal, ctx.currency_symbol)}</span></div>"
        f'<div class="total-row grand-total"><span>{escape(ctx.labels.total_label)}</span>'
        f"<span>{format_money(totals.display_total, ctx.currency_symbol)}</span></div>"
        "</div>"
    )


def words_block(ctx: DocumentContext, show_label: bool = True) -> str:
    label = f"<strong>{WORDS_LABEL}:</strong> " if show_label else ""
    return f'<div class="amount-words">{label}{escape(ctx.totals.amount_in_words)}</div>'


def bank_block(ctx: DocumentContext) -> str:
    if not ctx.bank_rows:
        return ""
    rows = "".join(
        f'<div class="info-row"><span>{label}:</span> {value}</div>'
        for label, value in ctx.bank_rows
    )
    return f'<div class="bank-details"><div class="section-title">Bank Details</div>{rows}</div>'


def terms_block(ctx: DocumentContext, heading: Optional[str] = "Terms & Conditions") -> str:
    if not ctx.terms:
        return ""
    title = f"<strong>{escape(heading)}:</strong> " if heading else ""
    return f'<div class="terms">{title}{ctx.terms}</div>'


def signature_block(ctx: DocumentContext) -> str:
    if ctx.signature_src:
        mark = f'<img src="{ctx.signature_src}" alt="Signature" />'
    else:
        mark = '<div class="signature-space"></div>'
    return (
        '<div class="signature-block">'
        f'{mark}<div class="line"></div><div class="label">{SIGNATURE_LABEL}</div>'
        "</div>"
    )


def footer_line(ctx: DocumentContext, platform: bool = False) -> str:
    if platform:
        text = escape(CLASSIC_FOOTER)
    else:
        text = escape(ISSUER_FOOTER).replace("{company}", ctx.company_name)
    return f'<div class="footer-line">{text}</div>'


# ---------------------------------------------------------
# PAGE SHELL
# ---------------------------------------------------------
SHARED_CSS = """
* { box-sizing: border-box; }
body { margin: 0; padding: 0; font-family: 'Inter', 'Helvetica Neue', Arial, sans-serif;
  background: #f0f0f0; color: #333; -webkit-print-color-adjust: exact; print-color-adjust: exact; }
@page { size: A4; margin: 0; }
.page { width: 210mm; min-height: 297mm; margin: 0 auto; background: #fff; padding: 15mm;
  position: relative; box-shadow: 0 0 10px rgba(0,0,0,0.1); }
@media print {
  body { background: #fff; }
  .page { width: 100%; box-shadow: none; margin: 0; transform: none !important; }
}
.align-right { text-align: right; }
.row { display: flex; justify-content: space-between; }
img.logo-img { max-width: 120px; max-height: 80px; object-fit: contain; margin-bottom: 10px; }
.logo-placeholder { width: 64px; height: 64px; border-radius: 8px; background: var(--accent);
  color: var(--on-accent); display: inline-flex; align-items: center; justify-content: center;
  font-weight: 700; font-size: 1.4em; margin-bottom: 10px; }
.label { font-weight: 600; color: #666; }
.meta-row { margin-bottom: 4px; }
.recipient .recipient-name { font-size: 1.15em; font-weight: 700; margin: 4px 0; }
.payment-badge { display: inline-block; padding: 4px 12px; border-radius: 999px; background: #DCFCE7;
  color: #166534; font-weight: 700; font-size: 0.85em; letter-spacing: 1px; text-transform: uppercase;
  margin-top: 6px; }
table.items-table { width: 100%; border-collapse: collapse; margin: 20px 0; }
.items-table th, .items-table td { padding: 10px; text-align: left; }
.items-table .col-qty { text-align: center; width: 60px; }
.items-table .col-price, .items-table .col-total { text-align: right; width: 120px; }
.items-table tr.row-odd { background: #f9fafb; }
.summary { display: flex; justify-content: space-between; margin-top: 20px; page-break-inside: avoid; }
.summary .left-area { flex: 1; padding-right: 40px; }
.totals { width: 300px; }
.total-row { display: flex; justify-content: space-between; padding: 6px 0; }
.grand-total { font-weight: 700; font-size: 1.2em; border-top: 2px solid #eee; margin-top: 5px;
  padding-top: 10px; color: var(--primary); }
.amount-words { font-style: italic; color: #555; margin-bottom: 10px; font-size: 0.9em; }
.bank-details { margin-top: 20px; font-size: 0.9em; background: #f9fafb; padding: 12px; border-radius: 4px; }
.bank-details .section-title { font-weight: 700; margin-bottom: 4px; }
.bank-details .info-row span { font-weight: 600; color: #666; width: 120px; display: inline-block; }
.footer-area { margin-top: 40px; page-break-inside: avoid; }
.signature-block { margin-bottom: 20px; }
.signature-block img { max-height: 80px; }
.signature-block .signature-space { height: 60px; }
.signature-block .line { width: 200px; border-bottom: 1px solid #333; margin-top: 5px; }
.signature-block .label { font-size: 0.8em; margin-top: 4px; }
.terms { font-size: 0.85em; color: #666; margin-top: 15px; white-space: pre-wrap; }
.footer-line { text-align: center; margin-top: 30px; font-size: 0.8em; color: #777; }

/* classic */
.tpl-classic .header { text-align: center; }
.tpl-classic .company-name { font-family: 'Playfair Display', Georgia, serif; font-size: 2.2em; color: #222; margin: 10px 0; }
.tpl-classic .divider-double { border-top: 1px solid #333; border-bottom: 1px solid #333; height: 3px; margin: 20px 0; }
.tpl-classic .doc-title { font-size: 1.4em; font-weight: 600; letter-spacing: 3px; border: 1px solid var(--primary);
  display: inline-block; padding: 8px 30px; margin: 20px 0 10px; color: var(--primary); }
.tpl-classic .items-table th { border-bottom: 2px solid #333; text-transform: uppercase; font-family: Georgia, serif; }
.tpl-classic .items-table td { border-bottom: 1px solid #eee; }
.tpl-classic .footer-line { font-style: italic; font-family: Georgia, serif; }

/* modern */
.tpl-modern .header-band { background: var(--primary); color: var(--on-primary); margin: -15mm -15mm 20px -15mm;
  padding: 15mm 15mm 20px 15mm; display: flex; justify-content: space-between; align-items: center; }
.tpl-modern .brand-area { display: flex; align-items: center; gap: 15px; }
.tpl-modern .company-name { font-size: 1.8em; font-weight: 700; }
.tpl-modern .doc-title { background: var(--accent); color: var(--on-accent); padding: 4px 12px; border-radius: 4px;
  font-weight: 600; display: inline-block; margin-bottom: 5px; }
.tpl-modern .meta-grid { display: flex; justify-content: space-between; }
.tpl-modern .items-table th { background: #f3f4f6; text-transform: uppercase; font-size: 0.85em; }
.tpl-modern .items-table tr { border-bottom: 1px solid #eee; }

/* minimal */
.tpl-minimal .header { display: flex; justify-content: space-between; align-items: flex-start; }
.tpl-minimal .company-name { font-weight: 700; font-size: 1.4em; }
.tpl-minimal .doc-title { font-weight: 300; font-size: 2em; letter-spacing: 2px; color: var(--primary); }
.tpl-minimal .separator-line { height: 1px; background: var(--accent); margin: 20px 0; }
.tpl-minimal .meta-grid { display: flex; justify-content: space-between; }
.tpl-minimal .items-table th { border-bottom: 1px solid var(--primary); text-transform: uppercase; letter-spacing: 1px; font-size: 0.8em; }
.tpl-minimal .items-table tr.row-odd { background: transparent; }
.tpl-minimal .grand-total { color: #111; }

/* bold */
.tpl-bold .top-bar { height: 10px; background: var(--primary); margin: -15mm -15mm 20px -15mm; }
.tpl-bold .header { display: flex; justify-content: space-between; align-items: flex-start; margin-bottom: 30px; }
.tpl-bold .company-name { font-size: 2.5em; font-weight: 900; letter-spacing: -1px; line-height: 1; color: var(--primary); }
.tpl-bold .doc-title { font-size: 4em; font-weight: 900; color: var(--accent); opacity: 0.25; line-height: 0.8; }
.tpl-bold .client-grid { display: flex; justify-content: space-between; }
.tpl-bold .recipient { border-left: 4px solid var(--primary); padding-left: 15px; }
.tpl-bold .items-table thead { background: var(--primary); color: var(--on-primary); }
.tpl-bold .items-table tr { border-bottom: 2px solid #eee; }
.tpl-bold .grand-total { background: var(--primary); color: var(--on-primary); padding: 10px; }
.tpl-bold .amount-words { background: #f3f4f6; padding: 10px; border-radius: 4px; }
.tpl-bold .terms { border-top: 2px solid var(--primary); padding-top: 10px; }

/* compact */
.tpl-compact { font-size: 0.9em; }
.tpl-compact .header { border-bottom: 3px solid var(--primary); margin-bottom: 15px; padding-bottom: 15px; }
.tpl-compact .doc-title { font-weight: 900; font-size: 1.8em; color: var(--primary); }
.tpl-compact .company-name { font-weight: 700; font-size: 1.4em; }
.tpl-compact .meta-bar { background: #f9fafb; padding: 10px; display: flex; justify-content: space-between;
  border-radius: 4px; border: 1px solid var(--accent); }
.tpl-compact .items-table thead { background: #f3f4f6; }
.tpl-compact .items-table th { font-size: 0.85em; text-transform: uppercase; }
.tpl-compact .items-table td { padding: 8px 10px; }
.tpl-compact .grand-total { border-top: 2px solid var(--primary); }
"""

SCALE_SCRIPT = """
(function () {
  var page = document.querySelector('.page');
  if (!page || !page.offsetWidth) { return; }
  var scale = Math.min(1, window.innerWidth / page.offsetWidth);
  page.style.transformOrigin = 'top left';
  page.style.transform = 'scale(' + scale + ')';
})();
"""


def theme_css(theme: Theme) -> str:
    return (
        ":root { "
        f"--primary: {theme.primary_color}; "
        f"--accent: {theme.accent_color}; "
        f"--on-primary: {readable_text_color(theme.primary_color)}; "
        f"--on-accent: {readable_text_color(theme.accent_color)}; "
        "}"
    )


def page_shell(title: str, body: str, theme: Theme, template: str) -> str:
    """Wrap a layout fragment into a standalone, print-ready HTML document."""
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8" />\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1" />\n'
        f"<title>{title}</title>\n"
        f"<style>\n{theme_css(theme)}\n{SHARED_CSS}</style>\n"
        "</head>\n"
        "<body>\n"
        f'<div class="page tpl-{escape(template)}">\n{body}\n</div>\n'
        f"<script>{SCALE_SCRIPT}</script>\n"
        "</body>\n"
        "</html>\n"
    )

# invoice_docgen/layouts.py
"""
The five visual layouts. Each builder arranges the same semantic blocks from
``markup``; wording comes only from ``ctx.labels``.
"""
from __future__ import annotations

from typing import Callable, Dict

from .config import DUE_DATE_LABEL, REFERENCE_LABEL
from .markup import (
    badge_block,
    bank_block,
    contact_line,
    escape,
    footer_line,
    line,
    logo_block,
    meta_row,
    recipient_block,
    render_table,
    signature_block,
    terms_block,
    totals_block,
    words_block,
)
from .models import DocumentContext, TemplateKey

LayoutBuilder = Callable[[DocumentContext], str]


def _doc_meta(ctx: DocumentContext, css_class: str = "meta-row") -> str:
    labels = ctx.labels
    return (
        meta_row(labels.number_label, ctx.document_number, css_class)
        + meta_row(labels.date_label, ctx.document_date, css_class)
        + meta_row(DUE_DATE_LABEL, ctx.due_date, css_class)
        + meta_row(REFERENCE_LABEL, ctx.reference, css_class)
    )


def _table(ctx: DocumentContext, style_class: str) -> str:
    return render_table(ctx.items, style_class, ctx.currency_symbol, ctx.labels.item_column)


def build_classic(ctx: DocumentContext) -> str:
    return f"""
<div class="header">
  {logo_block(ctx)}
  <div class="company-name">{ctx.company_name}</div>
  {line(ctx.company_address, "company-meta")}
  {contact_line(ctx, "|")}
  <div class="doc-title">{escape(ctx.labels.title)}</div>
  {_doc_meta(ctx)}
  {badge_block(ctx)}
</div>
<div class="divider-double"></div>
{recipient_block(ctx)}
{_table(ctx, "classic-table")}
<div class="summary">
  <div class="left-area">
    {words_block(ctx)}
    {bank_block(ctx)}
  </div>
  {totals_block(ctx)}
</div>
<div class="footer-area">
  {signature_block(ctx)}
  {terms_block(ctx)}
  {footer_line(ctx, platform=True)}
</div>
"""


def build_modern(ctx: DocumentContext) -> str:
    return f"""
<div class="header-band">
  <div class="brand-area">
    {logo_block(ctx)}
    <div>
      <div class="company-name">{ctx.company_name}</div>
      {line(ctx.company_email, "company-meta")}
      {line(ctx.company_phone, "company-meta")}
    </div>
  </div>
  <div class="align-right">
    <div class="doc-title">{escape(ctx.labels.title)}</div>
    <div class="doc-number">#{ctx.document_number}</div>
    {badge_block(ctx)}
  </div>
</div>
<div class="meta-grid">
  {recipient_block(ctx)}
  <div class="align-right">{_doc_meta(ctx)}</div>
</div>
{_table(ctx, "modern-table")}
<div class="summary">
  <div class="left-area">
    {words_block(ctx)}
    {bank_block(ctx)}
  </div>
  {totals_block(ctx)}
</div>
<div class="footer-area">
  {signature_block(ctx)}
  {terms_block(ctx, "Terms")}
  {footer_line(ctx)}
</div>
"""


def build_minimal(ctx: DocumentContext) -> str:
    return f"""
<div class="header">
  <div>
    {logo_block(ctx)}
    <div class="company-name">{ctx.company_name}</div>
    {line(ctx.company_address, "company-meta")}
    {contact_line(ctx, "&bull;")}
  </div>
  <div class="align-right">
    <div class="doc-title">{escape(ctx.labels.title)}</div>
    <div class="doc-number">#{ctx.document_number}</div>
    {badge_block(ctx)}
  </div>
</div>
<div class="separator-line"></div>
<div class="meta-grid">
  {recipient_block(ctx)}
  <div class="align-right">{_doc_meta(ctx)}</div>
</div>
{_table(ctx, "minimal-table")}
<div class="summary">
  <div class="left-area">
    {words_block(ctx, show_label=False)}
    {bank_block(ctx)}
  </div>
  {totals_block(ctx)}
</div>
<div class="separator-line"></div>
<div class="footer-area">
  {signature_block(ctx)}
  {terms_block(ctx, None)}
  {footer_line(ctx)}
</div>
"""


def build_bold(ctx: DocumentContext) -> str:
    return f"""
<div class="top-bar"></div>
<div class="header">
  <div>
    {logo_block(ctx)}
    <div class="company-name">{ctx.company_name}</div>
    {line(ctx.company_address, "company-meta")}
    {contact_line(ctx, "|")}
  </div>
  <div class="doc-title">{escape(ctx.labels.title)}</div>
</div>
<div class="client-grid">
  {recipient_block(ctx)}
  <div class="align-right">
    {_doc_meta(ctx, "meta-row detail-row")}
    {badge_block(ctx)}
  </div>
</div>
{_table(ctx, "bold-table")}
<div class="summary">
  <div class="left-area">
    {words_block(ctx)}
    {bank_block(ctx)}
  </div>
  {totals_block(ctx)}
</div>
<div class="footer-area">
  {signature_block(ctx)}
  {terms_block(ctx, None)}
  {footer_line(ctx)}
</div>
"""


def build_compact(ctx: DocumentContext) -> str:
    return f"""
<div class="header">
  <div class="row">
    <div>
      <div class="doc-title">{escape(ctx.labels.title)}</div>
      <div class="doc-number">#{ctx.document_number}</div>
      {badge_block(ctx)}
    </div>
    <div class="align-right">
      {logo_block(ctx)}
      <div class="company-name">{ctx.company_name}</div>
      {line(ctx.company_email, "company-meta")}
      {line(ctx.company_phone, "company-meta")}
    </div>
  </div>
</div>
<div class="meta-bar">
  {recipient_block(ctx)}
  <div class="align-right">{_doc_meta(ctx)}</div>
</div>
{_table(ctx, "compact-table")}
<div class="summary">
  <div class="left-area">
    {bank_block(ctx)}
    {terms_block(ctx, "Notes")}
  </div>
  <div>
    {totals_block(ctx)}
    {words_block(ctx, show_label=False)}
  </div>
</div>
<div class="footer-area">
  {signature_block(ctx)}
  {footer_line(ctx)}
</div>
"""


LAYOUTS: Dict[TemplateKey, LayoutBuilder] = {
    TemplateKey.CLASSIC: build_classic,
    TemplateKey.MODERN: build_modern,
    TemplateKey.MINIMAL: build_minimal,
    TemplateKey.BOLD: build_bold,
    TemplateKey.COMPACT: build_compact,
}


def select_layout(template) -> LayoutBuilder:
    """Builder for a template key; unknown keys get the classic layout."""
    return LAYOUTS[TemplateKey.parse(template)]

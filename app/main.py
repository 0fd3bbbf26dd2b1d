# app/main.py
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional

from fastapi import Body, FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from invoice_docgen.assembler import build_document, parse_request
from invoice_docgen.config import DEFAULT_CURRENCY
from invoice_docgen.exceptions import InvalidAmountError, RequestParsingError
from invoice_docgen.logging_setup import configure_logging
from invoice_docgen.models import DocumentRequest, TemplateKey
from invoice_docgen.theme import theme_for
from invoice_docgen.words import amount_to_words

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Invoice Document Generator")


def _parse(payload: Dict[str, Any], document_type: Optional[str] = None) -> DocumentRequest:
    try:
        return parse_request(payload, document_type)
    except RequestParsingError as e:
        raise HTTPException(status_code=422, detail=e.errors or str(e))


def _build(request: DocumentRequest) -> str:
    try:
        return build_document(request)
    except InvalidAmountError as e:
        raise HTTPException(status_code=422, detail=str(e))


def _render(payload: Dict[str, Any], document_type: str) -> str:
    return _build(_parse(payload, document_type))


# ---------------------------------------------------------
# HEALTH / TEMPLATE CATALOGUE
# ---------------------------------------------------------
@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/templates")
def templates():
    return [
        {"key": key.value, **theme_for(key).model_dump()}
        for key in TemplateKey
    ]


# ---------------------------------------------------------
# RENDER DOCUMENTS
# ---------------------------------------------------------
@app.post("/render/invoice", response_class=HTMLResponse)
def render_invoice(payload: Dict[str, Any] = Body(...)):
    return HTMLResponse(_render(payload, "invoice"))


@app.post("/render/receipt", response_class=HTMLResponse)
def render_receipt(payload: Dict[str, Any] = Body(...)):
    return HTMLResponse(_render(payload, "receipt"))


@app.post("/render/batch")
def render_batch(payloads: List[Dict[str, Any]] = Body(...)):
    """Render several requests; each payload carries its own document_type."""
    rendered = []
    for payload in payloads:
        request = _parse(payload)
        html = _build(request)
        rendered.append({"document_type": request.document_type.value, "html": html})
    logger.info("Rendered batch of %d documents", len(rendered))
    return rendered


# ---------------------------------------------------------
# AMOUNT IN WORDS
# ---------------------------------------------------------
class WordsRequest(BaseModel):
    amount: Decimal = Field(..., ge=0)
    currency_symbol: str = DEFAULT_CURRENCY


@app.post("/amount-in-words")
def words(req: WordsRequest):
    try:
        return {"words": amount_to_words(req.amount, req.currency_symbol)}
    except InvalidAmountError as e:
        raise HTTPException(status_code=422, detail=str(e))

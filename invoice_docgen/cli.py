# invoice_docgen/cli.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Dict, List, Optional

from .assembler import build_document, parse_request
from .config import DEFAULT_CURRENCY
from .exceptions import DocumentGenerationError, InvalidAmountError, RequestParsingError
from .logging_setup import configure_logging
from .models import TemplateKey
from .words import amount_to_words

logger = logging.getLogger(__name__)


def _load_payload(path: str) -> Dict[str, Any]:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise RequestParsingError(f"{path}: expected a JSON object")
    return data


def _render_file(src: str, dest: str, kind: Optional[str], template: Optional[str]) -> str:
    payload = _load_payload(src)
    if template:
        payload["template"] = template
    request = parse_request(payload, kind)
    html = build_document(request)
    out = Path(dest)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(html, encoding="utf-8")
    return request.document_type.value


def cmd_render(args: argparse.Namespace) -> int:
    try:
        kind = _render_file(args.input, args.output, args.kind, args.template)
    except (RequestParsingError, json.JSONDecodeError) as e:
        print(f"Invalid request: {e}", file=sys.stderr)
        for err in getattr(e, "errors", [])[:5]:
            print(f"  {'.'.join(str(p) for p in err.get('loc', []))}: {err.get('msg')}", file=sys.stderr)
        return 2
    print(f"Rendered {kind} to {args.output}")
    return 0


def cmd_batch(args: argparse.Namespace) -> int:
    sources = sorted(Path(args.input_dir).glob("*.json"))
    out_dir = Path(args.output_dir)
    failed = 0

    for src in sources:
        dest = out_dir / f"{src.stem}.html"
        try:
            _render_file(str(src), str(dest), args.kind, None)
        except (DocumentGenerationError, json.JSONDecodeError) as e:
            failed += 1
            logger.error("Failed to render %s: %s", src.name, e)

    print(f"Rendered {len(sources) - failed} of {len(sources)} documents to {out_dir}")
    return 0 if failed == 0 else 1


def cmd_words(args: argparse.Namespace) -> int:
    try:
        amount = Decimal(args.amount.replace(",", ""))
    except InvalidOperation:
        amount = None
    if amount is None or not amount.is_finite():
        print(f"Not a number: {args.amount}", file=sys.stderr)
        return 2
    try:
        print(amount_to_words(amount, args.currency))
    except InvalidAmountError as e:
        print(str(e), file=sys.stderr)
        return 2
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="invoice-docgen")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    sub = parser.add_subparsers(dest="command", required=True)

    kinds = ["invoice", "receipt"]
    templates = [t.value for t in TemplateKey]

    p_render = sub.add_parser("render", help="Render one request JSON to HTML")
    p_render.add_argument("--input", required=True, help="Request JSON file")
    p_render.add_argument("--output", required=True, help="Output HTML file")
    p_render.add_argument("--kind", choices=kinds, default=None, help="Override document type")
    p_render.add_argument("--template", choices=templates, default=None, help="Override template")
    p_render.set_defaults(func=cmd_render)

    p_batch = sub.add_parser("batch", help="Render every *.json in a directory")
    p_batch.add_argument("--input-dir", required=True, help="Directory of request JSON files")
    p_batch.add_argument("--output-dir", required=True, help="Directory for HTML output")
    p_batch.add_argument("--kind", choices=kinds, default=None, help="Override document type")
    p_batch.set_defaults(func=cmd_batch)

    p_words = sub.add_parser("words", help="Print an amount in words")
    p_words.add_argument("amount", help="Amount, e.g. 1500.75")
    p_words.add_argument("--currency", default=DEFAULT_CURRENCY, help="Currency symbol")
    p_words.set_defaults(func=cmd_words)

    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()

# invoice_docgen/assets.py
from __future__ import annotations

import logging
import re
from typing import Optional

from . import config

logger = logging.getLogger(__name__)

# data:, http:, https:, file:, content:, blob: ... anything with an explicit scheme
_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")


def resolve_asset(reference: Optional[str], api_base_url: Optional[str] = None) -> Optional[str]:
    """
    Normalize an image reference for use in an <img src>.

    Returns None when there is no asset. Only strings are touched; fetching
    or encoding image bytes is the caller's job.
    """
    if reference is None:
        return None
    ref = str(reference).strip()
    if not ref:
        return None

    if _SCHEME_RE.match(ref):
        return ref

    if ref.startswith("//"):
        return f"https:{ref}"

    if ref.startswith("/"):
        base = (api_base_url if api_base_url is not None else config.API_BASE_URL).rstrip("/")
        return f"{base}{ref}"

    logger.debug("Unclassified asset reference passed through: %.40s", ref)
    return ref


def initials(name: Optional[str]) -> str:
    """Up to two initials for the placeholder box shown when there is no logo."""
    words = [w for w in re.split(r"\s+", (name or "").strip()) if w and w[0].isalnum()]
    if not words:
        return "?"
    return "".join(w[0] for w in words[:2]).upper()

# invoice_docgen/theme.py
from __future__ import annotations

import logging
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Tuple

from .config import ACCENT_SHIFT, TEMPLATE_COLORS
from .models import TemplateKey, Theme

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_CSS_COLOR_RE = re.compile(r"^(?:[a-zA-Z]+|(?:rgb|rgba|hsl|hsla)\([\d\s.,%]+\))$")


def parse_hex(color: Optional[str]) -> Optional[Tuple[int, int, int]]:
    m = _HEX_RE.match((color or "").strip())
    if not m:
        return None
    digits = m.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))


def to_hex(rgb: Tuple[int, int, int]) -> str:
    return "#" + "".join(f"{c:02x}" for c in rgb)


def _clamp(value: int) -> int:
    return max(0, min(255, value))


def shift_color(color: str, fraction: float) -> str:
    """Darken (fraction < 0) or lighten (fraction > 0) each RGB channel."""
    rgb = parse_hex(color)
    if rgb is None:
        return color
    p = Decimal(str(fraction))
    shifted = []
    for c in rgb:
        if p < 0:
            value = Decimal(c) * (1 + p)
        else:
            value = Decimal(c) + (255 - Decimal(c)) * p
        shifted.append(_clamp(int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))))
    return to_hex(tuple(shifted))


def theme_for(template, brand_color_override: Optional[str] = None) -> Theme:
    """Theme for a template, optionally re-coloured with a brand colour.

    Hex overrides get the template's accent shift. Named and functional CSS
    colours ("teal", "rgb(0, 128, 128)") are used as given for both colours.
    """
    key = TemplateKey.parse(template)
    primary = TEMPLATE_COLORS[key.value]

    override = str(brand_color_override or "").strip()
    if override:
        if parse_hex(override) is not None:
            primary = override
        elif _CSS_COLOR_RE.match(override):
            css = override.lower()
            return Theme(primary_color=css, accent_color=css)
        else:
            logger.warning("Ignoring unparseable brand colour %r", brand_color_override)

    primary = to_hex(parse_hex(primary))
    return Theme(primary_color=primary, accent_color=shift_color(primary, ACCENT_SHIFT[key.value]))


def readable_text_color(background: str) -> str:
    """White or near-black text, whichever reads better on the background."""
    rgb = parse_hex(background) or (255, 255, 255)
    r, g, b = (c / 255 for c in rgb)
    luminance = 0.2126 * r + 0.7152 * g + 0.0722 * b
    return "#ffffff" if luminance < 0.6 else "#111827"

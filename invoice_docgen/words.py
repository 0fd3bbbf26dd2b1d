# invoice_docgen/words.py
"""Spell out money amounts for the "Amount in Words" line."""
from __future__ import annotations

import math
from decimal import Decimal
from typing import List, Union

from .config import CURRENCY_NAMES
from .exceptions import InvalidAmountError

ONES = [
    "", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine",
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen", "Sixteen",
    "Seventeen", "Eighteen", "Nineteen",
]
TENS = ["", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"]
SCALES = ["", "Thousand", "Million", "Billion", "Trillion"]

LARGEST_SCALE = 1000 ** (len(SCALES) - 1)


def currency_name(symbol: str) -> str:
    s = str(symbol or "").strip()
    return CURRENCY_NAMES.get(s) or s or "Currency"


def _group_words(chunk: int) -> List[str]:
    parts: List[str] = []
    if chunk >= 100:
        parts += [ONES[chunk // 100], "Hundred"]
        chunk %= 100
    if chunk >= 20:
        parts.append(TENS[chunk // 10])
        chunk %= 10
    if chunk > 0:
        parts.append(ONES[chunk])
    return parts


def number_to_words(n: int) -> str:
    """English words for a non-negative integer, short scale.

    Tens and units are separated by a space ("Twenty One"). Past the largest
    scale word the leading part is spelled on its own, so 10**15 reads
    "One Thousand Trillion".
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidAmountError(f"expected a non-negative integer, got {n!r}")
    if n < 0:
        raise InvalidAmountError(f"cannot spell a negative number: {n}")
    if n == 0:
        return "Zero"
    if n >= LARGEST_SCALE * 1000:
        high, low = divmod(n, LARGEST_SCALE)
        words = f"{number_to_words(high)} {SCALES[-1]}"
        return f"{words} {number_to_words(low)}" if low else words

    groups: List[List[str]] = []
    scale_index = 0
    while n > 0:
        n, chunk = divmod(n, 1000)
        if chunk:
            words = _group_words(chunk)
            if SCALES[scale_index]:
                words.append(SCALES[scale_index])
            groups.append(words)
        scale_index += 1

    return " ".join(w for group in reversed(groups) for w in group)


def amount_to_words(amount: Union[int, float, Decimal, None], currency_symbol: str) -> str:
    """'<whole units in words> <Currency> Only'. Minor units are not spelled."""
    whole = int(math.floor(abs(Decimal(str(amount or 0)))))
    return f"{number_to_words(whole)} {currency_name(currency_symbol)} Only"

"""
Function: parse_price

Convert a locale-formatted price label into a float.
"""

import re
from typing import Optional

from .models import UNPARSEABLE_PRICE

_NON_NUMERIC = re.compile(r"[^0-9.,]")
_DECIMAL_COMMA = re.compile(r",\d{2}$")


def parse_price(text: Optional[str]) -> float:
    """
    Parse a price label such as "R$ 3.456,78" into 3456.78.

    Handles:
    - Currency symbols and any other non-numeric noise (stripped)
    - Comma decimal separator when the label ends with ",DD"
    - Dots and commas as thousands separators otherwise

    A dotted value without a decimal comma ("3.456") is read as the integer
    3456. That matches Brazilian labels but misreads a true 3.456.

    Args:
        text: Raw price text

    Returns:
        Parsed value, or 0.0 when nothing numeric could be read. Never raises;
        the caller decides whether to report the degradation.
    """
    if not text:
        return UNPARSEABLE_PRICE

    clean = _NON_NUMERIC.sub("", str(text))

    if _DECIMAL_COMMA.search(clean):
        clean = clean.replace(".", "").replace(",", ".")
    else:
        clean = clean.replace(".", "").replace(",", "")

    try:
        return float(clean)
    except ValueError:
        return UNPARSEABLE_PRICE


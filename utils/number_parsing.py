from __future__ import annotations

import re
from typing import Optional


_SHORTHAND_RE = re.compile(r"^([0-9]+(?:\.[0-9]+)?)([KMB]?)$")
_FACTORS = {"": 1, "K": 1_000, "M": 1_000_000, "B": 1_000_000_000}


def parse_amount(value) -> Optional[float]:
    """Parse money-like input such as '12M', '$8.5M', '1,200,000' or 350000 into a float.

    Returns None for empty or unparsable inputs.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    s = str(value).strip().upper().replace(",", "").replace("$", "").replace(" ", "")
    if s.endswith("+"):
        s = s[:-1]
    if not s:
        return None
    m = _SHORTHAND_RE.match(s)
    if not m:
        return None
    return float(m.group(1)) * _FACTORS[m.group(2)]


def parse_int(value) -> Optional[int]:
    """Parse '120', '1.2K' or '500+' into an int; None when unparsable."""
    amount = parse_amount(value)
    if amount is None:
        return None
    return int(round(amount))


def parse_percent(value) -> Optional[float]:
    """Parse '180%', '-12.5' or 45 into a float percentage (sign kept)."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    s = str(value).strip().rstrip("%").strip()
    if not s:
        return None
    try:
        return float(s)
    except ValueError:
        return None

# src/rentadjust/domain/numerals.py
from __future__ import annotations

import math
import re
from typing import Any

# Extended Arabic-Indic (Persian) digits U+06F0..U+06F9 and
# Arabic-Indic digits U+0660..U+0669, both onto ASCII 0..9.
_DIGITS = str.maketrans(
    {
        **{chr(0x06F0 + i): str(i) for i in range(10)},
        **{chr(0x0660 + i): str(i) for i in range(10)},
    }
)

THOUSANDS_SEPARATORS = (",", "\u066c")
ARABIC_DECIMAL_SEPARATOR = "\u066b"

# Leading numeric prefix; trailing text such as "%" is ignored.
_NUMBER_PREFIX = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def to_ascii(raw: str) -> str:
    """
    Rewrite a locale-formatted numeral into plain ASCII:
      - "۱٬۲۳۴٫۵" -> "1234.5"
      - " 1,200,000 " -> "1200000"
    """
    s = raw.strip().translate(_DIGITS)
    for sep in THOUSANDS_SEPARATORS:
        s = s.replace(sep, "")
    return s.replace(ARABIC_DECIMAL_SEPARATOR, ".")


def normalize(raw: Any) -> float:
    """
    Convert a numeral string in any supported digit script to a float.

    Never raises: blank, garbage, or non-finite input gives 0.0 and the
    caller decides whether 0 is acceptable for the field.
    """
    if raw is None:
        return 0.0
    if isinstance(raw, (int, float)):
        f = float(raw)
        return f if math.isfinite(f) else 0.0

    m = _NUMBER_PREFIX.match(to_ascii(str(raw)))
    if not m:
        return 0.0

    f = float(m.group(0))
    if not math.isfinite(f):
        return 0.0
    return f


def is_present(raw: Any) -> bool:
    """A field counts as filled in when its raw string is non-empty, even "0"."""
    if raw is None:
        return False
    return len(str(raw)) > 0

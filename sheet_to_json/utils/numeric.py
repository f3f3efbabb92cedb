"""
Numeric-literal detection for cell text.

Only plain literals are recognised: optional sign, digits with an optional
decimal point, optional exponent. Thousands separators, currency symbols,
hex/octal prefixes and words like "Infinity"/"NaN" stay text.
"""

from __future__ import annotations

import re
from typing import Optional, Union

_NUMERIC_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INTEGER_LITERAL = re.compile(r"[+-]?\d+", re.ASCII)

Number = Union[int, float]


def is_numeric_literal(text: str) -> bool:
    return bool(text) and _NUMERIC_LITERAL.fullmatch(text) is not None


def parse_numeric_literal(text: str) -> Optional[Number]:
    """
    Parse ``text`` if the whole string is a numeric literal.

    Integers without fraction/exponent become ``int`` (so "0010" -> 10);
    everything else becomes ``float``. Returns None when ``text`` is not a
    literal.
    """
    if not is_numeric_literal(text):
        return None
    if _INTEGER_LITERAL.fullmatch(text):
        try:
            return int(text)
        except ValueError:
            # beyond the interpreter's int string-conversion limit
            pass
    return float(text)

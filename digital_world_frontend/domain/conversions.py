"""Conversion of raw input-field text into call arguments.

Both helpers follow the JavaScript coercions the page has always used, so a
value typed by the user reaches the backend exactly as it did before:

- ``to_number`` behaves like ``Number(text)``: it never fails and yields
  NaN for text that is not a numeric literal.
- ``to_bigint`` behaves like ``BigInt(text)``: arbitrary precision, and a
  hard ``ConversionError`` for anything that is not an integer literal.
"""

import math
import re

from digital_world_frontend.domain.exceptions import ConversionError
from digital_world_frontend.utils.js_format import decimal_to_int

# StrWhiteSpaceChar (WhiteSpace + LineTerminator)
JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_DECIMAL_NUMBER = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")
_DECIMAL_INTEGER = re.compile(r"[+-]?[0-9]+")
_PREFIXED_INTEGER = {
    "0x": (re.compile(r"[0-9a-fA-F]+"), 16),
    "0o": (re.compile(r"[0-7]+"), 8),
    "0b": (re.compile(r"[01]+"), 2),
}


def _parse_prefixed(text: str) -> int | None:
    """Parse 0x/0o/0b literals; None when text is not one"""
    prefix = text[:2].lower()
    if prefix not in _PREFIXED_INTEGER:
        return None
    pattern, base = _PREFIXED_INTEGER[prefix]
    body = text[2:]
    if not pattern.fullmatch(body):
        return None
    return int(body, base)


def to_number(text: str) -> float:
    """Convert text the way JavaScript ``Number(text)`` does"""
    stripped = text.strip(JS_WHITESPACE)
    if not stripped:
        return 0.0

    prefixed = _parse_prefixed(stripped)
    if prefixed is not None:
        try:
            return float(prefixed)
        except OverflowError:
            return math.inf

    if _DECIMAL_NUMBER.fullmatch(stripped):
        return float(stripped)

    return math.nan


def to_bigint(text: str) -> int:
    """
    Convert text the way JavaScript ``BigInt(text)`` does.

    Raises:
        ConversionError: text is not an integer literal
    """
    stripped = text.strip(JS_WHITESPACE)
    if not stripped:
        return 0

    prefixed = _parse_prefixed(stripped)
    if prefixed is not None:
        return prefixed

    if _DECIMAL_INTEGER.fullmatch(stripped):
        sign = -1 if stripped[0] == "-" else 1
        return sign * decimal_to_int(stripped.lstrip("+-"))

    raise ConversionError(f"Cannot convert {text} to a BigInt")

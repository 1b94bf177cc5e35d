"""Render values the way a JavaScript template literal interpolates them"""

import math
import re
from decimal import Decimal
from typing import Any

# Decimal digits converted per int()/str() step, under the interpreter's str-digits limit
DIGIT_CHUNK = 1000
_CHUNK_BASE = 10**DIGIT_CHUNK

_EXPONENT = re.compile(r"e([+-])0*(\d)")


def int_to_decimal(value: int) -> str:
    """str() for ints of any size"""
    if value < 0:
        return "-" + int_to_decimal(-value)

    chunks = []
    while value >= _CHUNK_BASE:
        value, low = divmod(value, _CHUNK_BASE)
        chunks.append(f"{low:0{DIGIT_CHUNK}d}")
    chunks.append(str(value))
    return "".join(reversed(chunks))


def decimal_to_int(digits: str) -> int:
    """int() for ASCII decimal digit strings of any length"""
    value = 0
    for start in range(0, len(digits), DIGIT_CHUNK):
        chunk = digits[start:start + DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def format_js_number(value: float) -> str:
    """Number.prototype.toString() for a Python float"""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"  # -0 prints as 0 too

    magnitude = abs(value)
    if 1e-6 <= magnitude < 1e21:
        # Shortest round-trip digits, zero-padded: 2**64 prints as 18446744073709552000
        return format(Decimal(repr(value)).normalize(), "f")

    # Exponent form: 1e+21, 1.5e-7
    return _EXPONENT.sub(r"e\1\2", repr(value))


def format_js_value(value: Any) -> str:
    """Render ``value`` as ``${value}`` would"""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return int_to_decimal(value)
    if isinstance(value, float):
        return format_js_number(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else format_js_value(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)

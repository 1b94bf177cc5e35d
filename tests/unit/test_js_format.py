"""Unit tests for template-literal value formatting"""

import math
import pytest
from digital_world_frontend.utils.js_format import decimal_to_int, format_js_value, int_to_decimal


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, "true"),
        (False, "false"),
        (None, "null"),
        (200, "200"),
        (3.0, "3"),
        (-0.0, "0"),
        (1.5, "1.5"),
        (0.00001, "0.00001"),
        (1.5e-7, "1.5e-7"),
        (1e21, "1e+21"),
        (-1e21, "-1e+21"),
        (float(2**64), "18446744073709552000"),
        (-float(2**64), "-18446744073709552000"),
        (1e20, "100000000000000000000"),
        (-2.5, "-2.5"),
        (math.nan, "NaN"),
        (-math.inf, "-Infinity"),
        ("Item 3 comprado por 2vxsx-fae", "Item 3 comprado por 2vxsx-fae"),
        ([1, None, "a"], "1,,a"),
        ({"Ok": 1}, "[object Object]"),
    ],
)
def test_format_js_value(value, expected):
    """Test values render as a JavaScript template literal would"""
    assert format_js_value(value) == expected


def test_int_to_decimal_beyond_str_digits_limit():
    """Test large integers render without hitting the interpreter limit"""
    value = 10**5000 + 7
    text = int_to_decimal(value)

    assert len(text) == 5001
    assert text.startswith("1000")
    assert text.endswith("0007")
    assert int_to_decimal(-value) == "-" + text


def test_decimal_to_int_beyond_str_digits_limit():
    """Test decimal text of any length parses to the same integer"""
    digits = "1" + "0" * 5000
    assert decimal_to_int(digits) == 10**5000
    assert decimal_to_int(int_to_decimal(10**5000 + 7)) == 10**5000 + 7

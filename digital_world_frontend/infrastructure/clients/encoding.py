"""Argument encoding and reply decoding for backend actor calls"""

from typing import Any

from digital_world_frontend.domain.exceptions import (
    ActorTransportError,
    ArgumentEncodingError,
    CallResultError,
)
from digital_world_frontend.utils.js_format import format_js_value, int_to_decimal

NAT64_MAX = 2**64 - 1


def _invalid(type_name: str, value: Any) -> ArgumentEncodingError:
    return ArgumentEncodingError(f"Invalid {type_name} argument: {format_js_value(value)}")


def encode_text(value: Any) -> str:
    if not isinstance(value, str):
        raise _invalid("text", value)
    return value


def encode_nat64(value: Any) -> int:
    """Fixed-width identifier; integral floats from form input are accepted"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _invalid("nat64", value)
    if isinstance(value, float) and not value.is_integer():
        raise _invalid("nat64", value)  # also NaN and Infinity

    number = int(value)
    if not 0 <= number <= NAT64_MAX:
        raise _invalid("nat64", value)
    return number


def encode_nat(value: Any) -> str:
    """Arbitrary-precision quantity, sent as decimal text so no digits are lost"""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise _invalid("nat", value)
    return int_to_decimal(value)


def describe_err(err: Any) -> str:
    """Human-readable message for the payload of an Err variant"""
    if isinstance(err, dict) and len(err) == 1:
        (tag, payload), = err.items()
        return tag if payload is None else f"{tag}: {format_js_value(payload)}"
    return format_js_value(err)


def decode_result(reply: Any) -> Any:
    """
    Unwrap a Result reply.

    Raises:
        CallResultError: reply is an Err variant
        ActorTransportError: reply is not a Result at all
    """
    if isinstance(reply, dict) and len(reply) == 1:
        if "Ok" in reply:
            return reply["Ok"]
        if "Err" in reply:
            raise CallResultError(describe_err(reply["Err"]))
    raise ActorTransportError(f"Invalid Result reply from backend: {reply!r}")

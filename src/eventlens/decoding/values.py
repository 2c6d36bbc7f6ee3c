"""Decoding utilities: indexed topics and ABI-encoded data sections."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import Any

from eth_abi import decode as abi_decode
from eth_abi.exceptions import ABITypeError, DecodingError, ParseError
from eth_utils import decode_hex, to_checksum_address

logger = logging.getLogger(__name__)

WORD_SIZE = 32

_INT_TYPE = re.compile(r"^u?int(\d{1,3})?$")


def is_integer_type(typ: str) -> bool:
    """True for scalar `uintN` / `intN` types (arrays excluded)."""
    return bool(_INT_TYPE.match(typ))


def to_bytes(data: str | bytes) -> bytes:
    """Accept 0x-hex (or bare hex) strings and raw bytes."""
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    return decode_hex(data) if data else b""


def _presentable(value: Any) -> Any:
    """Render eth_abi output: bytes as 0x-hex, arrays/tuples as lists."""
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    if isinstance(value, (list, tuple)):
        return [_presentable(v) for v in value]
    return value


def decode_indexed(typ: str, topic_value: str) -> Any:
    """Decode one indexed topic according to the declared type.

    Addresses come back checksummed, integers as unsigned big-endian ints.
    Other types (including dynamic ones, stored as a hash) pass through as
    the raw topic. A malformed topic also passes through, with a warning.
    """
    try:
        if typ == "address":
            return to_checksum_address("0x" + topic_value.lower().removeprefix("0x")[-40:])
        if is_integer_type(typ):
            return int(topic_value, 16)
    except ValueError as e:
        logger.warning("Failed to decode indexed %s from topic %r: %s", typ, topic_value, e)
    return topic_value


def decode_non_indexed(types: Sequence[str], data: str | bytes) -> list[Any] | None:
    """ABI-decode the data section against the non-indexed types.

    Returns [] when no types are declared and None when the data is shorter
    than `32 * len(types)` bytes or cannot be decoded.
    """
    if not types:
        return []

    try:
        payload = to_bytes(data)
    except ValueError as e:
        logger.warning("Log data is not valid hex: %s", e)
        return None

    need = WORD_SIZE * len(types)
    if len(payload) < need:
        logger.warning("Data is too short to decode. Needed: %d bytes, available: %d", need, len(payload))
        return None

    try:
        decoded = abi_decode(list(types), payload)
    except (DecodingError, ParseError, ABITypeError, ValueError) as e:
        logger.warning("Failed to decode log data as (%s): %s", ",".join(types), e)
        return None
    return [_presentable(v) for v in decoded]

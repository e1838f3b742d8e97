"""ABI encoding and hex input parsing.

Encoding is delegated to eth-abi; this module only maps its failures onto
:class:`EncodingError` and converts textual inputs (``0x``-prefixed hex,
decimal strings) into canonical byte values.
"""

from __future__ import annotations

import binascii
from typing import Any, Sequence

from eth_abi import encode as _eth_abi_encode
from eth_abi.exceptions import (
    ABITypeError,
    EncodingError as _EthAbiEncodingError,
    ParseError,
    PredicateMappingError,
)
from eth_utils import decode_hex, is_hex_address, to_canonical_address

from .constants import ADDRESS_LENGTH, HASH_LENGTH, UINT256_MAX
from .errors import EncodingError, ValidationError


def abi_encode(types: Sequence[str], values: Sequence[Any]) -> bytes:
    """
    Encode values with the canonical (non-packed) Solidity ABI layout.

    Static values are padded to 32 bytes in the head; dynamic arrays are
    referenced by offset and stored as ``length ++ elements`` in the tail.

    Raises:
        EncodingError: If the type list is malformed or a value does not
            fit its declared type.
    """
    if len(types) != len(values):
        raise EncodingError(f"Got {len(values)} values for {len(types)} types")
    try:
        return _eth_abi_encode(list(types), list(values))
    except (_EthAbiEncodingError, ABITypeError, ParseError, PredicateMappingError) as exc:
        raise EncodingError(f"Cannot encode {list(types)}: {exc}") from exc


def parse_address(value: str | bytes) -> bytes:
    """Parse a hex address (any case) or 20 raw bytes into canonical bytes."""
    if isinstance(value, (bytes, bytearray)):
        if len(value) != ADDRESS_LENGTH:
            raise ValidationError(f"Address must be {ADDRESS_LENGTH} bytes, got {len(value)}")
        return bytes(value)
    if not isinstance(value, str) or not is_hex_address(value.strip()):
        raise ValidationError(f"Invalid address: {value!r}")
    return to_canonical_address(value.strip())


def parse_bytes32(value: str | bytes) -> bytes:
    """Parse a 32-byte value given as raw bytes or ``0x`` + 64 hex chars."""
    if isinstance(value, str):
        try:
            value = decode_hex(value.strip())
        except (binascii.Error, ValueError) as exc:
            raise ValidationError(f"Invalid hex value: {value!r}") from exc
    if not isinstance(value, (bytes, bytearray)):
        raise ValidationError(f"Expected bytes or hex string, got {type(value).__name__}")
    if len(value) != HASH_LENGTH:
        raise ValidationError(f"Value must be {HASH_LENGTH} bytes, got {len(value)}")
    return bytes(value)


def parse_uint256(value: str | int) -> int:
    """Parse an unsigned 256-bit integer from an int, a decimal or a ``0x`` hex string."""
    if isinstance(value, bool):
        raise ValidationError("Boolean is not a valid uint256")
    if isinstance(value, str):
        text = value.strip()
        try:
            value = int(text, 16) if text.lower().startswith("0x") else int(text, 10)
        except ValueError as exc:
            raise ValidationError(f"Invalid integer: {text!r}") from exc
    if not isinstance(value, int):
        raise ValidationError(f"Expected integer, got {type(value).__name__}")
    if not 0 <= value <= UINT256_MAX:
        raise ValidationError(f"Value out of uint256 range: {value}")
    return value

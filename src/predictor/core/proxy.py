"""Minimal proxy bytecode for the summoner's clone deployments.

The summoner and the DAO deploy every contract as a 54-byte minimal proxy
whose only parameter is the implementation address embedded in its body:

    PROXY_PREFIX (18 bytes) ++ implementation (20 bytes) ++ PROXY_SUFFIX (16 bytes)

The resulting bytes are the CREATE2 ``init_code``.
"""

from .constants import ADDRESS_LENGTH, PROXY_PREFIX, PROXY_SUFFIX
from .crypto import keccak256
from .errors import ValidationError


def build_proxy_bytecode(implementation: bytes) -> bytes:
    """
    Build the proxy init code for an implementation.

    Args:
        implementation: 20-byte implementation address

    Returns:
        54-byte proxy init code

    Raises:
        ValidationError: If implementation is not 20 bytes
    """
    if len(implementation) != ADDRESS_LENGTH:
        raise ValidationError(
            f"Implementation must be {ADDRESS_LENGTH} bytes, got {len(implementation)}"
        )
    return PROXY_PREFIX + bytes(implementation) + PROXY_SUFFIX


def proxy_init_code_hash(implementation: bytes) -> bytes:
    return keccak256(build_proxy_bytecode(implementation))

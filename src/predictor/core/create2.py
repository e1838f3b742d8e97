"""CREATE2 address computation utilities (EIP-1014).

CREATE2 allows deterministic contract address generation before deployment.
The address is computed as:
    address = keccak256(0xff ++ sender_address ++ salt ++ keccak256(init_code))[12:]

Reference: https://eips.ethereum.org/EIPS/eip-1014
"""

from .constants import ADDRESS_LENGTH, CREATE2_PREFIX, HASH_LENGTH
from .crypto import keccak256
from .errors import ValidationError


def _check_lengths(sender: bytes, salt: bytes) -> None:
    if len(sender) != ADDRESS_LENGTH:
        raise ValidationError(f"Sender must be 20 bytes, got {len(sender)}")
    if len(salt) != HASH_LENGTH:
        raise ValidationError(f"Salt must be 32 bytes, got {len(salt)}")


def compute_create2_address(
    sender: bytes,
    salt: bytes,
    init_code: bytes,
) -> bytes:
    """
    Compute CREATE2 contract address.

    The contract address is the last 20 bytes of:
        keccak256(0xff ++ sender ++ salt ++ keccak256(init_code))

    Args:
        sender: 20-byte deployer address
        salt: 32-byte salt value (can be any 32 bytes)
        init_code: Contract initialization code

    Returns:
        20-byte predicted contract address (before deployment)

    Raises:
        ValidationError: If sender is not 20 bytes or salt is not 32 bytes

    Example:
        >>> sender = bytes(20)
        >>> compute_create2_address(sender, bytes(32), b"\\x00").hex()
        '4d1a2e2bb4f88f0250f26ffff098b0b30b26bf38'
    """
    _check_lengths(sender, salt)
    return compute_create2_address_with_code_hash(sender, salt, keccak256(init_code))


def compute_create2_address_with_code_hash(
    sender: bytes,
    salt: bytes,
    init_code_hash: bytes,
) -> bytes:
    """
    Compute CREATE2 address with pre-computed init_code hash.

    Useful when only the hash of init_code is known, e.g. a proxy's
    init code hash published by the factory.

    Raises:
        ValidationError: If lengths are incorrect
    """
    _check_lengths(sender, salt)
    if len(init_code_hash) != HASH_LENGTH:
        raise ValidationError(f"Init code hash must be 32 bytes, got {len(init_code_hash)}")

    preimage = CREATE2_PREFIX + bytes(sender) + bytes(salt) + bytes(init_code_hash)
    return keccak256(preimage)[12:]

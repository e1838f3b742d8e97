"""Salt derivation for the DAO and its token clones."""

from __future__ import annotations

from typing import Optional, Sequence

from .constants import ADDRESS_LENGTH, DAO_SALT_TYPES, HASH_LENGTH, UINT256_MAX, ZERO_SALT
from .crypto import keccak256
from .encoding import abi_encode
from .errors import ValidationError


def compute_dao_salt(
    init_holders: Sequence[bytes],
    init_shares: Sequence[int],
    custom_salt: Optional[bytes] = ZERO_SALT,
) -> bytes:
    """
    Compute the salt the summoner passes to CREATE2 for a new DAO.

        keccak256(abi.encode(initHolders, initShares, customSalt))

    Holder order is significant: the same (holder, shares) pairs in a
    different order produce a different salt.

    Raises:
        ValidationError: If the lists differ in length, a holder is not
            20 bytes, a share is outside uint256, or the salt is not 32 bytes
    """
    if len(init_holders) != len(init_shares):
        raise ValidationError(
            f"initHolders and initShares must have same length "
            f"({len(init_holders)} != {len(init_shares)})"
        )
    if custom_salt is None:
        custom_salt = ZERO_SALT
    if len(custom_salt) != HASH_LENGTH:
        raise ValidationError(f"Custom salt must be 32 bytes, got {len(custom_salt)}")
    for holder in init_holders:
        if len(holder) != ADDRESS_LENGTH:
            raise ValidationError(f"Holder must be 20 bytes, got {len(holder)}")
    for amount in init_shares:
        if isinstance(amount, bool) or not isinstance(amount, int) or not 0 <= amount <= UINT256_MAX:
            raise ValidationError(f"Share amount out of uint256 range: {amount!r}")

    encoded = abi_encode(
        DAO_SALT_TYPES,
        [[bytes(h) for h in init_holders], list(init_shares), bytes(custom_salt)],
    )
    return keccak256(encoded)


def compute_token_salt(dao_address: bytes) -> bytes:
    """
    Compute the salt a DAO uses for its token clones: ``bytes32(bytes20(dao))``.

    The address fills the high-order 20 bytes; the low-order 12 bytes are zero.
    """
    if len(dao_address) != ADDRESS_LENGTH:
        raise ValidationError(f"DAO address must be 20 bytes, got {len(dao_address)}")
    return bytes(dao_address) + b"\x00" * (HASH_LENGTH - ADDRESS_LENGTH)

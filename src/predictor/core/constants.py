"""Byte-level constants for CREATE2 proxy address prediction."""

ZERO_ADDRESS = b"\x00" * 20
ZERO_SALT = b"\x00" * 32

ADDRESS_LENGTH = 20
HASH_LENGTH = 32

UINT256_MAX = 2**256 - 1

# EIP-1014 preimage marker
CREATE2_PREFIX = b"\xff"

# Minimal proxy deployed by the summoner for the DAO and by the DAO for
# each token: 9 bytes of init code, then 45 bytes of runtime that
# delegatecalls into the embedded implementation.
PROXY_PREFIX = bytes.fromhex("602d5f8160095f39f35f5f365f5f37365f73")
PROXY_SUFFIX = bytes.fromhex("5af43d5f5f3e6029573d5ffd5b3d5ff3")
PROXY_BYTECODE_LENGTH = len(PROXY_PREFIX) + ADDRESS_LENGTH + len(PROXY_SUFFIX)

# abi.encode(initHolders, initShares, customSalt)
DAO_SALT_TYPES = ("address[]", "uint256[]", "bytes32")

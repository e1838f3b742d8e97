"""Hashing utilities using pycryptodome."""

from Crypto.Hash import keccak


def keccak256(data: bytes) -> bytes:
    k = keccak.new(digest_bits=256)
    k.update(data)
    return k.digest()

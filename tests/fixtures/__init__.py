"""Test fixtures for address prediction tests."""

from .addresses import (
    SUMMONER_ADDRESS,
    DAO_IMPLEMENTATION,
    SHARES_IMPLEMENTATION,
    BADGES_IMPLEMENTATION,
    LOOT_IMPLEMENTATION,
    HOLDER_1,
    HOLDER_2,
    ZERO_ADDRESS,
    TEST_ADDRESSES,
)
from .deployments import (
    GOLDEN_HOLDERS,
    GOLDEN_SHARES,
    GOLDEN_DAO,
    GOLDEN_SHARES_TOKEN,
    GOLDEN_BADGES_TOKEN,
    GOLDEN_LOOT_TOKEN,
)

__all__ = [
    # Addresses
    "SUMMONER_ADDRESS",
    "DAO_IMPLEMENTATION",
    "SHARES_IMPLEMENTATION",
    "BADGES_IMPLEMENTATION",
    "LOOT_IMPLEMENTATION",
    "HOLDER_1",
    "HOLDER_2",
    "ZERO_ADDRESS",
    "TEST_ADDRESSES",
    # Golden vector
    "GOLDEN_HOLDERS",
    "GOLDEN_SHARES",
    "GOLDEN_DAO",
    "GOLDEN_SHARES_TOKEN",
    "GOLDEN_BADGES_TOKEN",
    "GOLDEN_LOOT_TOKEN",
]

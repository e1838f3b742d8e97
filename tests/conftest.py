"""Pytest configuration and shared fixtures for all tests."""

import pytest

from predictor.core.constants import ZERO_SALT
from predictor.core.types import DeploymentConfig
from predictor.registry.memory import MemoryRegistry

from tests.fixtures.addresses import (
    SUMMONER_ADDRESS,
    DAO_IMPLEMENTATION,
    SHARES_IMPLEMENTATION,
    BADGES_IMPLEMENTATION,
    LOOT_IMPLEMENTATION,
)
from tests.fixtures.deployments import GOLDEN_HOLDERS, GOLDEN_SHARES


# =============================================================================
# Deployment Config Fixtures
# =============================================================================

@pytest.fixture
def golden_config():
    """Config for the pinned golden vector."""
    return DeploymentConfig(
        summoner=SUMMONER_ADDRESS,
        dao_implementation=DAO_IMPLEMENTATION,
        shares_implementation=SHARES_IMPLEMENTATION,
        badges_implementation=BADGES_IMPLEMENTATION,
        loot_implementation=LOOT_IMPLEMENTATION,
        init_holders=GOLDEN_HOLDERS,
        init_shares=GOLDEN_SHARES,
        custom_salt=ZERO_SALT,
    )


@pytest.fixture
def golden_config_json():
    """Golden config in the JSON document shape."""
    return {
        "summonerAddress": "0x" + SUMMONER_ADDRESS.hex(),
        "molochImplementation": "0x" + DAO_IMPLEMENTATION.hex(),
        "sharesImplementation": "0x" + SHARES_IMPLEMENTATION.hex(),
        "badgesImplementation": "0x" + BADGES_IMPLEMENTATION.hex(),
        "lootImplementation": "0x" + LOOT_IMPLEMENTATION.hex(),
        "initHolders": ["0x" + h.hex() for h in GOLDEN_HOLDERS],
        "initShares": [str(s) for s in GOLDEN_SHARES],
        "customSalt": "0x" + "00" * 32,
    }


# =============================================================================
# Registry Fixtures
# =============================================================================

@pytest.fixture
def memory_registry():
    """Registry knowing the golden summoner and two past deployments."""
    registry = MemoryRegistry()
    registry.add_summoner(
        SUMMONER_ADDRESS,
        DAO_IMPLEMENTATION,
        SHARES_IMPLEMENTATION,
        BADGES_IMPLEMENTATION,
        LOOT_IMPLEMENTATION,
    )
    registry.add_deployment(SUMMONER_ADDRESS, bytes.fromhex("aa" * 20), 100, b"\x01" * 32)
    registry.add_deployment(SUMMONER_ADDRESS, bytes.fromhex("bb" * 20), 250, b"\x02" * 32)
    return registry


@pytest.fixture
def flip_bit():
    """Factory fixture returning a copy of ``data`` with one bit toggled."""
    def _flip_bit(data: bytes, byte_index: int, bit: int = 0) -> bytes:
        mutable = bytearray(data)
        mutable[byte_index] ^= 1 << bit
        return bytes(mutable)
    return _flip_bit

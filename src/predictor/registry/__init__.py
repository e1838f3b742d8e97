"""Read-only lookups of implementation addresses and past deployments."""

from .base import Registry
from .memory import MemoryRegistry
from .web3_registry import Web3Registry

__all__ = ["Registry", "MemoryRegistry", "Web3Registry"]

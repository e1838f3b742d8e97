"""
Registry interface: read-only view of a summoner on some chain.

Supplies the raw byte values the predictor needs (implementation
addresses) and the history of deployments already made.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from predictor.core.types import DeploymentRecord, Implementations


class Registry(ABC):
    """Abstract registry.

    Implementations can be backed by a JSON-RPC node or by plain dicts
    (testing).
    """

    @abstractmethod
    def get_dao_implementation(self, summoner: bytes) -> bytes:
        """Implementation address the summoner clones for new DAOs."""
        ...

    @abstractmethod
    def get_token_implementations(self, dao_implementation: bytes) -> tuple[bytes, bytes, bytes]:
        """(shares, badges, loot) implementations referenced by a DAO implementation."""
        ...

    @abstractmethod
    def get_deployments(self, summoner: bytes, from_block: int = 0) -> list[DeploymentRecord]:
        """DAOs deployed by the summoner at or after ``from_block``, oldest first."""
        ...

    def get_implementations(self, summoner: bytes) -> Implementations:
        dao_impl = self.get_dao_implementation(summoner)
        shares, badges, loot = self.get_token_implementations(dao_impl)
        return Implementations(
            summoner=summoner,
            dao=dao_impl,
            shares=shares,
            badges=badges,
            loot=loot,
        )
